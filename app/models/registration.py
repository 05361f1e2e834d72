from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field

# ----------------------------------
# Enum definitions for registration
# ----------------------------------

class CompanyType(str, Enum):
    """Legal structures accepted on the corporate registration form."""
    PVT_LTD = "pvt-ltd"             # private limited company
    LLP = "llp"                     # limited liability partnership
    PARTNERSHIP = "partnership"
    PUBLIC_CO = "public-co"         # public limited company
    SOLE_PROP = "sole-prop"         # sole proprietorship


class IndustryType(str, Enum):
    """Buyer segments a registering business can belong to."""
    FMCG = "fmcg"
    AGRI_BUYER = "agri-buyer"
    FOOD_PROCESSING = "food-processing"
    CATERING = "catering"


class MessageKey(str, Enum):
    """
    Keys of the localized messages reported when a registration form is rejected.
    Each key names the first rule that failed.
    """
    MISSING_FIELDS = "missing_fields"
    INVALID_FULL_NAME = "invalid_full_name"
    INVALID_EMAIL = "invalid_email"
    INVALID_PHONE = "invalid_phone"
    INVALID_COMPANY_NAME = "invalid_company_name"
    INVALID_COMPANY_TYPE = "invalid_company_type"
    INVALID_GSTIN = "invalid_gstin"
    INVALID_PAN = "invalid_pan"
    INVALID_ADDRESS = "invalid_address"
    INVALID_INDUSTRY = "invalid_industry"
    INVALID_DESIGNATION = "invalid_designation"
    INVALID_WEBSITE = "invalid_website"


# ---------------------------
# Validation outcome types
# ---------------------------

@dataclass(frozen=True, slots=True)
class RegistrationFields:
    """Normalized registration form values. Optional fields are empty strings when omitted."""
    full_name: str
    email: str
    phone: str
    company_name: str
    company_type: str
    gstin: str
    pan: str
    address_line_1: str
    address_line_2: str
    industry_type: str
    authorized_signatory_designation: str
    company_website: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    message_key: MessageKey
    message: str

    @property
    def is_valid(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class ValidationSuccess:
    fields: RegistrationFields

    @property
    def is_valid(self) -> bool:
        return True


ValidationResult = Union[ValidationFailure, ValidationSuccess]


# ---------------------------
# HTTP response models
# ---------------------------

class RegistrationData(BaseModel):
    """Normalized registration fields echoed back once a submission is accepted."""
    full_name: str
    email: str
    phone: str
    company_name: str
    company_type: CompanyType
    gstin: str = ""
    pan: str = Field(..., min_length=10, max_length=10)
    address_line_1: str
    address_line_2: str
    industry_type: IndustryType
    authorized_signatory_designation: str
    company_website: str = ""


class RegistrationAcceptedResponse(BaseModel):
    """Response returned when a registration form passes every check."""
    message: str
    data: RegistrationData


class LoginPlaceholderResponse(BaseModel):
    """Response for the corporate login endpoint until sign-in exists."""
    message: str


__all__ = [
    "CompanyType",
    "IndustryType",
    "LoginPlaceholderResponse",
    "MessageKey",
    "RegistrationAcceptedResponse",
    "RegistrationData",
    "RegistrationFields",
    "ValidationFailure",
    "ValidationResult",
    "ValidationSuccess",
]
