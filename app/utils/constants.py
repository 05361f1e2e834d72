from __future__ import annotations

import re
from types import MappingProxyType
from typing import Final, Mapping

from app.models.registration import CompanyType, IndustryType

# NOTE: keep this module dependency-light; it should only expose constants and
# derived constant values (no I/O, no environment access).

FULL_NAME_MIN_LENGTH: Final[int] = 6
FULL_NAME_MAX_LENGTH: Final[int] = 64
EMAIL_MIN_LENGTH: Final[int] = 6
EMAIL_MAX_LENGTH: Final[int] = 128
COMPANY_NAME_MIN_LENGTH: Final[int] = 6
COMPANY_NAME_MAX_LENGTH: Final[int] = 80
GSTIN_LENGTH: Final[int] = 15
ADDRESS_MIN_LENGTH: Final[int] = 10
ADDRESS_MAX_LENGTH: Final[int] = 100
DESIGNATION_MIN_LENGTH: Final[int] = 6
DESIGNATION_MAX_LENGTH: Final[int] = 24
WEBSITE_MIN_LENGTH: Final[int] = 6
WEBSITE_MAX_LENGTH: Final[int] = 64

# Indian mobile number, optionally prefixed with +91
PHONE_RE: Final[re.Pattern[str]] = re.compile(r"(?:\+91)?[6-9][0-9]{9}")

# 2-digit state code, embedded PAN, entity number, literal Z, checksum
GSTIN_RE: Final[re.Pattern[str]] = re.compile(
    r"[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]", re.IGNORECASE | re.ASCII
)

PAN_RE: Final[re.Pattern[str]] = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]", re.IGNORECASE | re.ASCII)

PHONE_SEPARATORS_RE: Final[re.Pattern[str]] = re.compile(r"[\s-]")

COMPANY_TYPE_VALUES: Final[frozenset[str]] = frozenset(item.value for item in CompanyType)
INDUSTRY_TYPE_VALUES: Final[frozenset[str]] = frozenset(item.value for item in IndustryType)

# Canonical field names, in form order
FIELD_NAMES: Final[tuple[str, ...]] = (
    "full_name",
    "email",
    "phone",
    "company_name",
    "company_type",
    "gstin",
    "pan",
    "address_line_1",
    "address_line_2",
    "industry_type",
    "authorized_signatory_designation",
    "company_website",
)

OPTIONAL_FIELDS: Final[frozenset[str]] = frozenset({"gstin", "company_website"})
REQUIRED_FIELDS: Final[tuple[str, ...]] = tuple(
    name for name in FIELD_NAMES if name not in OPTIONAL_FIELDS
)

# HTML form input names posted by the registration page
FORM_FIELD_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "full-name-input": "full_name",
        "email-input": "email",
        "phone-input": "phone",
        "company-name-input": "company_name",
        "company-type-input": "company_type",
        "gstin-input": "gstin",
        "pan-input": "pan",
        "address-line-1-input": "address_line_1",
        "address-line-2-input": "address_line_2",
        "industry-type-input": "industry_type",
        "authorized-signatory-designation-input": "authorized_signatory_designation",
        "company-website-input": "company_website",
    }
)

__all__ = [
    "ADDRESS_MAX_LENGTH",
    "ADDRESS_MIN_LENGTH",
    "COMPANY_NAME_MAX_LENGTH",
    "COMPANY_NAME_MIN_LENGTH",
    "COMPANY_TYPE_VALUES",
    "DESIGNATION_MAX_LENGTH",
    "DESIGNATION_MIN_LENGTH",
    "EMAIL_MAX_LENGTH",
    "EMAIL_MIN_LENGTH",
    "FIELD_NAMES",
    "FORM_FIELD_ALIASES",
    "FULL_NAME_MAX_LENGTH",
    "FULL_NAME_MIN_LENGTH",
    "GSTIN_LENGTH",
    "GSTIN_RE",
    "INDUSTRY_TYPE_VALUES",
    "OPTIONAL_FIELDS",
    "PAN_RE",
    "PHONE_RE",
    "PHONE_SEPARATORS_RE",
    "REQUIRED_FIELDS",
    "WEBSITE_MAX_LENGTH",
    "WEBSITE_MIN_LENGTH",
]
