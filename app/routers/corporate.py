from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from app.core.exceptions import AppError
from app.core.logging import get_logger
from app.deps.registration import get_form_validator, get_request_language
from app.models.language import SupportedLanguage
from app.models.registration import (
    LoginPlaceholderResponse,
    RegistrationAcceptedResponse,
    RegistrationData,
    ValidationFailure,
)
from app.services.registration_validator import FormValidator, from_form
from app.utils.messages import translate

logger = get_logger(__name__)
router: APIRouter = APIRouter(prefix="/corporate", tags=["corporate"])


async def register_company(
    request: Request,
    *,
    language: SupportedLanguage = Depends(get_request_language),
    validator: FormValidator = Depends(get_form_validator),
) -> RegistrationAcceptedResponse:
    """
    Validate a corporate registration form submission.

    The body is the form-encoded registration page; inputs the page did not
    send are treated as empty. Persisting the company is not implemented yet,
    so an accepted submission only echoes the normalized fields.

    Args:
        request: Incoming request carrying the form body.
        language: Language resolved from the language cookie.
        validator: Shared FormValidator, injected via dependency.

    Returns:
        RegistrationAcceptedResponse: Localized confirmation and normalized fields.

    Raises:
        AppError: 400 with the localized message of the first failing rule.
    """
    form = await request.form()
    result = validator.validate(language, from_form(form))

    if isinstance(result, ValidationFailure):
        logger.info(
            "Registration rejected",
            extra={"message_key": result.message_key.value, "lang": language.value},
        )
        raise AppError(
            result.message,
            status_code=status.HTTP_400_BAD_REQUEST,
            code=result.message_key.value,
        )

    logger.info(
        "Registration accepted",
        extra={"company_type": result.fields.company_type, "lang": language.value},
    )
    return RegistrationAcceptedResponse(
        message=translate(language, "registration_received"),
        data=RegistrationData(**result.fields.to_dict()),
    )


async def login_company(
    *,
    language: SupportedLanguage = Depends(get_request_language),
) -> LoginPlaceholderResponse:
    """Corporate sign-in placeholder; accepts any request and reports that login is unavailable."""
    logger.info("Corporate login requested", extra={"lang": language.value})
    return LoginPlaceholderResponse(message=translate(language, "login_not_implemented"))


router.post("/register", response_model=RegistrationAcceptedResponse)(register_company)
router.post("/login", response_model=LoginPlaceholderResponse)(login_company)

__all__ = [
    "router",
    "register_company",
    "login_company",
]
