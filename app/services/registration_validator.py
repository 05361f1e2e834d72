from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from app.core.logging import get_logger
from app.models.language import SupportedLanguage, resolve_language
from app.models.registration import (
    MessageKey,
    RegistrationFields,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)
from app.utils.constants import (
    ADDRESS_MAX_LENGTH,
    ADDRESS_MIN_LENGTH,
    COMPANY_NAME_MAX_LENGTH,
    COMPANY_NAME_MIN_LENGTH,
    COMPANY_TYPE_VALUES,
    DESIGNATION_MAX_LENGTH,
    DESIGNATION_MIN_LENGTH,
    EMAIL_MAX_LENGTH,
    EMAIL_MIN_LENGTH,
    FIELD_NAMES,
    FORM_FIELD_ALIASES,
    FULL_NAME_MAX_LENGTH,
    FULL_NAME_MIN_LENGTH,
    GSTIN_LENGTH,
    GSTIN_RE,
    INDUSTRY_TYPE_VALUES,
    PAN_RE,
    PHONE_RE,
    REQUIRED_FIELDS,
    WEBSITE_MAX_LENGTH,
    WEBSITE_MIN_LENGTH,
)
from app.utils.messages import translate
from app.utils.validators import (
    collapse_whitespace,
    is_email,
    is_in_set,
    is_length_between,
    is_person_name,
    is_url,
    matches_pattern,
    normalize_lower,
    normalize_trim,
    normalize_upper,
    strip_phone_separators,
)

logger = get_logger(__name__)

Normalizer = Callable[..., str]

# How each field is cleaned before its rule runs
NORMALIZERS: Mapping[str, Normalizer] = {
    "full_name": collapse_whitespace,
    "email": normalize_lower,
    "phone": strip_phone_separators,
    "company_name": normalize_trim,
    "company_type": normalize_lower,
    "gstin": normalize_upper,
    "pan": normalize_upper,
    "address_line_1": collapse_whitespace,
    "address_line_2": collapse_whitespace,
    "industry_type": normalize_lower,
    "authorized_signatory_designation": collapse_whitespace,
    "company_website": normalize_trim,
}


@dataclass(frozen=True, slots=True)
class ValidationRule:
    """
    One ordered check of the registration form.

    ``predicate`` receives a single normalized value and is applied to every
    field in ``field_names``; the rule fails if any of them is rejected.
    Optional rules are skipped for fields left empty.
    """

    field_names: tuple[str, ...]
    predicate: Callable[[str], bool]
    message_key: MessageKey
    optional: bool = False

    def check(self, fields: RegistrationFields) -> bool:
        for name in self.field_names:
            value = getattr(fields, name)
            if self.optional and not value:
                continue
            if not self.predicate(value):
                return False
        return True


def _full_name_ok(value: str) -> bool:
    return is_person_name(value=value) and is_length_between(
        value=value, min_length=FULL_NAME_MIN_LENGTH, max_length=FULL_NAME_MAX_LENGTH
    )


def _email_ok(value: str) -> bool:
    return is_length_between(
        value=value, min_length=EMAIL_MIN_LENGTH, max_length=EMAIL_MAX_LENGTH
    ) and is_email(value=value)


def _gstin_ok(value: str) -> bool:
    return len(value) == GSTIN_LENGTH and matches_pattern(value=value, pattern=GSTIN_RE)


def _website_ok(value: str) -> bool:
    return is_length_between(
        value=value, min_length=WEBSITE_MIN_LENGTH, max_length=WEBSITE_MAX_LENGTH
    ) and is_url(value=value)


# Evaluated top to bottom; the first failing rule decides the reported message.
RULES: tuple[ValidationRule, ...] = (
    ValidationRule(("full_name",), _full_name_ok, MessageKey.INVALID_FULL_NAME),
    ValidationRule(("email",), _email_ok, MessageKey.INVALID_EMAIL),
    ValidationRule(
        ("phone",),
        lambda value: matches_pattern(value=value, pattern=PHONE_RE),
        MessageKey.INVALID_PHONE,
    ),
    ValidationRule(
        ("company_name",),
        lambda value: is_length_between(
            value=value,
            min_length=COMPANY_NAME_MIN_LENGTH,
            max_length=COMPANY_NAME_MAX_LENGTH,
        ),
        MessageKey.INVALID_COMPANY_NAME,
    ),
    ValidationRule(
        ("company_type",),
        lambda value: is_in_set(value=value, allowed_values=COMPANY_TYPE_VALUES),
        MessageKey.INVALID_COMPANY_TYPE,
    ),
    ValidationRule(("gstin",), _gstin_ok, MessageKey.INVALID_GSTIN, optional=True),
    ValidationRule(
        ("pan",),
        lambda value: matches_pattern(value=value, pattern=PAN_RE),
        MessageKey.INVALID_PAN,
    ),
    ValidationRule(
        ("address_line_1", "address_line_2"),
        lambda value: is_length_between(
            value=value, min_length=ADDRESS_MIN_LENGTH, max_length=ADDRESS_MAX_LENGTH
        ),
        MessageKey.INVALID_ADDRESS,
    ),
    ValidationRule(
        ("industry_type",),
        lambda value: is_in_set(value=value, allowed_values=INDUSTRY_TYPE_VALUES),
        MessageKey.INVALID_INDUSTRY,
    ),
    ValidationRule(
        ("authorized_signatory_designation",),
        lambda value: is_length_between(
            value=value,
            min_length=DESIGNATION_MIN_LENGTH,
            max_length=DESIGNATION_MAX_LENGTH,
        ),
        MessageKey.INVALID_DESIGNATION,
    ),
    ValidationRule(("company_website",), _website_ok, MessageKey.INVALID_WEBSITE, optional=True),
)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def from_form(form: Mapping[str, Any]) -> dict[str, str]:
    """Translate a posted form keyed by HTML input names into canonical field names."""
    return {
        field_name: _as_text(form.get(alias))
        for alias, field_name in FORM_FIELD_ALIASES.items()
    }


class FormValidator:
    """
    Validator for the corporate registration form.

    Stateless: every call works only on its arguments and the static RULES and
    message tables, so a single instance can serve concurrent requests.
    """

    def __init__(self, rules: tuple[ValidationRule, ...] = RULES) -> None:
        self.rules = rules

    @staticmethod
    def normalize(fields: Mapping[str, Any]) -> RegistrationFields:
        """Trim, collapse and case-fold every field. Missing keys become empty strings."""
        values = {
            name: NORMALIZERS[name](value=_as_text(fields.get(name)))
            for name in FIELD_NAMES
        }
        return RegistrationFields(**values)

    def validate(self, lang: str | SupportedLanguage | None, fields: Mapping[str, Any]) -> ValidationResult:
        """
        Validate a registration submission.

        Args:
            lang: Language tag of the requester; anything unsupported reads as English.
            fields: Raw field values keyed by canonical field name.

        Returns:
            ValidationFailure for the first failing rule, or ValidationSuccess
            carrying the normalized fields.
        """
        language = resolve_language(lang) if not isinstance(lang, SupportedLanguage) else lang

        missing = [name for name in REQUIRED_FIELDS if not _as_text(fields.get(name)).strip()]
        if missing:
            logger.debug(
                "Registration rejected",
                extra={"message_key": MessageKey.MISSING_FIELDS.value, "fields": missing},
            )
            return self._failure(language, MessageKey.MISSING_FIELDS)

        normalized = self.normalize(fields)
        for rule in self.rules:
            if not rule.check(normalized):
                logger.debug(
                    "Registration rejected",
                    extra={"message_key": rule.message_key.value, "fields": list(rule.field_names)},
                )
                return self._failure(language, rule.message_key)

        return ValidationSuccess(fields=normalized)

    @staticmethod
    def _failure(language: SupportedLanguage, key: MessageKey) -> ValidationFailure:
        return ValidationFailure(message_key=key, message=translate(language, key.value))


__all__ = ["FormValidator", "NORMALIZERS", "RULES", "ValidationRule", "from_form"]
