from __future__ import annotations

import ipaddress
import re
import unicodedata
from collections.abc import Collection
from urllib.parse import urlsplit

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, TypeAdapter, ValidationError

from app.utils.constants import PHONE_SEPARATORS_RE

_WHITESPACE_RUN_RE = re.compile(r"\s+")
_NAME_PUNCTUATION = frozenset(" .'-")
_ASCII_DIGITS = frozenset("0123456789")

ALLOWED_URL_SCHEMES = frozenset({"http", "https", "ftp"})
_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)
_HOST_LABEL_RE = re.compile(r"(?!-)[a-z0-9\u00a1-\uffff-]{1,63}(?<!-)", re.IGNORECASE)
_TLD_RE = re.compile(r"[a-z\u00a1-\uffff]{2,63}|xn--[a-z0-9-]{2,59}", re.IGNORECASE)


def normalize_trim(*, value: str) -> str:
    return value.strip()


def collapse_whitespace(*, value: str) -> str:
    """Trim and squeeze every internal whitespace run to a single space."""
    return _WHITESPACE_RUN_RE.sub(" ", value.strip())


def normalize_lower(*, value: str) -> str:
    return value.strip().lower()


def normalize_upper(*, value: str) -> str:
    return value.strip().upper()


def strip_phone_separators(*, value: str) -> str:
    return PHONE_SEPARATORS_RE.sub("", value.strip())


def is_length_between(*, value: str, min_length: int, max_length: int) -> bool:
    return min_length <= len(value) <= max_length


def matches_pattern(*, value: str, pattern: re.Pattern[str]) -> bool:
    return pattern.fullmatch(value) is not None


def is_in_set(*, value: str, allowed_values: Collection[str]) -> bool:
    return value.strip().lower() in allowed_values


def is_person_name(*, value: str) -> bool:
    """
    Accept letters and combining marks from any script, ASCII digits, spaces,
    dots, hyphens and apostrophes.
    """
    if not value:
        return False
    for char in value:
        if char in _NAME_PUNCTUATION or char in _ASCII_DIGITS:
            continue
        if unicodedata.category(char)[0] not in {"L", "M"}:
            return False
    return True


def is_email(*, value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_ip_host(host: str, *, bracketed: bool) -> bool:
    """Accept only a full dotted-quad IPv4 address or a bracketed IPv6 literal."""
    try:
        address = ipaddress.ip_address(host)
    except ValueError:
        return False
    return bracketed if address.version == 6 else not bracketed


def is_url(*, value: str) -> bool:
    """
    Check for an absolute URL with an explicit http, https or ftp scheme.

    The host, as typed, must be a dotted-quad IPv4 address, a bracketed IPv6
    literal, or a dotted domain name ending in an alphabetic TLD. Underscores
    and a trailing dot in the host are rejected.
    """
    if not value or any(char.isspace() for char in value):
        return False

    scheme, separator, _ = value.partition("://")
    if not separator or scheme.lower() not in ALLOWED_URL_SCHEMES:
        return False

    try:
        _URL_ADAPTER.validate_python(value)
        parts = urlsplit(value)
        host = parts.hostname
    except (ValidationError, ValueError):
        return False

    if not host or "_" in host or host.endswith("."):
        return False
    if _is_ip_host(host, bracketed="[" in parts.netloc):
        return True

    labels = host.split(".")
    if len(labels) < 2:
        return False
    if not all(_HOST_LABEL_RE.fullmatch(label) for label in labels):
        return False
    return _TLD_RE.fullmatch(labels[-1]) is not None


__all__ = [
    "ALLOWED_URL_SCHEMES",
    "collapse_whitespace",
    "is_email",
    "is_in_set",
    "is_length_between",
    "is_person_name",
    "is_url",
    "matches_pattern",
    "normalize_lower",
    "normalize_trim",
    "normalize_upper",
    "strip_phone_separators",
]
