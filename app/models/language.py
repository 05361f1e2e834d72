from __future__ import annotations

from enum import Enum


class SupportedLanguage(str, Enum):
    """
    Display languages the registration pages are translated into.
    English is the fallback for any tag outside this set.
    """
    EN = "en"   # English
    HI = "hi"   # Hindi
    KN = "kn"   # Kannada


DEFAULT_LANGUAGE = SupportedLanguage.EN


def resolve_language(tag: str | None) -> SupportedLanguage:
    """
    Map an arbitrary language tag (cookie value, query param) onto a supported language.

    Tags must match exactly; "HI" or " kn " resolve to English like any other unknown tag.
    """
    if not isinstance(tag, str):
        return DEFAULT_LANGUAGE
    try:
        return SupportedLanguage(tag)
    except ValueError:
        return DEFAULT_LANGUAGE


__all__ = ["DEFAULT_LANGUAGE", "SupportedLanguage", "resolve_language"]
