from __future__ import annotations

from functools import lru_cache

from fastapi import Request

from app.models.language import SupportedLanguage, resolve_language
from app.services.registration_validator import FormValidator


@lru_cache()
def get_form_validator() -> FormValidator:
    """
    FastAPI dependency returning the shared FormValidator.

    The validator holds no per-request state, so one instance serves every request.
    """
    return FormValidator()


def get_request_language(request: Request) -> SupportedLanguage:
    """
    FastAPI dependency resolving the requester's language from the language cookie.

    The cookie name comes from the settings create_app() stored on app.state;
    a missing or unsupported cookie resolves to English.
    """
    cookie_name = request.app.state.settings.lang_cookie_name
    return resolve_language(request.cookies.get(cookie_name))


__all__ = ["get_form_validator", "get_request_language"]
