from __future__ import annotations

from urllib.parse import urlsplit

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response

from app.core.logging import get_logger
from app.utils.formatters import language_options, wrap_response
from app.utils.messages import translate

logger = get_logger(__name__)
router: APIRouter = APIRouter(tags=["language"])

LANGUAGE_PATH = "/lang"


def safe_redirect_target(target: str | None) -> str:
    """
    Return a local path to send the user back to after choosing a language.

    Absolute or protocol-relative URLs, and the language endpoint itself, fall back to "/".
    """
    if not target or not target.startswith("/") or target.startswith(("//", "/\\")):
        return "/"
    if urlsplit(target).path == LANGUAGE_PATH:
        return "/"
    return target


def set_language(
    request: Request,
    lang: str | None = Query(None),
    redirect: str | None = Query(None),
) -> Response:
    """
    Persist the chosen display language in a cookie and redirect back.

    An unsupported tag answers 400 with the list of languages to choose from,
    standing in for the language selection page.
    """
    settings = request.app.state.settings
    options = language_options(supported=settings.supported_langs)

    if lang not in options:
        logger.info("Unsupported language requested", extra={"lang": lang})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": translate(lang, "unsupported_language"),
                "status_code": status.HTTP_400_BAD_REQUEST,
                **wrap_response(
                    data={"languages": options},
                    meta={"redirect": safe_redirect_target(redirect)},
                ),
            },
        )

    response = RedirectResponse(
        url=safe_redirect_target(redirect),
        status_code=status.HTTP_303_SEE_OTHER,
    )
    response.set_cookie(
        settings.lang_cookie_name,
        lang,
        max_age=settings.lang_cookie_max_age,
        samesite="lax",
    )
    logger.info("Language preference saved", extra={"lang": lang})
    return response


router.get(LANGUAGE_PATH, response_model=None)(set_language)

__all__ = ["router", "safe_redirect_target", "set_language"]
