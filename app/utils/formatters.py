from __future__ import annotations

from typing import Any, Mapping

from app.models.language import SupportedLanguage


def language_options(*, supported: list[str] | tuple[str, ...]) -> list[str]:
    """Return supported language tags in enum order, ignoring anything unknown."""
    requested = set(supported)
    return [language.value for language in SupportedLanguage if language.value in requested]


def wrap_response(*, data: Any, meta: Mapping[str, Any] | None = None) -> dict[str, Any]:
    response: dict[str, Any] = {"data": data}
    if meta is not None:
        response["meta"] = dict(meta)
    return response


__all__ = [
    "language_options",
    "wrap_response",
]
