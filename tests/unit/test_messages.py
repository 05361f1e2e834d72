"""Unit tests for language resolution and the localized message table."""
from __future__ import annotations

import pytest

from app.models.language import SupportedLanguage, resolve_language
from app.models.registration import MessageKey
from app.utils.messages import FALLBACK_MESSAGE, MESSAGE_TABLE, translate


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("hi", SupportedLanguage.HI),
        ("kn", SupportedLanguage.KN),
        ("en", SupportedLanguage.EN),
        (" KN ", SupportedLanguage.EN),
        ("HI", SupportedLanguage.EN),
        ("kn ", SupportedLanguage.EN),
        ("fr", SupportedLanguage.EN),
        ("", SupportedLanguage.EN),
        (None, SupportedLanguage.EN),
    ],
)
def test_resolve_language(tag: str | None, expected: SupportedLanguage) -> None:
    assert resolve_language(tag) is expected


def test_every_validation_key_is_translated_in_every_language() -> None:
    for language in SupportedLanguage:
        for key in MessageKey:
            assert key.value in MESSAGE_TABLE[language], (language, key)


def test_translate_uses_requested_language() -> None:
    assert translate("hi", "invalid_pan") == "PAN अमान्य दिख रहा है।"
    assert translate(SupportedLanguage.KN, "invalid_pan") == "PAN ಅಮಾನ್ಯವಾಗಿದೆ."


def test_translate_unknown_language_uses_english() -> None:
    assert translate("fr", "invalid_gstin") == "GSTIN looks invalid."
    assert translate(None, "missing_fields") == "Please fill all required fields."


def test_translate_key_missing_in_language_falls_back_to_english() -> None:
    assert translate("hi", "login_not_implemented") == MESSAGE_TABLE[SupportedLanguage.EN]["login_not_implemented"]


def test_translate_unknown_key_returns_generic_fallback() -> None:
    assert translate("kn", "no_such_key") == FALLBACK_MESSAGE
    assert translate("xx", "no_such_key") == "Invalid input."


def test_message_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        MESSAGE_TABLE[SupportedLanguage.EN]["invalid_pan"] = "changed"  # type: ignore[index]
    with pytest.raises(TypeError):
        MESSAGE_TABLE["fr"] = {}  # type: ignore[index]
