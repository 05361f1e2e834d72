from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from app.models.language import DEFAULT_LANGUAGE, SupportedLanguage, resolve_language

# NOTE: message tables are static; never mutate them at runtime. Every language
# table is read-only, and lookups fall back to English and then FALLBACK_MESSAGE.

FALLBACK_MESSAGE: Final[str] = "Invalid input."

_EN: Final[dict[str, str]] = {
    "missing_fields": "Please fill all required fields.",
    "invalid_full_name": "Full name must be 6-64 characters and contain valid letters.",
    "invalid_email": "Please enter a valid email address (6-128 chars).",
    "invalid_phone": "Please enter a valid 10-digit phone number.",
    "invalid_company_name": "Company name must be 6-80 characters.",
    "invalid_company_type": "Invalid company type selected.",
    "invalid_gstin": "GSTIN looks invalid.",
    "invalid_pan": "PAN looks invalid.",
    "invalid_address": "Address must be 10-100 characters.",
    "invalid_industry": "Invalid industry type selected.",
    "invalid_designation": "Authorized signatory designation must be 6-24 characters.",
    "invalid_website": "Website URL looks invalid (include protocol, e.g. https://).",
    "registration_received": (
        "Registration data looks valid. Server logic for registration not implemented yet."
    ),
    "login_not_implemented": "Corporate login is not available yet.",
    "unsupported_language": "Please choose one of the supported languages.",
}

_HI: Final[dict[str, str]] = {
    "missing_fields": "कृपया सभी आवश्यक फ़ील्ड भरें।",
    "invalid_full_name": "पूरा नाम 6–64 अक्षरों का होना चाहिए और मान्य वर्ण होने चाहिए।",
    "invalid_email": "कृपया मान्य ईमेल पता दर्ज करें (6–128 अक्षर)।",
    "invalid_phone": "कृपया 10-अंकीय फोन नंबर दर्ज करें।",
    "invalid_company_name": "कृपया 6–80 अक्षरों में कंपनी का नाम दर्ज करें।",
    "invalid_company_type": "अमान्य कंपनी प्रकार चुना गया है।",
    "invalid_gstin": "GSTIN अमान्य दिख रहा है।",
    "invalid_pan": "PAN अमान्य दिख रहा है।",
    "invalid_address": "पता 10–100 अक्षरों का होना चाहिए।",
    "invalid_industry": "अमान्य उद्योग प्रकार चुना गया है।",
    "invalid_designation": "पदनाम 6–24 अक्षरों का होना चाहिए।",
    "invalid_website": "Website URL अमान्य है (प्रोटोकॉल सहित, उदाहरण: https://)।",
    "registration_received": (
        "पंजीकरण विवरण मान्य हैं। पंजीकरण की सर्वर प्रक्रिया अभी उपलब्ध नहीं है।"
    ),
}

_KN: Final[dict[str, str]] = {
    "missing_fields": "ದಯವಿಟ್ಟು ಎಲ್ಲಾ ಅಗತ್ಯ ಕ್ಷೇತ್ರಗಳನ್ನು ಭರ್ತಿ ಮಾಡಿ.",
    "invalid_full_name": "ಪೂರ್ಣ ಹೆಸರು 6–64 ಅಕ್ಷರಗಳಿರಬೇಕು ಮತ್ತು ಮಾನ್ಯ ಅಕ್ಷರಗಳನ್ನು ಹೊಂದಿರಬೇಕು.",
    "invalid_email": "ದಯವಿಟ್ಟು ಮಾನ್ಯ ಇಮೇಲ್ ನಮೂದಿಸಿ (6–128 ಅಕ್ಷರ).",
    "invalid_phone": "ದಯವಿಟ್ಟು 10 ಅಂಕಿ ಫೋನ್ ನಂಬರ್ ನಮೂದಿಸಿ.",
    "invalid_company_name": "ದಯವಿಟ್ಟು 6–80 ಅಕ್ಷರಗಳಲ್ಲಿ ಕಂಪನಿ ಹೆಸರನ್ನು ನಮೂದಿಸಿ.",
    "invalid_company_type": "ಅಮಾನ್ಯ ಕಂಪನಿಯ ಪ್ರಕಾರ ಆಯ್ಕೆ ಮಾಡಲಾಗಿದೆ.",
    "invalid_gstin": "GSTIN ಅಮಾನ್ಯವಾಗಿ ಕಾಣುತ್ತಿದೆ.",
    "invalid_pan": "PAN ಅಮಾನ್ಯವಾಗಿದೆ.",
    "invalid_address": "ವಿಳಾಸವು 10–100 ಅಕ್ಷರಗಳಿರಬೇಕು.",
    "invalid_industry": "ಅಮಾನ್ಯ ಉದ್ಯಮ ಪ್ರಕಾರ ಆಯ್ಕೆ ಮಾಡಲಾಗಿದೆ.",
    "invalid_designation": "ಅಧಿಕೃತ ಸಹಿ ಪದವು 6–24 ಅಕ್ಷರಗಳಿರಬೇಕು.",
    "invalid_website": "Website URL ಅಮಾನ್ಯವಾಗಿದೆ (ಪ್ರೋಟೋಕಾಲ್ ಸೇರಿಸಿ, ಉದಾ: https://).",
    "registration_received": (
        "ನೋಂದಣಿ ವಿವರಗಳು ಮಾನ್ಯವಾಗಿವೆ. ನೋಂದಣಿಯ ಸರ್ವರ್ ಪ್ರಕ್ರಿಯೆ ಇನ್ನೂ ಲಭ್ಯವಿಲ್ಲ."
    ),
}

MESSAGE_TABLE: Final[Mapping[SupportedLanguage, Mapping[str, str]]] = MappingProxyType(
    {
        SupportedLanguage.EN: MappingProxyType(_EN),
        SupportedLanguage.HI: MappingProxyType(_HI),
        SupportedLanguage.KN: MappingProxyType(_KN),
    }
)


def translate(lang: str | SupportedLanguage | None, key: str) -> str:
    """
    Return the display string for a message key in the requested language.

    Unknown languages resolve to English; keys missing from the resolved
    language fall back to English, then to FALLBACK_MESSAGE. Never raises.
    """
    language = lang if isinstance(lang, SupportedLanguage) else resolve_language(lang)
    message = MESSAGE_TABLE[language].get(key)
    if message is None:
        message = MESSAGE_TABLE[DEFAULT_LANGUAGE].get(key, FALLBACK_MESSAGE)
    return message


__all__ = [
    "FALLBACK_MESSAGE",
    "MESSAGE_TABLE",
    "translate",
]
