"""Shared pytest fixtures for unit and integration tests."""
from __future__ import annotations

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.main import create_app


def _settings(**overrides: object) -> SimpleNamespace:
    values: dict[str, object] = {
        "app_env": "test",
        "app_name": "corporate-registration-test",
        "log_level": None,
        "supported_langs": ["en", "hi", "kn"],
        "lang_cookie_name": "lang",
        "lang_cookie_max_age": None,
        "rate_limit_enabled": False,
        "rate_limit_per_minute": 60,
        "cors_origins": ["*"],
    }
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.fixture
def test_settings() -> SimpleNamespace:
    """Minimal settings for test app (no real env, rate limiting off)."""
    return _settings()


@pytest.fixture
def app(test_settings: SimpleNamespace):
    """FastAPI app instance with test settings."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(app):
    """HTTP client for integration tests (sync TestClient)."""
    return TestClient(app)


@pytest.fixture
def rate_limited_client():
    """HTTP client for an app that allows two requests per minute."""
    return TestClient(create_app(settings=_settings(rate_limit_enabled=True, rate_limit_per_minute=2)))


@pytest.fixture
def valid_fields() -> dict[str, str]:
    """A registration submission that passes every rule, keyed by canonical field name."""
    return {
        "full_name": "  Asha   Raghavan ",
        "email": "Asha.R@AcmeFoods.in",
        "phone": "+91 98765-43210",
        "company_name": "Acme Foods Pvt Ltd",
        "company_type": "PVT-LTD",
        "gstin": "29abcde1234f1z5",
        "pan": "abcde1234f",
        "address_line_1": "12, MG Road,   Indiranagar",
        "address_line_2": "Bengaluru 560038",
        "industry_type": "FMCG",
        "authorized_signatory_designation": "Managing Director",
        "company_website": "https://acmefoods.in",
    }


@pytest.fixture
def valid_form(valid_fields: dict[str, str]) -> dict[str, str]:
    """The same submission keyed by the registration page's input names."""
    from app.utils.constants import FORM_FIELD_ALIASES

    return {alias: valid_fields[name] for alias, name in FORM_FIELD_ALIASES.items()}
