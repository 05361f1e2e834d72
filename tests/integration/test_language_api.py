"""Integration tests for the language preference endpoint."""
from __future__ import annotations

import pytest
from fastapi import status

from app.routers.language import safe_redirect_target


def test_set_language_sets_cookie_and_redirects(client) -> None:
    response = client.get(
        "/lang",
        params={"lang": "hi", "redirect": "/corporate/register"},
        follow_redirects=False,
    )
    assert response.status_code == status.HTTP_303_SEE_OTHER
    assert response.headers["location"] == "/corporate/register"
    assert response.cookies.get("lang") == "hi"


def test_set_language_without_redirect_goes_home(client) -> None:
    response = client.get("/lang", params={"lang": "kn"}, follow_redirects=False)
    assert response.status_code == status.HTTP_303_SEE_OTHER
    assert response.headers["location"] == "/"


def test_set_language_redirect_to_itself_goes_home(client) -> None:
    response = client.get(
        "/lang",
        params={"lang": "en", "redirect": "/lang"},
        follow_redirects=False,
    )
    assert response.headers["location"] == "/"


@pytest.mark.parametrize("lang", ["fr", "HI", ""])
def test_unsupported_language_lists_choices(client, lang: str) -> None:
    response = client.get(
        "/lang",
        params={"lang": lang, "redirect": "/corporate/register"},
        follow_redirects=False,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["data"]["languages"] == ["en", "hi", "kn"]
    assert body["meta"]["redirect"] == "/corporate/register"
    assert "lang" not in response.cookies


def test_missing_language_lists_choices(client) -> None:
    response = client.get("/lang", follow_redirects=False)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Please choose one of the supported languages."


def test_language_disabled_in_settings_is_rejected(test_settings) -> None:
    from fastapi.testclient import TestClient

    from app.main import create_app

    test_settings.supported_langs = ["en", "hi"]
    client = TestClient(create_app(settings=test_settings))

    response = client.get("/lang", params={"lang": "kn"}, follow_redirects=False)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["data"]["languages"] == ["en", "hi"]


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ("/corporate/register", "/corporate/register"),
        ("/corporate/register?step=2", "/corporate/register?step=2"),
        (None, "/"),
        ("", "/"),
        ("https://evil.example", "/"),
        ("//evil.example", "/"),
        ("/\\evil.example", "/"),
        ("/lang?lang=hi", "/"),
    ],
)
def test_safe_redirect_target(target: str | None, expected: str) -> None:
    assert safe_redirect_target(target) == expected
