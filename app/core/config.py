from __future__ import annotations
from dotenv import load_dotenv
import os
import ast
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from app.models.language import SupportedLanguage

# Load environment variables from a .env file into the process environment
load_dotenv()

KNOWN_LANGUAGE_TAGS = frozenset(language.value for language in SupportedLanguage)


def str_to_bool(value: str) -> bool:
    """Convert a string value from an environment variable to a boolean."""
    return value.lower() in {"true", "1", "yes", "y", "on"}


def parse_int_or_none(value: str) -> int | None:
    """Safely parse an int; allow None for 'None' (str) input."""
    if value is None:
        return None
    value_stripped = value.strip().lower()
    if value_stripped == "none":
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_csv_list(value: str) -> list[str]:
    """
    Parses a list-valued environment variable.
    Accepts Python list literal (e.g. "['en','hi']", JSON won't work), or comma-separated string.
    """
    value = value.strip()
    try:
        items = ast.literal_eval(value)
        if isinstance(items, list):
            return [str(item).strip(' "\'') for item in items]
    except (ValueError, SyntaxError):
        pass
    # fallback: comma-separated
    return [item.strip(' "\'') for item in value.split(",") if item.strip(' "\'')]


class AppSettings(BaseSettings):
    """
    Centralized application settings loaded from environment vars or .env using Pydantic's BaseSettings.

    Built once at process start and handed to create_app(); request handlers and
    the form validator never read the environment themselves.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = os.getenv("APP_ENV", "development")
    app_name: str = os.getenv("APP_NAME", "corporate-registration-server")

    port: int = int(os.getenv("PORT", "3000"))
    host: str = os.getenv("HOST", "0.0.0.0")
    reload: bool = str_to_bool(os.getenv("RELOAD", "True"))

    log_level: str | None = os.getenv("LOG_LEVEL") or None

    supported_langs: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["en", "hi", "kn"]
    )
    lang_cookie_name: str = os.getenv("LANG_COOKIE_NAME", "lang")
    lang_cookie_max_age: int | None = parse_int_or_none(
        os.getenv("LANG_COOKIE_MAX_AGE", "None")
    )

    rate_limit_enabled: bool = str_to_bool(os.getenv("RATE_LIMIT_ENABLED", "True"))
    rate_limit_per_minute: int = int(os.getenv("RATE_LIMIT_PER_MINUTE", "60"))

    cors_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    @field_validator("supported_langs", "cors_origins", mode="before")
    @classmethod
    def split_list_values(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_csv_list(value)
        return value

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 1 <= value <= 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return value

    @field_validator("rate_limit_per_minute")
    @classmethod
    def validate_rate_limit_per_minute(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("RATE_LIMIT_PER_MINUTE must be a positive integer")
        return value

    @field_validator("supported_langs")
    @classmethod
    def validate_supported_langs(cls, value: list[str]) -> list[str]:
        normalized = [tag.strip().lower() for tag in value if tag.strip()]
        unknown = set(normalized) - KNOWN_LANGUAGE_TAGS
        if unknown:
            raise ValueError(f"SUPPORTED_LANGS contains unknown languages: {sorted(unknown)}")
        if "en" not in normalized:
            raise ValueError("SUPPORTED_LANGS must include 'en'")
        return list(dict.fromkeys(normalized))


settings = AppSettings()


def get_settings() -> AppSettings:
    """Return the application settings instance."""
    return settings
