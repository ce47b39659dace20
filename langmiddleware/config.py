"""
Configuration management for language negotiation.
Uses Pydantic Settings to load configuration from environment variables.
"""
from enum import Enum
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LangSource(str, Enum):
    """Where the request language is read from."""

    COOKIE = "cookie"
    HEADER = "header"
    COOKIE_THEN_HEADER = "cookie_then_header"

    @property
    def uses_cookie(self) -> bool:
        return self in (LangSource.COOKIE, LangSource.COOKIE_THEN_HEADER)

    @property
    def uses_header(self) -> bool:
        return self in (LangSource.HEADER, LangSource.COOKIE_THEN_HEADER)


class LanguageSettings(BaseSettings):
    """Language negotiation settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LANG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_language: str = Field(
        default="en",
        description="Language used when the request carries no usable preference"
    )
    supported_languages: List[str] = Field(
        default_factory=lambda: ["en", "fr"],
        description="Languages the application can serve (JSON list in env, e.g. '[\"en\",\"fr\"]')"
    )
    source: LangSource = Field(
        default=LangSource.COOKIE_THEN_HEADER,
        description="Request language source: 'cookie', 'header' or 'cookie_then_header'"
    )
    cookie_name: str = Field(
        default="lang",
        description="Name of the cookie holding the preferred language"
    )


# Global settings instance
settings = LanguageSettings()
