"""
Request language negotiation for FastAPI / Starlette.

This module provides:
- Accept-Language and language tag parsing
- Resolution against a set of supported languages
- Middleware and request-scoped context for the resolved language
"""

from langmiddleware.tags import (
    WILDCARD,
    AcceptLanguageEntry,
    AcceptLanguageError,
    EmptyAcceptLanguageError,
    InvalidLanguageTag,
    LanguageError,
    parse_accept_language,
    parse_base,
)
from langmiddleware.resolver import LanguageResolver
from langmiddleware.config import LangSource, LanguageSettings
from langmiddleware.context import LanguageContext, get_language
from langmiddleware.middleware import LanguageExtractor, LanguageMiddleware

__all__ = [
    "WILDCARD",
    "AcceptLanguageEntry",
    "AcceptLanguageError",
    "EmptyAcceptLanguageError",
    "InvalidLanguageTag",
    "LanguageError",
    "parse_accept_language",
    "parse_base",
    "LanguageResolver",
    "LangSource",
    "LanguageSettings",
    "LanguageContext",
    "get_language",
    "LanguageExtractor",
    "LanguageMiddleware",
]
