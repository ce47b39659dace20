"""
Starlette middleware for language detection and context setup.

Reads the language from a cookie and/or the Accept-Language header and
sets LanguageContext for the duration of the request.
"""
import logging
from typing import Any, Iterable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from langmiddleware.config import LangSource, LanguageSettings
from langmiddleware.context import LanguageContext
from langmiddleware.resolver import LanguageResolver

logger = logging.getLogger(__name__)


class LanguageExtractor:
    """
    Picks the language for a request according to a source policy.

    Use one of the named constructors:
    - cookie_only(): read only the language cookie
    - header_only(): read only Accept-Language
    - cookie_and_header(): cookie first, Accept-Language when the cookie is absent
    """

    def __init__(
        self,
        resolver: LanguageResolver,
        source: LangSource,
        cookie_name: Optional[str] = None,
    ):
        if source.uses_cookie and not cookie_name:
            raise ValueError(f"cookie_name is required for source {source.value!r}")

        self.resolver = resolver
        self.source = source
        self.cookie_name = cookie_name if source.uses_cookie else None

        logger.info(
            f"Language extractor configured: source={source.value}, "
            f"default={resolver.default_language}, "
            f"supported={list(resolver.supported_languages)}"
        )

    @classmethod
    def cookie_only(
        cls,
        default_language: str,
        supported_languages: Iterable[str],
        cookie_name: str,
    ) -> "LanguageExtractor":
        resolver = LanguageResolver(default_language, supported_languages)
        return cls(resolver, LangSource.COOKIE, cookie_name)

    @classmethod
    def header_only(
        cls,
        default_language: str,
        supported_languages: Iterable[str],
    ) -> "LanguageExtractor":
        resolver = LanguageResolver(default_language, supported_languages)
        return cls(resolver, LangSource.HEADER)

    @classmethod
    def cookie_and_header(
        cls,
        default_language: str,
        supported_languages: Iterable[str],
        cookie_name: str,
    ) -> "LanguageExtractor":
        resolver = LanguageResolver(default_language, supported_languages)
        return cls(resolver, LangSource.COOKIE_THEN_HEADER, cookie_name)

    @classmethod
    def from_settings(cls, settings: LanguageSettings) -> "LanguageExtractor":
        resolver = LanguageResolver(settings.default_language, settings.supported_languages)
        return cls(resolver, settings.source, settings.cookie_name)

    @property
    def default_language(self) -> str:
        return self.resolver.default_language

    def extract(self, request: Any) -> str:
        """
        Resolve the language for a request.

        Args:
            request: Object exposing `cookies` and `headers` mappings
                (a Starlette Request in practice)

        Returns:
            Supported language code or the default language
        """
        if self.source.uses_cookie:
            cookie = request.cookies.get(self.cookie_name)
            if cookie is not None:
                return self.resolver.from_cookie(cookie)

        if self.source.uses_header:
            return self.resolver.from_header(request.headers.get("Accept-Language", ""))

        return self.resolver.default_language


class LanguageMiddleware(BaseHTTPMiddleware):
    """
    Middleware to detect and set request language.

    The detected language is stored in:
    - LanguageContext (async-safe context variable)
    - request.state.language (for direct access in endpoints)

    Usage:
        app.add_middleware(
            LanguageMiddleware,
            extractor=LanguageExtractor.header_only("en", ["en", "fr"]),
        )
    """

    def __init__(self, app: ASGIApp, extractor: LanguageExtractor):
        super().__init__(app)
        self.extractor = extractor

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        language = self.extractor.extract(request)

        LanguageContext.set(language)
        request.state.language = language

        try:
            response = await call_next(request)
            response.headers["Content-Language"] = language
            return response
        finally:
            LanguageContext.reset()
