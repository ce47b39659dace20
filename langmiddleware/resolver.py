"""
Language resolution against a fixed set of supported languages.

Every lookup degrades to the default language instead of raising, so a
bad header or cookie never fails the request.
"""
import logging
from typing import Iterable, Optional, Tuple

from langmiddleware.tags import (
    WILDCARD,
    AcceptLanguageError,
    InvalidLanguageTag,
    parse_accept_language,
    parse_base,
)

logger = logging.getLogger(__name__)


class LanguageResolver:
    """
    Resolves Accept-Language headers and cookie values to a supported language.

    The resolved language is always one of the supported languages or the
    default language.
    """

    def __init__(self, default_language: str, supported_languages: Iterable[str]):
        """
        Args:
            default_language: Language returned when nothing else matches
            supported_languages: Languages the application can serve, in order

        Raises:
            InvalidLanguageTag: If the default or a supported language is invalid
        """
        self._default_language = parse_base(default_language)

        normalized = []
        for language in supported_languages:
            code = parse_base(language)
            if code not in normalized:
                normalized.append(code)
        self._supported_languages: Tuple[str, ...] = tuple(normalized)

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def supported_languages(self) -> Tuple[str, ...]:
        return self._supported_languages

    def is_supported(self, code: str) -> bool:
        return code in self._supported_languages

    def from_header(self, header: Optional[str]) -> str:
        """
        Select the language to use from an Accept-Language header.

        Ranges are tried in preference order. A wildcard ends the search
        with the default language, even when a lower-priority range
        would have matched.

        Args:
            header: Raw Accept-Language header value

        Returns:
            Supported language code or the default language
        """
        try:
            entries = parse_accept_language(header)
        except AcceptLanguageError as e:
            logger.debug(f"Using default language, Accept-Language not usable: {e}")
            return self._default_language

        for entry in entries:
            base = entry.base
            if base == WILDCARD:
                logger.debug("Using default language, wildcard ranked ahead of any supported language")
                return self._default_language
            if self.is_supported(base):
                return base

        return self._default_language

    def from_cookie(self, value: Optional[str]) -> str:
        """
        Validate a language cookie value.

        Args:
            value: Raw cookie value

        Returns:
            Supported language code or the default language
        """
        try:
            code = parse_base(value)
        except InvalidLanguageTag:
            logger.debug(f"Using default language, invalid language cookie: {value!r}")
            return self._default_language

        if self.is_supported(code):
            return code

        logger.debug(f"Using default language, unsupported language cookie: {code}")
        return self._default_language

    def __repr__(self) -> str:
        return (
            f"LanguageResolver(default_language={self._default_language!r}, "
            f"supported_languages={list(self._supported_languages)!r})"
        )
