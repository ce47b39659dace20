"""
Language tag parsing.

Provides:
- parse_base() for cookie values and configured language codes
- parse_accept_language() for weighted Accept-Language headers
- base_subtag() to reduce a language range to its primary subtag
"""
import re
from dataclasses import dataclass
from typing import List, Optional

WILDCARD = "*"

# ISO 639-2 (T and B forms) codes that have an ISO 639-1 equivalent
_THREE_LETTER_ALIASES = {
    "ara": "ar",
    "chi": "zh",
    "zho": "zh",
    "cze": "cs",
    "ces": "cs",
    "dan": "da",
    "dut": "nl",
    "nld": "nl",
    "eng": "en",
    "fin": "fi",
    "fre": "fr",
    "fra": "fr",
    "ger": "de",
    "deu": "de",
    "gre": "el",
    "ell": "el",
    "heb": "he",
    "hin": "hi",
    "hun": "hu",
    "ita": "it",
    "jpn": "ja",
    "kor": "ko",
    "nor": "no",
    "per": "fa",
    "fas": "fa",
    "pol": "pl",
    "por": "pt",
    "rum": "ro",
    "ron": "ro",
    "rus": "ru",
    "spa": "es",
    "swe": "sv",
    "tur": "tr",
    "ukr": "uk",
    "vie": "vi",
}

_BASE_RE = re.compile(r"[A-Za-z]{2,3}")
_RANGE_RE = re.compile(r"[A-Za-z]{1,8}(?:[-_][A-Za-z0-9]{1,8})*")
_QUALITY_RE = re.compile(r"(?:0(?:\.\d{0,3})?|1(?:\.0{0,3})?)")


class LanguageError(Exception):
    """Base exception for language negotiation errors."""
    pass


class InvalidLanguageTag(LanguageError, ValueError):
    """A configured language or cookie value is not a valid base language tag."""

    def __init__(self, tag: Optional[str]):
        self.tag = tag
        super().__init__(f"Invalid language tag: {tag!r}")


class AcceptLanguageError(LanguageError, ValueError):
    """Accept-Language header is not well-formed."""
    pass


class EmptyAcceptLanguageError(AcceptLanguageError):
    """Accept-Language header contains no language ranges."""
    pass


@dataclass(frozen=True)
class AcceptLanguageEntry:
    """One language range from an Accept-Language header."""

    tag: str
    quality: float = 1.0

    @property
    def base(self) -> str:
        return base_subtag(self.tag)


def _normalize_primary(subtag: str) -> str:
    lowered = subtag.lower()
    return _THREE_LETTER_ALIASES.get(lowered, lowered)


def parse_base(value: Optional[str]) -> str:
    """
    Parse a bare base language code and return its canonical form.

    Only a lone 2-3 letter code is accepted; tags carrying region or
    script subtags ("en-US") are rejected. Three-letter codes are mapped
    to their two-letter form where one exists ("eng" -> "en").

    Args:
        value: Language code string

    Returns:
        Lowercase base language code

    Raises:
        InvalidLanguageTag: If the value is not 2-3 ASCII letters
    """
    if value is None:
        raise InvalidLanguageTag(value)

    code = value.strip()
    if not _BASE_RE.fullmatch(code):
        raise InvalidLanguageTag(value)

    return _normalize_primary(code)


def base_subtag(tag: str) -> str:
    """Reduce a language range to its primary subtag; the wildcard is kept as is."""
    if tag == WILDCARD:
        return WILDCARD
    return _normalize_primary(re.split(r"[-_]", tag, maxsplit=1)[0])


def _parse_entry(item: str) -> AcceptLanguageEntry:
    tag, *params = [part.strip() for part in item.split(";")]

    if tag != WILDCARD and not _RANGE_RE.fullmatch(tag):
        raise AcceptLanguageError(f"Malformed language range: {tag!r}")

    if not params:
        return AcceptLanguageEntry(tag=tag)

    if len(params) > 1:
        raise AcceptLanguageError(f"Unexpected parameters in entry: {item!r}")

    name, sep, raw_quality = params[0].partition("=")
    if not sep or name.strip().lower() != "q":
        raise AcceptLanguageError(f"Unexpected parameter in entry: {item!r}")

    raw_quality = raw_quality.strip()
    if not _QUALITY_RE.fullmatch(raw_quality):
        raise AcceptLanguageError(f"Malformed quality value: {raw_quality!r}")

    return AcceptLanguageEntry(tag=tag, quality=float(raw_quality))


def parse_accept_language(header: Optional[str]) -> List[AcceptLanguageEntry]:
    """
    Parse an Accept-Language header into entries ordered by preference.

    Handles:
    - Simple ranges: en, fr
    - Regional variants: en-US, zh-Hant-TW
    - Quality values: fr;q=0.8 (entries with q=0 are dropped)
    - The wildcard range: *

    Entries are sorted by quality, highest first. Entries with equal
    quality keep the order in which they appear in the header.

    Args:
        header: Raw Accept-Language header value

    Returns:
        Entries ordered by preference

    Raises:
        EmptyAcceptLanguageError: If the header contains no ranges
        AcceptLanguageError: If any entry is malformed
    """
    if header is None:
        raise EmptyAcceptLanguageError("Accept-Language header is empty")

    entries = []
    for item in header.split(","):
        item = item.strip()
        if not item:
            continue
        entries.append(_parse_entry(item))

    if not entries:
        raise EmptyAcceptLanguageError("Accept-Language header is empty")

    indexed = [(index, entry) for index, entry in enumerate(entries) if entry.quality > 0]
    indexed.sort(key=lambda pair: (-pair[1].quality, pair[0]))
    return [entry for _, entry in indexed]
