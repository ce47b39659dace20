"""
Tests for LanguageExtractor and LanguageMiddleware.
"""
from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient

from langmiddleware.config import LangSource, LanguageSettings
from langmiddleware.context import LanguageContext
from langmiddleware.main import create_app
from langmiddleware.middleware import LanguageExtractor
from langmiddleware.tags import InvalidLanguageTag


def make_request(cookies=None, headers=None):
    """Minimal stand-in exposing the attributes the extractor reads."""
    return SimpleNamespace(cookies=cookies or {}, headers=headers or {})


def make_client(extractor, cookies=None, headers=None):
    app = create_app(extractor)

    @app.get("/context")
    async def read_context():
        return {"language": LanguageContext.get()}

    return AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        cookies=cookies,
        headers=headers,
    )


def test_cookie_and_header_prefers_cookie():
    extractor = LanguageExtractor.cookie_and_header("en", ["en", "fr"], "cookie-lang")
    request = make_request(
        cookies={"cookie-lang": "fr"},
        headers={"Accept-Language": "en"},
    )

    assert extractor.extract(request) == "fr"


def test_cookie_and_header_unsupported_cookie_does_not_fall_back_to_header():
    extractor = LanguageExtractor.cookie_and_header("en", ["en", "fr"], "cookie-lang")
    request = make_request(
        cookies={"cookie-lang": "de"},
        headers={"Accept-Language": "fr"},
    )

    assert extractor.extract(request) == "en"


def test_cookie_and_header_uses_header_without_cookie():
    extractor = LanguageExtractor.cookie_and_header("en", ["en", "fr"], "cookie-lang")
    request = make_request(headers={"Accept-Language": "fr-CA, en;q=0.5"})

    assert extractor.extract(request) == "fr"


def test_cookie_only_ignores_header():
    extractor = LanguageExtractor.cookie_only("en", ["en", "fr"], "cookie-lang")

    assert extractor.extract(make_request(headers={"Accept-Language": "fr"})) == "en"
    assert extractor.extract(make_request(cookies={"cookie-lang": "fr"})) == "fr"


def test_header_only_ignores_cookie():
    extractor = LanguageExtractor.header_only("en", ["en", "fr"])
    request = make_request(cookies={"lang": "fr"})

    assert extractor.cookie_name is None
    assert extractor.extract(request) == "en"


def test_header_only_missing_header_returns_default():
    extractor = LanguageExtractor.header_only("fr", ["en", "fr"])

    assert extractor.extract(make_request()) == "fr"


def test_cookie_source_requires_cookie_name():
    with pytest.raises(ValueError):
        LanguageExtractor.cookie_only("en", ["en"], "")


def test_named_constructor_rejects_invalid_tag():
    with pytest.raises(InvalidLanguageTag):
        LanguageExtractor.header_only("en", ["en", "??"])


def test_from_settings():
    settings = LanguageSettings(
        default_language="fr",
        supported_languages=["FR", "deu"],
        source=LangSource.COOKIE,
        cookie_name="ui-lang",
    )

    extractor = LanguageExtractor.from_settings(settings)

    assert extractor.source == LangSource.COOKIE
    assert extractor.cookie_name == "ui-lang"
    assert extractor.default_language == "fr"
    assert extractor.resolver.supported_languages == ("fr", "de")


@pytest.mark.asyncio
async def test_middleware_resolves_header():
    extractor = LanguageExtractor.header_only("en", ["en", "fr"])

    async with make_client(extractor, headers={"Accept-Language": "fr-BE, en;q=0.8"}) as client:
        response = await client.get("/api/language")

    assert response.status_code == 200
    assert response.headers["Content-Language"] == "fr"
    data = response.json()
    assert data["language"] == "fr"
    assert data["default_language"] == "en"
    assert data["supported_languages"] == ["en", "fr"]
    assert data["source"] == "header"


@pytest.mark.asyncio
async def test_middleware_cookie_overrides_header():
    extractor = LanguageExtractor.cookie_and_header("en", ["en", "fr"], "cookie-lang")

    async with make_client(
        extractor,
        cookies={"cookie-lang": "fr"},
        headers={"Accept-Language": "en-US"},
    ) as client:
        response = await client.get("/api/language")

    assert response.json()["language"] == "fr"
    assert response.headers["Content-Language"] == "fr"


@pytest.mark.asyncio
async def test_middleware_wildcard_returns_default():
    extractor = LanguageExtractor.header_only("en", ["en", "fr"])

    async with make_client(
        extractor, headers={"Accept-Language": "de;q=0.85, fr;q=0.9, en;q=0.8, *;q=1"}
    ) as client:
        response = await client.get("/api/language")

    assert response.json()["language"] == "en"


@pytest.mark.asyncio
async def test_middleware_malformed_header_does_not_fail_request():
    extractor = LanguageExtractor.header_only("en", ["en", "fr"])

    async with make_client(extractor, headers={"Accept-Language": "fr;q=oops"}) as client:
        response = await client.get("/api/language")

    assert response.status_code == 200
    assert response.json()["language"] == "en"


@pytest.mark.asyncio
async def test_middleware_sets_language_context():
    extractor = LanguageExtractor.header_only("en", ["en", "fr"])

    async with make_client(extractor, headers={"Accept-Language": "fr"}) as client:
        response = await client.get("/context")

    assert response.json() == {"language": "fr"}
    assert LanguageContext.get() is None


@pytest.mark.asyncio
async def test_root_endpoint():
    extractor = LanguageExtractor.header_only("en", ["en", "fr"])

    async with make_client(extractor) as client:
        response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == "Language API"
    assert response.headers["Content-Language"] == "en"
