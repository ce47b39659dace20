"""
Language endpoints.
"""
from fastapi import APIRouter, Depends, Request

from langmiddleware.context import get_language
from langmiddleware.schemas import LanguageResponse

router = APIRouter()


@router.get("/language", response_model=LanguageResponse)
async def read_language(request: Request, language: str = Depends(get_language)):
    """Return the language negotiated for this request."""
    extractor = request.app.state.language_extractor
    return LanguageResponse(
        language=language,
        default_language=extractor.default_language,
        supported_languages=list(extractor.resolver.supported_languages),
        source=extractor.source,
    )
