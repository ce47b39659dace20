"""
Response schemas for the language API.
"""
from pydantic import BaseModel, Field

from langmiddleware.config import LangSource


class LanguageResponse(BaseModel):
    """Language resolved for the current request, with the active configuration."""
    language: str = Field(description="Language resolved for this request")
    default_language: str = Field(description="Fallback language")
    supported_languages: list[str] = Field(description="Languages the service can serve")
    source: LangSource = Field(description="Where the language is read from")
