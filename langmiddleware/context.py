"""
Request-scoped storage for the resolved language.
"""
from contextvars import ContextVar
from typing import Optional

from fastapi import Request

# Keyed by the ContextVar object itself, not by a string name
_current_language: ContextVar[Optional[str]] = ContextVar(
    "langmiddleware.language", default=None
)


class LanguageContext:
    """
    Context for the current request's language.

    Uses Python's contextvars to maintain request-scoped state
    in async environments.
    """

    @classmethod
    def get(cls) -> Optional[str]:
        """Get the language resolved for this request, or None outside a request."""
        return _current_language.get()

    @classmethod
    def set(cls, language: str) -> None:
        """Set language for this request/context."""
        _current_language.set(language)

    @classmethod
    def reset(cls) -> None:
        _current_language.set(None)


def get_language(request: Request) -> Optional[str]:
    """
    FastAPI dependency returning the language resolved by LanguageMiddleware.

    Example:
        >>> @router.get("/greeting")
        ... async def greeting(language: str = Depends(get_language)):
        ...     ...
    """
    language = getattr(request.state, "language", None)
    if language is not None:
        return language
    return LanguageContext.get()
