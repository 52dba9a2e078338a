"""FastAPI dependency providers for the app-level components."""

from fastapi import Query, Request

from config import Settings
from errors import UnsupportedLanguageError
from services.cache import TTLCache
from services.loader import LANGUAGES, DatasetLoader
from services.perf import PerformanceStats


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_cache(request: Request) -> TTLCache:
    return request.app.state.cache


def get_loader(request: Request) -> DatasetLoader:
    return request.app.state.loader


def get_perf(request: Request) -> PerformanceStats:
    return request.app.state.perf


def get_lang(lang: str = Query("en")) -> str:
    """Normalize and validate the ``lang`` query parameter."""
    lang = (lang or "en").lower()
    if lang not in LANGUAGES:
        raise UnsupportedLanguageError(lang, set(LANGUAGES))
    return lang
