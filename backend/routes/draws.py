"""Draw history routes: filtered listing and the latest draw.

Responses are cached per parameter set on top of the dataset cache, so a
repeated request skips decoding and filtering entirely.
"""

import logging

from fastapi import APIRouter, Depends, Query, Response

from config import Settings
from dependencies import get_cache, get_lang, get_loader, get_settings
from services.cache import TTLCache, build_key
from services.loader import DatasetLoader
from services.queries import find_nearest_draw, query_draws

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/draws")
async def list_draws(
    response: Response,
    year: str | None = Query(None),
    category: str | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1),
    lang: str = Depends(get_lang),
    cache: TTLCache = Depends(get_cache),
    loader: DatasetLoader = Depends(get_loader),
    settings: Settings = Depends(get_settings),
) -> dict:
    """All draws, optionally filtered by year and category, one page at a time."""
    cache_key = build_key(
        "draws",
        {"year": year, "category": category, "lang": lang, "page": page, "limit": limit},
    )
    cached = cache.get(cache_key)
    if cached is not None:
        response.headers["X-Cache-Hit"] = "true"
        return cached

    draws = await loader.get_draws(lang)
    result = query_draws(draws, year=year, category=category, page=page, limit=limit)

    cache.set(cache_key, result, ttl_seconds=settings.draws_ttl)
    return result


@router.get("/api/draws/latest")
async def latest_draw(
    response: Response,
    lang: str = Depends(get_lang),
    cache: TTLCache = Depends(get_cache),
    loader: DatasetLoader = Depends(get_loader),
    settings: Settings = Depends(get_settings),
) -> dict:
    """The draw closest to today's date that has already happened."""
    cache_key = build_key("latest_draw", {"lang": lang})
    cached = cache.get(cache_key)
    if cached is not None:
        response.headers["X-Cache-Hit"] = "true"
        return cached

    draws = await loader.get_draws(lang)
    nearest = find_nearest_draw(draws)
    if nearest is None:
        logger.info("No past draws available for lang=%s", lang)

    result = {"draw": nearest or {}}
    # Shorter TTL: this rolls over as soon as a new draw is published.
    cache.set(cache_key, result, ttl_seconds=settings.latest_ttl)
    return result
