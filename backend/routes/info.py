"""API description and runtime stats routes."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from dependencies import get_cache, get_loader, get_perf
from services.cache import TTLCache
from services.loader import DatasetLoader
from services.perf import PerformanceStats

router = APIRouter()

API_VERSION = "2.1.0"


@router.get("/")
async def api_info() -> dict:
    return {
        "version": API_VERSION,
        "name": "Canada Express Entry Draws API",
        "description": "API for accessing Canada Express Entry draw history with bilingual support",
        "endpoints": {
            "draws": {
                "path": "/api/draws",
                "description": "Get all draws with optional year and category filters",
                "parameters": ["year", "category", "lang", "page", "limit"],
                "examples": [
                    "/api/draws?year=2024",
                    "/api/draws?category=PNP&lang=fr",
                    "/api/draws?year=2023&category=CEC&page=2&limit=20",
                ],
            },
            "latest": {
                "path": "/api/draws/latest",
                "description": "Get the draw closest to today's date",
                "parameters": ["lang"],
            },
            "categories": {
                "path": "/api/categories",
                "description": "Get all categories, most frequent first",
                "parameters": ["lang"],
            },
            "stats": {
                "path": "/api/stats",
                "description": "Cache, performance and memory statistics",
            },
        },
        "language_support": {
            "english": {
                "default": True,
                "description": "English data with English category codes (PNP, CEC, etc.)",
            },
            "french": {
                "parameter": "?lang=fr",
                "description": "French data with French category labels",
            },
        },
    }


@router.get("/api/stats")
async def stats(
    cache: TTLCache = Depends(get_cache),
    loader: DatasetLoader = Depends(get_loader),
    perf: PerformanceStats = Depends(get_perf),
) -> dict:
    """Diagnostics for this instance only; other instances keep their own."""
    return {
        "cache": cache.stats(),
        "performance": perf.stats(),
        "memory": loader.memory_stats(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
