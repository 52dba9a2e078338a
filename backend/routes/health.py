"""Health and readiness check routes."""

import logging

from fastapi import APIRouter, Depends

from config import Settings
from dependencies import get_loader, get_settings
from services.loader import DatasetLoader

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/ready")
async def ready(settings: Settings = Depends(get_settings)) -> dict:
    """Lightweight readiness check, no data access."""
    return {"status": "ok", "service": "ee-draws-api", "commit": settings.git_sha}


@router.get("/health")
async def health(
    settings: Settings = Depends(get_settings),
    loader: DatasetLoader = Depends(get_loader),
) -> dict:
    """Deep health check that verifies the draw dataset can be loaded."""
    result = {"status": "ok", "service": "ee-draws-api", "commit": settings.git_sha, "data": "not_tested"}

    try:
        data = await loader.load()
        result["data"] = "loaded"
        result["draws"] = {lang: len(rows) for lang, rows in data.items()}
    except Exception as e:
        logger.exception("Draw data health check failed")
        result["status"] = "degraded"
        result["data"] = "error"
        result["data_error"] = str(e)

    return result
