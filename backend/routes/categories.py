"""Category listing route."""

from fastapi import APIRouter, Depends

from dependencies import get_lang, get_loader
from services.loader import DatasetLoader
from services.queries import list_categories

router = APIRouter()


@router.get("/api/categories")
async def categories(
    lang: str = Depends(get_lang),
    loader: DatasetLoader = Depends(get_loader),
) -> dict:
    """Draw categories, most frequent first.

    English categories are canonical codes (PNP, CEC, ...); French ones are the
    localized program labels.
    """
    draws = await loader.get_draws(lang)
    return {"categories": list_categories(draws)}
