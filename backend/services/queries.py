"""Query functions over a decoded draw dataset.

All functions are pure: they take a list of draw dicts and return new lists
without touching the input. Filtering always happens before pagination.
"""

import math
from collections import Counter
from datetime import date


def filter_by_year(draws: list[dict], year: str) -> list[dict]:
    return [draw for draw in draws if draw["year"] == year]


def filter_by_category(draws: list[dict], category: str) -> list[dict]:
    """Case-insensitive category match. Draws without a category never match."""
    wanted = category.lower()
    return [
        draw for draw in draws
        if draw.get("category") and draw["category"].lower() == wanted
    ]


def paginate(items: list, page: int = 1, limit: int = 50) -> dict:
    """Slice one page out of ``items`` and describe where it sits.

    Pages past the end come back empty rather than raising.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    total = len(items)
    total_pages = math.ceil(total / limit)
    start = (page - 1) * limit

    return {
        "items": items[start:start + limit],
        "pagination": {
            "page": page,
            "limit": limit,
            "totalDraws": total,
            "totalPages": total_pages,
            "hasNext": page < total_pages,
            "hasPrev": page > 1,
        },
    }


def query_draws(
    draws: list[dict],
    year: str | None = None,
    category: str | None = None,
    page: int = 1,
    limit: int = 50,
) -> dict:
    """Filter by year and/or category, then paginate."""
    if year:
        draws = filter_by_year(draws, year)
    if category:
        draws = filter_by_category(draws, category)

    page_data = paginate(draws, page=page, limit=limit)
    return {"draws": page_data["items"], "pagination": page_data["pagination"]}


def find_nearest_draw(draws: list[dict], today: date | None = None) -> dict | None:
    """Return the draw dated closest to today without being in the future.

    Dates are compared at day granularity. On a tie the draw that comes
    first in ``draws`` wins.
    """
    today = today or date.today()
    nearest = None
    nearest_gap = None

    for draw in draws:
        drawn_on = _parse_date(draw["date"])
        if drawn_on > today:
            continue
        gap = (today - drawn_on).days
        if nearest_gap is None or gap < nearest_gap:
            nearest, nearest_gap = draw, gap

    return nearest


def list_categories(draws: list[dict]) -> list[str]:
    """Distinct categories, most frequent first (ties keep first-seen order)."""
    counts = Counter(draw["category"] for draw in draws if draw.get("category"))
    return [category for category, _ in counts.most_common()]


def _parse_date(value: str) -> date:
    # Source dates are ISO strings, occasionally with a time component.
    return date.fromisoformat(value[:10])
