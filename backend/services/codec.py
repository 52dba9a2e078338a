"""Compact in-memory representation of draw records.

A decoded draw is a dict with verbose field names; the resident copy keeps each
draw as a plain tuple in a fixed field order, which drops the per-record key
overhead. The mapping is 1:1, nothing is summarized.
"""

# Field order of the compact tuple form.
DRAW_FIELDS = (
    "drawNumber",
    "date",
    "invitationsIssued",
    "minimumCRS",
    "category",
    "year",
)


def compress(draws: list[dict]) -> list[tuple]:
    """Turn decoded draw dicts into positional tuples.

    A missing ``category`` is stored as None, the same way the data files
    record "no program specified".
    """
    return [tuple(draw.get(field) for field in DRAW_FIELDS) for draw in draws]


def decompress(rows: list[tuple]) -> list[dict]:
    """Inverse of :func:`compress`."""
    return [dict(zip(DRAW_FIELDS, row)) for row in rows]
