"""Shared fixtures: sample draws and throwaway data directories."""

import json

import pytest


def make_draw(number: int, date: str, category: str | None = "CEC", **overrides) -> dict:
    draw = {
        "drawNumber": number,
        "date": date,
        "invitationsIssued": 1000 + number,
        "minimumCRS": 450 + number % 50,
        "category": category,
        "year": date[:4],
    }
    draw.update(overrides)
    return draw


class FakeClock:
    """Manually advanced time source for TTL tests."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def write_partition(data_dir, filename: str, draws: list[dict]) -> None:
    (data_dir / filename).write_text(json.dumps({"draws": draws}), encoding="utf-8")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def en_draws():
    return [
        make_draw(5, "2025-01-01", "PNP"),
        make_draw(4, "2024-06-01", "CEC"),
        make_draw(3, "2024-03-15", "PNP"),
        make_draw(2, "2024-01-01", None),
        make_draw(1, "2023-11-20", "Trades"),
    ]


@pytest.fixture
def fr_draws():
    return [
        make_draw(4, "2024-06-01", "Catégorie de l'expérience canadienne"),
        make_draw(2, "2024-01-01", None),
    ]


@pytest.fixture
def data_dir(tmp_path, en_draws, fr_draws):
    write_partition(tmp_path, "ee-draws.json", en_draws)
    write_partition(tmp_path, "ee-draws-fr.json", fr_draws)
    return tmp_path
