"""Tests for the compact draw codec."""

from conftest import make_draw

from services.codec import DRAW_FIELDS, compress, decompress


class TestCodec:
    def test_round_trip(self):
        draws = [
            make_draw(300, "2024-07-08", "French"),
            make_draw(299, "2024-07-02", None),
            make_draw(298, "2024-06-19", "CEC"),
        ]
        assert decompress(compress(draws)) == draws

    def test_compact_form_is_positional(self):
        row = compress([make_draw(1, "2024-01-01", "PNP")])[0]
        assert isinstance(row, tuple)
        assert len(row) == len(DRAW_FIELDS)
        assert row[DRAW_FIELDS.index("category")] == "PNP"

    def test_missing_category_becomes_none(self):
        draw = make_draw(1, "2024-01-01")
        del draw["category"]
        assert decompress(compress([draw]))[0]["category"] is None

    def test_empty(self):
        assert compress([]) == []
        assert decompress([]) == []
