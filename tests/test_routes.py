"""HTTP-level tests for the draws API."""

import pytest
from conftest import write_partition
from fastapi.testclient import TestClient

from app import create_app
from config import Settings


@pytest.fixture
def make_client(monkeypatch):
    def _make(data_dir):
        monkeypatch.setenv("DATA_DIR", str(data_dir))
        return TestClient(create_app(Settings()))

    return _make


@pytest.fixture
def client(make_client, data_dir):
    return make_client(data_dir)


class TestDraws:
    def test_lists_all_draws(self, client, en_draws):
        resp = client.get("/api/draws")
        assert resp.status_code == 200
        body = resp.json()
        assert body["draws"] == en_draws
        assert body["pagination"]["totalDraws"] == 5
        assert resp.headers["X-Cache-Hit"] == "false"

    def test_filters_and_paginates(self, client):
        resp = client.get("/api/draws", params={"year": "2024", "page": 2, "limit": 2})
        body = resp.json()
        assert [d["drawNumber"] for d in body["draws"]] == [2]
        assert body["pagination"]["hasPrev"] is True
        assert body["pagination"]["hasNext"] is False

    def test_category_filter_ignores_case(self, client):
        body = client.get("/api/draws", params={"category": "pnp"}).json()
        assert [d["drawNumber"] for d in body["draws"]] == [5, 3]

    def test_french_partition(self, client, fr_draws):
        body = client.get("/api/draws", params={"lang": "fr"}).json()
        assert body["draws"] == fr_draws

    def test_repeat_request_is_served_from_cache(self, client):
        client.get("/api/draws", params={"year": "2024"})
        resp = client.get("/api/draws", params={"year": "2024"})
        assert resp.headers["X-Cache-Hit"] == "true"

    @pytest.mark.parametrize("param", ["category", "year"])
    def test_literal_undefined_filter_does_not_poison_unfiltered_listing(self, client, param):
        filtered = client.get("/api/draws", params={param: "undefined"}).json()
        assert filtered["pagination"]["totalDraws"] == 0

        resp = client.get("/api/draws")
        assert resp.headers["X-Cache-Hit"] == "false"
        assert resp.json()["pagination"]["totalDraws"] == 5

    def test_empty_lang_defaults_to_english(self, client, en_draws):
        resp = client.get("/api/draws?lang=")
        assert resp.status_code == 200
        assert resp.json()["draws"] == en_draws

    def test_large_limit_accepted(self, client):
        body = client.get("/api/draws", params={"limit": 5000}).json()
        assert body["pagination"]["limit"] == 5000
        assert len(body["draws"]) == 5

    def test_out_of_range_page(self, client):
        body = client.get("/api/draws", params={"page": 9}).json()
        assert body["draws"] == []

    def test_invalid_page_rejected(self, client):
        assert client.get("/api/draws", params={"page": 0}).status_code == 422

    def test_unsupported_language(self, client):
        resp = client.get("/api/draws", params={"lang": "de"})
        assert resp.status_code == 400
        assert "Unsupported language" in resp.json()["error"]

    def test_missing_english_data_is_server_error(self, make_client, tmp_path, fr_draws):
        write_partition(tmp_path, "ee-draws-fr.json", fr_draws)
        resp = make_client(tmp_path).get("/api/draws")
        assert resp.status_code == 503
        assert "error" in resp.json()


class TestLatestDraw:
    def test_returns_nearest_past_draw(self, client):
        body = client.get("/api/draws/latest").json()
        assert body["draw"]["drawNumber"] == 5

    def test_empty_french_data_gives_empty_draw(self, make_client, tmp_path, en_draws):
        write_partition(tmp_path, "ee-draws.json", en_draws)
        body = make_client(tmp_path).get("/api/draws/latest", params={"lang": "fr"}).json()
        assert body == {"draw": {}}


class TestCategories:
    def test_categories_by_frequency(self, client):
        body = client.get("/api/categories").json()
        assert body["categories"] == ["PNP", "CEC", "Trades"]


class TestInfoAndStats:
    def test_api_info(self, client):
        body = client.get("/").json()
        assert body["endpoints"]["draws"]["path"] == "/api/draws"

    def test_stats_before_and_after_load(self, client):
        body = client.get("/api/stats").json()
        assert body["memory"] == {"status": "No data loaded"}
        assert body["cache"]["maxSize"] == 1000

        client.get("/api/draws")
        client.get("/api/draws")
        body = client.get("/api/stats").json()
        assert body["memory"]["compressed"] is True
        assert body["performance"]["cacheHits"] == 1
        assert "data_loader_compressed" in body["cache"]["keys"]

    def test_response_headers(self, client):
        resp = client.get("/ready")
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["X-Response-Time"].endswith("ms")


class TestHealth:
    def test_ready(self, client):
        assert client.get("/ready").json()["status"] == "ok"

    def test_health_reports_draw_counts(self, client):
        body = client.get("/health").json()
        assert body["data"] == "loaded"
        assert body["draws"] == {"en": 5, "fr": 2}

    def test_health_degraded_without_data(self, make_client, tmp_path):
        body = make_client(tmp_path).get("/health").json()
        assert body["status"] == "degraded"
        assert body["data"] == "error"
