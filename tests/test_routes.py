"""Tests for the referrer inspection router."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from referrer_utils.config import ReferrerConfig
from referrer_utils.options import SEARCH_ENGINE, OptionRegistry
from referrer_utils.routes import create_referrer_router


def _client(registry: OptionRegistry | None = None) -> TestClient:
    app = FastAPI()
    app.include_router(
        create_referrer_router(ReferrerConfig(site_url="https://mysite.com"), registry),
        prefix="/admin",
    )
    return TestClient(app)


class TestReferrerEndpoint:
    """Test GET /referrer."""

    def test_classifies_header(self):
        response = _client().get(
            "/admin/referrer",
            headers={"Referer": "https://www.google.com/search?q=wordpress+plugins"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["domain"] == "www.google.com"
        assert data["root_domain"] == "google.com"
        assert data["search_engine"] == "google"
        assert data["search_terms"] == "wordpress plugins"
        assert data["is_external"] is True
        assert data["traffic_source"] == "search"

    def test_url_parameter_wins(self):
        response = _client().get(
            "/admin/referrer",
            params={"url": "https://newsletter.example.com/?utm_source=newsletter&utm_medium=email&utm_campaign=summer-sale"},
            headers={"Referer": "https://t.co/abc"},
        )
        data = response.json()
        assert data["utm_parameters"]["source"] == "newsletter"
        assert data["utm_parameters"]["term"] is None
        assert data["traffic_source"] == "campaign"

    def test_internal_referrer(self):
        data = _client().get("/admin/referrer", headers={"Referer": "https://mysite.com/page"}).json()
        assert data["is_external"] is False
        assert data["traffic_source"] == "direct"

    def test_no_referrer(self):
        data = _client().get("/admin/referrer").json()
        assert data["url"] is None
        assert data["is_valid"] is False
        assert data["traffic_source"] == "direct"

    def test_invalid_referrer(self):
        data = _client().get("/admin/referrer", params={"url": "not-a-valid-url"}).json()
        assert data["is_valid"] is False
        assert data["domain"] is None
        assert data["traffic_source"] == "unknown"


class TestOptionsEndpoint:
    """Test GET /options/{group}."""

    def test_traffic_sources(self):
        response = _client().get("/admin/options/traffic_source")
        assert response.status_code == 200
        assert {"value": "campaign", "label": "Campaign"} in response.json()

    def test_registered_options_are_listed(self):
        registry = OptionRegistry()
        registry.register(SEARCH_ENGINE, {"mojeek": "Mojeek"}, context="admin")
        client = _client(registry)

        plain = client.get("/admin/options/search_engine").json()
        scoped = client.get("/admin/options/search_engine", params={"context": "admin"}).json()
        assert {"value": "mojeek", "label": "Mojeek"} not in plain
        assert {"value": "mojeek", "label": "Mojeek"} in scoped

    def test_unknown_group(self):
        response = _client().get("/admin/options/browsers")
        assert response.status_code == 404
