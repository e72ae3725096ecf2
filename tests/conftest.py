"""
Shared test fixtures: default price tables, test client, sample payloads.
"""

import pytest
from fastapi.testclient import TestClient

from webvaluator.config import PriceConfiguration, Settings, get_price_configuration
from webvaluator.main import app


@pytest.fixture
def default_settings(monkeypatch):
    """Settings with every documented default (ignores .env and stray env vars)."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def price_config(default_settings):
    return PriceConfiguration.from_settings(default_settings)


@pytest.fixture
def client(price_config):
    """FastAPI test client pinned to the default price tables."""
    app.dependency_overrides[get_price_configuration] = lambda: price_config
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def scenario_a():
    """Cheapest possible project: no extras."""
    return {
        "websiteType": "portfolio",
        "numberOfPages": 1,
        "complexity": "basic",
        "addons": [],
        "hosting": "none",
        "domain": "none",
        "maintenance": "none",
        "timeline": "normal",
    }


@pytest.fixture
def scenario_b():
    """Everything turned up: advanced e-commerce, add-ons, services, rush."""
    return {
        "websiteType": "ecommerce",
        "numberOfPages": 10,
        "complexity": "advanced",
        "addons": ["seo", "api"],
        "hosting": "vps",
        "domain": "com",
        "maintenance": "yearly",
        "timeline": "rush",
    }
