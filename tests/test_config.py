"""
Configuration tests: env overrides, fallback to defaults, read-only tables.
"""

import pytest

from webvaluator.config import PriceConfiguration, Settings
from webvaluator.pricing_engine import compute
from webvaluator.validation import validate_estimator_input


def _settings(monkeypatch, **env):
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return Settings(_env_file=None)


def test_defaults_match_documented_values(price_config):
    assert dict(price_config.base_prices) == {
        "portfolio": 5000, "blog": 6000, "ecommerce": 12000, "company": 8000, "custom": 15000,
    }
    assert dict(price_config.complexity_multipliers) == {"basic": 1, "standard": 1.5, "advanced": 2}
    assert dict(price_config.addon_prices) == {
        "pia": 1500, "va": 2000, "uat": 2500, "seo": 3000,
        "adminDash": 5000, "api": 5000, "uiux": 4000,
    }
    assert dict(price_config.hosting_prices) == {"shared": 2000, "vps": 4500, "cloud": 8000}
    assert dict(price_config.domain_prices) == {"com": 800, "ph": 1500, "org": 1000}
    assert dict(price_config.maintenance_prices) == {"monthly": 1500, "yearly": 10000}
    assert price_config.rush_multiplier == 1.5


def test_portfolio_override_changes_only_portfolio(monkeypatch, price_config):
    config = PriceConfiguration.from_settings(_settings(monkeypatch, BASE_PORTFOLIO_PRICE="7500"))
    assert config.base_prices["portfolio"] == 7500
    for key in ("blog", "ecommerce", "company", "custom"):
        assert config.base_prices[key] == price_config.base_prices[key]


def test_portfolio_override_flows_into_base_cost(monkeypatch, scenario_a):
    config = PriceConfiguration.from_settings(_settings(monkeypatch, BASE_PORTFOLIO_PRICE="7500"))
    result = compute(validate_estimator_input(scenario_a), config)
    assert result.breakdown.base_cost == 7500
    assert result.total == 7500


@pytest.mark.parametrize("raw", ["fast", "", "   ", "NaN", "inf", "1e400", "-5"])
def test_bad_values_fall_back_to_default(monkeypatch, raw):
    s = _settings(monkeypatch, RUSH_MULTIPLIER=raw, ADDON_SEO_PRICE=raw)
    assert s.RUSH_MULTIPLIER == 1.5
    assert s.ADDON_SEO_PRICE == 3000


def test_decimal_override_parsed(monkeypatch):
    s = _settings(monkeypatch, COMPLEXITY_STANDARD="1.75", MAINTENANCE_MONTHLY="1999.5")
    assert s.COMPLEXITY_STANDARD == 1.75
    assert s.MAINTENANCE_MONTHLY == 1999.5


def test_explicit_zero_is_kept(monkeypatch):
    s = _settings(monkeypatch, ADDON_DOMAIN_COM="0")
    assert s.ADDON_DOMAIN_COM == 0


def test_price_tables_are_read_only(price_config):
    with pytest.raises(TypeError):
        price_config.base_prices["portfolio"] = 1
    with pytest.raises(Exception):
        price_config.rush_multiplier = 3


def test_out_of_range_overrides_keep_totals_finite(monkeypatch, scenario_a, scenario_b):
    config = PriceConfiguration.from_settings(
        _settings(monkeypatch, RUSH_MULTIPLIER="1e400", BASE_PORTFOLIO_PRICE="-9000")
    )
    assert config.rush_multiplier == 1.5
    assert compute(validate_estimator_input(scenario_a), config).total == 5000
    assert compute(validate_estimator_input(scenario_b), config).total == 70950
