"""
Input validator tests: every rejection names the field and reason.
"""

import pytest

from webvaluator.errors import ValidationError
from webvaluator.schemas import Addon, EstimatorInput, Hosting, WebsiteType
from webvaluator.validation import validate_estimator_input


def _reject(payload):
    with pytest.raises(ValidationError) as exc:
        validate_estimator_input(payload)
    return exc.value


def test_valid_payload_becomes_typed_input(scenario_b):
    estimate = validate_estimator_input(scenario_b)
    assert isinstance(estimate, EstimatorInput)
    assert estimate.website_type is WebsiteType.ECOMMERCE
    assert estimate.hosting is Hosting.VPS
    assert estimate.addons == [Addon.SEO, Addon.API]
    assert estimate.number_of_pages == 10


def test_invalid_website_type_rejected(scenario_a):
    scenario_a["websiteType"] = "invalid"
    err = _reject(scenario_a)
    assert err.field == "websiteType"
    assert err.reason == "not in allowed set"


def test_enum_match_is_case_sensitive(scenario_a):
    scenario_a["complexity"] = "Basic"
    assert _reject(scenario_a).field == "complexity"


@pytest.mark.parametrize("field", ["hosting", "domain", "maintenance", "timeline"])
def test_each_enum_field_checked(scenario_a, field):
    scenario_a[field] = "premium"
    err = _reject(scenario_a)
    assert err.field == field
    assert err.reason == "not in allowed set"


def test_non_string_enum_value_rejected(scenario_a):
    scenario_a["timeline"] = 1
    assert _reject(scenario_a).field == "timeline"


@pytest.mark.parametrize("field", [
    "websiteType", "numberOfPages", "complexity", "addons",
    "hosting", "domain", "maintenance", "timeline",
])
def test_missing_field_rejected(scenario_a, field):
    del scenario_a[field]
    err = _reject(scenario_a)
    assert err.field == field
    assert err.reason == "is required"


@pytest.mark.parametrize("pages", [0, -3, 0.5, "5", None, True, float("nan")])
def test_bad_page_count_rejected(scenario_a, pages):
    scenario_a["numberOfPages"] = pages
    err = _reject(scenario_a)
    assert err.field == "numberOfPages"


def test_page_count_below_one_reason(scenario_a):
    scenario_a["numberOfPages"] = 0
    assert _reject(scenario_a).reason == "must be >= 1"


def test_fractional_page_count_rejected(scenario_a):
    scenario_a["numberOfPages"] = 2.5
    err = _reject(scenario_a)
    assert err.reason == "must be a whole number"


def test_whole_float_page_count_accepted(scenario_a):
    scenario_a["numberOfPages"] = 4.0
    assert validate_estimator_input(scenario_a).number_of_pages == 4


def test_addons_must_be_array(scenario_a):
    scenario_a["addons"] = "seo"
    err = _reject(scenario_a)
    assert err.field == "addons"
    assert err.reason == "must be an array"


def test_unknown_addon_rejected_with_index(scenario_a):
    scenario_a["addons"] = ["seo", "blockchain"]
    err = _reject(scenario_a)
    assert err.field == "addons[1]"
    assert err.reason == "not in allowed set"


def test_duplicate_addons_accepted(scenario_a):
    scenario_a["addons"] = ["api", "api"]
    assert validate_estimator_input(scenario_a).addons == [Addon.API, Addon.API]


def test_non_object_payload_rejected():
    err = _reject(["portfolio"])
    assert err.field == "body"


def test_input_is_immutable(scenario_a):
    estimate = validate_estimator_input(scenario_a)
    with pytest.raises(Exception):
        estimate.timeline = "rush"
