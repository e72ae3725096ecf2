"""
Input Validator.

Turns an untyped request payload into an EstimatorInput or raises
ValidationError naming the first offending field. Enumerated fields must
match one of their allowed values exactly (case-sensitive).

Pure check-and-convert. No defaults are substituted; the form's
"numberOfPages defaults to 1" is a client convenience, not engine behavior.
"""

import logging

from .errors import ValidationError
from .schemas import ENUM_FIELDS, REQUIRED_FIELDS, Addon, EstimatorInput

logger = logging.getLogger(__name__)

NOT_ALLOWED = "not in allowed set"


def validate_estimator_input(payload) -> EstimatorInput:
    if not isinstance(payload, dict):
        raise ValidationError("body", "must be an object")

    for field in REQUIRED_FIELDS:
        if field not in payload or payload[field] is None:
            raise ValidationError(field, "is required")

    values = {}
    for field, enum_cls in ENUM_FIELDS.items():
        values[field] = _parse_enum(field, payload[field], enum_cls)

    values["numberOfPages"] = _parse_page_count(payload["numberOfPages"])
    values["addons"] = _parse_addons(payload["addons"])

    estimate = EstimatorInput(**values)
    logger.debug("Validated estimate input: %s", estimate)
    return estimate


def _parse_enum(field: str, raw, enum_cls):
    if not isinstance(raw, str):
        raise ValidationError(field, NOT_ALLOWED)
    try:
        return enum_cls(raw)
    except ValueError:
        raise ValidationError(field, NOT_ALLOWED) from None


def _parse_page_count(raw) -> int:
    # bool is an int subclass; True is not a page count
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValidationError("numberOfPages", "must be >= 1")
    if raw != raw or raw < 1:  # NaN != NaN
        raise ValidationError("numberOfPages", "must be >= 1")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValidationError("numberOfPages", "must be a whole number")
        return int(raw)
    return raw


def _parse_addons(raw) -> list:
    if not isinstance(raw, list):
        raise ValidationError("addons", "must be an array")
    addons = []
    for i, item in enumerate(raw):
        addons.append(_parse_enum(f"addons[{i}]", item, Addon))
    return addons
