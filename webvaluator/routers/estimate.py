"""
Estimate endpoints.

POST /api/calculate: validate a form submission and price it.
POST /api/summary: display rows for an already-computed result.
GET /api/options: allowed values + labels for the form.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from ..config import PriceConfiguration, Settings, get_price_configuration, get_settings
from ..line_items import build_summary, form_options
from ..pricing_engine import PricingEngine
from ..schemas import CostCalculationResult, EstimateSummary
from ..validation import validate_estimator_input

logger = logging.getLogger(__name__)

router = APIRouter(tags=["estimate"])


@router.post(
    "/calculate",
    response_model=CostCalculationResult,
    response_model_exclude_none=True,
)
def calculate(
    payload: Any = Body(...),
    config: PriceConfiguration = Depends(get_price_configuration),
):
    """
    Price a website project.

    Body: EstimatorInput JSON (camelCase field names).
    Returns: CostCalculationResult; hosting/domain/maintenance keys are
    omitted when not selected.
    Raises ValidationError (-> 400) before any calculation happens.
    """
    estimate = validate_estimator_input(payload)
    result = PricingEngine(config).compute(estimate)
    logger.debug(
        "Estimate: %s/%s -> total %s",
        estimate.website_type.value, estimate.complexity.value, result.total,
    )
    return result


@router.post("/summary", response_model=EstimateSummary)
def summary(
    result: CostCalculationResult,
    settings: Settings = Depends(get_settings),
):
    return build_summary(result, settings.CURRENCY_PREFIX)


@router.get("/options")
def options():
    return form_options()
