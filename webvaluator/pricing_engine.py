"""
Pricing Engine.

Maps a validated EstimatorInput to a CostCalculationResult using the
supplied PriceConfiguration. Pure math, no I/O. Same input and config
always give the same result.

    subtotal = baseCost × complexity + Σ addons + hosting + domain + maintenance
    total    = round(subtotal × timeline)

Rounding is half away from zero (decimal ROUND_HALF_UP).
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from .config import PriceConfiguration
from .errors import ConfigurationError
from .schemas import CostBreakdown, CostCalculationResult, EstimatorInput, Timeline

logger = logging.getLogger(__name__)

NONE = "none"


class PricingEngine:
    """
    Computes cost breakdowns against one PriceConfiguration.
    Holds no state besides the (read-only) configuration.
    """

    def __init__(self, config: PriceConfiguration):
        self.config = config

    def compute(self, estimate: EstimatorInput) -> CostCalculationResult:
        config = self.config

        base_cost = self._required(config.base_prices, "base", estimate.website_type.value)
        complexity_multiplier = self._required(
            config.complexity_multipliers, "complexity", estimate.complexity.value,
        )

        addons, addons_total = self._price_addons(estimate.addons)

        hosting = self._optional(config.hosting_prices, estimate.hosting.value)
        domain = self._optional(config.domain_prices, estimate.domain.value)
        maintenance = self._optional(config.maintenance_prices, estimate.maintenance.value)

        timeline_multiplier = config.rush_multiplier if estimate.timeline == Timeline.RUSH else 1

        subtotal = base_cost * complexity_multiplier + addons_total + hosting + domain + maintenance
        total = round_half_up(subtotal * timeline_multiplier)

        breakdown = CostBreakdown(
            base_cost=base_cost,
            complexity_multiplier=complexity_multiplier,
            addons=addons,
            hosting=hosting if hosting > 0 else None,
            domain=domain if domain > 0 else None,
            maintenance=maintenance if maintenance > 0 else None,
            timeline_multiplier=timeline_multiplier,
        )
        logger.debug("Computed estimate total=%s subtotal=%s", total, subtotal)
        return CostCalculationResult(total=total, breakdown=breakdown)

    def _price_addons(self, selected) -> tuple:
        """
        Addons are a set: a key submitted twice is priced once.
        Returns ({key: price} in first-seen order, sum of prices).
        """
        addons = {}
        for addon in selected:
            key = addon.value
            addons[key] = self.config.addon_prices.get(key, 0)
        return addons, sum(addons.values())

    @staticmethod
    def _required(table, table_name: str, key: str) -> float:
        # Base price and complexity have no safe default.
        if key not in table:
            raise ConfigurationError(table_name, key)
        return table[key]

    @staticmethod
    def _optional(table, key: str) -> float:
        if key == NONE:
            return 0
        return table.get(key, 0)


def compute(estimate: EstimatorInput, config: PriceConfiguration) -> CostCalculationResult:
    return PricingEngine(config).compute(estimate)


def round_half_up(value) -> int:
    """Round to the nearest integer, halves away from zero (1.5 -> 2, -1.5 -> -2)."""
    # Decimal of the shortest float repr, not its binary expansion
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
