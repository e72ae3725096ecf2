import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from pydantic import field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


# Every tunable price or multiplier. Unset, empty or non-numeric values fall
# back to the field default instead of failing startup.
PRICE_FIELDS = (
    "BASE_PORTFOLIO_PRICE",
    "BASE_BLOG_PRICE",
    "BASE_ECOMMERCE_PRICE",
    "BASE_COMPANY_PRICE",
    "BASE_CUSTOM_PRICE",
    "COMPLEXITY_BASIC",
    "COMPLEXITY_STANDARD",
    "COMPLEXITY_ADVANCED",
    "ADDON_PIA_PRICE",
    "ADDON_VA_PRICE",
    "ADDON_UAT_PRICE",
    "ADDON_SEO_PRICE",
    "ADDON_ADMIN_DASH_PRICE",
    "ADDON_API_PRICE",
    "ADDON_UIUX_PRICE",
    "ADDON_HOSTING_SHARED",
    "ADDON_HOSTING_VPS",
    "ADDON_HOSTING_CLOUD",
    "ADDON_DOMAIN_COM",
    "ADDON_DOMAIN_PH",
    "ADDON_DOMAIN_ORG",
    "MAINTENANCE_MONTHLY",
    "MAINTENANCE_YEARLY",
    "RUSH_MULTIPLIER",
)


class Settings(BaseSettings):
    # Base price per website type
    BASE_PORTFOLIO_PRICE: float = 5000
    BASE_BLOG_PRICE: float = 6000
    BASE_ECOMMERCE_PRICE: float = 12000
    BASE_COMPANY_PRICE: float = 8000
    BASE_CUSTOM_PRICE: float = 15000

    # Complexity multipliers
    COMPLEXITY_BASIC: float = 1
    COMPLEXITY_STANDARD: float = 1.5
    COMPLEXITY_ADVANCED: float = 2

    # Add-ons
    ADDON_PIA_PRICE: float = 1500
    ADDON_VA_PRICE: float = 2000
    ADDON_UAT_PRICE: float = 2500
    ADDON_SEO_PRICE: float = 3000
    ADDON_ADMIN_DASH_PRICE: float = 5000
    ADDON_API_PRICE: float = 5000
    ADDON_UIUX_PRICE: float = 4000

    # Hosting / domain / maintenance ("none" is always 0)
    ADDON_HOSTING_SHARED: float = 2000
    ADDON_HOSTING_VPS: float = 4500
    ADDON_HOSTING_CLOUD: float = 8000
    ADDON_DOMAIN_COM: float = 800
    ADDON_DOMAIN_PH: float = 1500
    ADDON_DOMAIN_ORG: float = 1000
    MAINTENANCE_MONTHLY: float = 1500
    MAINTENANCE_YEARLY: float = 10000

    # flexible / normal timelines are fixed at 1x
    RUSH_MULTIPLIER: float = 1.5

    # Estimate document branding
    COMPANY_NAME: str = "WebValuator"
    COMPANY_TAGLINE: str = "Professional Website Cost Estimation & Development Services"
    COMPANY_EMAIL: str = "itsnelsonvargas@gmail.com"
    WEBSITE_URL: str = "https://webvaluator.com"
    CURRENCY_PREFIX: str = "Php"
    ESTIMATE_VALID_DAYS: int = 30

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @field_validator(*PRICE_FIELDS, mode="before")
    @classmethod
    def _default_on_bad_number(cls, value, info):
        default = cls.model_fields[info.field_name].default
        if value is None or (isinstance(value, str) and not value.strip()):
            return default
        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.warning("%s=%r is not a number, using default %s", info.field_name, value, default)
            return default
        if math.isnan(number) or math.isinf(number) or number < 0:
            logger.warning(
                "%s=%r is not a finite non-negative number, using default %s",
                info.field_name, value, default,
            )
            return default
        return number


settings = Settings()


@dataclass(frozen=True)
class PriceConfiguration:
    """
    Read-only price tables, built once per process and passed explicitly
    into the pricing engine.

    Tables are keyed by the option's wire value ("portfolio", "vps", ...).
    """

    base_prices: Mapping[str, float]
    complexity_multipliers: Mapping[str, float]
    addon_prices: Mapping[str, float]
    hosting_prices: Mapping[str, float]
    domain_prices: Mapping[str, float]
    maintenance_prices: Mapping[str, float]
    rush_multiplier: float = 1.5

    def __post_init__(self):
        for name in (
            "base_prices", "complexity_multipliers", "addon_prices",
            "hosting_prices", "domain_prices", "maintenance_prices",
        ):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @classmethod
    def from_settings(cls, s: Settings) -> "PriceConfiguration":
        return cls(
            base_prices={
                "portfolio": s.BASE_PORTFOLIO_PRICE,
                "blog": s.BASE_BLOG_PRICE,
                "ecommerce": s.BASE_ECOMMERCE_PRICE,
                "company": s.BASE_COMPANY_PRICE,
                "custom": s.BASE_CUSTOM_PRICE,
            },
            complexity_multipliers={
                "basic": s.COMPLEXITY_BASIC,
                "standard": s.COMPLEXITY_STANDARD,
                "advanced": s.COMPLEXITY_ADVANCED,
            },
            addon_prices={
                "pia": s.ADDON_PIA_PRICE,
                "va": s.ADDON_VA_PRICE,
                "uat": s.ADDON_UAT_PRICE,
                "seo": s.ADDON_SEO_PRICE,
                "adminDash": s.ADDON_ADMIN_DASH_PRICE,
                "api": s.ADDON_API_PRICE,
                "uiux": s.ADDON_UIUX_PRICE,
            },
            hosting_prices={
                "shared": s.ADDON_HOSTING_SHARED,
                "vps": s.ADDON_HOSTING_VPS,
                "cloud": s.ADDON_HOSTING_CLOUD,
            },
            domain_prices={
                "com": s.ADDON_DOMAIN_COM,
                "ph": s.ADDON_DOMAIN_PH,
                "org": s.ADDON_DOMAIN_ORG,
            },
            maintenance_prices={
                "monthly": s.MAINTENANCE_MONTHLY,
                "yearly": s.MAINTENANCE_YEARLY,
            },
            rush_multiplier=s.RUSH_MULTIPLIER,
        )


price_configuration = PriceConfiguration.from_settings(settings)


def get_price_configuration() -> PriceConfiguration:
    """FastAPI dependency returning the process-wide price tables."""
    return price_configuration


def get_settings() -> Settings:
    return settings
