from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict
import enum


# --- Enumerated form options ---
# Values are the wire values; matching is exact and case-sensitive.

class WebsiteType(str, enum.Enum):
    PORTFOLIO = "portfolio"
    BLOG = "blog"
    ECOMMERCE = "ecommerce"
    COMPANY = "company"
    CUSTOM = "custom"


class Complexity(str, enum.Enum):
    BASIC = "basic"
    STANDARD = "standard"
    ADVANCED = "advanced"


class Addon(str, enum.Enum):
    PIA = "pia"
    VA = "va"
    UAT = "uat"
    SEO = "seo"
    ADMIN_DASH = "adminDash"
    API = "api"
    UIUX = "uiux"


class Hosting(str, enum.Enum):
    SHARED = "shared"
    VPS = "vps"
    CLOUD = "cloud"
    NONE = "none"


class Domain(str, enum.Enum):
    COM = "com"
    PH = "ph"
    ORG = "org"
    NONE = "none"


class Maintenance(str, enum.Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NONE = "none"


class Timeline(str, enum.Enum):
    FLEXIBLE = "flexible"
    NORMAL = "normal"
    RUSH = "rush"


# Field name (camelCase, as submitted) -> allowed enumeration
ENUM_FIELDS = {
    "websiteType": WebsiteType,
    "complexity": Complexity,
    "hosting": Hosting,
    "domain": Domain,
    "maintenance": Maintenance,
    "timeline": Timeline,
}

REQUIRED_FIELDS = [
    "websiteType",
    "numberOfPages",
    "complexity",
    "addons",
    "hosting",
    "domain",
    "maintenance",
    "timeline",
]


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class EstimatorInput(CamelModel):
    website_type: WebsiteType
    number_of_pages: int
    complexity: Complexity
    addons: List[Addon] = []
    hosting: Hosting
    domain: Domain
    maintenance: Maintenance
    timeline: Timeline


class ReadOnlyDict(dict):
    """dict that refuses changes after construction; serializes like a dict."""

    def _read_only(self, *args, **kwargs):
        raise TypeError(f"'{type(self).__name__}' object is read-only")

    __setitem__ = __delitem__ = __ior__ = _read_only
    clear = pop = popitem = setdefault = update = _read_only

    def __reduce__(self):
        return type(self), (dict(self),)


class CostBreakdown(CamelModel):
    base_cost: float
    complexity_multiplier: float
    addons: Dict[str, float] = Field(default={}, validate_default=True)
    hosting: Optional[float] = None
    domain: Optional[float] = None
    maintenance: Optional[float] = None
    timeline_multiplier: float

    @field_validator("addons")
    @classmethod
    def _freeze_addons(cls, value):
        return ReadOnlyDict(value)


class CostCalculationResult(CamelModel):
    total: int
    breakdown: CostBreakdown


class LineItem(CamelModel):
    section: str
    label: str
    amount: float
    display: str


class EstimateSummary(CamelModel):
    lines: List[LineItem] = []
    subtotal: float
    total: int
    total_display: str
