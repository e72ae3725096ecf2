"""
Customer-facing line items derived from a CostCalculationResult.

Shared by the on-screen summary and the PDF so both show the same rows:
multipliers are turned into adjustment amounts, optional services appear
only when present in the breakdown.
"""

from .schemas import CostCalculationResult, LineItem, EstimateSummary

# --- Display names ---
WEBSITE_TYPE_NAMES = {
    "portfolio": "Portfolio",
    "blog": "Blog",
    "ecommerce": "E-commerce",
    "company": "Company Website",
    "custom": "Custom System",
}

COMPLEXITY_NAMES = {
    "basic": "Basic",
    "standard": "Standard",
    "advanced": "Advanced",
}

ADDON_LABELS = {
    "pia": "Project Initial Analysis (PIA)",
    "va": "Virtual Assistant (VA)",
    "uat": "User Acceptance Testing (UAT)",
    "seo": "SEO Setup & Optimization",
    "adminDash": "Admin Dashboard Development",
    "api": "API Integration & Development",
    "uiux": "UI/UX Design Services",
}

HOSTING_NAMES = {
    "none": "None",
    "shared": "Shared Hosting",
    "vps": "VPS Hosting",
    "cloud": "Cloud Hosting",
}

DOMAIN_NAMES = {
    "none": "None",
    "com": ".com domain",
    "ph": ".ph domain",
    "org": ".org domain",
}

MAINTENANCE_NAMES = {
    "none": "None",
    "monthly": "Monthly Maintenance",
    "yearly": "Yearly Maintenance",
}

TIMELINE_NAMES = {
    "flexible": "Flexible (1x)",
    "normal": "Normal (1x)",
    "rush": "Rush",
}

# Section headings, in display order
PROJECT_COSTS = "PROJECT COSTS"
PROFESSIONAL_SERVICES = "PROFESSIONAL SERVICES"
ADDITIONAL_SERVICES = "ADDITIONAL SERVICES"
PROJECT_TIMELINE = "PROJECT TIMELINE"


def format_currency(amount, prefix: str = "Php") -> str:
    """Format as 'Php 70,950' (two decimals only when the amount has cents)."""
    try:
        value = float(amount)
    except (ValueError, TypeError):
        value = 0.0
    if value.is_integer():
        return f"{prefix} {value:,.0f}"
    return f"{prefix} {value:,.2f}"


def format_multiplier(multiplier) -> str:
    """1.5 -> '1.5x', 2.0 -> '2x'"""
    return f"{float(multiplier):g}x"


def subtotal_of(result: CostCalculationResult) -> float:
    """Pre-timeline subtotal, re-derived from the breakdown alone."""
    b = result.breakdown
    return (
        b.base_cost * b.complexity_multiplier
        + sum(b.addons.values())
        + (b.hosting or 0)
        + (b.domain or 0)
        + (b.maintenance or 0)
    )


def build_line_items(result: CostCalculationResult, currency: str = "Php") -> list:
    b = result.breakdown
    rows = []

    def add(section, label, amount):
        rows.append(LineItem(
            section=section,
            label=label,
            amount=amount,
            display=format_currency(amount, currency),
        ))

    add(PROJECT_COSTS, "Base Website Cost", b.base_cost)
    if b.complexity_multiplier != 1:
        add(
            PROJECT_COSTS,
            f"Complexity Adjustment ({format_multiplier(b.complexity_multiplier)})",
            b.base_cost * b.complexity_multiplier - b.base_cost,
        )

    for key, price in b.addons.items():
        add(PROFESSIONAL_SERVICES, ADDON_LABELS.get(key, key), price)

    if b.hosting:
        add(ADDITIONAL_SERVICES, "Web Hosting Setup", b.hosting)
    if b.domain:
        add(ADDITIONAL_SERVICES, "Domain Registration", b.domain)
    if b.maintenance:
        add(ADDITIONAL_SERVICES, "Website Maintenance", b.maintenance)

    if b.timeline_multiplier != 1:
        subtotal = subtotal_of(result)
        add(
            PROJECT_TIMELINE,
            f"Rush Timeline Adjustment ({format_multiplier(b.timeline_multiplier)})",
            subtotal * b.timeline_multiplier - subtotal,
        )

    return rows


def build_summary(result: CostCalculationResult, currency: str = "Php") -> EstimateSummary:
    return EstimateSummary(
        lines=build_line_items(result, currency),
        subtotal=subtotal_of(result),
        total=result.total,
        total_display=format_currency(result.total, currency),
    )


def group_by_section(rows: list) -> list:
    """[(section, [rows...]), ...] preserving first-seen section order."""
    grouped = {}
    for row in rows:
        grouped.setdefault(row.section, []).append(row)
    return list(grouped.items())


def form_options() -> dict:
    """Allowed values and display labels for every enumerated form field."""
    def options(names):
        return [{"value": value, "label": label} for value, label in names.items()]

    return {
        "websiteType": options(WEBSITE_TYPE_NAMES),
        "complexity": options(COMPLEXITY_NAMES),
        "addons": options(ADDON_LABELS),
        "hosting": options(HOSTING_NAMES),
        "domain": options(DOMAIN_NAMES),
        "maintenance": options(MAINTENANCE_NAMES),
        "timeline": options(TIMELINE_NAMES),
    }
