"""
PDF Estimate Generator.

Renders a CostCalculationResult as a downloadable estimate document.
Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header (company branding + contact)
2. Title, generation date, validity
3. Line items (project costs, professional services, additional services, timeline)
4. Total
5. Notes / disclaimer + footer

Line items come from line_items.build_line_items so the document always
matches the on-screen breakdown.
"""

from datetime import date, datetime, timedelta

from fpdf import FPDF

from .line_items import build_line_items, format_currency, group_by_section
from .schemas import CostCalculationResult

DISCLAIMERS = [
    "This is an estimate. Final costs may vary based on detailed scope and requirements.",
    "Costs for third-party services (e.g., domain, premium hosting) are not included.",
]


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("\u2022", "-")    # bullet
        .replace("\u2014", " - ")  # em dash
        .replace("\u2013", "-")    # en dash
        .replace("\u201c", '"')    # left double quote
        .replace("\u201d", '"')    # right double quote
        .replace("\u2018", "'")    # left single quote
        .replace("\u2019", "'")    # right single quote
        .replace("\u20b1", "Php")  # peso sign
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


def _display_url(url: str) -> str:
    for scheme in ("https://", "http://"):
        if url.startswith(scheme):
            return url[len(scheme):]
    return url


def estimate_filename(day: date = None) -> str:
    day = day or date.today()
    return f"WebValuator-Estimate-{day.isoformat()}.pdf"


def estimate_id(generated_at: datetime) -> str:
    """WV- plus the last six digits of the generation timestamp (ms)."""
    millis = int(generated_at.timestamp() * 1000)
    return f"WV-{str(millis)[-6:]}"


def estimate_valid_days(branding: dict) -> int:
    """Validity period in days; only a missing value falls back to 30."""
    valid_days = branding.get("valid_days")
    return 30 if valid_days is None else int(valid_days)


class EstimatePDF(FPDF):
    """Custom PDF class for the estimate document."""

    ACCENT = (59, 130, 246)
    DARK = (31, 41, 55)
    MUTED = (107, 114, 128)
    PANEL = (249, 250, 251)

    def __init__(self, footer_text=""):
        super().__init__()
        self.footer_text = footer_text
        self.set_auto_page_break(auto=True, margin=20)

    def header(self):
        pass  # Branding is drawn once on the first page

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 7)
        self.set_text_color(156, 163, 175)
        self.cell(0, 5, _safe(self.footer_text), align="C", new_x="LMARGIN", new_y="NEXT")
        self.cell(0, 5, f"Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.ln(3)
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(*self.PANEL)
        self.set_text_color(*self.DARK)
        self.cell(0, 9, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.ln(2)

    def line_item(self, label, value):
        """Label left, amount right, with a light rule underneath."""
        self.set_font("Helvetica", "", 10)
        self.set_text_color(*self.MUTED)
        self.cell(130, 7, _safe(f"  {label}"))
        self.set_text_color(*self.DARK)
        self.cell(0, 7, _safe(value), align="R", new_x="LMARGIN", new_y="NEXT")
        self.set_draw_color(240, 240, 240)
        self.line(self.l_margin, self.get_y(), self.w - self.r_margin, self.get_y())
        self.ln(1)

    def total_bar(self, label, value):
        self.ln(6)
        self.set_fill_color(*self.ACCENT)
        self.set_text_color(255, 255, 255)
        self.set_font("Helvetica", "B", 14)
        self.cell(110, 12, f"  {label}", fill=True)
        self.cell(0, 12, f"{_safe(value)}  ", fill=True, align="R", new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)


def generate_estimate_pdf(
    result: CostCalculationResult,
    branding: dict,
    generated_at: datetime = None,
) -> bytes:
    """
    Generate the estimate PDF.

    Args:
        result: CostCalculationResult from the pricing engine
        branding: company_name, tagline, email, website_url, currency, valid_days
        generated_at: timestamp printed on the document (defaults to now)

    Returns:
        PDF bytes
    """
    generated_at = generated_at or datetime.now()
    company = branding.get("company_name") or "Estimate"
    tagline = branding.get("tagline") or ""
    email = branding.get("email") or ""
    website_url = branding.get("website_url") or ""
    currency = branding.get("currency") or "Php"
    valid_days = estimate_valid_days(branding)

    footer_text = f"{company} | Estimate ID: {estimate_id(generated_at)}"
    pdf = EstimatePDF(footer_text=footer_text)
    pdf.alias_nb_pages()
    pdf.add_page()

    # ── Header ──
    pdf.set_fill_color(*EstimatePDF.ACCENT)
    pdf.rect(0, 0, pdf.w, 3, style="F")
    pdf.set_y(10)
    pdf.set_font("Helvetica", "B", 26)
    pdf.set_text_color(*EstimatePDF.DARK)
    pdf.cell(0, 12, _safe(company), new_x="LMARGIN", new_y="NEXT")

    if tagline:
        pdf.set_font("Helvetica", "", 12)
        pdf.set_text_color(*EstimatePDF.MUTED)
        pdf.cell(0, 7, _safe(tagline), new_x="LMARGIN", new_y="NEXT")

    pdf.set_font("Helvetica", "", 9)
    pdf.set_text_color(*EstimatePDF.DARK)
    if email:
        pdf.cell(95, 6, _safe(f"Email: {email}"), link=f"mailto:{email}")
    if website_url:
        pdf.set_text_color(*EstimatePDF.ACCENT)
        pdf.cell(0, 6, _safe(_display_url(website_url)), align="R", link=website_url)
    pdf.ln(8)

    pdf.set_draw_color(*EstimatePDF.ACCENT)
    pdf.set_line_width(0.8)
    pdf.line(pdf.l_margin, pdf.get_y(), pdf.w - pdf.r_margin, pdf.get_y())
    pdf.set_line_width(0.2)
    pdf.ln(8)

    # ── Title ──
    pdf.set_font("Helvetica", "B", 18)
    pdf.set_text_color(*EstimatePDF.DARK)
    pdf.cell(0, 10, "WEBSITE COST ESTIMATE", align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.set_text_color(*EstimatePDF.MUTED)
    pdf.cell(0, 6, f"Generated on: {generated_at.strftime('%B %d, %Y')}", align="C", new_x="LMARGIN", new_y="NEXT")
    valid_until = (generated_at + timedelta(days=valid_days)).strftime("%B %d, %Y")
    pdf.cell(0, 6, f"Valid until: {valid_until}", align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    # ── Line items ──
    for section, rows in group_by_section(build_line_items(result, currency)):
        pdf.section_header(section)
        for row in rows:
            pdf.line_item(row.label, row.display)

    # ── Total ──
    pdf.total_bar("TOTAL PROJECT COST", format_currency(result.total, currency))

    # ── Notes ──
    pdf.ln(10)
    pdf.set_font("Helvetica", "B", 11)
    pdf.set_text_color(*EstimatePDF.ACCENT)
    pdf.cell(0, 7, "Important Notes / Disclaimer", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 9)
    pdf.set_text_color(*EstimatePDF.DARK)
    for note in DISCLAIMERS:
        pdf.multi_cell(0, 5, _safe(f"- {note}"), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "I", 8)
    pdf.set_text_color(*EstimatePDF.MUTED)
    pdf.multi_cell(
        0, 4.5,
        _safe(
            f"This estimate is valid for {valid_days} days. Final pricing may be adjusted "
            "based on specific project requirements, scope changes, or additional features."
        ),
        new_x="LMARGIN", new_y="NEXT",
    )
    if email:
        pdf.multi_cell(
            0, 4.5,
            _safe(f"For detailed project discussions or custom requirements, contact {email}."),
            new_x="LMARGIN", new_y="NEXT",
        )
    pdf.set_text_color(0, 0, 0)

    return bytes(pdf.output())
