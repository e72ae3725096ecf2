"""
PDF download endpoint.

POST /api/pdf: render a computed CostCalculationResult as a PDF estimate.

Export is independent of calculation: a rendering failure returns 500 and
the caller's breakdown is untouched (nothing here mutates the result).
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from ..config import Settings, get_settings
from ..pdf_generator import estimate_filename, generate_estimate_pdf
from ..schemas import CostCalculationResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pdf"])


def branding_from_settings(settings: Settings) -> dict:
    return {
        "company_name": settings.COMPANY_NAME,
        "tagline": settings.COMPANY_TAGLINE,
        "email": settings.COMPANY_EMAIL,
        "website_url": settings.WEBSITE_URL,
        "currency": settings.CURRENCY_PREFIX,
        "valid_days": settings.ESTIMATE_VALID_DAYS,
    }


@router.post("/pdf")
def download_pdf(
    result: CostCalculationResult,
    settings: Settings = Depends(get_settings),
):
    """
    Generate and download the estimate document.

    Returns: application/pdf
    """
    generated_at = datetime.now()
    try:
        pdf_bytes = generate_estimate_pdf(result, branding_from_settings(settings), generated_at)
    except Exception as e:
        logger.error(f"PDF generation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate PDF. Please try again.")

    filename = estimate_filename(generated_at.date())
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )
