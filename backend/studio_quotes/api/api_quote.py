import logging

from fastapi import APIRouter, Response

from ..schemas.quote import (
    QuotePdfRequest,
    QuoteResultOut,
    QuoteSelection,
    QuoteSummaryOut,
)
from ..service_types.catalog import catalog_payload
from ..services.quote_ai import summarize_quote, summary_input_for
from ..services.studio_quote import calculate_quote_breakdown

logger = logging.getLogger(__name__)

router = APIRouter(tags=["quotes"])


@router.get("/quotes/catalog")
def get_quote_catalog() -> dict:
    """Services, sub-types, packages and slider bands for the quote wizard."""
    return catalog_payload()


@router.post("/quotes/calculate", response_model=QuoteResultOut)
def calculate_quote_endpoint(selection: QuoteSelection):
    breakdown = calculate_quote_breakdown(selection)
    return QuoteResultOut.model_validate(breakdown)


@router.post("/quotes/summary", response_model=QuoteSummaryOut)
def summarize_quote_endpoint(selection: QuoteSelection):
    """Return a project title and short summary; falls back to static text."""
    result = summarize_quote(summary_input_for(selection))
    return QuoteSummaryOut(
        project_title=result.project_title,
        summary=result.summary,
        source=result.source,
    )


@router.post("/quotes/pdf", response_class=Response)
def quote_pdf_endpoint(body: QuotePdfRequest):
    """Render the quote as a downloadable PDF.

    A title and summary are generated when the client does not send them.
    """
    # Lazy import to avoid heavy deps during OpenAPI generation
    from ..services import quote_pdf  # type: ignore

    project_title = body.project_title
    summary = body.summary
    if not project_title or not summary:
        generated = summarize_quote(summary_input_for(body.selection))
        project_title = project_title or generated.project_title
        summary = summary or generated.summary

    breakdown = calculate_quote_breakdown(body.selection)
    pdf_bytes = quote_pdf.generate_pdf(
        breakdown,
        body.selection.contact,
        project_title,
        summary,
    )
    logger.info("Quote PDF generated", extra={"bytes": len(pdf_bytes), "items": len(breakdown.items)})
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="quote.pdf"'},
    )
