from datetime import date
from io import BytesIO
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..core.config import settings
from ..schemas.quote import ContactDetails
from .quote_totals import QuoteBreakdown, format_amount


def _quote_date_label(quote_date: Optional[date]) -> str:
    d = quote_date or date.today()
    return f"{d:%B} {d.day}, {d.year}"


def generate_pdf(
    breakdown: QuoteBreakdown,
    contact: ContactDetails,
    project_title: str,
    summary: str,
    quote_date: Optional[date] = None,
) -> bytes:
    """Render the client-facing quote as PDF bytes.

    Layout: studio header, billed-to and quote-date blocks, AI title and
    summary, line items, total estimate, then terms.
    """
    currency = breakdown.currency

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=18 * mm,
        rightMargin=18 * mm,
        topMargin=16 * mm,
        bottomMargin=16 * mm,
        title=project_title,
        author=settings.STUDIO_NAME,
    )
    brand = colors.HexColor("#7C3AED")
    brand_soft = colors.HexColor("#EDE9FE")
    muted = colors.HexColor("#6b7280")
    border = colors.HexColor("#e5e7eb")

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="TitleBrand", parent=styles["Heading1"], fontName="Helvetica-Bold", fontSize=20, textColor=brand, spaceAfter=4))
    styles.add(ParagraphStyle(name="ProjectTitle", parent=styles["Heading2"], fontName="Helvetica-Bold", fontSize=18, textColor=brand, spaceAfter=4))
    styles.add(ParagraphStyle(name="Muted", parent=styles["Normal"], fontName="Helvetica", fontSize=9, textColor=muted))
    styles.add(ParagraphStyle(name="Strong", parent=styles["Normal"], fontName="Helvetica-Bold", fontSize=10))
    styles.add(ParagraphStyle(name="NormalSmall", parent=styles["Normal"], fontName="Helvetica", fontSize=10))
    styles.add(ParagraphStyle(name="Centered", parent=styles["Muted"], alignment=1))

    story = []

    # Header: studio + contact line
    studio_lines = " · ".join(v for v in (settings.STUDIO_EMAIL, settings.STUDIO_PHONE) if v)
    header_tbl = Table(
        [[Paragraph(escape(settings.STUDIO_NAME), styles["TitleBrand"]), Paragraph(escape(studio_lines), styles["Muted"])]],
        colWidths=[doc.width * 0.6, doc.width * 0.4],
        hAlign="LEFT",
    )
    header_tbl.setStyle(TableStyle([
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("ALIGN", (1, 0), (1, 0), "RIGHT"),
        ("LINEBELOW", (0, 0), (-1, 0), 1, border),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
    ]))
    story.append(header_tbl)
    story.append(Spacer(1, 10))

    # Billed to / quote details
    billed = [Paragraph("BILLED TO", styles["Muted"]), Paragraph(f"<b>{escape(contact.name or 'Valued Customer')}</b>", styles["NormalSmall"])]
    for extra in (contact.email, contact.phone):
        if extra:
            billed.append(Paragraph(escape(extra), styles["Muted"]))
    details = [
        Paragraph("QUOTE DETAILS", styles["Muted"]),
        Paragraph(f"Quote Date: {_quote_date_label(quote_date)}", styles["NormalSmall"]),
    ]
    parties_tbl = Table([[billed, details]], colWidths=[doc.width * 0.5, doc.width * 0.5])
    parties_tbl.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP"), ("ALIGN", (1, 0), (1, 0), "RIGHT")]))
    story.append(parties_tbl)
    story.append(Spacer(1, 12))

    # Project title + summary
    story.append(Paragraph(escape(project_title), styles["ProjectTitle"]))
    story.append(Paragraph(escape(summary), styles["NormalSmall"]))
    story.append(Spacer(1, 12))

    # Line items
    rows = [[Paragraph("Description", styles["Strong"]), Paragraph("Price", styles["Strong"])]]
    for item in breakdown.items:
        rows.append([Paragraph(escape(item.label), styles["NormalSmall"]), Paragraph(format_amount(item.amount, currency), styles["NormalSmall"])])
    items_tbl = Table(rows, colWidths=[doc.width * 0.7, doc.width * 0.3])
    items_tbl.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.Color(0.95, 0.95, 0.97)),
        ("LINEBELOW", (0, 0), (-1, -1), 0.25, border),
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 6),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
    ]))
    story.append(items_tbl)
    story.append(Spacer(1, 10))

    # Total
    total_tbl = Table(
        [[Paragraph("<b>Total Estimate</b>", styles["Strong"]), Paragraph(f"<b>{format_amount(breakdown.total, currency)}</b>", styles["Strong"])]],
        colWidths=[doc.width * 0.25, doc.width * 0.25],
        hAlign="RIGHT",
    )
    total_tbl.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), brand_soft),
        ("TEXTCOLOR", (0, 0), (-1, -1), brand),
        ("ALIGN", (1, 0), (1, 0), "RIGHT"),
        ("TOPPADDING", (0, 0), (-1, -1), 8),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 8),
    ]))
    story.append(total_tbl)
    story.append(Spacer(1, 20))

    # Terms
    story.append(Paragraph("<b>Terms &amp; Conditions</b>", styles["Centered"]))
    story.append(Paragraph(
        f"{settings.ADVANCE_PAYMENT_PERCENT}% advance payment required to confirm the booking. "
        "Balance due upon project completion.",
        styles["Centered"],
    ))
    story.append(Paragraph(f"This quote is valid for {settings.QUOTE_VALIDITY_DAYS} days.", styles["Centered"]))
    story.append(Spacer(1, 12))
    story.append(Paragraph("<b>Thank you for your business!</b>", styles["Centered"]))

    doc.build(story)
    buffer.seek(0)
    return buffer.read()
