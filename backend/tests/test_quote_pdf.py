from datetime import date
from decimal import Decimal

from studio_quotes.schemas.quote import ContactDetails, QuoteSelection, VideoSelection
from studio_quotes.services.quote_pdf import _quote_date_label, generate_pdf
from studio_quotes.services.quote_totals import format_amount
from studio_quotes.services.studio_quote import calculate_quote_breakdown


def test_generate_pdf_returns_pdf_bytes():
    breakdown = calculate_quote_breakdown(
        QuoteSelection(service=VideoSelection(sub_type="corporate", corporate_scripting=True))
    )
    pdf = generate_pdf(
        breakdown,
        ContactDetails(name="Sara <Events>", email="sara@example.com"),
        "Launch Film",
        "A crisp corporate piece & more.",
        quote_date=date(2024, 3, 5),
    )
    assert pdf.startswith(b"%PDF")


def test_generate_pdf_without_contact_or_items():
    breakdown = calculate_quote_breakdown(QuoteSelection())
    pdf = generate_pdf(breakdown, ContactDetails(), "Your Project Quote", "Here is a summary of your quote selections.")
    assert pdf.startswith(b"%PDF")


def test_quote_date_label():
    assert _quote_date_label(date(2024, 3, 5)) == "March 5, 2024"


def test_format_amount():
    assert format_amount(Decimal("1050")) == "1,050 AED"
    assert format_amount(Decimal("12.5")) == "12.50 AED"
    assert format_amount(30000, "USD") == "30,000 USD"
