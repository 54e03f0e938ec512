"""Quote Engine facade.

Dispatches a :class:`QuoteSelection` to its service-family engine under
:mod:`studio_quotes.service_types`, then layers the universal modifiers on
top in a fixed order: studio rental, travel fee, rush fee. Post-production
quotes never carry universal modifiers.

The engine is total over its input: an unset service yields an empty quote
and an unset sub-type yields a single zero-priced placeholder line.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from ..schemas.quote import QuoteModifiers, QuoteSelection
from ..service_types.catalog import service_name
from ..service_types.durations import EventRates, duration_detail
from .quote_engines import FAMILY_ENGINES
from .quote_totals import (
    FamilyEstimate,
    LineItem,
    QuoteBreakdown,
    default_currency,
    empty_breakdown,
    line,
    money,
)
from .travel_estimator import travel_fee_item

logger = logging.getLogger(__name__)

STUDIO_RENTAL_RATES = EventRates(
    first_hour=Decimal("200"),
    additional_hour=Decimal("200"),
    half_day=Decimal("700"),
    full_day=Decimal("1200"),
)
RUSH_RATE = Decimal("0.5")
NO_MODIFIER_SERVICES = frozenset({"post-production"})


def studio_rental_item(estimate: FamilyEstimate, modifiers: QuoteModifiers) -> Optional[LineItem]:
    if modifiers.location_type != "Studio" or not estimate.event_duration:
        return None
    amount = STUDIO_RENTAL_RATES.price(estimate.event_duration, estimate.event_hours)
    detail = duration_detail(estimate.event_duration, estimate.event_hours)
    return line(f"Studio Rental ({detail})", amount)


def rush_fee_item(subtotal: Decimal, modifiers: QuoteModifiers) -> Optional[LineItem]:
    """Rush is charged on the service subtotal, never on studio or travel fees."""
    if modifiers.delivery_timeline != "rush":
        return None
    return line("Rush Delivery (+50%)", subtotal * RUSH_RATE)


def universal_modifier_items(estimate: FamilyEstimate, modifiers: QuoteModifiers) -> List[LineItem]:
    candidates = (
        studio_rental_item(estimate, modifiers),
        travel_fee_item(modifiers.location),
        rush_fee_item(estimate.subtotal, modifiers),
    )
    return [item for item in candidates if item is not None]


def calculate_quote_breakdown(selection: QuoteSelection) -> QuoteBreakdown:
    """Return the ordered line items and totals for ``selection``."""
    service = selection.service
    if service is None:
        return empty_breakdown()
    if not service.sub_type:
        return empty_breakdown([line(service_name(service.service_type), 0)])

    engine = FAMILY_ENGINES[service.service_type]
    estimate = engine(service, selection.modifiers)
    items = list(estimate.items)
    if service.service_type not in NO_MODIFIER_SERVICES:
        items.extend(universal_modifier_items(estimate, selection.modifiers))

    breakdown = QuoteBreakdown(
        items=items,
        subtotal=money(estimate.subtotal),
        currency=default_currency(),
    )
    logger.debug(
        "Quote computed",
        extra={
            "service_type": service.service_type,
            "sub_type": service.sub_type,
            "items": len(items),
            "total": float(breakdown.total),
        },
    )
    return breakdown


def calculate_quote(selection: QuoteSelection) -> Decimal:
    """Return only the grand total for ``selection``."""
    return calculate_quote_breakdown(selection).total
