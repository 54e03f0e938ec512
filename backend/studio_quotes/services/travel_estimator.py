"""Flat travel/logistics fee per service location.

Shoots in the home city travel for free; every other emirate carries a fixed
call-out fee. Unknown locations are billed like ``other`` so a stale client
never gets a free trip.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional

import logging

from ..core.config import settings
from ..service_types.catalog import LOCATION_NAMES
from .quote_totals import LineItem, line

logger = logging.getLogger(__name__)


TRAVEL_FEES: Dict[str, Decimal] = {
    "dubai": Decimal("0"),
    "abu-dhabi": Decimal("200"),
    "sharjah": Decimal("100"),
    "other": Decimal("300"),
}


def estimate_travel_fee(location: Optional[str]) -> Decimal:
    """Return the travel fee for ``location`` (zero for the home city)."""
    key = (location or settings.HOME_CITY).strip().lower()
    if key == settings.HOME_CITY:
        return Decimal("0")
    fee = TRAVEL_FEES.get(key)
    if fee is None:
        logger.debug("Unknown location %r billed as 'other'", location)
        fee = TRAVEL_FEES["other"]
    return fee


def travel_fee_item(location: Optional[str]) -> Optional[LineItem]:
    fee = estimate_travel_fee(location)
    if fee <= 0:
        return None
    city = LOCATION_NAMES.get((location or "").lower(), LOCATION_NAMES["other"])
    return line(f"Travel & Logistics Fee ({city})", fee)
