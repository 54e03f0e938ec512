from __future__ import annotations

from decimal import Decimal
from typing import Dict

from ...schemas.quote import QuoteModifiers, ToursSelection
from ...services.quote_totals import FamilyEstimate, line
from ..catalog import SERVICE_NAMES, sub_type_name

TOUR_RATES: Dict[str, Decimal] = {
    "studio": Decimal("1000"),
    "1-bedroom": Decimal("1400"),
    "2-bedroom": Decimal("1800"),
    "3-bedroom": Decimal("2500"),
}


def estimate_tours(selection: ToursSelection, modifiers: QuoteModifiers) -> FamilyEstimate:
    sub = selection.sub_type
    if sub not in TOUR_RATES:
        return FamilyEstimate(base=line(SERVICE_NAMES["360-tours"], 0))
    label = f"{SERVICE_NAMES['360-tours']}: {sub_type_name('360-tours', sub)}"
    return FamilyEstimate(base=line(label, TOUR_RATES[sub]))
