from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..services.quote_totals import plural
from .catalog import DURATION_LABELS


@dataclass(frozen=True)
class EventRates:
    """Duration-tiered rates shared by event coverage and studio rental.

    Per-hour bookings pay ``first_hour`` once and ``additional_hour`` for
    every hour after it; half and full days are flat.
    """

    first_hour: Decimal
    additional_hour: Decimal
    half_day: Decimal
    full_day: Decimal

    def price(self, duration: str, hours: int) -> Decimal:
        if duration == "halfDay":
            return self.half_day
        if duration == "fullDay":
            return self.full_day
        hours = max(1, int(hours or 1))
        return self.first_hour + self.additional_hour * (hours - 1)


def duration_detail(duration: str, hours: int) -> str:
    if duration in DURATION_LABELS:
        return DURATION_LABELS[duration]
    return plural(max(1, int(hours or 1)), "hour")
