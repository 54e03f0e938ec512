from __future__ import annotations

from ...schemas.quote import QuoteModifiers, TimelapseSelection
from ...services.quote_totals import FamilyEstimate, line
from ..catalog import SERVICE_NAMES, TIMELAPSE_BANDS, sub_type_name


def estimate_timelapse(selection: TimelapseSelection, modifiers: QuoteModifiers) -> FamilyEstimate:
    """Slider-priced project; the extra camera doubles the base line."""
    sub = selection.sub_type
    band = TIMELAPSE_BANDS.get(sub or "")
    if band is None:
        return FamilyEstimate(base=line(SERVICE_NAMES["time-lapse"], 0))

    label = f"{SERVICE_NAMES['time-lapse']}: {sub_type_name('time-lapse', sub)}"
    estimate = FamilyEstimate(base=line(label, band.clamp(selection.price)))
    if modifiers.extra_camera:
        estimate.addons.append(line("Extra Camera", estimate.base.amount))
    return estimate
