from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional, Tuple

from ...schemas.quote import PhotographySelection, QuoteModifiers
from ...services.quote_totals import FamilyEstimate, PriceBand, format_amount, line, plural
from ..catalog import PHOTO_PACKAGES, PHOTO_UNIT_BANDS, SERVICE_NAMES, sub_type_name
from ..durations import EventRates, duration_detail

EVENT_RATES = EventRates(
    first_hour=Decimal("500"),
    additional_hour=Decimal("350"),
    half_day=Decimal("1500"),
    full_day=Decimal("2800"),
)

# (unfurnished, furnished) per property. An older rate sheet carried 8000 for
# a furnished studio; 800 is the authoritative value.
REAL_ESTATE_RATES: Dict[str, Tuple[Decimal, Decimal]] = {
    "studio": (Decimal("600"), Decimal("800")),
    "1-bedroom": (Decimal("800"), Decimal("1000")),
    "2-bedroom": (Decimal("1000"), Decimal("1300")),
    "3-bedroom": (Decimal("1300"), Decimal("1600")),
    "villa": (Decimal("1800"), Decimal("2500")),
}

HEADSHOT_RATE = Decimal("350")

SECOND_CAMERA_SUB_TYPES = frozenset({"event", "wedding"})


def real_estate_rate(property_type: str, furnished: bool) -> Decimal:
    unfurnished, furnished_rate = REAL_ESTATE_RATES.get(property_type, REAL_ESTATE_RATES["studio"])
    return furnished_rate if furnished else unfurnished


def _unit_price(kind: str, complexity: str, slider: Optional[Decimal]) -> Decimal:
    band: PriceBand = PHOTO_UNIT_BANDS[kind]
    if slider is not None:
        return band.clamp(slider)
    return band.high if complexity == "complex" else band.low


def _per_photo(kind: str, photos: int, complexity: str, slider: Optional[Decimal]) -> Tuple[Decimal, str]:
    unit = _unit_price(kind, complexity, slider)
    if slider is not None:
        detail = f"{plural(photos, 'photo')} @ {format_amount(unit)}"
    else:
        detail = f"{plural(photos, 'photo')}, {complexity.title()}"
    return unit * photos, detail


def estimate_photography(selection: PhotographySelection, modifiers: QuoteModifiers) -> FamilyEstimate:
    """Price one photography booking: base line, then the second camera."""
    sub = selection.sub_type
    prefix = f"{SERVICE_NAMES['photography']}: {sub_type_name('photography', sub)}"
    duration: Optional[str] = None

    if sub == "event":
        duration = selection.event_duration
        amount = EVENT_RATES.price(duration, selection.event_hours)
        detail = duration_detail(duration, selection.event_hours)
    elif sub == "real_estate":
        amount = sum(
            (real_estate_rate(p.type, p.furnished) for p in selection.properties),
            Decimal("0"),
        )
        detail = plural(len(selection.properties), "property", "properties")
    elif sub == "headshots":
        amount = HEADSHOT_RATE * selection.headshots_people
        detail = plural(selection.headshots_people, "person", "people")
    elif sub == "product":
        amount, detail = _per_photo(
            "product",
            selection.product_photos,
            selection.product_complexity,
            selection.product_price_per_photo,
        )
    elif sub == "food":
        amount, detail = _per_photo(
            "food",
            selection.food_photos,
            selection.food_complexity,
            selection.food_price_per_photo,
        )
    elif sub in ("fashion", "wedding"):
        tier = selection.fashion_package if sub == "fashion" else selection.wedding_package
        amount = PHOTO_PACKAGES[sub][tier]
        detail = f"{tier.title()} Package"
    else:
        return FamilyEstimate(base=line(SERVICE_NAMES["photography"], 0))

    estimate = FamilyEstimate(
        base=line(f"{prefix} ({detail})", amount),
        event_duration=duration,
        event_hours=selection.event_hours if duration else 0,
    )
    if modifiers.second_camera and sub in SECOND_CAMERA_SUB_TYPES:
        estimate.addons.append(line("Second Camera", estimate.base.amount))
    return estimate
