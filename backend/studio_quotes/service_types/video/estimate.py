from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional, Tuple

from ...schemas.quote import QuoteModifiers, VideoSelection
from ...services.quote_totals import FamilyEstimate, LineItem, format_amount, line
from ..catalog import PROPERTY_TYPE_NAMES, SERVICE_NAMES, VIDEO_WEDDING_BAND, sub_type_name
from ..durations import EventRates, duration_detail

EVENT_RATES = EventRates(
    first_hour=Decimal("800"),
    additional_hour=Decimal("500"),
    half_day=Decimal("2500"),
    full_day=Decimal("4500"),
)

CORPORATE_FOUNDATION_PRICE = Decimal("3000")
CORPORATE_EXTENDED_FILMING: Dict[str, Tuple[str, Decimal]] = {
    "halfDay": ("Extended Filming (Half Day)", Decimal("1200")),
    "fullDay": ("Extended Filming (Full Day)", Decimal("2200")),
}
# Declaration order is the order the add-ons appear on the quote.
CORPORATE_ADDONS: Tuple[Tuple[str, str, Decimal], ...] = (
    ("corporate_two_cam", "Two-Camera Interview Setup", Decimal("950")),
    ("corporate_scripting", "Scriptwriting & Storyboarding", Decimal("750")),
    ("corporate_editing", "Advanced Editing & Color Grading", Decimal("800")),
    ("corporate_graphics", "Motion Graphics & Titles", Decimal("600")),
    ("corporate_voiceover", "Professional Voice-over", Decimal("500")),
)

PROMO_BASIC_PRICE = Decimal("4500")
PROMO_FULL_DAY = ("Full Day Filming", Decimal("2000"))
PROMO_LOCATION_RATE = Decimal("750")
PROMO_ADDONS: Tuple[Tuple[str, str, Decimal], ...] = (
    ("promo_concept", "Concept Development", Decimal("1000")),
    ("promo_graphics", "Motion Graphics", Decimal("800")),
    ("promo_sound", "Custom Sound Design", Decimal("600")),
    ("promo_makeup", "Hair & Makeup Styling", Decimal("500")),
)

REAL_ESTATE_RATES: Dict[str, Decimal] = {
    "studio": Decimal("1200"),
    "1-bedroom": Decimal("1500"),
    "2-bedroom": Decimal("1800"),
    "3-bedroom": Decimal("2200"),
    "villa": Decimal("3000"),
}

SECOND_CAMERA_SUB_TYPES = frozenset({"event", "wedding"})


def corporate_addons(selection: VideoSelection) -> list[LineItem]:
    items: list[LineItem] = []
    extended = CORPORATE_EXTENDED_FILMING.get(selection.corporate_extended_filming)
    if extended:
        items.append(line(*extended))
    for attr, label, price in CORPORATE_ADDONS:
        if getattr(selection, attr):
            items.append(line(label, price))
    return items


def promo_addons(selection: VideoSelection) -> list[LineItem]:
    items: list[LineItem] = []
    if selection.promo_full_day:
        items.append(line(*PROMO_FULL_DAY))
    extra_locations = int(selection.promo_multi_location or 0)
    if extra_locations > 0:
        items.append(line(f"Additional Locations (x{extra_locations})", PROMO_LOCATION_RATE * extra_locations))
    for attr, label, price in PROMO_ADDONS:
        if getattr(selection, attr):
            items.append(line(label, price))
    return items


def estimate_video(selection: VideoSelection, modifiers: QuoteModifiers) -> FamilyEstimate:
    """Price one video booking: base, checklist add-ons, then the second camera."""
    sub = selection.sub_type
    prefix = f"{SERVICE_NAMES['video']}: {sub_type_name('video', sub)}"
    duration: Optional[str] = None
    addons: list[LineItem] = []

    if sub == "event":
        duration = selection.event_duration
        amount = EVENT_RATES.price(duration, selection.event_hours)
        detail = duration_detail(duration, selection.event_hours)
    elif sub == "corporate":
        amount = CORPORATE_FOUNDATION_PRICE
        detail = "Foundation Package"
        addons = corporate_addons(selection)
    elif sub == "promo":
        amount = PROMO_BASIC_PRICE
        detail = "Basic Package"
        addons = promo_addons(selection)
    elif sub == "real_estate":
        ptype = selection.real_estate_property_type
        amount = REAL_ESTATE_RATES.get(ptype, REAL_ESTATE_RATES["studio"])
        detail = PROPERTY_TYPE_NAMES.get(ptype, ptype)
    elif sub == "wedding":
        amount = VIDEO_WEDDING_BAND.clamp(selection.wedding_price)
        detail = f"Package @ {format_amount(amount)}"
    else:
        return FamilyEstimate(base=line(SERVICE_NAMES["video"], 0))

    estimate = FamilyEstimate(
        base=line(f"{prefix} ({detail})", amount),
        addons=addons,
        event_duration=duration,
        event_hours=selection.event_hours if duration else 0,
    )
    if modifiers.second_camera and sub in SECOND_CAMERA_SUB_TYPES:
        estimate.addons.append(line("Second Camera", estimate.base.amount))
    return estimate
