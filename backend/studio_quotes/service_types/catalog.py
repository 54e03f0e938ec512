"""Names, packages and price bands shown by the quote wizard.

The family engines read their display names and slider bands from here so
the catalog endpoint and the pricing math can never drift apart.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict

from ..services.quote_totals import PriceBand

SERVICE_NAMES: Dict[str, str] = {
    "photography": "Photography",
    "video": "Video Production",
    "post-production": "Post Production",
    "360-tours": "360 Tours",
    "time-lapse": "Time Lapse",
}

SUB_TYPE_NAMES: Dict[str, Dict[str, str]] = {
    "photography": {
        "event": "Event Photography",
        "real_estate": "Real Estate Photography",
        "headshots": "Corporate/Business Headshots",
        "product": "Product Photography",
        "food": "Food Photography",
        "fashion": "Fashion/Lifestyle Photography",
        "wedding": "Wedding Photography",
    },
    "video": {
        "event": "Event Videography",
        "corporate": "Corporate Video",
        "promo": "Promotional/Brand Video",
        "real_estate": "Real Estate Videography",
        "wedding": "Wedding Videography",
    },
    "post-production": {
        "video": "Video Editing",
        "photo": "Photo Editing (Retouching)",
    },
    "360-tours": {
        "studio": "Studio Apartment",
        "1-bedroom": "1-Bedroom Apartment",
        "2-bedroom": "2-Bedroom Apartment",
        "3-bedroom": "3-Bedroom Villa",
    },
    "time-lapse": {
        "short": "Short Term (1-10 hours)",
        "long": "Long Term (Days/Weeks)",
        "extreme": "Extreme Long Term (Months/Years)",
    },
}

DURATION_LABELS: Dict[str, str] = {
    "halfDay": "Half Day - 4 hrs",
    "fullDay": "Full Day - 8 hrs",
}

PROPERTY_TYPE_NAMES: Dict[str, str] = {
    "studio": "Studio",
    "1-bedroom": "1-Bedroom",
    "2-bedroom": "2-Bedroom",
    "3-bedroom": "3-Bedroom",
    "villa": "Villa",
}

# Discrete packages (final pricing model for fashion/wedding photography)
PHOTO_PACKAGES: Dict[str, Dict[str, Decimal]] = {
    "fashion": {
        "essential": Decimal("1500"),
        "standard": Decimal("3000"),
        "premium": Decimal("5000"),
    },
    "wedding": {
        "essential": Decimal("5000"),
        "standard": Decimal("12000"),
        "premium": Decimal("25000"),
    },
}

# Per-photo bands; the tier picks an edge, the slider picks anything inside.
PHOTO_UNIT_BANDS: Dict[str, PriceBand] = {
    "product": PriceBand(Decimal("100"), Decimal("400")),
    "food": PriceBand(Decimal("150"), Decimal("400")),
}

VIDEO_WEDDING_BAND = PriceBand(Decimal("6000"), Decimal("30000"))

POST_VIDEO_PER_MINUTE_BAND = PriceBand(Decimal("500"), Decimal("1500"))
POST_VIDEO_SOCIAL_BAND = PriceBand(Decimal("500"), Decimal("1500"))
POST_PHOTO_BANDS: Dict[str, PriceBand] = {
    "basic": PriceBand(Decimal("20"), Decimal("50")),
    "advanced": PriceBand(Decimal("50"), Decimal("250")),
    "restoration": PriceBand(Decimal("100"), Decimal("300")),
}

TIMELAPSE_BANDS: Dict[str, PriceBand] = {
    "short": PriceBand(Decimal("2000"), Decimal("4000")),
    "long": PriceBand(Decimal("4000"), Decimal("8000")),
    "extreme": PriceBand(Decimal("8000"), Decimal("20000")),
}

LOCATION_NAMES: Dict[str, str] = {
    "dubai": "Dubai",
    "abu-dhabi": "Abu Dhabi",
    "sharjah": "Sharjah",
    "other": "Other UAE",
}

LOCATION_TYPES = ["Indoor", "Outdoor", "Studio", "Exhibition Center", "Hotel", "Other"]


def service_name(service_type: str | None) -> str:
    return SERVICE_NAMES.get(service_type or "", "")


def sub_type_name(service_type: str | None, sub_type: str | None) -> str:
    return SUB_TYPE_NAMES.get(service_type or "", {}).get(sub_type or "", "")


def _band_payload(band: PriceBand) -> dict:
    return {"min": float(band.low), "max": float(band.high)}


def catalog_payload() -> dict:
    """Return the catalog as plain JSON-friendly data for the wizard UI."""
    return {
        "services": [
            {
                "id": sid,
                "name": name,
                "sub_types": [{"id": k, "name": v} for k, v in SUB_TYPE_NAMES[sid].items()],
            }
            for sid, name in SERVICE_NAMES.items()
        ],
        "packages": {
            kind: {tier: float(price) for tier, price in tiers.items()}
            for kind, tiers in PHOTO_PACKAGES.items()
        },
        "price_bands": {
            "photography": {k: _band_payload(b) for k, b in PHOTO_UNIT_BANDS.items()},
            "video_wedding": _band_payload(VIDEO_WEDDING_BAND),
            "post_video_per_minute": _band_payload(POST_VIDEO_PER_MINUTE_BAND),
            "post_video_social": _band_payload(POST_VIDEO_SOCIAL_BAND),
            "post_photo": {k: _band_payload(b) for k, b in POST_PHOTO_BANDS.items()},
            "time_lapse": {k: _band_payload(b) for k, b in TIMELAPSE_BANDS.items()},
        },
        "locations": [{"id": k, "name": v} for k, v in LOCATION_NAMES.items()],
        "location_types": list(LOCATION_TYPES),
        "property_types": [{"id": k, "name": v} for k, v in PROPERTY_TYPE_NAMES.items()],
    }
