from __future__ import annotations

from decimal import Decimal

from ...schemas.quote import PostProductionSelection, QuoteModifiers
from ...services.quote_totals import FamilyEstimate, format_amount, line, plural
from ..catalog import (
    POST_PHOTO_BANDS,
    POST_VIDEO_PER_MINUTE_BAND,
    POST_VIDEO_SOCIAL_BAND,
    SERVICE_NAMES,
    sub_type_name,
)

VIDEO_EDITING_HOURLY_RATE = Decimal("250")


def estimate_post_production(
    selection: PostProductionSelection, modifiers: QuoteModifiers
) -> FamilyEstimate:
    """Post-production has no add-ons and never carries universal modifiers."""
    sub = selection.sub_type
    prefix = f"{SERVICE_NAMES['post-production']}: {sub_type_name('post-production', sub)}"

    if sub == "video":
        kind = selection.video_editing_type
        if kind == "perMinute":
            rate = POST_VIDEO_PER_MINUTE_BAND.clamp(selection.video_per_minute_price)
            minutes = selection.video_editing_minutes
            amount = rate * minutes
            detail = f"{plural(minutes, 'finished minute')} @ {format_amount(rate)}/min"
        elif kind == "social":
            amount = POST_VIDEO_SOCIAL_BAND.clamp(selection.video_social_price)
            detail = "15-60s Social Media Edit"
        else:
            hours = selection.video_editing_hours
            amount = VIDEO_EDITING_HOURLY_RATE * hours
            detail = plural(hours, "hour")
    elif sub == "photo":
        tier = selection.photo_editing_type
        unit = POST_PHOTO_BANDS[tier].clamp(selection.photo_price)
        amount = unit * selection.photo_quantity
        detail = f"{plural(selection.photo_quantity, 'photo')}, {tier.title()} @ {format_amount(unit)}"
    else:
        return FamilyEstimate(base=line(SERVICE_NAMES["post-production"], 0))

    return FamilyEstimate(base=line(f"{prefix} ({detail})", amount))
