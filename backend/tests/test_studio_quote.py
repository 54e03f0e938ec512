from decimal import Decimal

import pytest

import studio_quotes.services.studio_quote as studio_quote
from studio_quotes.schemas.quote import (
    PhotographySelection,
    PostProductionSelection,
    QuoteModifiers,
    QuoteResultOut,
    QuoteSelection,
    RealEstateProperty,
    TimelapseSelection,
    ToursSelection,
    VideoSelection,
)
from studio_quotes.services.quote_totals import LineItem
from studio_quotes.services.studio_quote import calculate_quote, calculate_quote_breakdown


def _labels(breakdown):
    return [it.label for it in breakdown.items]


def test_unset_service_is_empty():
    breakdown = calculate_quote_breakdown(QuoteSelection())
    assert breakdown.items == []
    assert breakdown.total == Decimal("0")


def test_unset_sub_type_yields_zero_placeholder():
    selection = QuoteSelection(
        service=PhotographySelection(),
        modifiers=QuoteModifiers(location="abu-dhabi", delivery_timeline="rush"),
    )
    breakdown = calculate_quote_breakdown(selection)
    assert breakdown.items == [LineItem("Photography", Decimal("0.00"))]
    assert breakdown.total == Decimal("0")


def test_headshots_for_three_people():
    selection = QuoteSelection(service=PhotographySelection(sub_type="headshots", headshots_people=3))
    breakdown = calculate_quote_breakdown(selection)
    assert _labels(breakdown) == ["Photography: Corporate/Business Headshots (3 people)"]
    assert breakdown.items[0].amount == Decimal("1050")
    assert breakdown.total == Decimal("1050")
    assert breakdown.currency == "AED"


def test_corporate_video_checklist_addons():
    selection = QuoteSelection(
        service=VideoSelection(sub_type="corporate", corporate_two_cam=True, corporate_voiceover=True)
    )
    breakdown = calculate_quote_breakdown(selection)
    assert _labels(breakdown) == [
        "Video Production: Corporate Video (Foundation Package)",
        "Two-Camera Interview Setup",
        "Professional Voice-over",
    ]
    assert breakdown.subtotal == Decimal("4450")
    assert breakdown.total == Decimal("4450")


def test_travel_and_rush_on_top_of_subtotal():
    selection = QuoteSelection(
        service=TimelapseSelection(sub_type="short", price=Decimal("2000")),
        modifiers=QuoteModifiers(location="abu-dhabi", delivery_timeline="rush"),
    )
    breakdown = calculate_quote_breakdown(selection)
    assert breakdown.subtotal == Decimal("2000")
    assert [(it.label, it.amount) for it in breakdown.items[1:]] == [
        ("Travel & Logistics Fee (Abu Dhabi)", Decimal("200")),
        ("Rush Delivery (+50%)", Decimal("1000")),
    ]
    assert breakdown.total == Decimal("3200")


@pytest.mark.parametrize(
    "service",
    [
        lambda h: PhotographySelection(sub_type="event", event_hours=h),
        lambda h: VideoSelection(sub_type="event", event_hours=h),
    ],
)
@pytest.mark.parametrize("location_type", ["Indoor", "Studio"])
def test_per_hour_events_increase_with_hours(service, location_type):
    totals = [
        calculate_quote(
            QuoteSelection(service=service(hours), modifiers=QuoteModifiers(location_type=location_type))
        )
        for hours in range(1, 9)
    ]
    assert all(later > earlier for earlier, later in zip(totals, totals[1:]))


@pytest.mark.parametrize(
    "service",
    [
        PhotographySelection(sub_type="event", event_duration="fullDay"),
        PhotographySelection(sub_type="wedding", wedding_package="standard"),
        VideoSelection(sub_type="event", event_hours=3),
        VideoSelection(sub_type="wedding", wedding_price=Decimal("9000")),
    ],
)
def test_second_camera_adds_exactly_the_base_line(service):
    off = calculate_quote_breakdown(QuoteSelection(service=service, modifiers=QuoteModifiers(location="sharjah")))
    on = calculate_quote_breakdown(
        QuoteSelection(service=service, modifiers=QuoteModifiers(location="sharjah", second_camera=True))
    )
    assert on.total == off.total + off.items[0].amount
    assert "Second Camera" in _labels(on)


def test_second_camera_ignored_for_ineligible_sub_types():
    service = VideoSelection(sub_type="corporate", corporate_editing=True)
    off = calculate_quote(QuoteSelection(service=service))
    on = calculate_quote(QuoteSelection(service=service, modifiers=QuoteModifiers(second_camera=True)))
    assert on == off


def test_extra_camera_doubles_time_lapse_base():
    service = TimelapseSelection(sub_type="long", price=Decimal("5000"))
    off = calculate_quote(QuoteSelection(service=service))
    on = calculate_quote(QuoteSelection(service=service, modifiers=QuoteModifiers(extra_camera=True)))
    assert on == off + Decimal("5000")


def test_rush_is_half_of_service_subtotal_only():
    selection = QuoteSelection(
        service=PhotographySelection(sub_type="event", event_duration="halfDay"),
        modifiers=QuoteModifiers(location="sharjah", location_type="Studio", delivery_timeline="rush"),
    )
    breakdown = calculate_quote_breakdown(selection)
    amounts = {it.label: it.amount for it in breakdown.items}
    assert amounts["Studio Rental (Half Day - 4 hrs)"] == Decimal("700")
    assert amounts["Travel & Logistics Fee (Sharjah)"] == Decimal("100")
    assert amounts["Rush Delivery (+50%)"] == breakdown.subtotal * Decimal("0.5")
    assert breakdown.total == Decimal("3050")


def test_line_item_order():
    selection = QuoteSelection(
        service=PhotographySelection(sub_type="event", event_hours=2),
        modifiers=QuoteModifiers(
            location="sharjah",
            location_type="Studio",
            second_camera=True,
            delivery_timeline="rush",
        ),
    )
    breakdown = calculate_quote_breakdown(selection)
    assert _labels(breakdown) == [
        "Photography: Event Photography (2 hours)",
        "Second Camera",
        "Studio Rental (2 hours)",
        "Travel & Logistics Fee (Sharjah)",
        "Rush Delivery (+50%)",
    ]
    assert breakdown.total == Decimal("3050")


def test_studio_rental_only_for_event_durations():
    selection = QuoteSelection(
        service=PhotographySelection(sub_type="headshots"),
        modifiers=QuoteModifiers(location_type="Studio"),
    )
    assert not any(label.startswith("Studio Rental") for label in _labels(calculate_quote_breakdown(selection)))


def test_identical_selections_give_identical_results():
    selection = QuoteSelection(
        service=VideoSelection(sub_type="promo", promo_multi_location=2, promo_sound=True),
        modifiers=QuoteModifiers(location="other", delivery_timeline="rush"),
    )
    first = QuoteResultOut.model_validate(calculate_quote_breakdown(selection)).model_dump_json()
    second = QuoteResultOut.model_validate(calculate_quote_breakdown(selection)).model_dump_json()
    assert first == second


def test_furnished_studio_real_estate_is_800():
    selection = QuoteSelection(
        service=PhotographySelection(
            sub_type="real_estate", properties=[RealEstateProperty(type="studio", furnished=True)]
        )
    )
    breakdown = calculate_quote_breakdown(selection)
    assert breakdown.items[0].label == "Photography: Real Estate Photography (1 property)"
    assert breakdown.total == Decimal("800")


def test_multiple_real_estate_properties_are_summed():
    selection = QuoteSelection(
        service=PhotographySelection(
            sub_type="real_estate",
            properties=[
                RealEstateProperty(type="villa", furnished=True),
                RealEstateProperty(type="2-bedroom"),
            ],
        )
    )
    assert calculate_quote(selection) == Decimal("3500")


def test_post_production_never_carries_modifiers():
    selection = QuoteSelection(
        service=PostProductionSelection(sub_type="video", video_editing_hours=3),
        modifiers=QuoteModifiers(location="abu-dhabi", location_type="Studio", delivery_timeline="rush"),
    )
    breakdown = calculate_quote_breakdown(selection)
    assert _labels(breakdown) == ["Post Production: Video Editing (3 hours)"]
    assert breakdown.total == Decimal("750")


def test_post_production_photo_price_is_clamped_to_tier_band():
    selection = QuoteSelection(
        service=PostProductionSelection(
            sub_type="photo", photo_editing_type="advanced", photo_quantity=10, photo_price=Decimal("5")
        )
    )
    breakdown = calculate_quote_breakdown(selection)
    assert breakdown.items[0].label == "Post Production: Photo Editing (Retouching) (10 photos, Advanced @ 50 AED)"
    assert breakdown.total == Decimal("500")


@pytest.mark.parametrize(
    "service, expected",
    [
        (TimelapseSelection(sub_type="short", price=Decimal("50000")), Decimal("4000")),
        (TimelapseSelection(sub_type="extreme"), Decimal("8000")),
        (VideoSelection(sub_type="wedding", wedding_price=Decimal("100")), Decimal("6000")),
        (PhotographySelection(sub_type="product", product_photos=4, product_price_per_photo=Decimal("50")), Decimal("400")),
        (PhotographySelection(sub_type="food", food_photos=2, food_complexity="complex"), Decimal("800")),
    ],
)
def test_slider_prices_are_clamped(service, expected):
    assert calculate_quote(QuoteSelection(service=service)) == expected


def test_tours_flat_rate_with_travel():
    selection = QuoteSelection(
        service=ToursSelection(sub_type="3-bedroom"),
        modifiers=QuoteModifiers(location="other"),
    )
    breakdown = calculate_quote_breakdown(selection)
    assert _labels(breakdown) == ["360 Tours: 3-Bedroom Villa", "Travel & Logistics Fee (Other UAE)"]
    assert breakdown.total == Decimal("2800")


def test_quote_breakdown_uses_travel_item(monkeypatch):
    def fake_travel(_location):
        return LineItem("Travel & Logistics Fee (Mars)", Decimal("42.00"))

    monkeypatch.setattr(studio_quote, "travel_fee_item", fake_travel)
    selection = QuoteSelection(service=ToursSelection(sub_type="studio"))
    breakdown = calculate_quote_breakdown(selection)
    assert breakdown.items[-1].label == "Travel & Logistics Fee (Mars)"
    assert breakdown.total == Decimal("1042")
