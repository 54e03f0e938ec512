from __future__ import annotations

from decimal import Decimal
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer


# Decimals leave the API as JSON numbers rather than strings.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

ServiceType = Literal["photography", "video", "post-production", "360-tours", "time-lapse"]
EventDuration = Literal["perHour", "halfDay", "fullDay"]
Complexity = Literal["simple", "complex"]
PackageTier = Literal["essential", "standard", "premium"]
PropertyType = Literal["studio", "1-bedroom", "2-bedroom", "3-bedroom", "villa"]
Location = Literal["dubai", "abu-dhabi", "sharjah", "other"]
LocationType = Literal["Indoor", "Outdoor", "Studio", "Exhibition Center", "Hotel", "Other"]
DeliveryTimeline = Literal["standard", "rush"]

PhotographySubType = Literal["event", "real_estate", "headshots", "product", "food", "fashion", "wedding"]
VideoSubType = Literal["event", "corporate", "promo", "real_estate", "wedding"]
PostProductionSubType = Literal["video", "photo"]
ToursSubType = Literal["studio", "1-bedroom", "2-bedroom", "3-bedroom"]
TimelapseSubType = Literal["short", "long", "extreme"]


class RealEstateProperty(BaseModel):
    type: PropertyType = "studio"
    furnished: bool = False


class PhotographySelection(BaseModel):
    service_type: Literal["photography"] = "photography"
    sub_type: Optional[PhotographySubType] = None

    event_duration: EventDuration = "perHour"
    event_hours: int = Field(1, ge=1)
    properties: List[RealEstateProperty] = Field(default_factory=lambda: [RealEstateProperty()])
    headshots_people: int = Field(1, ge=1)
    product_photos: int = Field(1, ge=1)
    product_complexity: Complexity = "simple"
    product_price_per_photo: Optional[Decimal] = Field(
        None, description="Slider value; overrides the complexity tier when set."
    )
    food_photos: int = Field(1, ge=1)
    food_complexity: Complexity = "simple"
    food_price_per_photo: Optional[Decimal] = None
    fashion_package: PackageTier = "essential"
    wedding_package: PackageTier = "essential"


class VideoSelection(BaseModel):
    service_type: Literal["video"] = "video"
    sub_type: Optional[VideoSubType] = None

    event_duration: EventDuration = "perHour"
    event_hours: int = Field(1, ge=1)

    corporate_extended_filming: Literal["none", "halfDay", "fullDay"] = "none"
    corporate_two_cam: bool = False
    corporate_scripting: bool = False
    corporate_editing: bool = False
    corporate_graphics: bool = False
    corporate_voiceover: bool = False

    promo_full_day: bool = False
    promo_multi_location: int = Field(0, ge=0, description="Additional filming locations.")
    promo_concept: bool = False
    promo_graphics: bool = False
    promo_sound: bool = False
    promo_makeup: bool = False

    real_estate_property_type: PropertyType = "studio"
    wedding_price: Optional[Decimal] = None


class PostProductionSelection(BaseModel):
    service_type: Literal["post-production"] = "post-production"
    sub_type: Optional[PostProductionSubType] = None

    video_editing_type: Literal["perHour", "perMinute", "social"] = "perHour"
    video_editing_hours: int = Field(1, ge=1)
    video_editing_minutes: int = Field(1, ge=1)
    video_per_minute_price: Optional[Decimal] = None
    video_social_price: Optional[Decimal] = None

    photo_editing_type: Literal["basic", "advanced", "restoration"] = "basic"
    photo_quantity: int = Field(1, ge=1)
    photo_price: Optional[Decimal] = None


class ToursSelection(BaseModel):
    service_type: Literal["360-tours"] = "360-tours"
    sub_type: Optional[ToursSubType] = None


class TimelapseSelection(BaseModel):
    service_type: Literal["time-lapse"] = "time-lapse"
    sub_type: Optional[TimelapseSubType] = None

    price: Optional[Decimal] = None


ServiceSelection = Annotated[
    Union[
        PhotographySelection,
        VideoSelection,
        PostProductionSelection,
        ToursSelection,
        TimelapseSelection,
    ],
    Field(discriminator="service_type"),
]


class QuoteModifiers(BaseModel):
    location: Location = "dubai"
    location_type: LocationType = "Indoor"
    second_camera: bool = False
    extra_camera: bool = False
    delivery_timeline: DeliveryTimeline = "standard"


class ContactDetails(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""


class QuoteSelection(BaseModel):
    """Everything the client picked in the quote wizard."""

    service: Optional[ServiceSelection] = None
    modifiers: QuoteModifiers = Field(default_factory=QuoteModifiers)
    contact: ContactDetails = Field(default_factory=ContactDetails)


class LineItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    label: str
    amount: Money


class QuoteResultOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    items: List[LineItemOut]
    subtotal: Money
    total: Money
    currency: str


class QuoteSummaryIn(BaseModel):
    """Condensed selection handed to the text-summary model."""

    service_type: str = Field(..., description="'Photography: Wedding Photography' style label.")
    package_type: str = "Custom"
    hours: Optional[int] = None
    location: str
    location_type: str
    addons: List[str] = Field(default_factory=list)
    name: Optional[str] = None


class QuoteSummaryOut(BaseModel):
    project_title: str
    summary: str
    source: Literal["genai", "fallback"]


class QuotePdfRequest(BaseModel):
    selection: QuoteSelection
    project_title: Optional[str] = None
    summary: Optional[str] = None
