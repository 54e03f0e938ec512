from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field

from .quote import ContactDetails, QuoteResultOut, QuoteSelection, ServiceType

WizardStage = Literal[
    "unselected",
    "service_chosen",
    "sub_type_chosen",
    "details_complete",
    "contact_complete",
    "quoted",
]


class EnrichmentPending(BaseModel):
    status: Literal["pending"] = "pending"


class EnrichmentReady(BaseModel):
    status: Literal["ready"] = "ready"
    project_title: str
    summary: str


class EnrichmentUnavailable(BaseModel):
    """Summary service failed; the static fallback pair is shown instead."""

    status: Literal["unavailable"] = "unavailable"
    project_title: str
    summary: str


Enrichment = Annotated[
    Union[EnrichmentPending, EnrichmentReady, EnrichmentUnavailable],
    Field(discriminator="status"),
]


class WizardState(BaseModel):
    """Serializable quote-wizard state; clients post it back on every step."""

    stage: WizardStage = "unselected"
    selection: QuoteSelection = Field(default_factory=QuoteSelection)
    enrichment: Enrichment = Field(default_factory=EnrichmentPending)
    enrichment_key: Optional[str] = Field(
        default=None,
        description="Fingerprint of the selection the enrichment was generated for.",
    )
    quote: Optional[QuoteResultOut] = None


class ChooseService(BaseModel):
    type: Literal["choose_service"] = "choose_service"
    service_type: ServiceType


class ChooseSubType(BaseModel):
    type: Literal["choose_sub_type"] = "choose_sub_type"
    sub_type: str


class UpdateDetails(BaseModel):
    type: Literal["update_details"] = "update_details"
    fields: Dict[str, Any] = Field(default_factory=dict)


class UpdateModifiers(BaseModel):
    type: Literal["update_modifiers"] = "update_modifiers"
    fields: Dict[str, Any] = Field(default_factory=dict)


class SubmitContact(BaseModel):
    type: Literal["submit_contact"] = "submit_contact"
    contact: ContactDetails


class Finalize(BaseModel):
    type: Literal["finalize"] = "finalize"


class Back(BaseModel):
    type: Literal["back"] = "back"


class Reset(BaseModel):
    type: Literal["reset"] = "reset"


WizardAction = Annotated[
    Union[ChooseService, ChooseSubType, UpdateDetails, UpdateModifiers, SubmitContact, Finalize, Back, Reset],
    Field(discriminator="type"),
]


class WizardStepRequest(BaseModel):
    state: Optional[WizardState] = None
    action: WizardAction
