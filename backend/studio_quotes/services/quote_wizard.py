"""Step-by-step quote wizard.

The wizard walks a selection through a fixed set of stages::

    unselected -> service_chosen -> sub_type_chosen -> details_complete
               -> contact_complete -> quoted

Each action returns a new :class:`WizardState` with a fresh quote preview.
The AI summary is fetched once on entering ``quoted`` and reused for as long
as the selection fingerprint stays the same.
"""

from __future__ import annotations

import hashlib
import logging
import re
from typing import Any, Dict

from pydantic import ValidationError

from ..schemas.quote import (
    ContactDetails,
    PhotographySelection,
    PostProductionSelection,
    QuoteModifiers,
    QuoteResultOut,
    QuoteSelection,
    TimelapseSelection,
    ToursSelection,
    VideoSelection,
)
from ..schemas.wizard import (
    Back,
    ChooseService,
    ChooseSubType,
    EnrichmentPending,
    EnrichmentReady,
    EnrichmentUnavailable,
    Finalize,
    Reset,
    SubmitContact,
    UpdateDetails,
    UpdateModifiers,
    WizardState,
)
from ..service_types.catalog import SUB_TYPE_NAMES, TIMELAPSE_BANDS
from ..utils.errors import field_errors_from_validation
from .quote_ai import summarize_quote, summary_input_for
from .studio_quote import calculate_quote_breakdown

logger = logging.getLogger(__name__)

STAGES = (
    "unselected",
    "service_chosen",
    "sub_type_chosen",
    "details_complete",
    "contact_complete",
    "quoted",
)
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_SERVICE_MODELS = {
    "photography": PhotographySelection,
    "video": VideoSelection,
    "post-production": PostProductionSelection,
    "360-tours": ToursSelection,
    "time-lapse": TimelapseSelection,
}
_LOCKED_DETAIL_FIELDS = ("service_type", "sub_type")


class WizardStepError(Exception):
    """Raised when an action is not allowed in the current stage or is invalid."""

    def __init__(self, message: str, field_errors: Dict[str, str]):
        super().__init__(message)
        self.message = message
        self.field_errors = field_errors


def _stage_at_least(state: WizardState, stage: str) -> bool:
    return STAGES.index(state.stage) >= STAGES.index(stage)


def selection_fingerprint(selection: QuoteSelection) -> str:
    return hashlib.sha1(selection.model_dump_json().encode()).hexdigest()


def _rebuild_service(service: Any, updates: Dict[str, Any]) -> Any:
    try:
        return type(service).model_validate({**service.model_dump(), **updates})
    except ValidationError as exc:
        raise WizardStepError("Invalid service details", field_errors_from_validation(exc)) from exc


def _choose_service(state: WizardState, action: ChooseService) -> WizardState:
    current = state.selection.service
    if current is None or current.service_type != action.service_type:
        state.selection.service = _SERVICE_MODELS[action.service_type]()
    state.stage = "service_chosen"
    return state


def _choose_sub_type(state: WizardState, action: ChooseSubType) -> WizardState:
    service = state.selection.service
    if service is None:
        raise WizardStepError("Choose a service first", {"service_type": "required"})
    if action.sub_type not in SUB_TYPE_NAMES[service.service_type]:
        raise WizardStepError("Unknown sub-type for this service", {"sub_type": "invalid"})

    updates: Dict[str, Any] = {"sub_type": action.sub_type}
    if action.sub_type != service.sub_type:
        # Slider prices snap back to the bottom of the new band.
        if service.service_type == "time-lapse":
            updates["price"] = TIMELAPSE_BANDS[action.sub_type].low
        elif service.service_type == "post-production":
            updates["photo_price"] = None
    state.selection.service = _rebuild_service(service, updates)
    state.stage = "sub_type_chosen"
    return state


def _update_details(state: WizardState, action: UpdateDetails) -> WizardState:
    service = state.selection.service
    if service is None or not service.sub_type:
        raise WizardStepError("Choose a service type first", {"sub_type": "required"})
    locked = [k for k in action.fields if k in _LOCKED_DETAIL_FIELDS]
    if locked:
        raise WizardStepError("Use the service steps to change these fields", {k: "read_only" for k in locked})
    updates = dict(action.fields)
    if service.service_type == "post-production" and "photo_editing_type" in updates and "photo_price" not in updates:
        updates["photo_price"] = None
    state.selection.service = _rebuild_service(service, updates)
    state.stage = "sub_type_chosen"
    return state


def _update_modifiers(state: WizardState, action: UpdateModifiers) -> WizardState:
    service = state.selection.service
    if service is None or not service.sub_type:
        raise WizardStepError("Choose a service type first", {"sub_type": "required"})
    try:
        state.selection.modifiers = QuoteModifiers.model_validate(
            {**state.selection.modifiers.model_dump(), **action.fields}
        )
    except ValidationError as exc:
        raise WizardStepError("Invalid location or add-ons", field_errors_from_validation(exc)) from exc
    state.stage = "details_complete"
    return state


def validate_contact(contact: ContactDetails) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not contact.name.strip():
        errors["name"] = "required"
    email = contact.email.strip()
    if not email:
        errors["email"] = "required"
    elif not _EMAIL_RE.match(email):
        errors["email"] = "invalid"
    return errors


def _submit_contact(state: WizardState, action: SubmitContact) -> WizardState:
    if not _stage_at_least(state, "details_complete"):
        raise WizardStepError("Complete the service details first", {"stage": "details_incomplete"})
    errors = validate_contact(action.contact)
    if errors:
        raise WizardStepError("Please fill in your contact details", errors)
    state.selection.contact = ContactDetails(
        name=action.contact.name.strip(),
        email=action.contact.email.strip(),
        phone=action.contact.phone.strip(),
        message=action.contact.message,
    )
    state.stage = "contact_complete"
    return state


def _finalize(state: WizardState) -> WizardState:
    if not _stage_at_least(state, "contact_complete"):
        raise WizardStepError("Complete your contact details first", {"stage": "contact_incomplete"})
    key = selection_fingerprint(state.selection)
    reusable = state.enrichment_key == key and not isinstance(state.enrichment, EnrichmentPending)
    if reusable:
        logger.debug("Reusing quote summary for unchanged selection")
    else:
        result = summarize_quote(summary_input_for(state.selection))
        if result.source == "fallback":
            state.enrichment = EnrichmentUnavailable(project_title=result.project_title, summary=result.summary)
        else:
            state.enrichment = EnrichmentReady(project_title=result.project_title, summary=result.summary)
        state.enrichment_key = key
    state.stage = "quoted"
    return state


def apply_wizard_action(state: WizardState | None, action: Any) -> WizardState:
    """Apply one wizard action and return the resulting state.

    Raises :class:`WizardStepError` when the action is not valid for the
    current stage; the input state is never mutated.
    """
    state = state.model_copy(deep=True) if state is not None else WizardState()

    if isinstance(action, Reset):
        state = WizardState()
    elif isinstance(action, Back):
        state.stage = STAGES[max(0, STAGES.index(state.stage) - 1)]
    elif isinstance(action, ChooseService):
        state = _choose_service(state, action)
    elif isinstance(action, ChooseSubType):
        state = _choose_sub_type(state, action)
    elif isinstance(action, UpdateDetails):
        state = _update_details(state, action)
    elif isinstance(action, UpdateModifiers):
        state = _update_modifiers(state, action)
    elif isinstance(action, SubmitContact):
        state = _submit_contact(state, action)
    elif isinstance(action, Finalize):
        state = _finalize(state)
    else:
        raise WizardStepError("Unknown wizard action", {"type": "invalid"})

    state.quote = QuoteResultOut.model_validate(calculate_quote_breakdown(state.selection))
    return state
