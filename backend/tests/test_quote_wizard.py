from decimal import Decimal

import pytest

from studio_quotes.schemas.quote import ContactDetails
from studio_quotes.schemas.wizard import (
    Back,
    ChooseService,
    ChooseSubType,
    EnrichmentReady,
    EnrichmentUnavailable,
    Finalize,
    Reset,
    SubmitContact,
    UpdateDetails,
    UpdateModifiers,
    WizardState,
)
from studio_quotes.services import quote_wizard
from studio_quotes.services.quote_ai import FALLBACK, QuoteSummary
from studio_quotes.services.quote_wizard import WizardStepError, apply_wizard_action

CONTACT = ContactDetails(name="Sara", email="sara@example.com", phone="+971 50 000 0000")


def _run(*actions, state=None):
    for action in actions:
        state = apply_wizard_action(state, action)
    return state


def _ready_for_contact():
    return _run(
        ChooseService(service_type="photography"),
        ChooseSubType(sub_type="headshots"),
        UpdateDetails(fields={"headshots_people": 3}),
        UpdateModifiers(fields={"location": "abu-dhabi"}),
    )


def test_full_flow_reaches_quoted_with_fallback_summary():
    state = _ready_for_contact()
    assert state.stage == "details_complete"
    assert state.quote.total == Decimal("1250")

    state = _run(SubmitContact(contact=CONTACT), Finalize(), state=state)
    assert state.stage == "quoted"
    assert isinstance(state.enrichment, EnrichmentUnavailable)
    assert state.enrichment.project_title == FALLBACK.project_title
    assert state.enrichment_key == quote_wizard.selection_fingerprint(state.selection)


def test_every_action_refreshes_quote_preview():
    state = apply_wizard_action(None, ChooseService(service_type="video"))
    assert state.stage == "service_chosen"
    assert [it.label for it in state.quote.items] == ["Video Production"]
    assert state.quote.total == Decimal("0")

    state = apply_wizard_action(state, ChooseSubType(sub_type="corporate"))
    assert state.quote.total == Decimal("3000")

    state = apply_wizard_action(state, UpdateDetails(fields={"corporate_graphics": True}))
    assert state.stage == "sub_type_chosen"
    assert state.quote.total == Decimal("3600")


def test_finalize_reuses_summary_for_unchanged_selection(monkeypatch):
    calls = []

    def fake_summary(data):
        calls.append(data)
        return QuoteSummary("Portrait Day", "Crisp headshots for your team.")

    monkeypatch.setattr(quote_wizard, "summarize_quote", fake_summary)
    state = _run(SubmitContact(contact=CONTACT), Finalize(), state=_ready_for_contact())
    assert isinstance(state.enrichment, EnrichmentReady)
    assert state.enrichment.project_title == "Portrait Day"

    state = _run(Back(), Finalize(), state=state)
    assert state.stage == "quoted"
    assert len(calls) == 1

    state = _run(
        UpdateDetails(fields={"headshots_people": 5}),
        UpdateModifiers(fields={}),
        SubmitContact(contact=CONTACT),
        Finalize(),
        state=state,
    )
    assert len(calls) == 2
    assert calls[-1].name == "Sara"


def test_input_state_is_not_mutated():
    state = _ready_for_contact()
    before = state.model_dump()
    apply_wizard_action(state, UpdateDetails(fields={"headshots_people": 9}))
    assert state.model_dump() == before


def test_sub_type_requires_service():
    with pytest.raises(WizardStepError) as exc:
        apply_wizard_action(None, ChooseSubType(sub_type="event"))
    assert exc.value.field_errors == {"service_type": "required"}


def test_sub_type_must_belong_to_service():
    state = apply_wizard_action(None, ChooseService(service_type="photography"))
    with pytest.raises(WizardStepError) as exc:
        apply_wizard_action(state, ChooseSubType(sub_type="corporate"))
    assert exc.value.field_errors == {"sub_type": "invalid"}


def test_details_require_sub_type():
    state = apply_wizard_action(None, ChooseService(service_type="photography"))
    with pytest.raises(WizardStepError):
        apply_wizard_action(state, UpdateDetails(fields={"headshots_people": 2}))


def test_details_are_validated_by_family_model():
    state = _run(ChooseService(service_type="photography"), ChooseSubType(sub_type="headshots"))
    with pytest.raises(WizardStepError) as exc:
        apply_wizard_action(state, UpdateDetails(fields={"headshots_people": 0}))
    assert exc.value.field_errors == {"headshots_people": "greater_than_equal"}


def test_details_cannot_switch_sub_type():
    state = _run(ChooseService(service_type="photography"), ChooseSubType(sub_type="headshots"))
    with pytest.raises(WizardStepError) as exc:
        apply_wizard_action(state, UpdateDetails(fields={"sub_type": "food"}))
    assert exc.value.field_errors == {"sub_type": "read_only"}


def test_invalid_modifiers_rejected():
    state = _run(ChooseService(service_type="360-tours"), ChooseSubType(sub_type="studio"))
    with pytest.raises(WizardStepError) as exc:
        apply_wizard_action(state, UpdateModifiers(fields={"location": "mars"}))
    assert "location" in exc.value.field_errors


def test_contact_before_details_rejected():
    state = _run(ChooseService(service_type="photography"), ChooseSubType(sub_type="headshots"))
    with pytest.raises(WizardStepError) as exc:
        apply_wizard_action(state, SubmitContact(contact=CONTACT))
    assert exc.value.field_errors == {"stage": "details_incomplete"}


@pytest.mark.parametrize(
    "contact, errors",
    [
        (ContactDetails(name="", email="sara@example.com"), {"name": "required"}),
        (ContactDetails(name="Sara", email=""), {"email": "required"}),
        (ContactDetails(name="Sara", email="not-an-email"), {"email": "invalid"}),
    ],
)
def test_contact_requires_name_and_valid_email(contact, errors):
    with pytest.raises(WizardStepError) as exc:
        apply_wizard_action(_ready_for_contact(), SubmitContact(contact=contact))
    assert exc.value.field_errors == errors


def test_finalize_requires_contact():
    with pytest.raises(WizardStepError) as exc:
        apply_wizard_action(_ready_for_contact(), Finalize())
    assert exc.value.field_errors == {"stage": "contact_incomplete"}


def test_time_lapse_sub_type_resets_price_to_band_minimum():
    state = _run(
        ChooseService(service_type="time-lapse"),
        ChooseSubType(sub_type="short"),
        UpdateDetails(fields={"price": 3500}),
    )
    assert state.quote.total == Decimal("3500")

    state = apply_wizard_action(state, ChooseSubType(sub_type="long"))
    assert state.selection.service.price == Decimal("4000")
    assert state.quote.total == Decimal("4000")


def test_choosing_same_service_keeps_fields():
    state = _run(
        ChooseService(service_type="photography"),
        ChooseSubType(sub_type="headshots"),
        UpdateDetails(fields={"headshots_people": 4}),
        ChooseService(service_type="photography"),
    )
    assert state.stage == "service_chosen"
    assert state.selection.service.headshots_people == 4

    state = apply_wizard_action(state, ChooseService(service_type="video"))
    assert state.selection.service.service_type == "video"
    assert state.selection.service.sub_type is None


def test_back_and_reset():
    state = _ready_for_contact()
    state = apply_wizard_action(state, Back())
    assert state.stage == "sub_type_chosen"

    state = apply_wizard_action(state, Reset())
    assert state.stage == "unselected"
    assert state.selection.service is None
    assert state.quote.items == []

    assert apply_wizard_action(WizardState(), Back()).stage == "unselected"
