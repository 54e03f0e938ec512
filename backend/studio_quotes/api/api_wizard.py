from fastapi import APIRouter

from ..schemas.wizard import WizardState, WizardStepRequest
from ..services.quote_wizard import WizardStepError, apply_wizard_action
from ..utils import error_response

router = APIRouter(tags=["quote-wizard"])


@router.post("/quotes/wizard/step", response_model=WizardState)
def wizard_step(body: WizardStepRequest):
    """Apply one wizard action to the posted state and return the next state."""
    try:
        return apply_wizard_action(body.state, body.action)
    except WizardStepError as exc:
        raise error_response(exc.message, exc.field_errors)
