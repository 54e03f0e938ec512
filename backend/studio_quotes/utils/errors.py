from typing import Dict
from fastapi import HTTPException, status
from pydantic import ValidationError
import logging

logger = logging.getLogger(__name__)


def error_response(
    message: str,
    field_errors: Dict[str, str],
    code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
) -> HTTPException:
    """Return an HTTPException with a consistent structure and log details."""
    logger.error("%s %s", message, field_errors)
    detail = {"message": message, "field_errors": field_errors}
    return HTTPException(status_code=code, detail=detail)


def field_errors_from_validation(exc: ValidationError) -> Dict[str, str]:
    """Flatten pydantic errors into ``{"dotted.field": "error_type"}``."""
    errors: Dict[str, str] = {}
    for err in exc.errors():
        key = ".".join(str(p) for p in err.get("loc", ())) or "__root__"
        errors.setdefault(key, err.get("type", "invalid"))
    return errors
