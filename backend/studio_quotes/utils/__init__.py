from .errors import error_response, field_errors_from_validation
