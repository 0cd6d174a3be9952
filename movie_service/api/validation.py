"""
Full and partial validation of movie payloads.

Wraps the pydantic movie schemas and flattens their errors into the
field/message/code list returned to API clients. Validation never raises
for bad input; callers inspect ``ValidationResult.ok``.
"""

import logging
from typing import Any, Iterable, List, Mapping, Type

from pydantic import BaseModel, ValidationError

from movie_service.api.models.movie import (
    FieldError,
    MovieCreate,
    MovieUpdate,
    ValidationResult,
)

logger = logging.getLogger(__name__)

# Messages for specific (field, pydantic error type) pairs
FIELD_MESSAGES = {
    ("title", "missing"): "Movie title is required",
    ("title", "string_type"): "Movie title must be a string",
    ("genre", "missing"): "Genre is required",
    ("genre", "list_type"): "Genre must be a list of genres",
    ("body", "model_type"): "Movie must be a JSON object",
    ("body", "model_attributes_type"): "Movie must be a JSON object",
}

# pydantic error type -> reported code
ERROR_CODES = {
    "missing": "invalid_type",
    "null_not_allowed": "invalid_type",
    "model_type": "invalid_type",
    "model_attributes_type": "invalid_type",
    "string_type": "invalid_type",
    "int_type": "invalid_type",
    "float_type": "invalid_type",
    "list_type": "invalid_type",
    "enum": "invalid_type",
    "json_invalid": "invalid_json",
    "greater_than": "too_small",
    "greater_than_equal": "too_small",
    "less_than": "too_big",
    "less_than_equal": "too_big",
    "string_too_short": "too_small",
    "too_short": "too_small",
    "url_parsing": "invalid_string",
}


def _field_path(loc: Iterable[Any]) -> str:
    path = ".".join(str(part) for part in loc)
    return path or "body"


def _message_for(error: Mapping[str, Any], field: str) -> str:
    loc = error.get("loc") or ()
    error_type = error.get("type", "")

    if loc and loc[0] == "genre" and len(loc) > 1 and error_type == "enum":
        value = error.get("input")
        if isinstance(value, str):
            return f"'{value}' is not a valid genre"
        return "Genre must be a string"

    top_level = str(loc[0]) if loc else field
    return FIELD_MESSAGES.get((top_level, error_type), error.get("msg", "Invalid value"))


def to_field_errors(errors: Iterable[Mapping[str, Any]]) -> List[FieldError]:
    """
    Convert pydantic error dicts into API field errors.

    Args:
        errors: Output of ``ValidationError.errors()`` or
            ``RequestValidationError.errors()``

    Returns:
        Field errors in the order pydantic reported them
    """
    field_errors = []
    for error in errors:
        field = _field_path(error.get("loc") or ())
        error_type = error.get("type", "")
        field_errors.append(
            FieldError(
                field=field,
                message=_message_for(error, field),
                code=ERROR_CODES.get(error_type, error_type),
            )
        )
    return field_errors


def _validate(model: Type[BaseModel], payload: Any, partial: bool) -> ValidationResult:
    try:
        instance = model.model_validate(payload)
    except ValidationError as exc:
        errors = to_field_errors(exc.errors())
        logger.debug("Movie payload rejected: %s", [e.field for e in errors])
        return ValidationResult(ok=False, errors=errors)

    data = instance.model_dump(mode="json", exclude_unset=partial)
    return ValidationResult(ok=True, data=data)


def validate_movie(payload: Any) -> ValidationResult:
    """
    Validate a payload against the complete movie schema.

    ``rate`` defaults to 5 when absent. Unknown keys, including ``id``,
    are dropped from the normalized data.
    """
    return _validate(MovieCreate, payload, partial=False)


def validate_partial_movie(payload: Any) -> ValidationResult:
    """
    Validate only the fields present in the payload.

    Absent fields are neither defaulted nor reported as missing, so
    ``validate_partial_movie({})`` succeeds with empty data.
    """
    return _validate(MovieUpdate, payload, partial=True)
