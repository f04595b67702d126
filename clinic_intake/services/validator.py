# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Schema validation of raw form payloads."""
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from clinic_intake.core.errors import ValidationError
from clinic_intake.schemas import Submission

S = TypeVar("S", bound=Submission)


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "body"


def validate_submission(schema: type[S], raw: Any) -> S:
    """Parse `raw` against `schema`, collecting every violation.

    Raises ValidationError whose details are `{"field", "message"}` dicts
    keyed by the JSON (camelCase) field name.
    """
    try:
        return schema.model_validate(raw)
    except PydanticValidationError as exc:
        errors = [
            {"field": _field_path(err["loc"]), "message": err["msg"]}
            for err in exc.errors(include_url=False)
        ]
        raise ValidationError(errors) from exc
