"""PydanticValidator — leverages Pydantic model validation."""

from __future__ import annotations

import dataclasses
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .result import ValidationResult

if TYPE_CHECKING:
    from ..ports.validation import BoundInput

ROOT_ERROR_KEY = "__root__"


class PydanticValidator:
    """Validates bound values using Pydantic validation.

    When the value was bound from a request body, the matched input data is
    validated against the target type exactly once, so fields that change
    during validation (``Json[...]``, ``mode="before"`` validators) are never
    fed their own output. Without bound input, the fields that were set on a
    model or dataclass instance are validated instead. Other values always
    pass.

    Errors are reported under their dotted ``loc`` path. Model-level errors
    (empty location) go under ``"__root__"`` because the empty key belongs to
    binding errors.
    """

    async def validate(
        self, value: Any, bound_input: BoundInput | None = None
    ) -> ValidationResult:
        if bound_input is not None:
            return _validate_data(bound_input.target_type, bound_input.data)
        if isinstance(value, BaseModel):
            return _validate_data(type(value), _set_field_data(value))
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return _validate_data(type(value), _set_attribute_data(value))
        return ValidationResult.success()


def _validate_data(target_type: Any, data: Any) -> ValidationResult:
    try:
        if isinstance(target_type, type) and issubclass(target_type, BaseModel):
            target_type.model_validate(data)
        else:
            _adapter(target_type).validate_python(data)
    except PydanticValidationError as exc:
        result = ValidationResult.success()
        for error in exc.errors():
            loc = ".".join(str(p) for p in error.get("loc", ()))
            message = error.get("msg", "validation error")
            result.add_error(loc or ROOT_ERROR_KEY, message)
        return result
    return ValidationResult.success()


@lru_cache(maxsize=256)
def _adapter(target_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target_type)


def _set_field_data(model: BaseModel) -> dict[str, Any]:
    """Input data for re-validation, keyed the way the model accepts it.

    Only explicitly set fields are included so that missing required fields
    of a partially constructed model are reported as missing.
    """
    fields = type(model).model_fields
    present = vars(model)
    data: dict[str, Any] = {}
    for name in model.model_fields_set:
        if name not in present or name not in fields:
            continue
        data[fields[name].alias or name] = present[name]
    return data


def _set_attribute_data(instance: Any) -> dict[str, Any]:
    # unset attributes of a partial instance are left out and reported missing
    return {
        dc_field.name: getattr(instance, dc_field.name)
        for dc_field in dataclasses.fields(instance)
        if hasattr(instance, dc_field.name)
    }
