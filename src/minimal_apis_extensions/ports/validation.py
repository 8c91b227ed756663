"""IValidator — composable object-validation protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..validation.result import ValidationResult


@dataclass(frozen=True)
class BoundInput:
    """The request data a value was bound from.

    ``data`` holds the matched JSON keys as they arrived, before any
    conversion, and ``target_type`` the type they were bound to.
    """

    target_type: Any
    data: Any


@runtime_checkable
class IValidator(Protocol):
    """Protocol for validators of bound values.

    Validators are composable via
    :class:`~minimal_apis_extensions.validation.composite.CompositeValidator`.
    The ``""`` key is reserved for binding-level errors and must not be
    produced by validators.
    """

    async def validate(
        self, value: Any, bound_input: BoundInput | None = None
    ) -> ValidationResult:
        """Validate *value* and return a
        :class:`~minimal_apis_extensions.validation.result.ValidationResult`.

        *bound_input* is given when the value was read from a request body.
        Validators that check input constraints should check it rather than
        the converted value.

        Must return :meth:`ValidationResult.success()` or
        :meth:`ValidationResult.failure(errors)`.
        """
        ...
