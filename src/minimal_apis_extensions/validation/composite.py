"""CompositeValidator — chains multiple validators, collects all errors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .result import ValidationResult

if TYPE_CHECKING:
    from ..ports.validation import BoundInput, IValidator


class CompositeValidator:
    """Runs a chain of validators over one bound value and merges their results.

    Every validator sees the value and the input it was bound from, and all
    of their errors are collected before returning. A
    :class:`~minimal_apis_extensions.binding.validated.ValidatedBinder` built
    with ``extra_validators`` chains them behind its main validator this way.

    Usage::

        validator = CompositeValidator([PydanticValidator(), SkuValidator()])
        result = await validator.validate(order)
    """

    def __init__(self, validators: list[IValidator] | None = None) -> None:
        self._validators: list[IValidator] = list(validators or [])

    def add(self, validator: IValidator) -> None:
        """Append *validator* to the end of the chain."""
        self._validators.append(validator)

    async def validate(
        self, value: Any, bound_input: BoundInput | None = None
    ) -> ValidationResult:
        combined = ValidationResult.success()
        for validator in self._validators:
            combined = combined.merge(await validator.validate(value, bound_input))
        return combined
