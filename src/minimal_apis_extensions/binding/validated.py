"""Validated — a request value bound and validated in one step."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic

from typing_extensions import TypeVar

from ..config import BindingConfig
from ..metadata.types import AcceptsRequestBody
from ..primitives.exceptions import BinderContractError
from ..validation.composite import CompositeValidator
from ..validation.pydantic import PydanticValidator
from .default_binder import JsonDefaultBinder
from .media_types import JSON_CONTENT_TYPE
from .target import BindingTarget

if TYPE_CHECKING:
    from starlette.requests import Request

    from ..ports.binding import IDefaultBinder
    from ..ports.validation import IValidator
    from ..validation.result import ValidationResult

logger = logging.getLogger("minimal_apis.binding")

T = TypeVar("T", default=Any)

BINDING_ERROR_KEY = ""


def _errors_factory() -> dict[str, list[str]]:
    return {}


@dataclass(frozen=True)
class Validated(Generic[T]):
    """Outcome of binding and validating one request value.

    Attributes:
        value: The bound object, or ``None`` when the body was absent or
            binding failed.
        is_valid: ``True`` when binding succeeded and the value (if any)
            passed validation.
        errors: Field path to messages. The ``""`` key holds object-level
            and binding errors.
        default_binding_status_code: Status code reported by the default
            binder when it did not succeed; ``None`` otherwise.

    Iterating yields ``(value, is_valid)`` so an outcome can be unpacked::

        order, is_valid = validated
    """

    value: T | None = None
    is_valid: bool = True
    errors: dict[str, list[str]] = field(default_factory=_errors_factory)
    default_binding_status_code: int | None = None

    @classmethod
    def create(
        cls,
        value: T | None,
        validation: ValidationResult | None = None,
        initial_errors: Sequence[str] | None = None,
        default_binding_status_code: int | None = None,
    ) -> Validated[T]:
        """Build an outcome from a bound value and its validation result.

        *initial_errors* are appended under the ``""`` key and always make
        the outcome invalid.
        """
        is_valid = True
        errors: dict[str, list[str]] = {}

        if value is not None and validation is not None:
            is_valid = validation.is_valid
            errors = {key: list(messages) for key, messages in validation.errors.items()}

        if initial_errors is not None:
            is_valid = False
            errors.setdefault(BINDING_ERROR_KEY, []).extend(initial_errors)

        return cls(value, is_valid, errors, default_binding_status_code)

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.is_valid

    def unpack(self) -> tuple[T | None, bool, dict[str, list[str]]]:
        """Return ``(value, is_valid, errors)``."""
        return self.value, self.is_valid, self.errors


class ValidatedBinder(Generic[T]):
    """Binds a request value through a default binder, then validates it.

    The binding strategy of *target_type* is resolved once here. Both
    collaborators are passed in explicitly; when omitted a
    :class:`JsonDefaultBinder` and a :class:`PydanticValidator` are used.
    *extra_validators* run after the validator and their errors are merged
    into the same outcome.

    Example:
        ```python
        binder = ValidatedBinder(CreateOrder)

        async def endpoint(request: Request) -> Response:
            order, is_valid = await binder.bind(request)
            ...
        ```
    """

    def __init__(
        self,
        target_type: type[T] | Any,
        *,
        default_binder: IDefaultBinder | None = None,
        validator: IValidator | None = None,
        extra_validators: Sequence[IValidator] = (),
        config: BindingConfig | None = None,
        optional: bool | None = None,
        name: str | None = None,
    ) -> None:
        self._config = config or BindingConfig()
        self._target: BindingTarget[T] = BindingTarget.resolve(
            target_type,
            optional=optional,
            name=name,
            default_optional=self._config.allow_absent_body,
        )
        self._default_binder = default_binder or JsonDefaultBinder(self._config)
        self._validator: IValidator = validator or PydanticValidator()
        if extra_validators:
            chain = CompositeValidator([self._validator])
            for extra in extra_validators:
                chain.add(extra)
            self._validator = chain

    @property
    def target(self) -> BindingTarget[T]:
        return self._target

    @property
    def config(self) -> BindingConfig:
        return self._config

    async def bind(self, request: Request) -> Validated[T]:
        """Bind and validate the target value from *request*.

        Never raises for bad client data: binding failures and validation
        failures are both reported through the returned :class:`Validated`.

        Raises:
            BinderContractError: If *request* is ``None``.
        """
        if request is None:
            raise BinderContractError("request is required")

        attempt = await self._default_binder.get_value(request, self._target)

        if not attempt.succeeded:
            logger.debug(
                "Default binding of %s failed with status %d",
                self._target.display_name,
                attempt.status_code,
            )
            return Validated.create(
                None,
                initial_errors=[self._config.binding_error_message],
                default_binding_status_code=attempt.status_code,
            )

        if attempt.value is None:
            return Validated.create(None)

        validation = await self._validator.validate(
            attempt.value, attempt.bound_input
        )
        if not validation.is_valid:
            logger.debug(
                "Validation of %s failed for %s",
                self._target.display_name,
                sorted(validation.errors),
            )
        return Validated.create(attempt.value, validation)

    def get_metadata(self) -> list[AcceptsRequestBody]:
        """Parameter metadata describing the accepted request body."""
        return [
            AcceptsRequestBody(
                self._target.target_type,
                (JSON_CONTENT_TYPE, *self._extra_media_types()),
                self._target.optional,
            )
        ]

    def _extra_media_types(self) -> tuple[str, ...]:
        return tuple(
            m for m in self._config.json_media_types if m != JSON_CONTENT_TYPE
        )
