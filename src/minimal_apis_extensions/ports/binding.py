"""Binding ports — the default-binder collaborator and the custom-bind capability."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Protocol, runtime_checkable

from typing_extensions import TypeVar

if TYPE_CHECKING:
    from starlette.requests import Request

    from ..binding.target import BindingTarget
    from .validation import BoundInput

T = TypeVar("T", default=Any)

HTTP_200_OK = 200


@dataclass(frozen=True)
class BindingAttempt(Generic[T]):
    """Value produced by a default binder plus the status code of the attempt.

    ``status_code`` is 200 when binding succeeded, including the case where
    the value is legitimately absent. ``bound_input`` is the raw request data
    behind a structured value, for validators to check.
    """

    value: T | None
    status_code: int = HTTP_200_OK
    bound_input: BoundInput | None = None

    @property
    def succeeded(self) -> bool:
        return self.status_code == HTTP_200_OK


@runtime_checkable
class IDefaultBinder(Protocol):
    """Protocol for the routine that deserializes a request into a value."""

    async def get_value(
        self, request: Request, target: BindingTarget[Any]
    ) -> BindingAttempt[Any]:
        """Bind *target* from *request*.

        Must return 200 on success, 400 for malformed or empty bodies and
        415 for unrecognized content types. Must never raise for bad client
        data.
        """
        ...


@runtime_checkable
class SupportsBindAsync(Protocol):
    """Capability of a type that binds itself from a request.

    Implement it as a classmethod::

        class Order(BaseModel):
            @classmethod
            async def bind_async(cls, request, target):
                return cls.model_validate(await request.json())

    Raising :class:`~minimal_apis_extensions.primitives.exceptions.BindingError`
    reports a failed binding with its status code.
    """

    async def bind_async(self, request: Request, target: BindingTarget[Any]) -> Any:
        ...
