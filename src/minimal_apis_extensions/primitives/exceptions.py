"""Exceptions for minimal-apis-extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..binding.validated import Validated


class MinimalApisError(Exception):
    """Root exception for the extensions library."""


class BinderContractError(MinimalApisError, ValueError):
    """Raised when the hosting pipeline calls a binder with missing arguments.

    This signals a programming error in the caller, never bad client data,
    so it is raised immediately instead of being encoded in the outcome.
    """


class BindingError(MinimalApisError):
    """Raised by custom bind routines to report a failed binding.

    The default binder converts it into a non-200
    :class:`~minimal_apis_extensions.ports.binding.BindingAttempt`.
    """

    def __init__(self, message: str = "", *, status_code: int = 400) -> None:
        self.status_code = status_code
        super().__init__(message or f"Binding failed with status {status_code}")


class RequestBindingError(MinimalApisError):
    """Raised when a required validated parameter could not be produced.

    Carries the :class:`~minimal_apis_extensions.binding.validated.Validated`
    outcome so an exception handler can render the right response.
    """

    def __init__(self, validated: Validated[Any]) -> None:
        self.validated = validated
        super().__init__(str(validated.errors))

    @property
    def status_code(self) -> int:
        return self.validated.default_binding_status_code or 400
