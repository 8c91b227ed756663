"""Translate binding outcomes into HTTP responses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from ...binding.validated import BINDING_ERROR_KEY
from ...primitives.exceptions import RequestBindingError
from ...results.problem import Problem, ValidationProblem

if TYPE_CHECKING:
    from fastapi import FastAPI
    from starlette.requests import Request
    from starlette.responses import Response

    from ...binding.validated import Validated

logger = logging.getLogger("minimal_apis.fastapi")


def to_response(validated: Validated[Any]) -> Response | None:
    """Return the error response for an outcome, or ``None`` if it is valid.

    A default-binding status code is answered with a problem using that
    status. Validation failures are answered with a 400 validation problem.
    """
    status_code = validated.default_binding_status_code
    if status_code is not None:
        messages = validated.errors.get(BINDING_ERROR_KEY) or [None]
        return Problem(status_code, detail=messages[0])
    if not validated.is_valid:
        return ValidationProblem(validated.errors)
    return None


async def request_binding_error_handler(
    request: Request, exc: Exception
) -> Response:
    """Exception handler for :class:`RequestBindingError`."""
    binding_error = cast("RequestBindingError", exc)
    logger.debug(
        "Rejected %s %s with status %d",
        request.method,
        request.url.path,
        binding_error.status_code,
    )
    validated = binding_error.validated
    return to_response(validated) or ValidationProblem(validated.errors)


def install_exception_handlers(app: FastAPI) -> None:
    """Register the handlers that render binding failures.

    Example:
        ```python
        app = FastAPI()
        install_exception_handlers(app)
        ```
    """
    app.add_exception_handler(RequestBindingError, request_binding_error_handler)


__all__: list[str] = [
    "install_exception_handlers",
    "request_binding_error_handler",
    "to_response",
]
