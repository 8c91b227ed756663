"""FastAPI dependencies for validated request bodies.

Provides callables for ``Depends`` that bind and validate a request body
through a :class:`~minimal_apis_extensions.binding.validated.ValidatedBinder`.
"""

# No postponed annotations: FastAPI resolves the __call__ signatures at runtime.

from collections.abc import Sequence
from typing import Any, Optional

from starlette.requests import Request

from ...binding.validated import Validated, ValidatedBinder
from ...config import BindingConfig
from ...ports.binding import IDefaultBinder
from ...ports.validation import IValidator
from ...primitives.exceptions import RequestBindingError


class ValidatedBody:
    """Dependency producing a :class:`Validated` outcome for a body model.

    The binder is built once, when the dependency is created.

    Example:
        ```python
        from fastapi import APIRouter, Depends
        from minimal_apis_extensions import Validated
        from minimal_apis_extensions.contrib.fastapi import ValidatedBody

        router = APIRouter()
        order_body = ValidatedBody(CreateOrder)

        @router.post("/orders", openapi_extra=order_body.openapi_extra())
        async def create_order(
            order: Validated[CreateOrder] = Depends(order_body),
        ):
            if not order.is_valid:
                return to_response(order)
            ...
        ```
    """

    def __init__(
        self,
        model: Any,
        *,
        default_binder: Optional[IDefaultBinder] = None,
        validator: Optional[IValidator] = None,
        extra_validators: Sequence[IValidator] = (),
        config: Optional[BindingConfig] = None,
        optional: Optional[bool] = None,
    ) -> None:
        self.binder: ValidatedBinder[Any] = ValidatedBinder(
            model,
            default_binder=default_binder,
            validator=validator,
            extra_validators=extra_validators,
            config=config,
            optional=optional,
        )

    async def __call__(self, request: Request) -> Validated[Any]:
        return await self.binder.bind(request)

    def openapi_extra(self) -> dict[str, Any]:
        """``openapi_extra=`` fragment describing the request body."""
        return validated_openapi_extra(self.binder)


class RequireValid(ValidatedBody):
    """Dependency producing the bound value, or rejecting the request.

    Raises :class:`RequestBindingError` when binding or validation fails;
    register :func:`install_exception_handlers` to turn it into a response.
    """

    async def __call__(self, request: Request) -> Any:
        validated = await self.binder.bind(request)
        if not validated.is_valid:
            raise RequestBindingError(validated)
        return validated.value


def validated_body(model: Any, **options: Any) -> ValidatedBody:
    """Create a dependency that returns ``Validated[model]``."""
    return ValidatedBody(model, **options)


def require_valid(model: Any, **options: Any) -> RequireValid:
    """Create a dependency that returns a valid ``model`` or rejects the request."""
    return RequireValid(model, **options)


def validated_openapi_extra(binder: Any) -> dict[str, Any]:
    """Build an ``openapi_extra`` request-body fragment.

    Accepts a :class:`ValidatedBinder` or a :class:`ValidatedBody`.
    """
    if isinstance(binder, ValidatedBody):
        binder = binder.binder
    extra: dict[str, Any] = {}
    for fact in binder.get_metadata():
        extra.update(fact.to_openapi_extra())
    return extra


__all__: list[str] = [
    "RequireValid",
    "ValidatedBody",
    "require_valid",
    "validated_body",
    "validated_openapi_extra",
]
