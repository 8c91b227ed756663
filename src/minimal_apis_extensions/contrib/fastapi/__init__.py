"""FastAPI integration for minimal-apis-extensions."""

from .dependencies import (
    RequireValid,
    ValidatedBody,
    require_valid,
    validated_body,
    validated_openapi_extra,
)
from .handlers import (
    install_exception_handlers,
    request_binding_error_handler,
    to_response,
)

__all__: list[str] = [
    # Dependencies
    "RequireValid",
    "ValidatedBody",
    "require_valid",
    "validated_body",
    "validated_openapi_extra",
    # Responses
    "install_exception_handlers",
    "request_binding_error_handler",
    "to_response",
]
