from .binding import HTTP_200_OK, BindingAttempt, IDefaultBinder, SupportsBindAsync
from .validation import BoundInput, IValidator

__all__ = [
    "HTTP_200_OK",
    "BindingAttempt",
    "BoundInput",
    "IDefaultBinder",
    "IValidator",
    "SupportsBindAsync",
]
