from .exceptions import (
    BinderContractError,
    BindingError,
    MinimalApisError,
    RequestBindingError,
)

__all__ = [
    "BinderContractError",
    "BindingError",
    "MinimalApisError",
    "RequestBindingError",
]
