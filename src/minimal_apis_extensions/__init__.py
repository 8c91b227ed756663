"""minimal-apis-extensions — validated request binding and typed results.

Host framework integration lives in :mod:`minimal_apis_extensions.contrib`.
"""

from __future__ import annotations

# ── Binding ──────────────────────────────────────────────────────
from .binding import (
    BINDING_ERROR_KEY,
    BindingSource,
    BindingTarget,
    JsonDefaultBinder,
    Validated,
    ValidatedBinder,
    is_json_media_type,
)
from .config import BindingConfig

# ── Metadata ─────────────────────────────────────────────────────
from .metadata import AcceptsRequestBody, ProducesResponseType

# ── Ports ────────────────────────────────────────────────────────
from .ports import (
    BindingAttempt,
    BoundInput,
    IDefaultBinder,
    IValidator,
    SupportsBindAsync,
)

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    BinderContractError,
    BindingError,
    MinimalApisError,
    RequestBindingError,
)

# ── Results ──────────────────────────────────────────────────────
from .results import Ok, Problem, ValidationProblem

# ── Validation ───────────────────────────────────────────────────
from .validation import CompositeValidator, PydanticValidator, ValidationResult

__all__ = [
    # Binding
    "BINDING_ERROR_KEY",
    "BindingSource",
    "BindingTarget",
    "JsonDefaultBinder",
    "Validated",
    "ValidatedBinder",
    "is_json_media_type",
    "BindingConfig",
    # Metadata
    "AcceptsRequestBody",
    "ProducesResponseType",
    # Ports
    "BindingAttempt",
    "BoundInput",
    "IDefaultBinder",
    "IValidator",
    "SupportsBindAsync",
    # Primitives
    "BinderContractError",
    "BindingError",
    "MinimalApisError",
    "RequestBindingError",
    # Results
    "Ok",
    "Problem",
    "ValidationProblem",
    # Validation
    "CompositeValidator",
    "PydanticValidator",
    "ValidationResult",
]
