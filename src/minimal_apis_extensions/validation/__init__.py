"""Validation system: ValidationResult, CompositeValidator, PydanticValidator."""

from __future__ import annotations

from .composite import CompositeValidator
from .pydantic import ROOT_ERROR_KEY, PydanticValidator
from .result import ValidationResult

__all__ = [
    "ROOT_ERROR_KEY",
    "CompositeValidator",
    "PydanticValidator",
    "ValidationResult",
]
