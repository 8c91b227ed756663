"""Request binding: Validated, ValidatedBinder and the JSON default binder."""

from __future__ import annotations

from .default_binder import JsonDefaultBinder
from .media_types import JSON_CONTENT_TYPE, is_json_media_type, parse_media_type
from .target import BindingSource, BindingTarget
from .validated import BINDING_ERROR_KEY, Validated, ValidatedBinder

__all__ = [
    "BINDING_ERROR_KEY",
    "JSON_CONTENT_TYPE",
    "BindingSource",
    "BindingTarget",
    "JsonDefaultBinder",
    "Validated",
    "ValidatedBinder",
    "is_json_media_type",
    "parse_media_type",
]
