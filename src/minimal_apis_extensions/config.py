"""Binding configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BINDING_ERROR_MESSAGE = "An error occurred while processing the request."


@dataclass(frozen=True)
class BindingConfig:
    """Configuration for request binding behavior.

    Attributes:
        json_media_types: Extra exact media types treated as JSON.
            ``application/json`` and ``application/*+json`` are always accepted.
        case_insensitive: Match JSON keys to model fields ignoring case.
        allow_absent_body: Treat a missing or ``null`` body as a legitimate
            absent value instead of a binding failure.
        binding_error_message: Message recorded under the ``""`` key when the
            default binder reports a failure.
    """

    json_media_types: tuple[str, ...] = ("application/json",)
    case_insensitive: bool = True
    allow_absent_body: bool = True
    binding_error_message: str = DEFAULT_BINDING_ERROR_MESSAGE
