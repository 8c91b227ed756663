"""Endpoint metadata: ProducesResponseType, AcceptsRequestBody."""

from __future__ import annotations

from .types import AcceptsRequestBody, ProducesResponseType

__all__ = ["AcceptsRequestBody", "ProducesResponseType"]
