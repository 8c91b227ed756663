"""Endpoint metadata facts consumed by OpenAPI tooling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import TypeAdapter


@dataclass(frozen=True)
class ProducesResponseType:
    """An endpoint may produce *status_code* with a body of *payload_type*."""

    payload_type: Any
    status_code: int = 200
    content_type: str = "application/json"

    def to_openapi(self) -> dict[int | str, dict[str, Any]]:
        """Fragment for FastAPI's ``responses=`` route argument."""
        return {
            self.status_code: {
                "model": self.payload_type,
                "content": {self.content_type: {}},
            }
        }


@dataclass(frozen=True)
class AcceptsRequestBody:
    """An endpoint accepts a body of *payload_type* in one of *content_types*."""

    payload_type: Any
    content_types: tuple[str, ...] = ("application/json",)
    optional: bool = True

    def json_schema(self) -> dict[str, Any]:
        return TypeAdapter(self.payload_type).json_schema()

    def to_openapi_extra(self) -> dict[str, Any]:
        """Fragment for FastAPI's ``openapi_extra=`` route argument."""
        schema = self.json_schema()
        return {
            "requestBody": {
                "required": not self.optional,
                "content": {
                    content_type: {"schema": schema}
                    for content_type in self.content_types
                },
            }
        }
