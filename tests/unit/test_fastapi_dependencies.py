"""Tests for FastAPI dependencies and handlers (optional; requires fastapi)."""

from __future__ import annotations

import json
from typing import Any

import pytest

fastapi = pytest.importorskip("fastapi")

from fastapi import FastAPI
from pydantic import BaseModel, Field

from minimal_apis_extensions.binding.validated import Validated
from minimal_apis_extensions.contrib.fastapi.dependencies import (
    RequireValid,
    ValidatedBody,
    require_valid,
    validated_body,
    validated_openapi_extra,
)
from minimal_apis_extensions.contrib.fastapi.handlers import (
    install_exception_handlers,
    request_binding_error_handler,
    to_response,
)
from minimal_apis_extensions.primitives.exceptions import RequestBindingError
from minimal_apis_extensions.results.problem import Problem, ValidationProblem


class Widget(BaseModel):
    name: str = Field(..., min_length=1)


class TestValidatedBody:
    @pytest.mark.asyncio
    async def test_returns_outcome(self, make_request: Any) -> None:
        dependency = validated_body(Widget)

        outcome = await dependency(make_request('{"name": ""}'))

        assert isinstance(dependency, ValidatedBody)
        assert isinstance(outcome, Validated)
        assert not outcome.is_valid
        assert "name" in outcome.errors

    def test_openapi_extra_uses_binder_metadata(self) -> None:
        dependency = validated_body(Widget, optional=False)

        extra = dependency.openapi_extra()

        assert extra == validated_openapi_extra(dependency.binder)
        assert extra["requestBody"]["required"] is True


class TestRequireValid:
    @pytest.mark.asyncio
    async def test_returns_value_when_valid(self, make_request: Any) -> None:
        dependency = require_valid(Widget)

        value = await dependency(make_request('{"name": "bolt"}'))

        assert isinstance(dependency, RequireValid)
        assert value == Widget(name="bolt")

    @pytest.mark.asyncio
    async def test_raises_when_invalid(self, make_request: Any) -> None:
        with pytest.raises(RequestBindingError) as exc_info:
            await require_valid(Widget)(make_request("{}"))

        assert exc_info.value.status_code == 400
        assert "name" in exc_info.value.validated.errors

    @pytest.mark.asyncio
    async def test_absent_body_is_valid_and_none(self, make_request: Any) -> None:
        assert await require_valid(Widget)(make_request("null")) is None


class TestToResponse:
    def test_valid_outcome_has_no_response(self) -> None:
        assert to_response(Validated(value=Widget(name="x"))) is None

    def test_binding_failure_uses_its_status(self) -> None:
        outcome = Validated.create(
            None,
            initial_errors=["An error occurred while processing the request."],
            default_binding_status_code=415,
        )

        response = to_response(outcome)

        assert isinstance(response, Problem)
        assert response.status_code == 415
        assert json.loads(response.body)["detail"] == (
            "An error occurred while processing the request."
        )

    def test_validation_failure_is_validation_problem(self) -> None:
        outcome = Validated(
            value=Widget.model_construct(),
            is_valid=False,
            errors={"name": ["Field required"]},
        )

        response = to_response(outcome)

        assert isinstance(response, ValidationProblem)
        assert response.status_code == 400
        assert json.loads(response.body)["errors"] == {"name": ["Field required"]}


class TestExceptionHandlers:
    def test_install_registers_handler(self) -> None:
        app = FastAPI()

        install_exception_handlers(app)

        assert app.exception_handlers[RequestBindingError] is request_binding_error_handler

    @pytest.mark.asyncio
    async def test_handler_renders_outcome(self, make_request: Any) -> None:
        outcome = Validated(value=None, is_valid=False, errors={"name": ["bad"]})

        response = await request_binding_error_handler(
            make_request(None), RequestBindingError(outcome)
        )

        assert response.status_code == 400
