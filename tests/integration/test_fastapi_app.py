"""End-to-end tests through a FastAPI application (requires fastapi, httpx)."""

import pytest

fastapi = pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from minimal_apis_extensions.binding.validated import Validated
from minimal_apis_extensions.contrib.fastapi import (
    install_exception_handlers,
    require_valid,
    to_response,
    validated_body,
)
from minimal_apis_extensions.results.ok import Ok


class Order(BaseModel):
    sku: str = Field(..., min_length=1)
    quantity: int = Field(1, gt=0)


order_body = validated_body(Order)
valid_order = require_valid(Order, optional=False)

app = FastAPI()
install_exception_handlers(app)


@app.post(
    "/orders",
    responses=Ok[Order].responses(),
    openapi_extra=valid_order.openapi_extra(),
)
async def create_order(order: Order = Depends(valid_order)):
    return Ok[Order](order)


@app.post("/orders/preview", openapi_extra=order_body.openapi_extra())
async def preview_order(order: Validated[Order] = Depends(order_body)):
    rejected = to_response(order)
    if rejected is not None:
        return rejected
    if order.value is None:
        return {"order": None}
    return Ok[Order](order.value)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_valid_order_is_created(client: TestClient) -> None:
    response = client.post("/orders", json={"SKU": "abc-1", "quantity": 2})

    assert response.status_code == 200
    assert response.json() == {"sku": "abc-1", "quantity": 2}


def test_invalid_order_is_a_validation_problem(client: TestClient) -> None:
    response = client.post("/orders", json={"quantity": 0})

    assert response.status_code == 400
    assert response.headers["content-type"] == "application/problem+json"
    body = response.json()
    assert set(body["errors"]) == {"sku", "quantity"}


def test_non_json_order_is_unsupported_media_type(client: TestClient) -> None:
    response = client.post(
        "/orders", content="some text", headers={"content-type": "text/plain"}
    )

    assert response.status_code == 415
    assert response.json()["detail"] == "An error occurred while processing the request."


def test_malformed_json_is_bad_request(client: TestClient) -> None:
    response = client.post(
        "/orders", content="{", headers={"content-type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["status"] == 400


def test_preview_accepts_null_body(client: TestClient) -> None:
    response = client.post(
        "/orders/preview", content="null", headers={"content-type": "application/json"}
    )

    assert response.status_code == 200
    assert response.json() == {"order": None}


def test_preview_returns_validated_order(client: TestClient) -> None:
    response = client.post("/orders/preview", json={"sku": "x"})

    assert response.status_code == 200
    assert response.json() == {"sku": "x", "quantity": 1}


def test_openapi_documents_body_and_response(client: TestClient) -> None:
    schema = client.get("/openapi.json").json()
    operation = schema["paths"]["/orders"]["post"]

    request_body = operation["requestBody"]
    assert request_body["required"] is True
    assert "sku" in request_body["content"]["application/json"]["schema"]["properties"]
    assert "200" in operation["responses"]
