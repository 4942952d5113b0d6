"""Tests for the HTTP API, framework-free and on FastAPI."""

import json

import pytest
from builders import ORDER_FORM, build_workflow
from fastapi.testclient import TestClient

from ordertaking import lift as L
from ordertaking import place_order as P
from ordertaking.settings import load_settings
from ordertaking.wire import (
    HTTPRouteTrigger,
    HttpRequest,
    HttpResponse,
    RequestResponseCodec,
    application,
    endpoint,
    place_order_api,
)
from ordertaking.wire.contrib import fastapi
from ordertaking.wire.dto import OrderFormDto


def post(body) -> HttpRequest:
    return HttpRequest(action="POST", uri="/orders", body=body if isinstance(body, str) else json.dumps(body))


class TestPlaceOrderApi:
    @pytest.mark.asyncio
    async def test_success(self):
        response = await place_order_api(build_workflow())(post(ORDER_FORM))
        assert response.http_status_code == 200
        events = json.loads(response.body)
        assert [list(event) for event in events] == [
            ["orderAcknowledgmentSent"],
            ["shippableOrderPlaced"],
            ["billableOrderPlaced"],
        ]
        assert events[2]["billableOrderPlaced"]["amountToBill"] == "20.00"

    @pytest.mark.asyncio
    async def test_validation_error(self):
        body = {**ORDER_FORM, "customerInfo": {**ORDER_FORM["customerInfo"], "emailAddress": "nope"}}
        response = await place_order_api(build_workflow())(post(body))
        assert response.http_status_code == 401
        assert json.loads(response.body) == {
            "code": "ValidationError",
            "message": "EmailAddress: 'nope' must match the pattern '.+@.+'",
        }

    @pytest.mark.asyncio
    async def test_address_rejected(self):
        workflow = build_workflow(check_address=lambda address: L.fail(P.InvalidFormat()))
        response = await place_order_api(workflow)(post(ORDER_FORM))
        assert response.http_status_code == 401
        assert json.loads(response.body) == {"code": "ValidationError", "message": "Address has bad format"}

    @pytest.mark.asyncio
    async def test_remote_service_error(self):
        def check_address(address):
            raise TimeoutError("address service timed out")

        response = await place_order_api(build_workflow(check_address=check_address))(post(ORDER_FORM))
        assert response.http_status_code == 401
        assert json.loads(response.body) == {
            "code": "RemoteServiceError",
            "message": "PlaceOrder: address service timed out",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["not json", "{}", json.dumps({"orderId": "ORD-001"})])
    async def test_malformed_body(self, body):
        calls = []

        def check_address(address):
            calls.append(address)
            return L.pure(P.CheckedAddress(address))

        response = await place_order_api(build_workflow(check_address=check_address))(post(body))
        assert response.http_status_code == 400
        assert json.loads(response.body)["code"] == "BadRequest"
        assert calls == []


class TestFastApi:
    def test_create_app_serves_orders(self):
        settings = load_settings({"pricing": {"product_prices": {"W1234": "12.50"}}})
        client = TestClient(fastapi.create_app(settings))
        response = client.post("/orders", json=ORDER_FORM)
        assert response.status_code == 200
        billing = response.json()[2]["billableOrderPlaced"]
        assert billing["amountToBill"] == "25.00"

    def test_create_app_uses_configured_route(self):
        settings = load_settings({"http": {"route_path": "/api/place-order"}})
        client = TestClient(fastapi.create_app(settings))
        assert client.post("/api/place-order", json=ORDER_FORM).status_code == 200
        assert client.post("/orders", json=ORDER_FORM).status_code == 404

    def test_workflow_error_is_401(self):
        client = TestClient(fastapi.create_app(load_settings()))
        body = {**ORDER_FORM, "lines": [{"orderLineId": "L1", "productCode": "W1234", "quantity": 5000}]}
        response = client.post("/orders", json=body)
        assert response.status_code == 401
        assert response.json() == {
            "code": "ValidationError",
            "message": "OrderQuantity must not be more than 1000",
        }

    @pytest.mark.parametrize("body", [{"orderId": "x"}, {**ORDER_FORM, "lines": "none"}])
    def test_malformed_body_is_400(self, body):
        client = TestClient(fastapi.create_app(load_settings()))
        response = client.post("/orders", json=body)
        assert response.status_code == 400
        assert response.json()["code"] == "BadRequest"

    def test_from_application(self):
        endp = endpoint(build_workflow()).expose(
            HTTPRouteTrigger("POST", "/v2/orders"),
            RequestResponseCodec(request=OrderFormDto, response=HttpResponse),
        )
        client = TestClient(fastapi.from_application(application().mount(endp)))
        response = client.post("/v2/orders", json=ORDER_FORM)
        assert response.status_code == 200
        assert len(response.json()) == 3
