"""End-to-end tests for the place-order workflow."""

from decimal import Decimal

import pytest
from builders import build_address, build_line, build_order, build_workflow
from kungfu import Error, Ok

from ordertaking import lift as L
from ordertaking import place_order as P
from ordertaking.domain import BillingAmount
from ordertaking.wire import with_remote_errors


def event_types(events):
    return [type(event) for event in events]


class TestPlaceOrder:
    @pytest.mark.asyncio
    async def test_happy_path(self, workflow, order):
        match await workflow(order):
            case Ok(events):
                assert event_types(events) == [
                    P.OrderAcknowledgmentSent,
                    P.ShippableOrderPlaced,
                    P.BillableOrderPlaced,
                ]
                assert events[0].email_address.value == "ada@example.com"
                assert len(events[1].shipment_lines) == 2
                assert events[2].amount_to_bill == BillingAmount(Decimal("27.5"))
            case Error(err):
                pytest.fail(f"unexpected error {err}")

    @pytest.mark.asyncio
    async def test_promotion_applied(self):
        workflow = build_workflow(promotions={"SPRING": {"W1234": Decimal(8)}})
        order = build_order(promotion_code="SPRING")
        match await workflow(order):
            case Ok(events):
                assert events[-1].amount_to_bill == BillingAmount(Decimal("23.5"))
                assert len(events[1].shipment_lines) == 2
            case Error(err):
                pytest.fail(f"unexpected error {err}")

    @pytest.mark.asyncio
    async def test_free_order_is_not_billed(self):
        workflow = build_workflow(prices={"W1234": Decimal(0), "G123": Decimal(0)})
        match await workflow(build_order()):
            case Ok(events):
                assert event_types(events) == [P.OrderAcknowledgmentSent, P.ShippableOrderPlaced]
            case Error(err):
                pytest.fail(f"unexpected error {err}")

    @pytest.mark.asyncio
    async def test_unsent_acknowledgment_is_skipped(self, order):
        workflow = build_workflow(send=lambda ack: P.SendResult.NOT_SENT)
        match await workflow(order):
            case Ok(events):
                assert event_types(events) == [P.ShippableOrderPlaced, P.BillableOrderPlaced]
            case Error(err):
                pytest.fail(f"unexpected error {err}")

    @pytest.mark.asyncio
    async def test_validation_error_stops_the_run(self):
        sent = []
        workflow = build_workflow(send=lambda ack: sent.append(ack) or P.SendResult.SENT)
        order = build_order(lines=(build_line("L1", "X999", 1),))
        result = await workflow(order)
        assert result == Error(P.ValidationError("ProductCode", "ProductCode: format not recognised 'X999'"))
        assert sent == []

    @pytest.mark.asyncio
    async def test_invalid_zip_code_stops_the_run(self):
        sent = []
        workflow = build_workflow(send=lambda ack: sent.append(ack) or P.SendResult.SENT)
        order = build_order(shipping_address=build_address(zip_code="1234"))
        result = await workflow(order)
        assert result == Error(
            P.ValidationError("ZipCode", r"ZipCode: '1234' must match the pattern '^\d{5}$'")
        )
        assert sent == []

    @pytest.mark.asyncio
    async def test_address_service_rejection(self, order):
        workflow = build_workflow(check_address=lambda address: L.fail(P.AddressNotFound()))
        assert await workflow(order) == Error(P.ValidationError("ShippingAddress", "Address not found"))

    @pytest.mark.asyncio
    async def test_pricing_error(self):
        order = build_order(lines=tuple(build_line(f"L{i}", "W1234", 100) for i in range(11)))
        result = await build_workflow()(order)
        assert result == Error(P.PricingError("BillingAmount", "BillingAmount must not be more than 10000"))

    @pytest.mark.asyncio
    async def test_workflow_is_reusable(self, workflow, order):
        first = await workflow(order)
        second = await workflow(order)
        assert first == second


class TestRemoteErrors:
    @pytest.mark.asyncio
    async def test_raising_collaborator_becomes_remote_service_error(self, order):
        boom = ConnectionError("address service down")

        def check_address(address):
            raise boom

        service = P.ServiceInfo(name="PlaceOrder", endpoint="/orders")
        guarded = with_remote_errors(build_workflow(check_address=check_address), service)
        assert await guarded(order) == Error(P.RemoteServiceError(service=service, exception=boom))

    @pytest.mark.asyncio
    async def test_expected_failures_pass_through(self):
        service = P.ServiceInfo(name="PlaceOrder", endpoint="/orders")
        guarded = with_remote_errors(build_workflow(), service)
        result = await guarded(build_order(order_id=""))
        assert result == Error(P.ValidationError("OrderId", "OrderId must not be null or empty"))

    @pytest.mark.asyncio
    async def test_success_passes_through(self, order):
        service = P.ServiceInfo(name="PlaceOrder", endpoint="/orders")
        result = await with_remote_errors(build_workflow(), service)(order)
        assert isinstance(result, Ok)
