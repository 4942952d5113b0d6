"""Tests for the validation stage."""

from decimal import Decimal

import pytest
from builders import accept_address, build_address, build_customer, build_line, build_order
from kungfu import Error, Nothing, Ok, Some

from ordertaking import lift as L
from ordertaking import place_order as P
from ordertaking.domain import (
    GizmoCode,
    KilogramQuantity,
    String50,
    UnitQuantity,
    VipStatus,
    WidgetCode,
)


def always(exists: bool):
    return lambda code: exists


class TestFieldValidation:
    def test_customer_info(self):
        match P.to_customer_info(build_customer(vip_status="vip")):
            case Ok(info):
                assert info.name.first_name == String50("Ada")
                assert info.email_address.value == "ada@example.com"
                assert info.vip_status is VipStatus.VIP
            case Error(err):
                pytest.fail(f"unexpected error {err}")

    def test_customer_info_stops_at_first_bad_field(self):
        result = P.to_customer_info(build_customer(first_name="", email_address="nope"))
        assert result == Error(P.ValidationError("FirstName", "FirstName must not be null or empty"))

    def test_address_optional_lines(self):
        checked = P.CheckedAddress(build_address(address_line2="Flat 2"))
        match P.to_address(checked):
            case Ok(address):
                assert address.address_line2 == Some(String50("Flat 2"))
                assert address.address_line3 is Nothing()
            case Error(err):
                pytest.fail(f"unexpected error {err}")

    def test_address_bad_zip(self):
        result = P.to_address(P.CheckedAddress(build_address(zip_code="1234")))
        assert result == Error(
            P.ValidationError("ZipCode", r"ZipCode: '1234' must match the pattern '^\d{5}$'")
        )

    def test_product_code_must_exist(self):
        assert P.to_product_code(always(True), "W1234") == Ok(WidgetCode("W1234"))
        assert P.to_product_code(always(False), "W1234") == Error(
            P.ValidationError("ProductCode", "Invalid: W1234")
        )

    def test_malformed_product_code_is_not_looked_up(self):
        looked_up = []

        def check(code):
            looked_up.append(code)
            return True

        result = P.to_product_code(check, "X1")
        assert result == Error(P.ValidationError("ProductCode", "ProductCode: format not recognised 'X1'"))
        assert looked_up == []

    def test_order_line(self):
        result = P.to_validated_order_line(always(True), build_line("L1", "G123", "2.5"))
        assert result == Ok(
            P.ValidatedOrderLine(
                order_line_id=P.to_order_line_id("L1").unwrap(),
                product_code=GizmoCode("G123"),
                quantity=KilogramQuantity(Decimal("2.5")),
            )
        )

    def test_order_line_quantity_follows_product(self):
        result = P.to_validated_order_line(always(True), build_line("L1", "W1234", "2.5"))
        assert result == Error(P.ValidationError("OrderQuantity", "OrderQuantity must be an integer"))


class TestPricingMethod:
    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_blank_is_standard(self, raw):
        assert P.create_pricing_method(raw) == P.Standard()

    def test_code_is_promotion(self):
        assert P.create_pricing_method("SPRING") == P.PromotionCode("SPRING")


class TestValidateOrder:
    @pytest.mark.asyncio
    async def test_valid_order(self, order):
        match await P.validate_order(always(True), accept_address, order):
            case Ok(validated):
                assert validated.order_id.value == "ORD-001"
                assert [line.quantity for line in validated.lines] == [
                    UnitQuantity(2),
                    KilogramQuantity(Decimal("1.5")),
                ]
                assert validated.pricing_method == P.Standard()
            case Error(err):
                pytest.fail(f"unexpected error {err}")

    @pytest.mark.asyncio
    async def test_order_id_checked_first(self):
        order = build_order(order_id="", customer_info=build_customer(first_name=""))
        result = await P.validate_order(always(True), accept_address, order)
        assert result == Error(P.ValidationError("OrderId", "OrderId must not be null or empty"))

    @pytest.mark.asyncio
    async def test_address_not_found(self, order):
        result = await P.validate_order(always(True), lambda address: L.fail(P.AddressNotFound()), order)
        assert result == Error(P.ValidationError("ShippingAddress", "Address not found"))

    @pytest.mark.asyncio
    async def test_billing_address_bad_format(self):
        bad = build_address(city="Nowhere")
        order = build_order(billing_address=bad)

        def check(address):
            if address == bad:
                return L.fail(P.InvalidFormat())
            return accept_address(address)

        result = await P.validate_order(always(True), check, order)
        assert result == Error(P.ValidationError("BillingAddress", "Address has bad format"))

    @pytest.mark.asyncio
    async def test_shipping_error_wins_when_both_fail(self, order):
        result = await P.validate_order(always(True), lambda address: L.fail(P.InvalidFormat()), order)
        assert result == Error(P.ValidationError("ShippingAddress", "Address has bad format"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("rejection", "message"),
        [
            (P.AddressNotFound(), "Address not found"),
            (P.InvalidFormat(), "Address has bad format"),
        ],
    )
    async def test_address_rejection_has_fixed_message(self, rejection, message):
        result = await P.to_checked_address(lambda address: L.fail(rejection), "BillingAddress", build_address())
        assert result == Error(P.ValidationError("BillingAddress", message))

    @pytest.mark.asyncio
    async def test_address_rejection_reported_before_bad_shipping_field(self):
        bad_zip = build_address(zip_code="1234")
        order = build_order(shipping_address=bad_zip, billing_address=build_address(city="Atlantis"))

        def check(address):
            if address == bad_zip:
                return accept_address(address)
            return L.fail(P.AddressNotFound())

        result = await P.validate_order(always(True), check, order)
        assert result == Error(P.ValidationError("BillingAddress", "Address not found"))

    @pytest.mark.asyncio
    async def test_first_bad_line_stops_validation(self):
        checked = []

        def exists(code):
            checked.append(code.value)
            return True

        order = build_order(
            lines=(
                build_line("L1", "W1234", 1),
                build_line("", "W1234", 1),
                build_line("L3", "G123", 1),
            )
        )
        result = await P.validate_order(exists, accept_address, order)
        assert result == Error(P.ValidationError("OrderLineId", "OrderLineId must not be null or empty"))
        assert checked == ["W1234"]

    @pytest.mark.asyncio
    async def test_nothing_runs_until_awaited(self, order):
        calls = []

        def check(address):
            calls.append(address)
            return accept_address(address)

        computation = P.validate_order(always(True), check, order)
        assert calls == []
        await computation
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_promotion_code_is_carried(self):
        match await P.validate_order(always(True), accept_address, build_order(promotion_code="SPRING")):
            case Ok(validated):
                assert validated.pricing_method == P.PromotionCode("SPRING")
            case Error(err):
                pytest.fail(f"unexpected error {err}")
