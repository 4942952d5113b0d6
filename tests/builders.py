"""Builders for unvalidated orders, collaborators and domain records."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

from kungfu import Nothing, Some

from ordertaking import lift as L
from ordertaking import place_order as P
from ordertaking.domain import (
    Address,
    BillingAmount,
    CustomerInfo,
    EmailAddress,
    OrderId,
    PersonalName,
    Price,
    ProductCode,
    String50,
    UsStateCode,
    VipStatus,
    ZipCode,
)

STANDARD_PRICES = {"W1234": Decimal("10.00"), "G123": Decimal("5")}

# JSON order form as a client would post it
ORDER_FORM: dict[str, Any] = {
    "orderId": "ORD-001",
    "customerInfo": {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "emailAddress": "ada@example.com",
        "vipStatus": "VIP",
    },
    "shippingAddress": {
        "addressLine1": "1 Main Street",
        "city": "Portland",
        "zipCode": "97201",
        "state": "OR",
        "country": "US",
    },
    "billingAddress": {
        "addressLine1": "1 Main Street",
        "addressLine2": "Flat 2",
        "city": "Portland",
        "zipCode": "97201",
        "state": "OR",
        "country": "US",
    },
    "lines": [{"orderLineId": "L1", "productCode": "W1234", "quantity": 2}],
    "promotionCode": "SPRING",
}


def build_address(**overrides: Any) -> P.UnvalidatedAddress:
    fields: dict[str, Any] = {
        "address_line1": "1 Main Street",
        "address_line2": "",
        "address_line3": "",
        "address_line4": "",
        "city": "Portland",
        "zip_code": "97201",
        "state": "OR",
        "country": "US",
    }
    fields.update(overrides)
    return P.UnvalidatedAddress(**fields)


def build_customer(**overrides: Any) -> P.UnvalidatedCustomerInfo:
    fields: dict[str, Any] = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email_address": "ada@example.com",
        "vip_status": "Normal",
    }
    fields.update(overrides)
    return P.UnvalidatedCustomerInfo(**fields)


def build_line(order_line_id: str, product_code: str, quantity: Any) -> P.UnvalidatedOrderLine:
    return P.UnvalidatedOrderLine(
        order_line_id=order_line_id,
        product_code=product_code,
        quantity=Decimal(quantity),
    )


def build_order(**overrides: Any) -> P.UnvalidatedOrder:
    fields: dict[str, Any] = {
        "order_id": "ORD-001",
        "customer_info": build_customer(),
        "shipping_address": build_address(),
        "billing_address": build_address(),
        "lines": (
            build_line("L1", "W1234", 2),
            build_line("L2", "G123", "1.5"),
        ),
        "promotion_code": "",
    }
    fields.update(overrides)
    return P.UnvalidatedOrder(**fields)


def standard_prices(prices: dict[str, Decimal] | None = None) -> P.GetStandardPrices:
    table = STANDARD_PRICES if prices is None else prices

    def get_standard_prices() -> P.GetProductPrice:
        def get_price(code: ProductCode) -> Price:
            return Price.unsafe_create(table.get(code.value, Decimal(1)))

        return get_price

    return get_standard_prices


def promotion_prices(promotions: dict[str, dict[str, Decimal]] | None = None) -> P.GetPromotionPrices:
    table = promotions or {}

    def get_promotion_prices(promotion_code: P.PromotionCode) -> P.TryGetProductPrice:
        prices = table.get(promotion_code.value, {})

        def try_get_price(code: ProductCode):
            if code.value in prices:
                return Some(Price.unsafe_create(prices[code.value]))
            return Nothing()

        return try_get_price

    return get_promotion_prices


def accept_address(address: P.UnvalidatedAddress):
    return L.pure(P.CheckedAddress(address))


def build_workflow(
    *,
    product_exists: Callable[[ProductCode], bool] = lambda code: True,
    check_address: P.CheckAddressExists = accept_address,
    prices: dict[str, Decimal] | None = None,
    promotions: dict[str, dict[str, Decimal]] | None = None,
    send: Callable[[P.OrderAcknowledgment], P.SendResult] = lambda ack: P.SendResult.SENT,
) -> P.PlaceOrderWorkflow:
    return P.place_order(
        check_product_code_exists=product_exists,
        check_address_exists=check_address,
        get_pricing_function=P.get_pricing_function(
            standard_prices(prices),
            promotion_prices(promotions),
        ),
        create_order_acknowledgment_letter=lambda order: P.HtmlString("some text"),
        send_order_acknowledgment=send,
    )


def build_domain_address(*, state: str = "OR", country: str = "US") -> Address:
    return Address(
        address_line1=String50.create("AddressLine1", "1 Main Street").unwrap(),
        address_line2=Nothing(),
        address_line3=Nothing(),
        address_line4=Nothing(),
        city=String50.create("City", "Portland").unwrap(),
        zip_code=ZipCode.create("ZipCode", "97201").unwrap(),
        state=UsStateCode.create("State", state).unwrap(),
        country=String50.create("Country", country).unwrap(),
    )


def build_priced_order(
    *,
    state: str = "OR",
    country: str = "US",
    vip_status: VipStatus = VipStatus.NORMAL,
    amount_to_bill: Decimal = Decimal("20.00"),
    lines: tuple[P.PricedOrderLine, ...] = (),
) -> P.PricedOrder:
    address = build_domain_address(state=state, country=country)
    return P.PricedOrder(
        order_id=OrderId.create("OrderId", "ORD-001").unwrap(),
        customer_info=CustomerInfo(
            name=PersonalName(
                first_name=String50.create("FirstName", "Ada").unwrap(),
                last_name=String50.create("LastName", "Lovelace").unwrap(),
            ),
            email_address=EmailAddress.create("EmailAddress", "ada@example.com").unwrap(),
            vip_status=vip_status,
        ),
        shipping_address=address,
        billing_address=address,
        amount_to_bill=BillingAmount.create(amount_to_bill).unwrap(),
        lines=lines,
        pricing_method=P.Standard(),
    )
