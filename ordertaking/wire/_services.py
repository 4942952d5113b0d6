"""
Stand-alone collaborators — enough to run the HTTP service without any
real catalog, address service, price list or mailer behind it.

Every product exists, every address exists, prices come from
`Settings.pricing`, every acknowledgment is sent.
"""

from __future__ import annotations

import html

import structlog
from kungfu import LazyCoroResult, Nothing, Option, Some

from ordertaking import lift as L
from ordertaking.domain import Price, ProductCode
from ordertaking.place_order import (
    AddressValidationError,
    CheckedAddress,
    GetProductPrice,
    GetPromotionPrices,
    GetStandardPrices,
    HtmlString,
    OrderAcknowledgment,
    PlaceOrderWorkflow,
    PricedOrderWithShippingMethod,
    PromotionCode,
    SendResult,
    TryGetProductPrice,
    UnvalidatedAddress,
    get_pricing_function,
    place_order,
)
from ordertaking.settings import PricingConfig, Settings

logger = structlog.get_logger(__name__)


def check_product_exists(product_code: ProductCode) -> bool:
    return True


def check_address_exists(
    address: UnvalidatedAddress,
) -> LazyCoroResult[CheckedAddress, AddressValidationError]:
    return L.pure(CheckedAddress(address))


def standard_prices(pricing: PricingConfig) -> GetStandardPrices:
    def get_standard_prices() -> GetProductPrice:
        default_price = Price.unsafe_create(pricing.default_product_price)
        prices = {code: Price.unsafe_create(value) for code, value in pricing.product_prices.items()}

        def get_product_price(product_code: ProductCode) -> Price:
            return prices.get(product_code.value, default_price)

        return get_product_price

    return get_standard_prices


def promotion_prices(pricing: PricingConfig) -> GetPromotionPrices:
    def get_promotion_prices(promotion_code: PromotionCode) -> TryGetProductPrice:
        prices = pricing.promotions.get(promotion_code.value, {})

        def try_get_product_price(product_code: ProductCode) -> Option[Price]:
            price = prices.get(product_code.value)
            if price is None:
                return Nothing()
            return Some(Price.unsafe_create(price))

        return try_get_product_price

    return get_promotion_prices


def create_order_acknowledgment_letter(order: PricedOrderWithShippingMethod) -> HtmlString:
    priced_order = order.priced_order
    name = priced_order.customer_info.name
    return HtmlString(
        f"<p>Dear {html.escape(name.first_name.value)} {html.escape(name.last_name.value)},</p>"
        f"<p>Order {html.escape(priced_order.order_id.value)} has been placed. "
        f"Amount to bill: {priced_order.amount_to_bill.value}. "
        f"Shipping: {order.shipping_info.shipping_method.value} "
        f"({order.shipping_info.shipping_cost.value}).</p>"
    )


def send_order_acknowledgment(acknowledgment: OrderAcknowledgment) -> SendResult:
    logger.info("acknowledgment sent", to=acknowledgment.email_address.value)
    return SendResult.SENT


def default_workflow(settings: Settings | None = None) -> PlaceOrderWorkflow:
    """The place-order workflow wired to the stand-alone collaborators."""
    pricing = (settings or Settings()).pricing
    return place_order(
        check_product_code_exists=check_product_exists,
        check_address_exists=check_address_exists,
        get_pricing_function=get_pricing_function(
            standard_prices(pricing),
            promotion_prices(pricing),
        ),
        create_order_acknowledgment_letter=create_order_acknowledgment_letter,
        send_order_acknowledgment=send_order_acknowledgment,
    )


__all__ = (
    "check_product_exists",
    "check_address_exists",
    "standard_prices",
    "promotion_prices",
    "create_order_acknowledgment_letter",
    "send_order_acknowledgment",
    "default_workflow",
)
