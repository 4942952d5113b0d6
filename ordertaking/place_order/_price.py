"""Pricing stage — ValidatedOrder → PricedOrder."""

from __future__ import annotations

from kungfu import Error, Ok, Result, unwrapping

from ordertaking.domain import BillingAmount, Price
from ordertaking.place_order._internal import (
    CommentLine,
    GetPricingFunction,
    GetProductPrice,
    PricedOrder,
    PricedOrderLine,
    PricedOrderProductLine,
    PricingMethod,
    PromotionCode,
    Standard,
    ValidatedOrder,
    ValidatedOrderLine,
)
from ordertaking.place_order._public import PricingError, ValidationError


def to_priced_order_line(
    get_product_price: GetProductPrice,
    validated_order_line: ValidatedOrderLine,
) -> Result[PricedOrderProductLine, ValidationError]:
    """Unit price × quantity. A line price above the Price ceiling is a ValidationError."""
    price = get_product_price(validated_order_line.product_code)
    match price.multiply(validated_order_line.quantity.value):
        case Ok(line_price):
            return Ok(
                PricedOrderProductLine(
                    order_line_id=validated_order_line.order_line_id,
                    product_code=validated_order_line.product_code,
                    quantity=validated_order_line.quantity,
                    line_price=line_price,
                )
            )
        case Error(err):
            return Error(ValidationError.from_error(err))


def add_comment_line(
    pricing_method: PricingMethod,
    lines: list[PricedOrderLine],
) -> list[PricedOrderLine]:
    match pricing_method:
        case Standard():
            return lines
        case PromotionCode(value=code):
            return [*lines, CommentLine(f"Applied promotion {code}")]


def get_line_price(line: PricedOrderLine) -> Price:
    match line:
        case PricedOrderProductLine(line_price=line_price):
            return line_price
        case CommentLine():
            return Price.unsafe_create(0)


@unwrapping
def price_order(
    get_pricing_function: GetPricingFunction,
    validated_order: ValidatedOrder,
) -> Result[PricedOrder, ValidationError | PricingError]:
    """
    Price every line, append the promotion comment, total into a BillingAmount.

    Lines are priced in order; the first line out of range stops pricing.
    A total above the BillingAmount ceiling is a PricingError.
    """
    get_product_price = get_pricing_function(validated_order.pricing_method)
    product_lines: list[PricedOrderLine] = [
        to_priced_order_line(get_product_price, line).unwrap()
        for line in validated_order.lines
    ]
    lines = add_comment_line(validated_order.pricing_method, product_lines)
    amount_to_bill = (
        BillingAmount.sum_prices(get_line_price(line) for line in lines)
        .map_err(PricingError.from_error)
        .unwrap()
    )
    return Ok(
        PricedOrder(
            order_id=validated_order.order_id,
            customer_info=validated_order.customer_info,
            shipping_address=validated_order.shipping_address,
            billing_address=validated_order.billing_address,
            amount_to_bill=amount_to_bill,
            lines=tuple(lines),
            pricing_method=validated_order.pricing_method,
        )
    )


__all__ = (
    "to_priced_order_line",
    "add_comment_line",
    "get_line_price",
    "price_order",
)
