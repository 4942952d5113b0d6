"""Event assembly — PricedOrder (+ acknowledgment) → outbound events."""

from __future__ import annotations

from kungfu import Nothing, Option, Some

from ordertaking.domain import PdfAttachment
from ordertaking.lift import list_of_option
from ordertaking.place_order._internal import (
    CommentLine,
    PricedOrder,
    PricedOrderLine,
    PricedOrderProductLine,
)
from ordertaking.place_order._public import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    PlaceOrderEvent,
    ShippableOrderLine,
    ShippableOrderPlaced,
)


def make_shipment_line(line: PricedOrderLine) -> Option[ShippableOrderLine]:
    """Comment lines have nothing to ship."""
    match line:
        case PricedOrderProductLine(product_code=product_code, quantity=quantity):
            return Some(ShippableOrderLine(product_code=product_code, quantity=quantity))
        case CommentLine():
            return Nothing()


def create_shipping_event(priced_order: PricedOrder) -> ShippableOrderPlaced:
    order_id = priced_order.order_id
    return ShippableOrderPlaced(
        order_id=order_id,
        shipping_address=priced_order.shipping_address,
        shipment_lines=tuple(
            shipment_line
            for line in priced_order.lines
            for shipment_line in list_of_option(make_shipment_line(line))
        ),
        pdf=PdfAttachment(name=f"Order{order_id.value}.pdf", bytes=b""),
    )


def create_billing_event(priced_order: PricedOrder) -> Option[BillableOrderPlaced]:
    """Only orders with something to bill reach the billing context."""
    if priced_order.amount_to_bill.value > 0:
        return Some(
            BillableOrderPlaced(
                order_id=priced_order.order_id,
                billing_address=priced_order.billing_address,
                amount_to_bill=priced_order.amount_to_bill,
            )
        )
    return Nothing()


def create_events(
    priced_order: PricedOrder,
    acknowledgment_event: Option[OrderAcknowledgmentSent],
) -> list[PlaceOrderEvent]:
    """Acknowledgment first, then shipping, then billing."""
    return [
        *list_of_option(acknowledgment_event),
        create_shipping_event(priced_order),
        *list_of_option(create_billing_event(priced_order)),
    ]


__all__ = (
    "make_shipment_line",
    "create_shipping_event",
    "create_billing_event",
    "create_events",
)
