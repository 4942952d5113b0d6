"""Acknowledgment stage — render the letter, try to send it."""

from __future__ import annotations

import structlog
from kungfu import Nothing, Option, Some

from ordertaking.place_order._internal import (
    CreateOrderAcknowledgmentLetter,
    OrderAcknowledgment,
    PricedOrderWithShippingMethod,
    SendOrderAcknowledgment,
    SendResult,
)
from ordertaking.place_order._public import OrderAcknowledgmentSent

logger = structlog.get_logger(__name__)


def acknowledge_order(
    create_acknowledgment_letter: CreateOrderAcknowledgmentLetter,
    send_acknowledgment: SendOrderAcknowledgment,
    priced_order_with_shipping: PricedOrderWithShippingMethod,
) -> Option[OrderAcknowledgmentSent]:
    """
    `Some(OrderAcknowledgmentSent)` when the sender reports `SENT`.

    A letter that was not sent is not a failure of the order: the workflow
    continues without the acknowledgment event.
    """
    priced_order = priced_order_with_shipping.priced_order
    letter = create_acknowledgment_letter(priced_order_with_shipping)
    acknowledgment = OrderAcknowledgment(
        email_address=priced_order.customer_info.email_address,
        letter=letter,
    )

    match send_acknowledgment(acknowledgment):
        case SendResult.SENT:
            return Some(
                OrderAcknowledgmentSent(
                    order_id=priced_order.order_id,
                    email_address=priced_order.customer_info.email_address,
                )
            )
        case SendResult.NOT_SENT:
            logger.info("acknowledgment not sent", order_id=priced_order.order_id.value)
            return Nothing()


__all__ = ("acknowledge_order",)
