"""
The place-order workflow — every stage wired together.

Collaborators are injected once, when the workflow is built; the result is
a capability object that turns an UnvalidatedOrder into a lazy computation.
"""

from __future__ import annotations

from dataclasses import dataclass

import combinators as C
import structlog
from kungfu import LazyCoroResult

from ordertaking import lift as L
from ordertaking.place_order._acknowledge import acknowledge_order
from ordertaking.place_order._events import create_events
from ordertaking.place_order._internal import (
    CheckAddressExists,
    CheckProductCodeExists,
    CreateOrderAcknowledgmentLetter,
    GetPricingFunction,
    PricedOrder,
    SendOrderAcknowledgment,
    ValidatedOrder,
)
from ordertaking.place_order._price import price_order
from ordertaking.place_order._public import (
    PlaceOrderError,
    PlaceOrderEvent,
    UnvalidatedOrder,
)
from ordertaking.place_order._shipping import (
    add_shipping_info_to_order,
    calculate_shipping_cost,
    free_vip_shipping,
)
from ordertaking.place_order._validate import validate_order

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PlaceOrderWorkflow:
    """
    UnvalidatedOrder → LazyCoroResult[list[PlaceOrderEvent], PlaceOrderError].

    Stages run in order: validate, price, shipping, VIP adjustment,
    acknowledge, assemble events. The first failing stage ends the run and
    its error is the result. Nothing runs until the result is awaited.

    Example:
        workflow = place_order(
            check_product_code_exists=catalog.contains,
            check_address_exists=address_service.check,
            get_pricing_function=get_pricing_function(standard, promotions),
            create_order_acknowledgment_letter=render_letter,
            send_order_acknowledgment=mailer.send,
        )

        match await workflow(order):
            case Ok(events):
                publish(events)
            case Error(err):
                report(err)
    """

    check_product_code_exists: CheckProductCodeExists
    check_address_exists: CheckAddressExists
    get_pricing_function: GetPricingFunction
    create_order_acknowledgment_letter: CreateOrderAcknowledgmentLetter
    send_order_acknowledgment: SendOrderAcknowledgment

    def __call__(
        self, unvalidated_order: UnvalidatedOrder
    ) -> LazyCoroResult[list[PlaceOrderEvent], PlaceOrderError]:
        validated = validate_order(
            self.check_product_code_exists,
            self.check_address_exists,
            unvalidated_order,
        )
        return (
            C.flow(validated)
            .tap(_log_validated)
            .then(self._price)
            .tap(_log_priced)
            .map(self._ship_and_acknowledge)
            .bimap_tap(
                on_ok=lambda events: logger.info(
                    "order placed",
                    order_id=unvalidated_order.order_id,
                    events=len(events),
                ),
                on_err=lambda error: logger.warning(
                    "order rejected",
                    order_id=unvalidated_order.order_id,
                    error=error,
                ),
            )
            .compile()
        )

    def _price(self, validated_order: ValidatedOrder) -> LazyCoroResult[PricedOrder, PlaceOrderError]:
        return L.from_result(price_order(self.get_pricing_function, validated_order))

    def _ship_and_acknowledge(self, priced_order: PricedOrder) -> list[PlaceOrderEvent]:
        with_shipping = free_vip_shipping(
            add_shipping_info_to_order(calculate_shipping_cost, priced_order)
        )
        acknowledgment = acknowledge_order(
            self.create_order_acknowledgment_letter,
            self.send_order_acknowledgment,
            with_shipping,
        )
        return create_events(priced_order, acknowledgment)


def _log_validated(order: ValidatedOrder) -> None:
    logger.debug("order validated", order_id=order.order_id.value, lines=len(order.lines))


def _log_priced(order: PricedOrder) -> None:
    logger.debug(
        "order priced",
        order_id=order.order_id.value,
        amount_to_bill=str(order.amount_to_bill.value),
    )


def place_order(
    check_product_code_exists: CheckProductCodeExists,
    check_address_exists: CheckAddressExists,
    get_pricing_function: GetPricingFunction,
    create_order_acknowledgment_letter: CreateOrderAcknowledgmentLetter,
    send_order_acknowledgment: SendOrderAcknowledgment,
) -> PlaceOrderWorkflow:
    """Inject the collaborators; returns the ready-to-call workflow."""
    return PlaceOrderWorkflow(
        check_product_code_exists=check_product_code_exists,
        check_address_exists=check_address_exists,
        get_pricing_function=get_pricing_function,
        create_order_acknowledgment_letter=create_order_acknowledgment_letter,
        send_order_acknowledgment=send_order_acknowledgment,
    )


__all__ = ("PlaceOrderWorkflow", "place_order")
