"""Shipping stage — attach a shipping method and cost, waive it for VIPs."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum, auto

from ordertaking.domain import Address, Price, VipStatus
from ordertaking.place_order._internal import (
    CalculateShippingCost,
    PricedOrder,
    PricedOrderWithShippingMethod,
    ShippingInfo,
    ShippingMethod,
)

LOCAL_STATES = frozenset({"CA", "OR", "AZ", "NV"})


class UsStateClassification(Enum):
    US_LOCAL_STATE = auto()
    US_REMOTE_STATE = auto()
    INTERNATIONAL = auto()


def classify_address(address: Address) -> UsStateClassification:
    if address.country.value != "US":
        return UsStateClassification.INTERNATIONAL
    if address.state.value in LOCAL_STATES:
        return UsStateClassification.US_LOCAL_STATE
    return UsStateClassification.US_REMOTE_STATE


def calculate_shipping_cost(priced_order: PricedOrder) -> Price:
    """5 for nearby states, 10 elsewhere in the US, 20 abroad."""
    match classify_address(priced_order.shipping_address):
        case UsStateClassification.US_LOCAL_STATE:
            return Price.unsafe_create(5)
        case UsStateClassification.US_REMOTE_STATE:
            return Price.unsafe_create(10)
        case UsStateClassification.INTERNATIONAL:
            return Price.unsafe_create(20)


def add_shipping_info_to_order(
    calculate_shipping_cost: CalculateShippingCost,
    priced_order: PricedOrder,
) -> PricedOrderWithShippingMethod:
    shipping_info = ShippingInfo(
        shipping_method=ShippingMethod.FEDEX24,
        shipping_cost=calculate_shipping_cost(priced_order),
    )
    return PricedOrderWithShippingMethod(shipping_info=shipping_info, priced_order=priced_order)


def free_vip_shipping(order: PricedOrderWithShippingMethod) -> PricedOrderWithShippingMethod:
    """VIP customers ship for free; the shipping method is kept."""
    match order.priced_order.customer_info.vip_status:
        case VipStatus.NORMAL:
            return order
        case VipStatus.VIP:
            return replace(
                order,
                shipping_info=replace(order.shipping_info, shipping_cost=Price.unsafe_create(0)),
            )


__all__ = (
    "LOCAL_STATES",
    "UsStateClassification",
    "classify_address",
    "calculate_shipping_cost",
    "add_shipping_info_to_order",
    "free_vip_shipping",
)
