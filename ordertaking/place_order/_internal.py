"""
Internal types of the place-order workflow.

The intermediate order shapes passed between stages and the signatures of
the collaborators each stage depends on.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from kungfu import Option

from ordertaking._types import AsyncResult
from ordertaking.domain import (
    Address,
    BillingAmount,
    CustomerInfo,
    EmailAddress,
    OrderId,
    OrderLineId,
    OrderQuantity,
    Price,
    ProductCode,
)
from ordertaking.place_order._public import UnvalidatedAddress

# ═══════════════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════════════

type CheckProductCodeExists = Callable[[ProductCode], bool]


@dataclass(frozen=True, slots=True)
class CheckedAddress:
    """An address the address service has vouched for. Fields still raw."""

    value: UnvalidatedAddress


@dataclass(frozen=True, slots=True)
class AddressNotFound:
    """The address service does not know this address."""


@dataclass(frozen=True, slots=True)
class InvalidFormat:
    """The address service could not parse this address."""


type AddressValidationError = AddressNotFound | InvalidFormat


class CheckAddressExists(Protocol):
    """Remote address check. Lazy: nothing is sent until awaited."""

    def __call__(
        self, address: UnvalidatedAddress, /
    ) -> AsyncResult[CheckedAddress, AddressValidationError]: ...


@dataclass(frozen=True, slots=True)
class Standard:
    """Price from the standard price list."""


@dataclass(frozen=True, slots=True)
class PromotionCode:
    """Price from the promotion's price list, falling back to standard."""

    value: str


type PricingMethod = Standard | PromotionCode


@dataclass(frozen=True, slots=True)
class ValidatedOrderLine:
    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity


@dataclass(frozen=True, slots=True)
class ValidatedOrder:
    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    lines: tuple[ValidatedOrderLine, ...]
    pricing_method: PricingMethod


# ═══════════════════════════════════════════════════════════════════════════════
# Pricing
# ═══════════════════════════════════════════════════════════════════════════════

type GetProductPrice = Callable[[ProductCode], Price]

type TryGetProductPrice = Callable[[ProductCode], Option[Price]]

type GetPricingFunction = Callable[[PricingMethod], GetProductPrice]

type GetStandardPrices = Callable[[], GetProductPrice]

type GetPromotionPrices = Callable[[PromotionCode], TryGetProductPrice]


@dataclass(frozen=True, slots=True)
class PricedOrderProductLine:
    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity
    line_price: Price


@dataclass(frozen=True, slots=True)
class CommentLine:
    """Free-text line carried alongside product lines. Never shipped or billed."""

    comment: str


type PricedOrderLine = PricedOrderProductLine | CommentLine


@dataclass(frozen=True, slots=True)
class PricedOrder:
    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    amount_to_bill: BillingAmount
    lines: tuple[PricedOrderLine, ...]
    pricing_method: PricingMethod


# ═══════════════════════════════════════════════════════════════════════════════
# Shipping
# ═══════════════════════════════════════════════════════════════════════════════

class ShippingMethod(Enum):
    POSTAL_SERVICE = "PostalService"
    FEDEX24 = "Fedex24"
    FEDEX48 = "Fedex48"
    UPS48 = "Ups48"


@dataclass(frozen=True, slots=True)
class ShippingInfo:
    shipping_method: ShippingMethod
    shipping_cost: Price


@dataclass(frozen=True, slots=True)
class PricedOrderWithShippingMethod:
    shipping_info: ShippingInfo
    priced_order: PricedOrder


type CalculateShippingCost = Callable[[PricedOrder], Price]


# ═══════════════════════════════════════════════════════════════════════════════
# Acknowledgment
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class HtmlString:
    value: str


@dataclass(frozen=True, slots=True)
class OrderAcknowledgment:
    email_address: EmailAddress
    letter: HtmlString


class SendResult(Enum):
    SENT = "Sent"
    NOT_SENT = "NotSent"


type CreateOrderAcknowledgmentLetter = Callable[[PricedOrderWithShippingMethod], HtmlString]

type SendOrderAcknowledgment = Callable[[OrderAcknowledgment], SendResult]


__all__ = (
    # Validation
    "CheckProductCodeExists",
    "CheckedAddress",
    "AddressNotFound",
    "InvalidFormat",
    "AddressValidationError",
    "CheckAddressExists",
    "Standard",
    "PromotionCode",
    "PricingMethod",
    "ValidatedOrderLine",
    "ValidatedOrder",
    # Pricing
    "GetProductPrice",
    "TryGetProductPrice",
    "GetPricingFunction",
    "GetStandardPrices",
    "GetPromotionPrices",
    "PricedOrderProductLine",
    "CommentLine",
    "PricedOrderLine",
    "PricedOrder",
    # Shipping
    "ShippingMethod",
    "ShippingInfo",
    "PricedOrderWithShippingMethod",
    "CalculateShippingCost",
    # Acknowledgment
    "HtmlString",
    "OrderAcknowledgment",
    "SendResult",
    "CreateOrderAcknowledgmentLetter",
    "SendOrderAcknowledgment",
)
