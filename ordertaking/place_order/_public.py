"""
Public types of the place-order workflow.

What goes in (`UnvalidatedOrder`), what comes out (`PlaceOrderEvent`s) and
what can go wrong (`PlaceOrderError`).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from ordertaking._types import AsyncResult

from ordertaking.domain import (
    Address,
    BillingAmount,
    ConstrainedTypeError,
    EmailAddress,
    OrderId,
    OrderQuantity,
    PdfAttachment,
    ProductCode,
)

# ═══════════════════════════════════════════════════════════════════════════════
# Inputs
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class UnvalidatedCustomerInfo:
    first_name: str
    last_name: str
    email_address: str
    vip_status: str


@dataclass(frozen=True, slots=True)
class UnvalidatedAddress:
    address_line1: str
    address_line2: str
    address_line3: str
    address_line4: str
    city: str
    zip_code: str
    state: str
    country: str


@dataclass(frozen=True, slots=True)
class UnvalidatedOrderLine:
    order_line_id: str
    product_code: str
    quantity: Decimal


@dataclass(frozen=True, slots=True)
class UnvalidatedOrder:
    """Raw order form. Every field is a primitive; nothing is trusted yet."""

    order_id: str
    customer_info: UnvalidatedCustomerInfo
    shipping_address: UnvalidatedAddress
    billing_address: UnvalidatedAddress
    lines: tuple[UnvalidatedOrderLine, ...]
    promotion_code: str = ""


# ═══════════════════════════════════════════════════════════════════════════════
# Outputs
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class OrderAcknowledgmentSent:
    """Event to send to other bounded contexts."""

    order_id: OrderId
    email_address: EmailAddress


@dataclass(frozen=True, slots=True)
class ShippableOrderLine:
    product_code: ProductCode
    quantity: OrderQuantity


@dataclass(frozen=True, slots=True)
class ShippableOrderPlaced:
    """Event for the shipping context."""

    order_id: OrderId
    shipping_address: Address
    shipment_lines: tuple[ShippableOrderLine, ...]
    pdf: PdfAttachment


@dataclass(frozen=True, slots=True)
class BillableOrderPlaced:
    """Event for the billing context. Only emitted when there is something to bill."""

    order_id: OrderId
    billing_address: Address
    amount_to_bill: BillingAmount


type PlaceOrderEvent = ShippableOrderPlaced | BillableOrderPlaced | OrderAcknowledgmentSent


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class ValidationError:
    field_name: str
    message: str

    @classmethod
    def from_error(cls, error: ConstrainedTypeError) -> ValidationError:
        return cls(error.field_name, error.message)


@dataclass(frozen=True, slots=True)
class PricingError:
    field_name: str
    message: str

    @classmethod
    def from_error(cls, error: ConstrainedTypeError) -> PricingError:
        return cls(error.field_name, error.message)


@dataclass(frozen=True, slots=True)
class ServiceInfo:
    name: str
    endpoint: str


@dataclass(frozen=True, slots=True)
class RemoteServiceError:
    """A collaborator blew up instead of answering."""

    service: ServiceInfo
    exception: Exception


type PlaceOrderError = ValidationError | PricingError | RemoteServiceError


# ═══════════════════════════════════════════════════════════════════════════════
# The Workflow
# ═══════════════════════════════════════════════════════════════════════════════

type PlaceOrder = Callable[
    [UnvalidatedOrder],
    AsyncResult[list[PlaceOrderEvent], PlaceOrderError],
]


__all__ = (
    # Inputs
    "UnvalidatedCustomerInfo",
    "UnvalidatedAddress",
    "UnvalidatedOrderLine",
    "UnvalidatedOrder",
    # Outputs
    "OrderAcknowledgmentSent",
    "ShippableOrderLine",
    "ShippableOrderPlaced",
    "BillableOrderPlaced",
    "PlaceOrderEvent",
    # Errors
    "ValidationError",
    "PricingError",
    "ServiceInfo",
    "RemoteServiceError",
    "PlaceOrderError",
    # Workflow
    "PlaceOrder",
)
