"""
DTOs — the JSON shapes that cross the service boundary.

Field names are snake_case in Python and camelCase on the wire. Conversions
*to* the unvalidated domain types always succeed; conversions to validated
domain types return a Result; conversions *from* domain types always succeed.
"""

from __future__ import annotations

import base64
from decimal import Decimal
from typing import Any

from kungfu import Option, Result, Some
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ordertaking.domain import Address, CustomerInfo, PdfAttachment
from ordertaking.place_order import (
    BillableOrderPlaced,
    CheckedAddress,
    CommentLine,
    OrderAcknowledgmentSent,
    PlaceOrderError,
    PlaceOrderEvent,
    PricedOrderLine,
    PricedOrderProductLine,
    PricingError,
    RemoteServiceError,
    ShippableOrderLine,
    ShippableOrderPlaced,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidationError,
    to_address,
    to_customer_info,
)


class _Dto(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def _option_value(opt: Option[Any]) -> str:
    match opt:
        case Some(value):
            return value.value
        case _:
            return ""


# ═══════════════════════════════════════════════════════════════════════════════
# Shared
# ═══════════════════════════════════════════════════════════════════════════════

class CustomerInfoDto(_Dto):
    first_name: str
    last_name: str
    email_address: str
    vip_status: str = "Normal"

    def to_unvalidated_customer_info(self) -> UnvalidatedCustomerInfo:
        return UnvalidatedCustomerInfo(
            first_name=self.first_name,
            last_name=self.last_name,
            email_address=self.email_address,
            vip_status=self.vip_status,
        )

    def to_customer_info(self) -> Result[CustomerInfo, ValidationError]:
        return to_customer_info(self.to_unvalidated_customer_info())

    @classmethod
    def from_customer_info(cls, info: CustomerInfo) -> CustomerInfoDto:
        return cls(
            first_name=info.name.first_name.value,
            last_name=info.name.last_name.value,
            email_address=info.email_address.value,
            vip_status=info.vip_status.value,
        )


class AddressDto(_Dto):
    address_line1: str
    address_line2: str = ""
    address_line3: str = ""
    address_line4: str = ""
    city: str
    zip_code: str
    state: str
    country: str

    def to_unvalidated_address(self) -> UnvalidatedAddress:
        return UnvalidatedAddress(
            address_line1=self.address_line1,
            address_line2=self.address_line2,
            address_line3=self.address_line3,
            address_line4=self.address_line4,
            city=self.city,
            zip_code=self.zip_code,
            state=self.state,
            country=self.country,
        )

    def to_address(self) -> Result[Address, ValidationError]:
        """Validate the fields only; no address-existence check is made."""
        return to_address(CheckedAddress(self.to_unvalidated_address()))

    @classmethod
    def from_address(cls, address: Address) -> AddressDto:
        return cls(
            address_line1=address.address_line1.value,
            address_line2=_option_value(address.address_line2),
            address_line3=_option_value(address.address_line3),
            address_line4=_option_value(address.address_line4),
            city=address.city.value,
            zip_code=address.zip_code.value,
            state=address.state.value,
            country=address.country.value,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Input: the order form
# ═══════════════════════════════════════════════════════════════════════════════

class OrderFormLineDto(_Dto):
    order_line_id: str
    product_code: str
    quantity: Decimal

    def to_unvalidated_order_line(self) -> UnvalidatedOrderLine:
        return UnvalidatedOrderLine(
            order_line_id=self.order_line_id,
            product_code=self.product_code,
            quantity=self.quantity,
        )


class OrderFormDto(_Dto):
    order_id: str
    customer_info: CustomerInfoDto
    shipping_address: AddressDto
    billing_address: AddressDto
    lines: list[OrderFormLineDto] = Field(default_factory=list)
    promotion_code: str = ""

    def to_unvalidated_order(self) -> UnvalidatedOrder:
        return UnvalidatedOrder(
            order_id=self.order_id,
            customer_info=self.customer_info.to_unvalidated_customer_info(),
            shipping_address=self.shipping_address.to_unvalidated_address(),
            billing_address=self.billing_address.to_unvalidated_address(),
            lines=tuple(line.to_unvalidated_order_line() for line in self.lines),
            promotion_code=self.promotion_code,
        )

    def to_domain(self) -> UnvalidatedOrder:
        return self.to_unvalidated_order()


# ═══════════════════════════════════════════════════════════════════════════════
# Output: events
# ═══════════════════════════════════════════════════════════════════════════════

class PricedOrderLineDto(_Dto):
    """Comment lines have no id or product code and zero quantity and price."""

    order_line_id: str | None
    product_code: str | None
    quantity: Decimal
    line_price: Decimal
    comment: str

    @classmethod
    def from_domain(cls, line: PricedOrderLine) -> PricedOrderLineDto:
        match line:
            case PricedOrderProductLine():
                return cls(
                    order_line_id=line.order_line_id.value,
                    product_code=line.product_code.value,
                    quantity=Decimal(line.quantity.value),
                    line_price=line.line_price.value,
                    comment="",
                )
            case CommentLine(comment=comment):
                return cls(
                    order_line_id=None,
                    product_code=None,
                    quantity=Decimal(0),
                    line_price=Decimal(0),
                    comment=comment,
                )


class ShippableOrderLineDto(_Dto):
    product_code: str
    quantity: Decimal

    @classmethod
    def from_domain(cls, line: ShippableOrderLine) -> ShippableOrderLineDto:
        return cls(product_code=line.product_code.value, quantity=Decimal(line.quantity.value))


class PdfAttachmentDto(_Dto):
    """`bytes` travels base64-encoded."""

    name: str
    bytes: str

    @classmethod
    def from_domain(cls, pdf: PdfAttachment) -> PdfAttachmentDto:
        return cls(name=pdf.name, bytes=base64.b64encode(pdf.bytes).decode("ascii"))


class ShippableOrderPlacedDto(_Dto):
    order_id: str
    shipping_address: AddressDto
    shipment_lines: list[ShippableOrderLineDto]
    pdf: PdfAttachmentDto

    @classmethod
    def from_domain(cls, event: ShippableOrderPlaced) -> ShippableOrderPlacedDto:
        return cls(
            order_id=event.order_id.value,
            shipping_address=AddressDto.from_address(event.shipping_address),
            shipment_lines=[ShippableOrderLineDto.from_domain(line) for line in event.shipment_lines],
            pdf=PdfAttachmentDto.from_domain(event.pdf),
        )


class BillableOrderPlacedDto(_Dto):
    order_id: str
    billing_address: AddressDto
    amount_to_bill: Decimal

    @classmethod
    def from_domain(cls, event: BillableOrderPlaced) -> BillableOrderPlacedDto:
        return cls(
            order_id=event.order_id.value,
            billing_address=AddressDto.from_address(event.billing_address),
            amount_to_bill=event.amount_to_bill.value,
        )


class OrderAcknowledgmentSentDto(_Dto):
    order_id: str
    email_address: str

    @classmethod
    def from_domain(cls, event: OrderAcknowledgmentSent) -> OrderAcknowledgmentSentDto:
        return cls(order_id=event.order_id.value, email_address=event.email_address.value)


type PlaceOrderEventDto = dict[str, dict[str, Any]]
"""Single-key JSON object: event name → event payload."""


def place_order_event_dto_from_domain(event: PlaceOrderEvent) -> PlaceOrderEventDto:
    match event:
        case ShippableOrderPlaced():
            return {"shippableOrderPlaced": ShippableOrderPlacedDto.from_domain(event).to_json()}
        case BillableOrderPlaced():
            return {"billableOrderPlaced": BillableOrderPlacedDto.from_domain(event).to_json()}
        case OrderAcknowledgmentSent():
            return {"orderAcknowledgmentSent": OrderAcknowledgmentSentDto.from_domain(event).to_json()}


# ═══════════════════════════════════════════════════════════════════════════════
# Output: errors
# ═══════════════════════════════════════════════════════════════════════════════

class PlaceOrderErrorDto(_Dto):
    code: str
    message: str

    @classmethod
    def from_domain(cls, error: PlaceOrderError) -> PlaceOrderErrorDto:
        match error:
            case ValidationError(message=message):
                return cls(code="ValidationError", message=message)
            case PricingError(message=message):
                return cls(code="PricingError", message=message)
            case RemoteServiceError(service=service, exception=exception):
                return cls(code="RemoteServiceError", message=f"{service.name}: {exception}")


__all__ = (
    "CustomerInfoDto",
    "AddressDto",
    "OrderFormLineDto",
    "OrderFormDto",
    "PricedOrderLineDto",
    "ShippableOrderLineDto",
    "PdfAttachmentDto",
    "ShippableOrderPlacedDto",
    "BillableOrderPlacedDto",
    "OrderAcknowledgmentSentDto",
    "PlaceOrderEventDto",
    "place_order_event_dto_from_domain",
    "PlaceOrderErrorDto",
)
