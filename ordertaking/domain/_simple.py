"""
Simple types — primitives wrapped in a validating constructor.

Build every value through its `create` classmethod (or the module-level
`create_*` functions for the unions); the plain dataclass constructor skips
validation and is reserved for the constructors themselves.

Example:
    match String50.create("FirstName", raw):
        case Ok(name):
            ...
        case Error(ConstrainedTypeError(field_name=field, message=msg)):
            ...
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from kungfu import Error, Ok, Option, Result

from ordertaking.domain._constrained import (
    Number,
    create_decimal,
    create_int,
    create_like,
    create_string,
    create_string_option,
)
from ordertaking.domain._errors import ConstrainedTypeError

_EMAIL_PATTERN = re.compile(r".+@.+")
_ZIP_CODE_PATTERN = re.compile(r"^\d{5}$")
_US_STATE_PATTERN = re.compile(
    r"^(A[KLRZ]|C[AOT]|D[CE]|FL|GA|HI|I[ADLN]|K[SY]|LA|M[ADEINOST]|N[CDEHJMVY]"
    r"|O[HKR]|P[AR]|RI|S[CD]|T[NX]|UT|V[AIT]|W[AIVY])$"
)
_WIDGET_PATTERN = re.compile(r"^W\d{4}$")
_GIZMO_PATTERN = re.compile(r"^G\d{3}$")


# ═══════════════════════════════════════════════════════════════════════════════
# Strings
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class String50:
    """Non-empty string of at most 50 characters."""

    value: str

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> Result[String50, ConstrainedTypeError]:
        return create_string(field_name, cls, 50, raw)

    @classmethod
    def create_option(
        cls, field_name: str, raw: str | None
    ) -> Result[Option[String50], ConstrainedTypeError]:
        """Empty input is a legitimate absence: `Ok(Nothing())`."""
        return create_string_option(field_name, cls, 50, raw)


@dataclass(frozen=True, slots=True)
class EmailAddress:
    """String containing an @ symbol."""

    value: str

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> Result[EmailAddress, ConstrainedTypeError]:
        return create_like(field_name, cls, _EMAIL_PATTERN, raw)


@dataclass(frozen=True, slots=True)
class ZipCode:
    """Five digits."""

    value: str

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> Result[ZipCode, ConstrainedTypeError]:
        return create_like(field_name, cls, _ZIP_CODE_PATTERN, raw)


@dataclass(frozen=True, slots=True)
class UsStateCode:
    """Two-letter US state or territory code."""

    value: str

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> Result[UsStateCode, ConstrainedTypeError]:
        return create_like(field_name, cls, _US_STATE_PATTERN, raw)


@dataclass(frozen=True, slots=True)
class OrderId:
    value: str

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> Result[OrderId, ConstrainedTypeError]:
        return create_string(field_name, cls, 50, raw)


@dataclass(frozen=True, slots=True)
class OrderLineId:
    value: str

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> Result[OrderLineId, ConstrainedTypeError]:
        return create_string(field_name, cls, 50, raw)


class VipStatus(Enum):
    NORMAL = "Normal"
    VIP = "Vip"

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> Result[VipStatus, ConstrainedTypeError]:
        """Accepts "Normal" / "VIP" in any letter case."""
        match (raw or "").strip().lower():
            case "normal":
                return Ok(cls.NORMAL)
            case "vip":
                return Ok(cls.VIP)
            case _:
                return Error(
                    ConstrainedTypeError(field_name, f"{field_name}: must be one of 'Normal', 'VIP'")
                )


# ═══════════════════════════════════════════════════════════════════════════════
# Product Codes
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class WidgetCode:
    """W followed by four digits."""

    value: str

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> Result[WidgetCode, ConstrainedTypeError]:
        return create_like(field_name, cls, _WIDGET_PATTERN, raw)


@dataclass(frozen=True, slots=True)
class GizmoCode:
    """G followed by three digits."""

    value: str

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> Result[GizmoCode, ConstrainedTypeError]:
        return create_like(field_name, cls, _GIZMO_PATTERN, raw)


type ProductCode = WidgetCode | GizmoCode


def create_product_code(field_name: str, raw: str | None) -> Result[ProductCode, ConstrainedTypeError]:
    """
    Dispatch on the first character: "W" → WidgetCode, "G" → GizmoCode.

    Example:
        create_product_code("ProductCode", "W1234")  # Ok(WidgetCode("W1234"))
        create_product_code("ProductCode", "X123")   # Error(... format not recognised ...)
    """
    if not raw:
        return Error(ConstrainedTypeError(field_name, f"{field_name} must not be null or empty"))
    if raw.startswith("W"):
        return WidgetCode.create(field_name, raw)
    if raw.startswith("G"):
        return GizmoCode.create(field_name, raw)
    return Error(ConstrainedTypeError(field_name, f"{field_name}: format not recognised '{raw}'"))


# ═══════════════════════════════════════════════════════════════════════════════
# Quantities
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class UnitQuantity:
    """Integer between 1 and 1000."""

    value: int

    @classmethod
    def create(cls, field_name: str, raw: Number) -> Result[UnitQuantity, ConstrainedTypeError]:
        return create_int(field_name, cls, 1, 1000, raw)


@dataclass(frozen=True, slots=True)
class KilogramQuantity:
    """Decimal between 0.05 and 100.00."""

    value: Decimal

    @classmethod
    def create(cls, field_name: str, raw: Number) -> Result[KilogramQuantity, ConstrainedTypeError]:
        return create_decimal(field_name, cls, Decimal("0.05"), Decimal("100.00"), raw)


type OrderQuantity = UnitQuantity | KilogramQuantity


def create_order_quantity(
    field_name: str,
    product_code: ProductCode,
    quantity: Number,
) -> Result[OrderQuantity, ConstrainedTypeError]:
    """Widgets are counted in units, gizmos are weighed in kilograms."""
    match product_code:
        case WidgetCode():
            return UnitQuantity.create(field_name, quantity)
        case GizmoCode():
            return KilogramQuantity.create(field_name, quantity)


# ═══════════════════════════════════════════════════════════════════════════════
# Money
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class Price:
    """Decimal between 0.0 and 1000.00."""

    value: Decimal

    @classmethod
    def create(cls, raw: Number) -> Result[Price, ConstrainedTypeError]:
        return create_decimal("Price", cls, Decimal(0), Decimal(1000), raw)

    @classmethod
    def unsafe_create(cls, raw: Number) -> Price:
        """
        For constants known to be in range. Raises `kungfu.UnwrapError`
        otherwise.
        """
        return cls.create(raw).expect(f"Not expecting Price to be out of bounds: {raw}")

    def multiply(self, quantity: Number) -> Result[Price, ConstrainedTypeError]:
        """Line price for `quantity` units of this price; may leave the range."""
        return Price.create(Decimal(quantity) * self.value)


@dataclass(frozen=True, slots=True)
class BillingAmount:
    """Decimal between 0.0 and 10000.00."""

    value: Decimal

    @classmethod
    def create(cls, raw: Number) -> Result[BillingAmount, ConstrainedTypeError]:
        return create_decimal("BillingAmount", cls, Decimal(0), Decimal(10000), raw)

    @classmethod
    def sum_prices(cls, prices: Iterable[Price]) -> Result[BillingAmount, ConstrainedTypeError]:
        return cls.create(sum((price.value for price in prices), Decimal(0)))


# ═══════════════════════════════════════════════════════════════════════════════
# Documents
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class PdfAttachment:
    name: str
    bytes: bytes


__all__ = (
    "String50",
    "EmailAddress",
    "ZipCode",
    "UsStateCode",
    "OrderId",
    "OrderLineId",
    "VipStatus",
    "WidgetCode",
    "GizmoCode",
    "ProductCode",
    "create_product_code",
    "UnitQuantity",
    "KilogramQuantity",
    "OrderQuantity",
    "create_order_quantity",
    "Price",
    "BillingAmount",
    "PdfAttachment",
)
