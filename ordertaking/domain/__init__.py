"""
Domain — constrained values and the records built from them.

Usage:
    from ordertaking import domain as D

    D.String50.create("FirstName", "Ada")          # Ok(String50("Ada"))
    D.create_product_code("ProductCode", "G123")   # Ok(GizmoCode("G123"))
    D.Price.create(2000)                            # Error(ConstrainedTypeError(...))

Every constructor answers with `Ok(value)` or `Error(ConstrainedTypeError)`.
"""

from ordertaking.domain._errors import ConstrainedTypeError
from ordertaking.domain._simple import (
    String50,
    EmailAddress,
    ZipCode,
    UsStateCode,
    OrderId,
    OrderLineId,
    VipStatus,
    WidgetCode,
    GizmoCode,
    ProductCode,
    create_product_code,
    UnitQuantity,
    KilogramQuantity,
    OrderQuantity,
    create_order_quantity,
    Price,
    BillingAmount,
    PdfAttachment,
)
from ordertaking.domain._compound import PersonalName, CustomerInfo, Address

__all__ = (
    # Errors
    "ConstrainedTypeError",
    # Simple types
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
    # Compound types
    "PersonalName",
    "CustomerInfo",
    "Address",
)
