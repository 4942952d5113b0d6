"""
Validation stage — UnvalidatedOrder → ValidatedOrder.

Every helper answers with a Result; the first failure wins and nothing after
it runs. Sequential field binding uses `kungfu.unwrapping`: inside a
decorated function `.unwrap()` on an Error returns that Error from the
function instead of raising.
"""

from __future__ import annotations

from collections.abc import Callable

import combinators as C
from kungfu import Error, LazyCoroResult, Ok, Result, unwrapping

from ordertaking import lift as L
from ordertaking.domain import (
    Address,
    ConstrainedTypeError,
    CustomerInfo,
    EmailAddress,
    OrderId,
    OrderLineId,
    OrderQuantity,
    PersonalName,
    ProductCode,
    String50,
    UsStateCode,
    VipStatus,
    ZipCode,
    create_order_quantity,
    create_product_code,
)
from ordertaking.domain._constrained import Number
from ordertaking.place_order._internal import (
    AddressNotFound,
    AddressValidationError,
    CheckAddressExists,
    CheckedAddress,
    CheckProductCodeExists,
    InvalidFormat,
    ValidatedOrder,
    ValidatedOrderLine,
)
from ordertaking.place_order._pricing import create_pricing_method
from ordertaking.place_order._public import (
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidationError,
)


def _validated[T](result: Result[T, ConstrainedTypeError]) -> Result[T, ValidationError]:
    return result.map_err(ValidationError.from_error)


# ═══════════════════════════════════════════════════════════════════════════════
# Fields
# ═══════════════════════════════════════════════════════════════════════════════

def to_order_id(order_id: str) -> Result[OrderId, ValidationError]:
    return _validated(OrderId.create("OrderId", order_id))


def to_order_line_id(order_line_id: str) -> Result[OrderLineId, ValidationError]:
    return _validated(OrderLineId.create("OrderLineId", order_line_id))


def to_product_code(
    check_product_code_exists: CheckProductCodeExists,
    product_code: str,
) -> Result[ProductCode, ValidationError]:
    """Well-formed and known to the product catalog."""
    match create_product_code("ProductCode", product_code):
        case Ok(code) if check_product_code_exists(code):
            return Ok(code)
        case Ok(_):
            return Error(ValidationError("ProductCode", f"Invalid: {product_code}"))
        case Error(err):
            return Error(ValidationError.from_error(err))


def to_order_quantity(product_code: ProductCode, quantity: Number) -> Result[OrderQuantity, ValidationError]:
    return _validated(create_order_quantity("OrderQuantity", product_code, quantity))


@unwrapping
def to_customer_info(info: UnvalidatedCustomerInfo) -> Result[CustomerInfo, ValidationError]:
    first_name = _validated(String50.create("FirstName", info.first_name)).unwrap()
    last_name = _validated(String50.create("LastName", info.last_name)).unwrap()
    email_address = _validated(EmailAddress.create("EmailAddress", info.email_address)).unwrap()
    vip_status = _validated(VipStatus.create("VipStatus", info.vip_status)).unwrap()
    return Ok(
        CustomerInfo(
            name=PersonalName(first_name=first_name, last_name=last_name),
            email_address=email_address,
            vip_status=vip_status,
        )
    )


@unwrapping
def to_address(checked_address: CheckedAddress) -> Result[Address, ValidationError]:
    """Build an Address from one the address service has already vouched for."""
    raw = checked_address.value
    address_line1 = _validated(String50.create("AddressLine1", raw.address_line1)).unwrap()
    address_line2 = _validated(String50.create_option("AddressLine2", raw.address_line2)).unwrap()
    address_line3 = _validated(String50.create_option("AddressLine3", raw.address_line3)).unwrap()
    address_line4 = _validated(String50.create_option("AddressLine4", raw.address_line4)).unwrap()
    city = _validated(String50.create("City", raw.city)).unwrap()
    zip_code = _validated(ZipCode.create("ZipCode", raw.zip_code)).unwrap()
    state = _validated(UsStateCode.create("State", raw.state)).unwrap()
    country = _validated(String50.create("Country", raw.country)).unwrap()
    return Ok(
        Address(
            address_line1=address_line1,
            address_line2=address_line2,
            address_line3=address_line3,
            address_line4=address_line4,
            city=city,
            zip_code=zip_code,
            state=state,
            country=country,
        )
    )


def _address_error(field_name: str) -> Callable[[AddressValidationError], ValidationError]:
    def convert(error: AddressValidationError) -> ValidationError:
        match error:
            case AddressNotFound():
                return ValidationError(field_name, "Address not found")
            case InvalidFormat():
                return ValidationError(field_name, "Address has bad format")

    return convert


def to_checked_address(
    check_address_exists: CheckAddressExists,
    field_name: str,
    address: UnvalidatedAddress,
) -> LazyCoroResult[CheckedAddress, ValidationError]:
    """Ask the address service; its failures become ValidationErrors on `field_name`."""
    return check_address_exists(address).map_err(_address_error(field_name))


@unwrapping
def to_validated_order_line(
    check_product_code_exists: CheckProductCodeExists,
    line: UnvalidatedOrderLine,
) -> Result[ValidatedOrderLine, ValidationError]:
    order_line_id = to_order_line_id(line.order_line_id).unwrap()
    product_code = to_product_code(check_product_code_exists, line.product_code).unwrap()
    quantity = to_order_quantity(product_code, line.quantity).unwrap()
    return Ok(
        ValidatedOrderLine(
            order_line_id=order_line_id,
            product_code=product_code,
            quantity=quantity,
        )
    )


# ═══════════════════════════════════════════════════════════════════════════════
# The Stage
# ═══════════════════════════════════════════════════════════════════════════════

def validate_order(
    check_product_code_exists: CheckProductCodeExists,
    check_address_exists: CheckAddressExists,
    unvalidated_order: UnvalidatedOrder,
) -> LazyCoroResult[ValidatedOrder, ValidationError]:
    """
    Validate the order header, both addresses and every line.

    Both address checks run concurrently; when both fail the shipping
    address error is reported. Both existence checks complete before either
    address is validated field by field, so a billing address the service
    rejects is reported ahead of a malformed shipping field. Lines are
    validated in order and the first bad line stops validation.

    Example:
        result = await validate_order(
            lambda code: True,
            lambda addr: L.pure(CheckedAddress(addr)),
            order,
        )
    """

    @unwrapping
    async def run() -> Result[ValidatedOrder, ValidationError]:
        order_id = to_order_id(unvalidated_order.order_id).unwrap()
        customer_info = to_customer_info(unvalidated_order.customer_info).unwrap()

        checked_shipping, checked_billing = (
            await C.parallel(
                to_checked_address(
                    check_address_exists, "ShippingAddress", unvalidated_order.shipping_address
                ),
                to_checked_address(
                    check_address_exists, "BillingAddress", unvalidated_order.billing_address
                ),
            )
        ).unwrap()
        shipping_address = to_address(checked_shipping).unwrap()
        billing_address = to_address(checked_billing).unwrap()

        lines = (
            await C.traverse(
                unvalidated_order.lines,
                lambda line: L.from_result(to_validated_order_line(check_product_code_exists, line)),
            )
        ).unwrap()

        return Ok(
            ValidatedOrder(
                order_id=order_id,
                customer_info=customer_info,
                shipping_address=shipping_address,
                billing_address=billing_address,
                lines=tuple(lines),
                pricing_method=create_pricing_method(unvalidated_order.promotion_code),
            )
        )

    return LazyCoroResult(run)


__all__ = (
    "to_order_id",
    "to_order_line_id",
    "to_product_code",
    "to_order_quantity",
    "to_customer_info",
    "to_address",
    "to_checked_address",
    "to_validated_order_line",
    "validate_order",
)
