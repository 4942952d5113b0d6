"""
Place order — UnvalidatedOrder in, events or a single error out.

Usage:
    from ordertaking import place_order as P

    workflow = P.place_order(
        check_product_code_exists=lambda code: True,
        check_address_exists=lambda addr: L.pure(P.CheckedAddress(addr)),
        get_pricing_function=P.get_pricing_function(standard, promotions),
        create_order_acknowledgment_letter=lambda order: P.HtmlString("..."),
        send_order_acknowledgment=lambda ack: P.SendResult.SENT,
    )

    match await workflow(order):
        case Ok(events):
            ...  # [OrderAcknowledgmentSent?, ShippableOrderPlaced, BillableOrderPlaced?]
        case Error(P.ValidationError(field_name=field, message=msg)):
            ...

Stages (each usable on its own):
    validate_order   — LazyCoroResult[ValidatedOrder, ValidationError]
    price_order      — Result[PricedOrder, ValidationError | PricingError]
    add_shipping_info_to_order / free_vip_shipping — infallible
    acknowledge_order — Option[OrderAcknowledgmentSent]
    create_events    — list[PlaceOrderEvent]
"""

from ordertaking.place_order._public import (
    UnvalidatedCustomerInfo,
    UnvalidatedAddress,
    UnvalidatedOrderLine,
    UnvalidatedOrder,
    OrderAcknowledgmentSent,
    ShippableOrderLine,
    ShippableOrderPlaced,
    BillableOrderPlaced,
    PlaceOrderEvent,
    ValidationError,
    PricingError,
    ServiceInfo,
    RemoteServiceError,
    PlaceOrderError,
    PlaceOrder,
)
from ordertaking.place_order._internal import (
    CheckProductCodeExists,
    CheckedAddress,
    AddressNotFound,
    InvalidFormat,
    AddressValidationError,
    CheckAddressExists,
    Standard,
    PromotionCode,
    PricingMethod,
    ValidatedOrderLine,
    ValidatedOrder,
    GetProductPrice,
    TryGetProductPrice,
    GetPricingFunction,
    GetStandardPrices,
    GetPromotionPrices,
    PricedOrderProductLine,
    CommentLine,
    PricedOrderLine,
    PricedOrder,
    ShippingMethod,
    ShippingInfo,
    PricedOrderWithShippingMethod,
    CalculateShippingCost,
    HtmlString,
    OrderAcknowledgment,
    SendResult,
    CreateOrderAcknowledgmentLetter,
    SendOrderAcknowledgment,
)
from ordertaking.place_order._validate import (
    to_order_id,
    to_order_line_id,
    to_product_code,
    to_order_quantity,
    to_customer_info,
    to_address,
    to_checked_address,
    to_validated_order_line,
    validate_order,
)
from ordertaking.place_order._pricing import create_pricing_method, get_pricing_function
from ordertaking.place_order._price import (
    to_priced_order_line,
    add_comment_line,
    get_line_price,
    price_order,
)
from ordertaking.place_order._shipping import (
    LOCAL_STATES,
    UsStateClassification,
    classify_address,
    calculate_shipping_cost,
    add_shipping_info_to_order,
    free_vip_shipping,
)
from ordertaking.place_order._acknowledge import acknowledge_order
from ordertaking.place_order._events import (
    make_shipment_line,
    create_shipping_event,
    create_billing_event,
    create_events,
)
from ordertaking.place_order._workflow import PlaceOrderWorkflow, place_order

__all__ = (
    # Public types
    "UnvalidatedCustomerInfo",
    "UnvalidatedAddress",
    "UnvalidatedOrderLine",
    "UnvalidatedOrder",
    "OrderAcknowledgmentSent",
    "ShippableOrderLine",
    "ShippableOrderPlaced",
    "BillableOrderPlaced",
    "PlaceOrderEvent",
    "ValidationError",
    "PricingError",
    "ServiceInfo",
    "RemoteServiceError",
    "PlaceOrderError",
    "PlaceOrder",
    # Internal types
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
    "GetProductPrice",
    "TryGetProductPrice",
    "GetPricingFunction",
    "GetStandardPrices",
    "GetPromotionPrices",
    "PricedOrderProductLine",
    "CommentLine",
    "PricedOrderLine",
    "PricedOrder",
    "ShippingMethod",
    "ShippingInfo",
    "PricedOrderWithShippingMethod",
    "CalculateShippingCost",
    "HtmlString",
    "OrderAcknowledgment",
    "SendResult",
    "CreateOrderAcknowledgmentLetter",
    "SendOrderAcknowledgment",
    # Validation
    "to_order_id",
    "to_order_line_id",
    "to_product_code",
    "to_order_quantity",
    "to_customer_info",
    "to_address",
    "to_checked_address",
    "to_validated_order_line",
    "validate_order",
    # Pricing
    "create_pricing_method",
    "get_pricing_function",
    "to_priced_order_line",
    "add_comment_line",
    "get_line_price",
    "price_order",
    # Shipping
    "LOCAL_STATES",
    "UsStateClassification",
    "classify_address",
    "calculate_shipping_cost",
    "add_shipping_info_to_order",
    "free_vip_shipping",
    # Acknowledgment
    "acknowledge_order",
    # Events
    "make_shipment_line",
    "create_shipping_event",
    "create_billing_event",
    "create_events",
    # Workflow
    "PlaceOrderWorkflow",
    "place_order",
)
