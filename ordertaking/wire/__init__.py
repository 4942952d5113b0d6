"""
Wire — expose the place-order workflow over HTTP.

    from ordertaking.wire import endpoint, Application, HTTPRouteTrigger, RequestResponseCodec
    from ordertaking.wire.contrib import fastapi

    endp = endpoint(workflow).expose(
        HTTPRouteTrigger("POST", "/orders"),
        RequestResponseCodec(OrderFormDto, HttpResponse),
    )
    app = fastapi.from_application(Application().mount(endp))

Or without any web framework:

    api = place_order_api(workflow)
    response = await api(HttpRequest("POST", "/orders", body))
"""

from ordertaking.wire._types import (
    Method,
    Path,
    HTTPRouteTrigger,
    WorkflowResult,
    ToDomain,
    FromDomain,
    RequestResponseCodec,
    Trigger,
    Codec,
    Exposure,
)
from ordertaking.wire._endpoint import Endpoint, endpoint, Application, application
from ordertaking.wire._http import (
    HttpRequest,
    HttpResponse,
    PlaceOrderApi,
    workflow_result_to_http_response,
    with_remote_errors,
    place_order_api,
)
from ordertaking.wire._services import (
    check_product_exists,
    check_address_exists,
    standard_prices,
    promotion_prices,
    create_order_acknowledgment_letter,
    send_order_acknowledgment,
    default_workflow,
)
from ordertaking.wire.dto import OrderFormDto, PlaceOrderErrorDto

# Subpackages
from ordertaking.wire import dto, contrib

__all__ = (
    # Core API
    "Endpoint",
    "endpoint",
    "Application",
    "application",
    "Trigger",
    "Codec",
    "Exposure",
    # Built-ins
    "Method",
    "Path",
    "HTTPRouteTrigger",
    "WorkflowResult",
    "ToDomain",
    "FromDomain",
    "RequestResponseCodec",
    # HTTP API
    "HttpRequest",
    "HttpResponse",
    "PlaceOrderApi",
    "workflow_result_to_http_response",
    "with_remote_errors",
    "place_order_api",
    # Stand-alone collaborators
    "check_product_exists",
    "check_address_exists",
    "standard_prices",
    "promotion_prices",
    "create_order_acknowledgment_letter",
    "send_order_acknowledgment",
    "default_workflow",
    # DTOs
    "OrderFormDto",
    "PlaceOrderErrorDto",
    # Subpackages
    "dto",
    "contrib",
)
