"""
Framework-free HTTP API — HttpRequest in, HttpResponse out.

    api = place_order_api(workflow)
    response = await api(HttpRequest("POST", "/orders", body))
    response.http_status_code  # 200, 401 or 400
"""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import pydantic
import structlog
from kungfu import Error, LazyCoroResult, Ok

from ordertaking import lift as L
from ordertaking.place_order import (
    PlaceOrder,
    PlaceOrderError,
    PlaceOrderEvent,
    RemoteServiceError,
    ServiceInfo,
    UnvalidatedOrder,
)
from ordertaking.wire._types import WorkflowResult
from ordertaking.wire.dto import OrderFormDto, PlaceOrderErrorDto, place_order_event_dto_from_domain

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class HttpRequest:
    action: str
    uri: str
    body: str


@dataclass(frozen=True, slots=True)
class HttpResponse:
    http_status_code: int
    body: str

    @classmethod
    def from_domain(cls, result: WorkflowResult) -> HttpResponse:
        return workflow_result_to_http_response(result)

    @classmethod
    def bad_request(cls, message: str) -> HttpResponse:
        return cls(400, PlaceOrderErrorDto(code="BadRequest", message=message).model_dump_json())


type PlaceOrderApi = Callable[[HttpRequest], Awaitable[HttpResponse]]


def workflow_result_to_http_response(result: WorkflowResult) -> HttpResponse:
    """`Ok(events)` → 200 + JSON list of event DTOs; `Error(err)` → 401 + `{code, message}`."""
    match result:
        case Ok(events):
            return HttpResponse(200, json.dumps([place_order_event_dto_from_domain(e) for e in events]))
        case Error(error):
            return HttpResponse(401, PlaceOrderErrorDto.from_domain(error).model_dump_json())


def with_remote_errors(workflow: PlaceOrder, service: ServiceInfo) -> PlaceOrder:
    """
    Exceptions escaping a collaborator become `RemoteServiceError(service, exc)`.

    The workflow itself never raises for expected failures; whatever does
    raise came from an injected dependency.
    """

    def on_error(exc: Exception) -> PlaceOrderError:
        logger.error("collaborator raised", service=service.name, exc_info=exc)
        return RemoteServiceError(service=service, exception=exc)

    def guarded(order: UnvalidatedOrder) -> LazyCoroResult[list[PlaceOrderEvent], PlaceOrderError]:
        return L.catching_async(workflow(order), on_error=on_error).then(L.from_result)

    return guarded


def place_order_api(workflow: PlaceOrder) -> PlaceOrderApi:
    """
    Parse the JSON order form, run the workflow, serialise the outcome.

    A body that is not a valid order form never reaches the workflow: it is
    answered with 400 and `{"code": "BadRequest", ...}`.
    """

    async def api(request: HttpRequest) -> HttpResponse:
        try:
            order_form = OrderFormDto.model_validate_json(request.body)
        except pydantic.ValidationError as exc:
            logger.warning("malformed order form", uri=request.uri, errors=exc.error_count())
            return HttpResponse.bad_request(str(exc))

        run = with_remote_errors(workflow, ServiceInfo(name="PlaceOrder", endpoint=request.uri))
        return workflow_result_to_http_response(await run(order_form.to_domain()))

    return api


__all__ = (
    "HttpRequest",
    "HttpResponse",
    "PlaceOrderApi",
    "workflow_result_to_http_response",
    "with_remote_errors",
    "place_order_api",
)
