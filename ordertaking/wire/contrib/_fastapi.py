from __future__ import annotations

from typing import Any, TypeGuard

import fastapi
import structlog
from fastapi.exceptions import RequestValidationError

from ordertaking._logging import setup_logging
from ordertaking.place_order import PlaceOrder, ServiceInfo
from ordertaking.settings import Settings, load_settings
from ordertaking.wire._endpoint import Application, Endpoint, endpoint
from ordertaking.wire._http import HttpResponse, with_remote_errors
from ordertaking.wire._services import default_workflow
from ordertaking.wire._types import (
    Codec,
    FromDomain,
    HTTPRouteTrigger,
    Path,
    RequestResponseCodec,
    ToDomain,
    Trigger,
)
from ordertaking.wire.dto import OrderFormDto

logger = structlog.get_logger(__name__)


def is_http_exposure(tc: tuple[Trigger, Codec]) -> TypeGuard[tuple[HTTPRouteTrigger, RequestResponseCodec]]:
    return isinstance(tc[0], HTTPRouteTrigger) and isinstance(tc[1], RequestResponseCodec)


def to_fastapi_response(response: HttpResponse) -> fastapi.Response:
    return fastapi.Response(
        content=response.body,
        status_code=response.http_status_code,
        media_type="application/json",
    )


async def bad_request_handler(request: fastapi.Request, exc: RequestValidationError) -> fastapi.Response:
    """Bodies that are not order forms get 400 BadRequest, same as `place_order_api`."""
    logger.warning("malformed order form", uri=request.url.path, errors=len(exc.errors()))
    return to_fastapi_response(HttpResponse.bad_request(str(exc)))


def compile_to_fastapi_route(
    endp: Endpoint,
) -> list[tuple[str, Path, Any]]:  # (method, path, route_func)
    routes: list[tuple[str, Path, Any]] = []

    for exposure in endp.exposures:
        if not is_http_exposure(exposure):
            continue

        http_trigger, codec = exposure

        def make_handler(
            req_cls: type[ToDomain],
            resp_cls: type[FromDomain],
            workflow: PlaceOrder,
        ) -> Any:
            async def _route_handler(req: Any) -> fastapi.Response:
                result = await workflow(req.to_domain())
                return to_fastapi_response(resp_cls.from_domain(result))

            _route_handler.__annotations__ = {
                "req": req_cls,
                "return": fastapi.Response,
            }

            return _route_handler

        guarded = with_remote_errors(
            endp.workflow, ServiceInfo(name="PlaceOrder", endpoint=http_trigger.path)
        )
        handler = make_handler(codec.request, codec.response, guarded)

        routes.append((http_trigger.method.upper(), http_trigger.path, handler))

    return routes


def add_endpoint_to_app(
    app: fastapi.FastAPI,
    endp: Endpoint,
) -> None:
    for method, path, handler in compile_to_fastapi_route(endp):
        route_method = getattr(app, method.lower(), None)
        if route_method is None:
            raise ValueError(f"Unsupported HTTP method: {method}")

        route_method(path)(handler)


def from_application(app: Application, *, title: str = "Order Taking") -> fastapi.FastAPI:
    f_app = fastapi.FastAPI(title=title)
    f_app.add_exception_handler(RequestValidationError, bad_request_handler)

    for endp in app.endpoints:
        add_endpoint_to_app(f_app, endp)

    return f_app


def create_app(settings: Settings | None = None) -> fastapi.FastAPI:
    """
    The order-taking service: stand-alone collaborators behind
    `POST <settings.http.route_path>`.

    Example:
        uvicorn --factory ordertaking.wire.contrib.fastapi:create_app
    """
    settings = settings or load_settings()
    setup_logging(settings.logging.level, settings.logging.format)

    endp = endpoint(default_workflow(settings)).expose(
        HTTPRouteTrigger("POST", settings.http.route_path),
        RequestResponseCodec(request=OrderFormDto, response=HttpResponse),
    )
    return from_application(Application().mount(endp), title=settings.http.title)
