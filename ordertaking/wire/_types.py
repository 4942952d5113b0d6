"""Triggers, codecs and exposures — how a workflow is reached from outside."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Protocol

from kungfu import Result

from ordertaking.place_order import PlaceOrderError, PlaceOrderEvent, UnvalidatedOrder

if TYPE_CHECKING:
    from ordertaking.wire._http import HttpResponse

# ═══════════════════════════════════════════════════════════════════════════════
# Triggers
# ═══════════════════════════════════════════════════════════════════════════════

type Method = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]
type Path = str


@dataclass(frozen=True, slots=True)
class HTTPRouteTrigger:
    method: Method
    path: Path


# ═══════════════════════════════════════════════════════════════════════════════
# Codecs
# ═══════════════════════════════════════════════════════════════════════════════

type WorkflowResult = Result[list[PlaceOrderEvent], PlaceOrderError]


class ToDomain(Protocol):
    def to_domain(self) -> UnvalidatedOrder: ...


class FromDomain(Protocol):
    @classmethod
    def from_domain(cls, result: WorkflowResult, /) -> HttpResponse: ...


@dataclass(frozen=True, slots=True)
class RequestResponseCodec:
    """
    `request` parses the payload into an UnvalidatedOrder; `response` turns
    the workflow's Result into an HttpResponse.
    """

    request: type[ToDomain]
    response: type[FromDomain]


type Trigger = HTTPRouteTrigger
type Codec = RequestResponseCodec
type Exposure = tuple[Trigger, Codec]


__all__ = (
    "Method",
    "Path",
    "HTTPRouteTrigger",
    "WorkflowResult",
    "ToDomain",
    "FromDomain",
    "RequestResponseCodec",
    "Trigger",
    "Codec",
    "Exposure",
)
