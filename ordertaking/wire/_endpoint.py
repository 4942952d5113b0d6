from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

from ordertaking.place_order import PlaceOrder
from ordertaking.wire._types import Codec, Exposure, Trigger


@dataclass(slots=True)
class Endpoint:
    """A workflow plus every (trigger, codec) pair it is reachable through."""

    workflow: PlaceOrder
    exposures: list[Exposure] = field(default_factory=list[Exposure])

    @classmethod
    def from_workflow(cls, workflow: PlaceOrder) -> Endpoint:
        return cls(workflow=workflow)

    def expose(self, trigger: Trigger, codec: Codec) -> Endpoint:
        return Endpoint(
            workflow=self.workflow, exposures=[*self.exposures, (trigger, codec)]
        )


def endpoint(workflow: PlaceOrder) -> Endpoint:
    return Endpoint.from_workflow(workflow)


class Application:
    def __init__(self) -> None:
        self.endpoints: list[Endpoint] = []

    def mount(self, *endps: Endpoint) -> Self:
        self.endpoints.extend(endps)
        return self


def application() -> Application:
    return Application()


__all__ = ("Endpoint", "endpoint", "Application", "application")
