"""
ordertaking — the place-order workflow as composable results.

    from ordertaking import domain as D
    from ordertaking import place_order as P
    from ordertaking import wire as W

    workflow = W.default_workflow()
    result = await workflow(order)        # Ok([...events]) | Error(PlaceOrderError)

Modules:
    domain       — constrained values, compound records
    place_order  — validate → price → ship → acknowledge → events
    wire         — DTOs, HTTP API, FastAPI integration
    settings     — pydantic-settings configuration
    lift         — Option / Result helpers
"""

from ordertaking._types import (
    Result,
    Ok,
    Error,
    Option,
    Some,
    Nothing,
    LazyCoroResult,
    AsyncResult,
)
from ordertaking._logging import setup_logging
from ordertaking.settings import Settings, load_settings

from ordertaking import domain, place_order, wire, lift, settings

__all__ = (
    # Types
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "LazyCoroResult",
    "AsyncResult",
    # Ambient
    "setup_logging",
    "Settings",
    "load_settings",
    # Modules
    "domain",
    "place_order",
    "wire",
    "lift",
    "settings",
)
