from __future__ import annotations

import pytest
from builders import build_order, build_workflow

from ordertaking import place_order as P


@pytest.fixture
def order() -> P.UnvalidatedOrder:
    return build_order()


@pytest.fixture
def workflow() -> P.PlaceOrderWorkflow:
    return build_workflow()
