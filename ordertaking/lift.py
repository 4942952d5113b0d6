"""
Lift — helpers for moving between plain values, Option, Result and
LazyCoroResult.

Re-exports from combinators.lift with workflow-specific additions.
"""

from __future__ import annotations

from kungfu import Option, Some

# Re-export everything the workflow uses from combinators.lift
from combinators.lift import (
    pure,
    fail,
    from_result,
    catching_async,
)


# ═══════════════════════════════════════════════════════════════════════════════
# Option helpers
# ═══════════════════════════════════════════════════════════════════════════════

def list_of_option[T](opt: Option[T]) -> list[T]:
    """`Some(x)` → `[x]`, `Nothing()` → `[]`."""
    match opt:
        case Some(value):
            return [value]
        case _:
            return []


__all__ = (
    # From combinators.lift
    "pure",
    "fail",
    "from_result",
    "catching_async",
    # ordertaking additions
    "list_of_option",
)
