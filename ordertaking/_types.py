"""
Core types for ordertaking.

Re-exports from kungfu + workflow-wide type aliases.
"""

from __future__ import annotations

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Lazy Computation Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type AsyncResult[T, E] = LazyCoroResult[T, E]
"""Lazy async computation that may fail. Nothing runs until awaited."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "LazyCoroResult",
    # Type aliases
    "AsyncResult",
)
