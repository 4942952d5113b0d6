"""ConstrainedTypeError — the one failure every constrained value reports."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConstrainedTypeError:
    """
    A raw value did not satisfy the rule of a constrained type.

    `field_name` is whatever the caller passed to `create`, so the same type
    reports "FirstName" in one place and "LastName" in another.
    """

    field_name: str
    message: str


__all__ = ("ConstrainedTypeError",)
