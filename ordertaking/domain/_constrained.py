"""
Generic constructors shared by the constrained value types.

Each takes the field name, a constructor for the wrapped type and the raw
input, and answers with `Ok(wrapped)` or `Error(ConstrainedTypeError)`.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from decimal import Decimal

from kungfu import Error, Nothing, Ok, Option, Result, Some

from ordertaking.domain._errors import ConstrainedTypeError

type Number = int | float | Decimal


def _fail(field_name: str, message: str) -> Error[ConstrainedTypeError]:
    return Error(ConstrainedTypeError(field_name, message))


# ═══════════════════════════════════════════════════════════════════════════════
# Strings
# ═══════════════════════════════════════════════════════════════════════════════

def create_string[T](
    field_name: str,
    ctor: Callable[[str], T],
    max_len: int,
    raw: str | None,
) -> Result[T, ConstrainedTypeError]:
    """Non-empty string of at most `max_len` characters."""
    if not raw:
        return _fail(field_name, f"{field_name} must not be null or empty")
    if len(raw) > max_len:
        return _fail(field_name, f"{field_name} must not be more than {max_len} chars")
    return Ok(ctor(raw))


def create_string_option[T](
    field_name: str,
    ctor: Callable[[str], T],
    max_len: int,
    raw: str | None,
) -> Result[Option[T], ConstrainedTypeError]:
    """Like `create_string`, but empty input is `Ok(Nothing())`."""
    if not raw:
        return Ok(Nothing())
    if len(raw) > max_len:
        return _fail(field_name, f"{field_name} must not be more than {max_len} chars")
    return Ok(Some(ctor(raw)))


def create_like[T](
    field_name: str,
    ctor: Callable[[str], T],
    pattern: re.Pattern[str],
    raw: str | None,
) -> Result[T, ConstrainedTypeError]:
    """Non-empty string matching `pattern`."""
    if not raw:
        return _fail(field_name, f"{field_name} must not be null or empty")
    if pattern.search(raw) is None:
        return _fail(
            field_name,
            f"{field_name}: '{raw}' must match the pattern '{pattern.pattern}'",
        )
    return Ok(ctor(raw))


# ═══════════════════════════════════════════════════════════════════════════════
# Numbers
# ═══════════════════════════════════════════════════════════════════════════════

def _as_integer(raw: object) -> int | None:
    match raw:
        case bool():
            return None
        case int():
            return raw
        case Decimal() if raw.is_finite() and raw == raw.to_integral_value():
            return int(raw)
        case float() if raw.is_integer():
            return int(raw)
        case _:
            return None


def _as_decimal(raw: object) -> Decimal | None:
    match raw:
        case bool():
            return None
        case Decimal():
            return raw if raw.is_finite() else None
        case int():
            return Decimal(raw)
        case float():
            value = Decimal(str(raw))
            return value if value.is_finite() else None
        case _:
            return None


def create_int[T](
    field_name: str,
    ctor: Callable[[int], T],
    min_val: int,
    max_val: int,
    raw: Number,
) -> Result[T, ConstrainedTypeError]:
    """Integer in `[min_val, max_val]`. Fractional input is rejected."""
    value = _as_integer(raw)
    if value is None:
        return _fail(field_name, f"{field_name} must be an integer")
    if value < min_val:
        return _fail(field_name, f"{field_name} must not be less than {min_val}")
    if value > max_val:
        return _fail(field_name, f"{field_name} must not be more than {max_val}")
    return Ok(ctor(value))


def create_decimal[T](
    field_name: str,
    ctor: Callable[[Decimal], T],
    min_val: Decimal,
    max_val: Decimal,
    raw: Number,
) -> Result[T, ConstrainedTypeError]:
    """Decimal in `[min_val, max_val]`."""
    value = _as_decimal(raw)
    if value is None:
        return _fail(field_name, f"{field_name} must be a number")
    if value < min_val:
        return _fail(field_name, f"{field_name} must not be less than {min_val}")
    if value > max_val:
        return _fail(field_name, f"{field_name} must not be more than {max_val}")
    return Ok(ctor(value))


__all__ = (
    "Number",
    "create_string",
    "create_string_option",
    "create_like",
    "create_int",
    "create_decimal",
)
