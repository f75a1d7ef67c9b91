"""Tolerant conversions from document values to Python primitives."""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime
from decimal import Decimal

from flatdoc.errors import TypeMismatchError
from flatdoc.value_types import Value

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_SIGNED_PATTERN = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def to_bool(value: Value) -> bool:
    """Return a bool from a native bool or a boolean literal string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value in _TRUE_LITERALS:
            return True
        if value in _FALSE_LITERALS:
            return False
        raise ValueError(f"invalid boolean literal: {value!r}")
    raise TypeMismatchError("bool", value)


def to_float(value: Value) -> float:
    """Return a float from a float, an exact number or a decimal float literal.

    Exact numbers and literals beyond the float range raise ``ValueError``;
    only ``inf`` and ``nan`` spellings produce non-finite results.
    """
    if isinstance(value, bool):
        raise TypeMismatchError("float", value)
    if isinstance(value, float):
        return value
    if isinstance(value, (Decimal, int)):
        return _exact_to_float(value)
    if isinstance(value, str):
        return _parse_float(value)
    raise TypeMismatchError("float", value)


def to_int(value: Value) -> int:
    """Return a signed 64-bit integer.

    Floats are truncated toward zero; exact numbers and strings must be
    base-10 integer literals.
    """
    if isinstance(value, bool):
        raise TypeMismatchError("int", value)
    if isinstance(value, float):
        return _check_range(_truncate(value), INT64_MIN, INT64_MAX)
    if isinstance(value, (Decimal, int, str)):
        return _check_range(_parse_integer(str(value), _SIGNED_PATTERN), INT64_MIN, INT64_MAX)
    raise TypeMismatchError("int", value)


def to_uint(value: Value) -> int:
    """Return an unsigned 64-bit integer, following the rules of ``to_int``."""
    if isinstance(value, bool):
        raise TypeMismatchError("uint", value)
    if isinstance(value, float):
        return _check_range(_truncate(value), 0, UINT64_MAX)
    if isinstance(value, (Decimal, int, str)):
        return _check_range(_parse_integer(str(value), _UNSIGNED_PATTERN), 0, UINT64_MAX)
    raise TypeMismatchError("uint", value)


def to_str(value: Value) -> str:
    """Return a string; exact numbers are rendered, bools and floats are not."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise TypeMismatchError("str", value)
    if isinstance(value, (Decimal, int)):
        return str(value)
    raise TypeMismatchError("str", value)


def to_str_list(value: Value) -> list[str]:
    """Return a list of strings, failing on the first element ``to_str`` rejects."""
    if not isinstance(value, list):
        raise TypeMismatchError("list[str]", value)
    return [to_str(item) for item in value]


def to_datetime(value: Value, time_format: str) -> datetime:
    """Parse a string value with a ``strptime`` format.

    Parse failures surface as the ``ValueError`` raised by ``strptime``.
    Results without an explicit offset are placed in UTC.
    """
    parsed = datetime.strptime(to_str(value), time_format)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def _exact_to_float(value: Decimal | int) -> float:
    try:
        number = float(value)
    except OverflowError as exc:
        raise ValueError("number out of float range") from exc
    if math.isinf(number) and (isinstance(value, int) or value.is_finite()):
        raise ValueError("number out of float range")
    return number


def _parse_float(text: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid float literal: {text!r}")
    number = float(text)
    if math.isinf(number) and "inf" not in text.lower():
        raise ValueError(f"value {text} out of float range")
    return number


def _truncate(value: float) -> int:
    if not math.isfinite(value):
        raise ValueError(f"cannot convert {value!r} to an integer")
    return int(value)


def _parse_integer(text: str, pattern: re.Pattern[str]) -> int:
    if not pattern.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(text)


def _check_range(number: int, lower: int, upper: int) -> int:
    if number < lower or number > upper:
        raise ValueError(f"value {number} out of range [{lower}, {upper}]")
    return number
