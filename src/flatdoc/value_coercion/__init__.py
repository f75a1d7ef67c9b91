"""Value coercion exports."""

from .scalar_coercion import (
    to_bool,
    to_datetime,
    to_float,
    to_int,
    to_str,
    to_str_list,
    to_uint,
)
from .scalar_formatting import format_scalar

__all__ = [
    "format_scalar",
    "to_bool",
    "to_datetime",
    "to_float",
    "to_int",
    "to_str",
    "to_str_list",
    "to_uint",
]
