"""Text rendering of document leaf values."""

from __future__ import annotations

from decimal import Decimal

from flatdoc.value_types import Value


def format_scalar(value: Value, array_separator: str) -> str:
    """Render a leaf value as XML text content.

    Lists are rendered element by element and joined with ``array_separator``.
    Values without a text form (``None``, mappings) render as an empty string.
    """
    if isinstance(value, list):
        return array_separator.join(format_scalar(item, array_separator) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (Decimal, int)):
        return str(value)
    if isinstance(value, str):
        return value
    return ""


def _format_float(value: float) -> str:
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text
