"""JSON and YAML encoding of document trees."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

import simplejson
import yaml

from flatdoc.errors import TypeMismatchError
from flatdoc.value_types import Tree, Value


def decode_json(data: bytes | str | None) -> Tree | None:
    """Decode a JSON object, keeping every number as an exact ``Decimal``.

    An absent payload or a JSON ``null`` yields ``None``.
    """
    if data is None:
        return None
    parsed = simplejson.loads(data, parse_float=Decimal, parse_int=Decimal)
    return _require_tree(parsed)


def encode_json(document: Tree | None, *, indent: int | None = None) -> str:
    """Encode a document as JSON; an absent document encodes as ``null``.

    ``Decimal`` numbers are written with their own digits.
    """
    return simplejson.dumps(document, use_decimal=True, ensure_ascii=False, indent=indent)


def decode_yaml(data: bytes | str | None) -> Tree | None:
    """Decode a YAML mapping; an empty stream or ``null`` yields ``None``."""
    if data is None:
        return None
    parsed = yaml.safe_load(data)
    return _require_tree(_plain_yaml(parsed))


def encode_yaml(document: Tree | None) -> str:
    """Encode a document as YAML, writing exact numbers with their own digits."""
    return yaml.dump(
        document, Dumper=_DocumentDumper, sort_keys=False, allow_unicode=True
    )


def _require_tree(parsed: Any) -> Tree | None:
    if parsed is None:
        return None
    if not isinstance(parsed, dict):
        raise TypeMismatchError("dict", parsed)
    return parsed


def _plain_yaml(value: Any) -> Value:
    # Keys become strings and timestamps their ISO text so the tree only holds document values.
    if isinstance(value, Mapping):
        return {str(key): _plain_yaml(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain_yaml(item) for item in value]
    if isinstance(value, date):
        return value.isoformat()
    return value


class _DocumentDumper(yaml.SafeDumper):
    """Safe dumper that also represents ``Decimal`` numbers."""


def _represent_decimal(dumper: yaml.SafeDumper, value: Decimal) -> yaml.ScalarNode:
    if not value.is_finite():
        return dumper.represent_float(float(value))
    if value == value.to_integral_value():
        return dumper.represent_scalar(
            "tag:yaml.org,2002:int", format(value.to_integral_value(), "f")
        )
    return dumper.represent_scalar("tag:yaml.org,2002:float", format(value, "f"))


_DocumentDumper.add_representer(Decimal, _represent_decimal)
