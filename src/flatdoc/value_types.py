"""Value shapes a document tree is made of.

A document is a ``dict`` whose values are ``None``, ``bool``, ``float``,
arbitrary-precision numbers (``Decimal`` from JSON, ``int`` from YAML or
Python callers), ``str``, lists of values or nested ``dict`` values.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

Scalar: TypeAlias = None | bool | float | int | Decimal | str
Value: TypeAlias = Scalar | list["Value"] | dict[str, "Value"]
Tree: TypeAlias = dict[str, Value]
FlatMap: TypeAlias = dict[str, Value]
