"""Hierarchical document with flattening, typed accessors and codecs."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import BinaryIO, TextIO, TypeVar

from flatdoc.configuration.runtime_settings import XMLSettings
from flatdoc.errors import FlatError, NotFoundError
from flatdoc.key_flattening.tree_flattener import flatten
from flatdoc.value_coercion.scalar_coercion import (
    to_bool,
    to_datetime,
    to_float,
    to_int,
    to_str,
    to_str_list,
    to_uint,
)
from flatdoc.value_types import FlatMap, Tree, Value
from flatdoc.xml_projection.xml_reader import read_xml, root_namespaces
from flatdoc.xml_projection.xml_writer import write_xml

from .document_codecs import decode_json, decode_yaml, encode_json, encode_yaml

ZERO_TIME = datetime(1, 1, 1, tzinfo=UTC)

_T = TypeVar("_T")


class Document:
    """A nested document and the XML settings used to serialize it.

    ``data`` is ``None`` when no document was given or decoded; it is
    replaced, never patched, by the ``unmarshal_*`` methods. Instances carry no
    locking: concurrent reads are safe, concurrent unmarshalling is not.
    """

    def __init__(self, data: Tree | None = None, settings: XMLSettings | None = None) -> None:
        self.data = data
        self._settings = settings or XMLSettings()

    @property
    def settings(self) -> XMLSettings:
        """XML settings fixed when the document was built."""
        return self._settings

    def __repr__(self) -> str:
        return f"Document(data={self.data!r}, settings={self.settings!r})"

    @classmethod
    def from_json(cls, data: bytes | str | None, settings: XMLSettings | None = None) -> Document:
        """Build a document from JSON text."""
        return cls(decode_json(data), settings)

    @classmethod
    def from_yaml(cls, data: bytes | str | None, settings: XMLSettings | None = None) -> Document:
        """Build a document from YAML text."""
        return cls(decode_yaml(data), settings)

    @classmethod
    def from_xml(cls, data: bytes | str, settings: XMLSettings | None = None) -> Document:
        """Build a document from XML text.

        Prefixes declared on the root element are added to the settings so
        keys such as ``hyp:number`` can be written back out.
        """
        tree = read_xml(data)
        base = settings or XMLSettings()
        return cls(tree, base.with_namespace_declarations(root_namespaces(data)))

    def flatten(self, *ignored_paths: Sequence[str]) -> FlatMap | None:
        """Return every leaf on one level, or ``None`` for an empty document.

        Each entry of ``ignored_paths`` is a sequence of raw key segments naming
        a branch to leave out, e.g. ``("object", "c")``.
        """
        return flatten(self.data, *ignored_paths)

    def lookup(self, *keys: str) -> Value:
        """Return the value found by walking ``keys`` from the document root.

        Raises:
          NotFoundError: If no key is given, a key is missing, or the walk
            reaches a value that is not a mapping.
        """
        if not keys:
            raise NotFoundError()
        value: Value = self.data
        for key in keys:
            if not isinstance(value, dict) or key not in value:
                raise NotFoundError()
            value = value[key]
        return value

    def get_bool(self, *keys: str) -> bool:
        return to_bool(self.lookup(*keys))

    def get_float(self, *keys: str) -> float:
        return to_float(self.lookup(*keys))

    def get_int(self, *keys: str) -> int:
        return to_int(self.lookup(*keys))

    def get_uint(self, *keys: str) -> int:
        return to_uint(self.lookup(*keys))

    def get_str(self, *keys: str) -> str:
        return to_str(self.lookup(*keys))

    def get_strs(self, *keys: str) -> list[str]:
        return to_str_list(self.lookup(*keys))

    def get_time(self, time_format: str, *keys: str) -> datetime:
        """Return the string behind ``keys`` parsed with a ``strptime`` format."""
        return to_datetime(self.lookup(*keys), time_format)

    def should_bool(self, *keys: str) -> bool:
        return _or_zero(self.get_bool, keys, False)

    def should_float(self, *keys: str) -> float:
        return _or_zero(self.get_float, keys, 0.0)

    def should_int(self, *keys: str) -> int:
        return _or_zero(self.get_int, keys, 0)

    def should_uint(self, *keys: str) -> int:
        return _or_zero(self.get_uint, keys, 0)

    def should_str(self, *keys: str) -> str:
        return _or_zero(self.get_str, keys, "")

    def should_strs(self, *keys: str) -> list[str]:
        return _or_zero(self.get_strs, keys, [])

    def should_time(self, time_format: str, *keys: str) -> datetime:
        try:
            return self.get_time(time_format, *keys)
        except (FlatError, ValueError):
            return ZERO_TIME

    def marshal_json(self) -> str:
        return encode_json(self.data)

    def unmarshal_json(self, data: bytes | str | None) -> None:
        self.data = decode_json(data)

    def json_encode(self, stream: TextIO) -> None:
        """Write the JSON form of the document followed by a newline."""
        stream.write(self.marshal_json())
        stream.write("\n")

    def marshal_yaml(self) -> str:
        return encode_yaml(self.data)

    def unmarshal_yaml(self, data: bytes | str | None) -> None:
        self.data = decode_yaml(data)

    def marshal_xml(self) -> bytes:
        """Return the XML form of the document; empty for an empty document."""
        return write_xml(self.data, self.settings)

    def unmarshal_xml(self, data: bytes | str) -> None:
        """Replace the document with the leaves read from XML text.

        Leaves keep their raw text: arrays, booleans and numbers are not re-typed.
        The settings are left unchanged.
        """
        self.data = read_xml(data)

    def xml_encode(self, stream: BinaryIO) -> None:
        stream.write(self.marshal_xml())


def _or_zero(getter: Callable[..., _T], keys: tuple[str, ...], zero: _T) -> _T:
    try:
        return getter(*keys)
    except (FlatError, ValueError):
        return zero
