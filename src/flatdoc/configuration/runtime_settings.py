"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType

DEFAULT_XML_NAME = "d"
DEFAULT_XML_ARRAY_SEPARATOR = "|"
XMLNS_ATTRIBUTE_PREFIX = "xmlns:"


@dataclass(frozen=True)
class XMLSettings:
    """XML projection of a document: root element, namespace and array text."""

    name: str = DEFAULT_XML_NAME
    namespace: str | None = None
    array_separator: str = DEFAULT_XML_ARRAY_SEPARATOR
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Empty values fall back to the defaults.
        if not self.name:
            object.__setattr__(self, "name", DEFAULT_XML_NAME)
        if not self.array_separator:
            object.__setattr__(self, "array_separator", DEFAULT_XML_ARRAY_SEPARATOR)
        if not self.namespace:
            object.__setattr__(self, "namespace", None)
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def with_namespace_declarations(self, declarations: Mapping[str, str]) -> XMLSettings:
        """Return settings that also declare each ``prefix: uri`` pair on the root.

        Prefixes already declared in ``attributes`` keep their configured URI.
        """
        if not declarations:
            return self
        declared = {
            f"{XMLNS_ATTRIBUTE_PREFIX}{prefix}": uri for prefix, uri in declarations.items()
        }
        return replace(self, attributes={**declared, **self.attributes})


@dataclass(frozen=True)
class FlattenSettings:
    """Branches excluded from every flatten call."""

    ignored_paths: tuple[tuple[str, ...], ...] = ()


@dataclass(frozen=True)
class Settings:
    """Top-level configuration aggregate."""

    path: Path | None
    xml: XMLSettings
    flatten: FlattenSettings
