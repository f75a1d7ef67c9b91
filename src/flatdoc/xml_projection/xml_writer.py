"""XML serialization of nested documents."""

from __future__ import annotations

from collections.abc import Mapping

from lxml import etree

from flatdoc.configuration.runtime_settings import XMLSettings
from flatdoc.value_coercion.scalar_formatting import format_scalar
from flatdoc.value_types import Value

from .xml_reader import XML_NAMESPACE_SEPARATOR

_XMLNS = "xmlns"

NamespaceMap = Mapping[str | None, str]


def write_xml(document: Mapping[str, Value] | None, settings: XMLSettings) -> bytes:
    """Serialize ``document`` under a root element built from ``settings``.

    Nested mappings become nested elements and every other value becomes a
    leaf element holding its text form. When a namespace is configured it is
    the default namespace of every element. An empty document produces no
    output at all.

    Raises:
      ValueError: If a key is not a valid XML name or uses an undeclared prefix.
    """
    if not document:
        return b""
    nsmap, attributes = _split_namespace_declarations(settings)
    root = etree.Element(_qualify(settings.name, nsmap), nsmap=nsmap)
    for name, value in attributes.items():
        root.set(_qualify(name, nsmap, default_namespace=False), value)
    _append_children(root, document, settings.array_separator, nsmap)
    return etree.tostring(root, encoding="utf-8")


def _append_children(
    parent: etree._Element,
    document: Mapping[str, Value],
    array_separator: str,
    nsmap: NamespaceMap,
) -> None:
    for key, value in document.items():
        child = etree.SubElement(parent, _qualify(key, nsmap))
        if isinstance(value, Mapping):
            _append_children(child, value, array_separator, nsmap)
        else:
            child.text = format_scalar(value, array_separator)


def _split_namespace_declarations(
    settings: XMLSettings,
) -> tuple[dict[str | None, str], dict[str, str]]:
    nsmap: dict[str | None, str] = {}
    if settings.namespace:
        nsmap[None] = settings.namespace
    attributes: dict[str, str] = {}
    for name, value in settings.attributes.items():
        prefix, separator, local_name = name.partition(XML_NAMESPACE_SEPARATOR)
        if name == _XMLNS:
            nsmap[None] = value
        elif separator and prefix == _XMLNS:
            nsmap[local_name] = value
        else:
            attributes[name] = value
    return nsmap, attributes


def _qualify(name: str, nsmap: NamespaceMap, *, default_namespace: bool = True) -> str:
    prefix, separator, local_name = name.partition(XML_NAMESPACE_SEPARATOR)
    if separator:
        if prefix not in nsmap:
            raise ValueError(f"Undeclared namespace prefix in name: {name}")
        return str(etree.QName(nsmap[prefix], local_name))
    if default_namespace and nsmap.get(None):
        return str(etree.QName(nsmap[None], name))
    return name
