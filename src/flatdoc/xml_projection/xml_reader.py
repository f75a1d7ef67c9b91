"""XML parsing into nested documents.

Parsing happens in two steps. ``linearize`` streams the element events and
records every leaf element under its full path; ``expand`` rebuilds the nested
mappings from those paths. Leaf values are kept as raw text: an array written
as ``1|2|3`` reads back as that string and booleans read back as ``"true"``.
"""

from __future__ import annotations

import io
import logging

from lxml import etree

from flatdoc.value_types import Tree

XML_LEVEL_SEPARATOR = ">"
XML_NAMESPACE_SEPARATOR = ":"

_LOGGER = logging.getLogger(__name__)


def read_xml(data: bytes | str) -> Tree:
    """Parse an XML document into nested mappings without its root element.

    Raises:
      lxml.etree.XMLSyntaxError: If the input is not well-formed XML.
    """
    return expand(linearize(data))


def linearize(data: bytes | str) -> dict[str, str]:
    """Return the text of every leaf element keyed by its ``>``-joined path.

    The root element name is the first path segment. Namespaced names are
    written ``alias:local`` using the prefixes declared on the root element.
    """
    source = _byte_stream(data)
    entries: dict[str, str] = {}
    aliases: dict[str, str] = {}
    path: list[str] = []
    grew = False
    events = etree.iterparse(
        source, events=("start", "end"), resolve_entities=False, no_network=True
    )
    for event, element in events:
        if event == "start":
            if not path:
                aliases = {uri: prefix for prefix, uri in element.nsmap.items() if prefix}
            path.append(_qualified_name(element, aliases))
            grew = True
            continue
        # A start right before this end means the element has no child elements.
        if grew and len(path) > 1:
            entries[XML_LEVEL_SEPARATOR.join(path)] = "".join(element.itertext())
        grew = False
        path.pop()
    _LOGGER.debug("Read %d leaf elements", len(entries))
    return entries


def root_namespaces(data: bytes | str) -> dict[str, str]:
    """Return the prefixed namespace declarations of the root element."""
    events = etree.iterparse(
        _byte_stream(data), events=("start",), resolve_entities=False, no_network=True
    )
    for _event, element in events:
        return {prefix: uri for prefix, uri in element.nsmap.items() if prefix}
    return {}


def expand(path_entries: dict[str, str]) -> Tree:
    """Rebuild nested mappings from ``>``-joined paths, dropping the root segment."""
    tree: Tree = {}
    for path, value in path_entries.items():
        segments = path.split(XML_LEVEL_SEPARATOR)[1:]
        if not segments:
            continue
        node = tree
        for segment in segments[:-1]:
            if segment not in node:
                node[segment] = {}
            node = node[segment]  # type: ignore[assignment]
        node[segments[-1]] = value
    return tree


def _byte_stream(data: bytes | str) -> io.BytesIO:
    return io.BytesIO(data.encode("utf-8") if isinstance(data, str) else data)


def _qualified_name(element: etree._Element, aliases: dict[str, str]) -> str:
    name = etree.QName(element)
    alias = aliases.get(name.namespace or "")
    if alias:
        return f"{alias}{XML_NAMESPACE_SEPARATOR}{name.localname}"
    return name.localname
