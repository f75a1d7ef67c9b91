"""XML projection exports."""

from .xml_reader import XML_LEVEL_SEPARATOR, expand, linearize, read_xml, root_namespaces
from .xml_writer import write_xml

__all__ = [
    "XML_LEVEL_SEPARATOR",
    "expand",
    "linearize",
    "read_xml",
    "root_namespaces",
    "write_xml",
]
