"""Flatten hierarchical JSON, YAML and XML documents into single-level maps."""

import logging

from .configuration import DEFAULT_XML_ARRAY_SEPARATOR, DEFAULT_XML_NAME, XMLSettings
from .document import ZERO_TIME, Document
from .errors import FlatError, NotFoundError, TypeMismatchError
from .key_flattening import flatten, simplify

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_XML_ARRAY_SEPARATOR",
    "DEFAULT_XML_NAME",
    "Document",
    "FlatError",
    "NotFoundError",
    "TypeMismatchError",
    "XMLSettings",
    "ZERO_TIME",
    "flatten",
    "simplify",
]
