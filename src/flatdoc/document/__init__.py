"""Document exports."""

from .document_codecs import decode_json, decode_yaml, encode_json, encode_yaml
from .document_model import ZERO_TIME, Document

__all__ = [
    "Document",
    "ZERO_TIME",
    "decode_json",
    "decode_yaml",
    "encode_json",
    "encode_yaml",
]
