"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, default_settings, load_settings, parse_key_path
from .runtime_settings import (
    DEFAULT_XML_ARRAY_SEPARATOR,
    DEFAULT_XML_NAME,
    FlattenSettings,
    Settings,
    XMLSettings,
)

__all__ = [
    "DEFAULT_XML_ARRAY_SEPARATOR",
    "DEFAULT_XML_NAME",
    "FlattenSettings",
    "Settings",
    "XMLSettings",
    "ConfigurationError",
    "default_settings",
    "load_settings",
    "parse_key_path",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
