"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import FlattenSettings, Settings, XMLSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_settings() -> Settings:
    """Return the settings used when no configuration file is given."""
    return Settings(path=None, xml=XMLSettings(), flatten=FlattenSettings())


def load_settings(config_path: Path | str) -> Settings:
    """Load and validate a YAML or JSON configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Settings(
        path=path,
        xml=parse_xml_section(parsed.get("xml")),
        flatten=parse_flatten_section(parsed.get("flatten")),
    )


def parse_xml_section(value: Any) -> XMLSettings:
    """Build XML settings from the optional ``xml`` section."""
    section = _optional_mapping(value, "xml")
    attributes = _optional_mapping(section.get("attributes"), "xml.attributes")
    for name, attribute_value in attributes.items():
        if not isinstance(name, str) or not isinstance(attribute_value, str):
            raise ConfigurationError("xml.attributes must map strings to strings.")
    return XMLSettings(
        name=_optional_string(section.get("name"), "xml.name") or "",
        namespace=_optional_string(section.get("namespace"), "xml.namespace"),
        array_separator=_optional_separator(section.get("array_separator")),
        attributes=dict(attributes),
    )


def parse_flatten_section(value: Any) -> FlattenSettings:
    """Build flatten settings from the optional ``flatten`` section."""
    section = _optional_mapping(value, "flatten")
    raw_paths = section.get("ignore")
    if raw_paths is None:
        return FlattenSettings()
    if isinstance(raw_paths, str) or not isinstance(raw_paths, Sequence):
        raise ConfigurationError("flatten.ignore must be a list of paths.")
    return FlattenSettings(ignored_paths=tuple(parse_key_path(item) for item in raw_paths))


def parse_key_path(value: Any) -> tuple[str, ...]:
    """Parse one key path given as a dotted string or a list of segments."""
    if isinstance(value, str):
        segments = [segment for segment in value.split(".") if segment]
    elif isinstance(value, Sequence):
        segments = []
        for segment in value:
            if not isinstance(segment, str):
                raise ConfigurationError("flatten.ignore path segments must be strings.")
            segments.append(segment)
    else:
        raise ConfigurationError("flatten.ignore entries must be strings or lists of strings.")
    if not segments:
        raise ConfigurationError("flatten.ignore entries must not be empty.")
    return tuple(segments)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_separator(value: Any) -> str:
    # Separators are kept verbatim, surrounding blanks included.
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigurationError("xml.array_separator must be a string.")
    return value
