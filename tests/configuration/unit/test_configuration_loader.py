"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from flatdoc.configuration.loader import (
    ConfigurationError,
    default_settings,
    load_settings,
    parse_key_path,
)
from flatdoc.configuration.runtime_settings import XMLSettings


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "flatdoc.yaml",
        """
xml:
  name: record
  namespace: "urn:default"
  array_separator: ", "
  attributes:
    xmlns:hyp: "urn:hyp"
    version: "2"
flatten:
  ignore:
    - "object.c"
    - ["hyp:number"]
""",
    )

    settings = load_settings(config_path)

    assert settings.path == config_path
    assert settings.xml.name == "record"
    assert settings.xml.namespace == "urn:default"
    assert settings.xml.array_separator == ", "
    assert dict(settings.xml.attributes) == {"xmlns:hyp": "urn:hyp", "version": "2"}
    assert settings.flatten.ignored_paths == (("object", "c"), ("hyp:number",))


def test_loads_json_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "flatdoc.json",
        json.dumps({"xml": {"name": "doc"}, "flatten": {"ignore": ["secret"]}}),
    )

    settings = load_settings(config_path)

    assert settings.xml.name == "doc"
    assert settings.xml.array_separator == "|"
    assert settings.flatten.ignored_paths == (("secret",),)


def test_empty_configuration_uses_defaults(tmp_path: Path) -> None:
    settings = load_settings(_write_file(tmp_path / "empty.yaml", ""))

    assert settings.xml == XMLSettings()
    assert settings.flatten.ignored_paths == ()


def test_blank_values_fall_back_to_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "blank.yaml",
        'xml:\n  name: "  "\n  namespace: ""\n  array_separator: ""\n',
    )

    settings = load_settings(config_path)

    assert settings.xml.name == "d"
    assert settings.xml.namespace is None
    assert settings.xml.array_separator == "|"


def test_default_settings_have_no_path() -> None:
    settings = default_settings()

    assert settings.path is None
    assert settings.xml == XMLSettings()


def test_missing_configuration_file_fails(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_settings(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- just\n- a list\n", "root must be a mapping"),
        ("xml: nope\n", "'xml' must be a mapping"),
        ("xml:\n  name: 5\n", "xml.name must be a string"),
        ("xml:\n  array_separator: 1\n", "xml.array_separator must be a string"),
        ("xml:\n  attributes:\n    version: 2\n", "xml.attributes must map strings"),
        ("flatten:\n  ignore: object.c\n", "flatten.ignore must be a list"),
        ("flatten:\n  ignore:\n    - 5\n", "entries must be strings"),
        ("flatten:\n  ignore:\n    - [object, 1]\n", "segments must be strings"),
        ("flatten:\n  ignore:\n    - ''\n", "must not be empty"),
    ],
)
def test_invalid_configuration_is_rejected(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "invalid.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_settings(config_path)


def test_parse_key_path_accepts_dotted_strings_and_segment_lists() -> None:
    assert parse_key_path("object.c") == ("object", "c")
    assert parse_key_path("hyp:number") == ("hyp:number",)
    assert parse_key_path(["a.b", "c"]) == ("a.b", "c")
