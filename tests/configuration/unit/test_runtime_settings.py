"""Runtime settings tests."""

from __future__ import annotations

from flatdoc.configuration.runtime_settings import XMLSettings


def test_with_namespace_declarations_adds_xmlns_attributes() -> None:
    settings = XMLSettings(name="record", attributes={"version": "2"})

    declared = settings.with_namespace_declarations({"hyp": "urn:hyp"})

    assert dict(declared.attributes) == {"xmlns:hyp": "urn:hyp", "version": "2"}
    assert declared.name == "record"
    assert dict(settings.attributes) == {"version": "2"}


def test_with_namespace_declarations_keeps_configured_prefixes() -> None:
    settings = XMLSettings(attributes={"xmlns:hyp": "urn:configured"})

    declared = settings.with_namespace_declarations({"hyp": "urn:read", "x": "urn:x"})

    assert dict(declared.attributes) == {"xmlns:hyp": "urn:configured", "xmlns:x": "urn:x"}


def test_with_namespace_declarations_without_declarations_is_identity() -> None:
    settings = XMLSettings()

    assert settings.with_namespace_declarations({}) is settings
