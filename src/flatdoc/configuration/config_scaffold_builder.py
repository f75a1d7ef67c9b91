"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "flatdoc.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for flatdoc.
# Every setting is optional; remove the ones you do not need.

xml:
  # Root element name used when writing XML (default: d).
  name: "d"
  # Default namespace of the written elements.
  # namespace: "http://example.com/ns"
  # Text placed between array values inside one element (default: |).
  array_separator: "|"
  # Extra attributes set on the root element; xmlns:alias entries declare namespaces.
  # attributes:
  #   xmlns:xsi: "http://www.w3.org/2001/XMLSchema-instance"

flatten:
  # Branches dropped from flattened output, as dotted paths or segment lists.
  ignore: []
  #   - "object.c"
  #   - ["hyp:number"]
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
