"""Flat map output rendering."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from flatdoc.configuration.runtime_settings import DEFAULT_XML_ARRAY_SEPARATOR
from flatdoc.document.document_codecs import encode_json
from flatdoc.value_coercion.scalar_formatting import format_scalar
from flatdoc.value_types import Value

FLAT_MAP_SHEET_NAME = "Flattened"
HEADER_COLUMNS = ("Key", "Value")


def render_flat_map_json(flat_map: Mapping[str, Value] | None) -> str:
    """Render a flat map as an indented JSON object with sorted keys."""
    if flat_map is None:
        return encode_json(None)
    return encode_json(dict(sorted(flat_map.items())), indent=2)


def write_flat_map_workbook(
    flat_map: Mapping[str, Value] | None,
    output_path: Path | str,
    array_separator: str = DEFAULT_XML_ARRAY_SEPARATOR,
) -> Path:
    """Write one ``Key``/``Value`` row per flat entry, keys sorted.

    Lists are written as their joined text. Returns the resolved output path.
    """
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = FLAT_MAP_SHEET_NAME

    for column_index, label in enumerate(HEADER_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=label)
        sheet.cell(row=1, column=column_index).style = "Headline 1"

    key_width = len(HEADER_COLUMNS[0])
    for row_index, (key, value) in enumerate(sorted((flat_map or {}).items()), start=2):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=_cell_value(value, array_separator))
        key_width = max(key_width, len(key))
    sheet.column_dimensions[get_column_letter(1)].width = max(12, min(key_width + 6, 60))
    sheet.column_dimensions[get_column_letter(2)].width = 40

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _cell_value(value: Value, array_separator: str) -> Value:
    if value is None or isinstance(value, (bool, str, float, int, Decimal)):
        return value
    return format_scalar(value, array_separator)
