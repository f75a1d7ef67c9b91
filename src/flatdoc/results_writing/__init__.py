"""Flat map output exports."""

from .flat_map_writer import (
    FLAT_MAP_SHEET_NAME,
    HEADER_COLUMNS,
    render_flat_map_json,
    write_flat_map_workbook,
)

__all__ = [
    "FLAT_MAP_SHEET_NAME",
    "HEADER_COLUMNS",
    "render_flat_map_json",
    "write_flat_map_workbook",
]
