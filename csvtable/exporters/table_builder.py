# csvtable/exporters/table_builder.py

from __future__ import annotations

from typing import Any, Sequence

from csvtable.core.config import ListDirection
from csvtable.core.fields import FieldRegistry
from csvtable.exporters.cell_escaper import csv_line


def vertical_text(fields: FieldRegistry, items: Sequence[Any]) -> str:
    """One row per record under a heading row of field names."""
    lines = [csv_line(fields.names())]
    for item in items:
        lines.append(csv_line(fields.format_cell(field, item) for field in fields))
    return "".join(lines)


def horizontal_text(fields: FieldRegistry, items: Sequence[Any]) -> str:
    """One row per field, led by the field name, with one column per record."""
    lines = []
    for field in fields:
        cells = [field.name]
        cells.extend(fields.format_cell(field, item) for item in items)
        lines.append(csv_line(cells))
    return "".join(lines)


def build_text(direction: ListDirection, fields: FieldRegistry, items: Sequence[Any]) -> str:
    if ListDirection(direction) == ListDirection.HORIZONTAL:
        return horizontal_text(fields, items)
    return vertical_text(fields, items)
