from __future__ import annotations

from typing import Any, Iterable

CELL_QUOTE = '"'
CELL_SEPARATOR = ","
LINE_TERMINATOR = "\n"


def quote_cell(value: Any) -> str:
    # Quoted verbatim; embedded quotes, commas and newlines are not escaped.
    return f"{CELL_QUOTE}{value}{CELL_QUOTE}"


def csv_line(values: Iterable[Any]) -> str:
    cells = [quote_cell(value) for value in values]
    if not cells:
        return ""
    return CELL_SEPARATOR.join(cells) + LINE_TERMINATOR
