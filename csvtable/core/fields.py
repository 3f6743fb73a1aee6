# csvtable/core/fields.py

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict

Accessor = Callable[[Any], Any]
Formatter = Callable[[Optional[str]], str]


class TableField(BaseModel):
    """A heading bound to the accessor that reads its value from a record."""

    name: str
    accessor: Accessor

    model_config = ConfigDict(frozen=True)


def describe_value(value: Any) -> Optional[str]:
    # None is the absent value and is kept distinct from "".
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def default_formatter(owner: Any) -> Formatter:
    """Build the shared empty/nil policy for a field without its own formatter.

    The owner's ``default_empty_value`` and ``default_nil_value`` are read each
    time a cell is formatted, so changing them after registration still
    affects the next export.
    """

    def _format(value: Optional[str]) -> str:
        if value is None:
            return owner.default_nil_value
        return owner.default_empty_value if value == "" else value

    return _format


class FieldRegistry:
    """Ordered field declarations plus the name -> formatter lookup."""

    def __init__(self, owner: Any) -> None:
        self._owner = owner
        self._fields: List[TableField] = []
        self._formatters: Dict[str, Formatter] = {}

    def add_field(self, name: str, accessor: Accessor, formatter: Optional[Formatter] = None) -> None:
        self._fields.append(TableField(name=name, accessor=accessor))
        # Keyed by name: a repeated name replaces the earlier formatter.
        self._formatters[name] = formatter if formatter is not None else default_formatter(self._owner)

    def names(self) -> List[str]:
        return [field.name for field in self._fields]

    def formatter_for(self, name: str) -> Formatter:
        return self._formatters[name]

    def duplicate_names(self) -> List[str]:
        seen: set[str] = set()
        duplicates: List[str] = []
        for name in self.names():
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        return duplicates

    def format_cell(self, field: TableField, record: Any) -> str:
        return self.formatter_for(field.name)(describe_value(field.accessor(record)))

    def __iter__(self) -> Iterator[TableField]:
        return iter(list(self._fields))

    def __len__(self) -> int:
        return len(self._fields)
