# csvtable/table.py

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from csvtable.core.config import ListDirection, TableConfig
from csvtable.core.errors import DuplicateHeadingsError, TextEncodingError
from csvtable.core.fields import Accessor, FieldRegistry, Formatter
from csvtable.exporters.table_builder import build_text

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"


class CSVTable:
    """Records of one type plus the fields that turn them into CSV.

    ``default_empty_value`` replaces values that stringify to ``""`` and
    ``default_nil_value`` replaces ``None``, for every field registered
    without its own formatter. Both are read at export time.
    """

    def __init__(self, name: str, items: Iterable[Any], *, config: Optional[TableConfig] = None) -> None:
        if config is None:
            config = TableConfig()
        self.name = name
        self.items: List[Any] = list(items)
        self.default_empty_value = config.default_empty_value
        self.default_nil_value = config.default_nil_value
        self.list_direction = config.list_direction
        self._fields = FieldRegistry(self)

    @property
    def list_direction(self) -> ListDirection:
        return self._list_direction

    @list_direction.setter
    def list_direction(self, value: ListDirection | str) -> None:
        self._list_direction = ListDirection(value)

    @property
    def headings(self) -> List[str]:
        return self._fields.names()

    def add_field(self, name: str, accessor: Accessor, formatter: Optional[Formatter] = None) -> None:
        """Declares a column (vertical) or row (horizontal) named ``name``.

        Registration never fails; repeated names are rejected at export.
        """
        self._fields.add_field(name, accessor, formatter)

    def create_text(self) -> str:
        duplicates = self._fields.duplicate_names()
        if duplicates:
            logger.warning("CSV export rejected (table=%s duplicates=%s)", self.name, duplicates)
            raise DuplicateHeadingsError(duplicates)
        return build_text(self.list_direction, self._fields, self.items)

    def create_data(self) -> bytes:
        """Validates the fields and returns the table as UTF-8 CSV bytes."""
        text = self.create_text()
        try:
            data = text.encode(TEXT_ENCODING)
        except UnicodeEncodeError as exc:
            logger.warning("CSV export could not be encoded (table=%s encoding=%s): %s", self.name, TEXT_ENCODING, exc)
            raise TextEncodingError(TEXT_ENCODING, exc.reason) from exc
        logger.debug(
            "CSV export built (table=%s direction=%s fields=%s records=%s bytes=%s)",
            self.name,
            self.list_direction.value,
            len(self._fields),
            len(self.items),
            len(data),
        )
        return data
