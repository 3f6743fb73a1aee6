# csvtable/core/config.py

from __future__ import annotations

import os
from enum import Enum

from pydantic import BaseModel


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


class ListDirection(str, Enum):
    """Orientation of the exported grid."""

    # Records as rows, heading row first.
    VERTICAL = "vertical"
    # Records as columns, field name leads every row.
    HORIZONTAL = "horizontal"


class TableConfig(BaseModel):
    """Starting defaults for a table."""

    default_empty_value: str = ""
    default_nil_value: str = ""
    list_direction: ListDirection = ListDirection.VERTICAL

    @classmethod
    def from_env(cls) -> "TableConfig":
        """Loads defaults from environment variables."""
        return cls(
            default_empty_value=_env("CSVTABLE_DEFAULT_EMPTY_VALUE", ""),
            default_nil_value=_env("CSVTABLE_DEFAULT_NIL_VALUE", ""),
            list_direction=_env("CSVTABLE_LIST_DIRECTION", "vertical").strip().lower(),
        )
