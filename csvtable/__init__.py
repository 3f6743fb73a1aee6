# csvtable/__init__.py

from .core.config import ListDirection, TableConfig
from .core.errors import ContentError, DuplicateHeadingsError, TextEncodingError
from .core.version import __version__
from .table import CSVTable

__all__ = [
    "CSVTable",
    "ListDirection",
    "TableConfig",
    "ContentError",
    "DuplicateHeadingsError",
    "TextEncodingError",
    "__version__",
]
