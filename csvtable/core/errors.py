# csvtable/core/errors.py

from __future__ import annotations

from typing import Iterable


class ContentError(Exception):
    """Base class for failures while building table content."""


class DuplicateHeadingsError(ContentError):
    def __init__(self, duplicates: Iterable[str]) -> None:
        self.duplicates = list(duplicates)
        joined = ", ".join(repr(name) for name in self.duplicates)
        super().__init__(f"Duplicate field headings: {joined}")


class TextEncodingError(ContentError):
    def __init__(self, encoding: str, reason: str = "") -> None:
        self.encoding = encoding
        message = f"Table text cannot be encoded as {encoding}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
