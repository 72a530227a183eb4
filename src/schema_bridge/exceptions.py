"""
Custom exceptions for schema conversion.
"""
from typing import Any


class SchemaConversionError(Exception):
    """Base class for all schema conversion errors."""
    pass

class UnsupportedKindError(SchemaConversionError):
    """Raised when a descriptor's kind has no entry in the kind-to-type table.
    This signals a coverage gap in the conversion tables, not bad input data."""
    def __init__(self, kind: Any, message: str | None = None):
        super().__init__(message or f'Cannot find support for "{kind}" type in kind-to-type table.')
        self.kind = kind

class UnsupportedFormatError(SchemaConversionError):
    """Raised when a descriptor's kind has no entry in the kind-to-format table."""
    def __init__(self, kind: Any, message: str | None = None):
        super().__init__(message or f'Cannot find support for "{kind}" format in kind-to-format table.')
        self.kind = kind
