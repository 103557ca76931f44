"""
Exceptions raised by jsontypegen.
"""

from typing import Optional


class TypeGenerationError(Exception):
    """Base class for all errors raised while generating type definitions."""


class UnsupportedFormatError(TypeGenerationError, ValueError):
    """Raised when the requested output format has no emitter."""

    def __init__(self, format_id):
        self.format_id = format_id
        super().__init__(f"Unsupported output format: {format_id!r}")


class SchemaDepthError(TypeGenerationError):
    """Raised when a JSON value is nested deeper than the configured limit."""

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = max_depth
        message = "JSON value is too deeply nested"
        if max_depth is not None:
            message += f" (limit is {max_depth} levels)"
        super().__init__(message)


class InputTooLargeError(TypeGenerationError):
    """Raised when raw JSON text exceeds the configured size limit."""

    def __init__(self, size_kb: float, max_kb: int):
        self.size_kb = size_kb
        self.max_kb = max_kb
        super().__init__(f"Input size ({size_kb:.1f}KB) exceeds maximum allowed size ({max_kb}KB)")


class JSONParseError(TypeGenerationError, ValueError):
    """Raised when input text is not valid JSON."""
