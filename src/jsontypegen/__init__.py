"""
jsontypegen - Infer a structural schema from sample JSON and generate type definitions.

Supported output formats are TypeScript interfaces, JSDoc typedefs, Python
TypedDicts, Python dataclasses and pydantic v2 models.
"""

from .errors import (
    InputTooLargeError,
    JSONParseError,
    SchemaDepthError,
    TypeGenerationError,
    UnsupportedFormatError,
)
from .generator import generate_from_text, generate_from_value, generate_types
from .models import GeneratedType, OutputFormat, TypeGenerationOptions
from .naming import NestedTypeNamer
from .parser import ParseResult, parse_json_safely
from .reader import JsonSampleStream
from .schema import Schema, SchemaKind, analyze, analyze_samples, merge_schemas

__version__ = "0.1.0"

__all__ = [
    "Schema",
    "SchemaKind",
    "analyze",
    "analyze_samples",
    "merge_schemas",
    "NestedTypeNamer",
    "OutputFormat",
    "TypeGenerationOptions",
    "GeneratedType",
    "generate_types",
    "generate_from_value",
    "generate_from_text",
    "parse_json_safely",
    "ParseResult",
    "JsonSampleStream",
    "TypeGenerationError",
    "UnsupportedFormatError",
    "SchemaDepthError",
    "InputTooLargeError",
    "JSONParseError",
    "__version__",
]
