"""
Entry points tying the analyzer and the emitters together.
"""

import json
from typing import Any, Optional

from .config import DEFAULT_MAX_DEPTH, DEFAULT_MAX_INPUT_KB
from .emitters import EMITTERS
from .errors import InputTooLargeError, JSONParseError, SchemaDepthError
from .models import GeneratedType, OutputFormat, TypeGenerationOptions
from .parser import input_size_kb
from .schema import Schema, analyze


def generate_types(schema: Schema, options: TypeGenerationOptions) -> GeneratedType:
    """
    Emits type declarations for `schema` in the format selected by `options`.
    Raises UnsupportedFormatError for an unknown format.
    """
    emitter_cls = EMITTERS[OutputFormat.parse(options.format)]
    return emitter_cls(options).emit(schema)


def generate_from_value(value: Any, options: TypeGenerationOptions,
                        max_depth: int = DEFAULT_MAX_DEPTH) -> GeneratedType:
    return generate_types(analyze(value, max_depth), options)


def generate_from_text(text: str, options: TypeGenerationOptions,
                       max_depth: int = DEFAULT_MAX_DEPTH,
                       max_input_kb: Optional[int] = DEFAULT_MAX_INPUT_KB) -> GeneratedType:
    """
    Parses JSON text and emits type declarations for it.

    Raises JSONParseError for empty or malformed text, InputTooLargeError
    when the text exceeds max_input_kb and SchemaDepthError when it nests
    too deeply to decode.
    """
    # Fail on configuration before doing any work
    OutputFormat.parse(options.format)

    if not text or not text.strip():
        raise JSONParseError("Input is empty")
    if max_input_kb is not None:
        size_kb = input_size_kb(text)
        if size_kb > max_input_kb:
            raise InputTooLargeError(size_kb, max_input_kb)

    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise JSONParseError(str(e)) from e
    except RecursionError as e:
        raise SchemaDepthError(max_depth) from e

    return generate_from_value(value, options, max_depth)
