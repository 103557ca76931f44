"""
Safe parsing of raw JSON text.
"""

import json
from typing import Any, NamedTuple, Optional

from .config import DEFAULT_MAX_INPUT_KB


class ParseResult(NamedTuple):
    data: Any
    error: Optional[str]

    @property
    def ok(self) -> bool:
        return self.error is None


def input_size_kb(text: str) -> float:
    return len(text.encode("utf-8")) / 1024


def parse_json_safely(text: str, max_input_kb: Optional[int] = DEFAULT_MAX_INPUT_KB) -> ParseResult:
    """
    Parses JSON text without raising.
    Returns (data, None) on success and (None, message) on failure.
    """
    if not text or not text.strip():
        return ParseResult(None, "Input is empty")

    if max_input_kb is not None:
        size_kb = input_size_kb(text)
        if size_kb > max_input_kb:
            return ParseResult(
                None,
                f"Input size ({size_kb:.1f}KB) exceeds maximum allowed size ({max_input_kb}KB)",
            )

    try:
        return ParseResult(json.loads(text), None)
    except json.JSONDecodeError as e:
        return ParseResult(None, str(e))
    except RecursionError:
        # Small inputs can still nest deeper than the decoder can recurse
        return ParseResult(None, "JSON value is too deeply nested")
