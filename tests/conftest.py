# tests/conftest.py

"""Shared fixtures for the test suite"""

# Standard library imports
import json
from io import StringIO

# Third party imports
import pytest
from rich.console import Console

# Local imports
from jsontypegen import OutputFormat, Schema, SchemaKind, TypeGenerationOptions


@pytest.fixture
def user_samples():
    """Three user records that disagree on which fields are present"""
    return [
        {"id": 1, "name": "Ada", "email": "ada@example.com", "tags": ["admin"], "profile": {"bio": "x"}},
        {"id": 2, "name": "Grace", "email": None, "tags": [], "profile": {"bio": "y", "avatar": None}},
        {"id": 3, "name": "Linus", "tags": ["dev", None]},
    ]


@pytest.fixture
def user_schema():
    """Hand-built schema: name required, email optional"""
    return Schema(
        SchemaKind.OBJECT,
        properties={"name": Schema(SchemaKind.STRING), "email": Schema(SchemaKind.STRING)},
        required=frozenset({"name"}),
    )


@pytest.fixture
def make_options():
    def _make(output_format: OutputFormat | str, root: str = "Root", optional: bool = True):
        return TypeGenerationOptions(format=output_format, root_type_name=root, use_optional_fields=optional)

    return _make


@pytest.fixture
def write_json(tmp_path):
    def _write(name: str, data) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def quiet_console(monkeypatch):
    """Redirect module-level rich consoles into a buffer and return it"""
    buffer = StringIO()
    console = Console(file=buffer, width=160)
    monkeypatch.setattr("jsontypegen.reader.console", console)
    monkeypatch.setattr("jsontypegen.cli.console", console)
    return buffer
