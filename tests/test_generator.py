# tests/test_generator.py

"""Tests for format dispatch, the text pipeline and the safe parser"""

# Third party imports
import pytest

# Local imports
from jsontypegen import (
    InputTooLargeError,
    JSONParseError,
    OutputFormat,
    SchemaDepthError,
    TypeGenerationError,
    TypeGenerationOptions,
    UnsupportedFormatError,
    analyze,
    generate_from_text,
    generate_from_value,
    generate_types,
    parse_json_safely,
)

ALL_FORMATS = list(OutputFormat)
PYTHON_FORMATS = [OutputFormat.PYTHON_TYPEDDICT, OutputFormat.PYTHON_DATACLASS, OutputFormat.PYDANTIC_V2]

SAMPLE_VALUES = [
    {},
    [],
    None,
    42,
    "text",
    [[[]]],
    [{"a": 1}, {"b": "x"}, None],
    {"a": {"b": {"c": [{"d": None, "e": [1, None]}]}}, "f": ["x", 1, True]},
]


class TestDispatch:
    """Choosing an emitter from the options"""

    def test_unknown_format(self) -> None:
        options = TypeGenerationOptions(format="cobol", root_type_name="Root")

        with pytest.raises(UnsupportedFormatError) as exc_info:
            generate_types(analyze({}), options)

        assert exc_info.value.format_id == "cobol"
        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, TypeGenerationError)

    @pytest.mark.parametrize("output_format", ALL_FORMATS)
    def test_string_ids_are_accepted(self, output_format, make_options) -> None:
        by_member = generate_types(analyze({"a": 1}), make_options(output_format))
        by_id = generate_types(analyze({"a": 1}), make_options(output_format.value))
        assert by_member == by_id

    def test_empty_root_name_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            TypeGenerationOptions(format="typescript", root_type_name="")

    @pytest.mark.parametrize(
        "output_format,dependencies",
        [
            (OutputFormat.TYPESCRIPT, []),
            (OutputFormat.JSDOC, []),
            (OutputFormat.PYTHON_TYPEDDICT, ["typing"]),
            (OutputFormat.PYTHON_DATACLASS, ["dataclasses"]),
            (OutputFormat.PYDANTIC_V2, ["pydantic"]),
        ],
    )
    def test_dependencies(self, output_format, dependencies, make_options) -> None:
        assert generate_types(analyze({"a": 1}), make_options(output_format)).dependencies == dependencies


class TestTotality:
    """Every value and format produces a complete result"""

    @pytest.mark.parametrize("output_format", ALL_FORMATS)
    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_every_value_emits(self, value, output_format, make_options) -> None:
        result = generate_from_value(value, make_options(output_format, "Sample"))

        assert result.name == "Sample"
        assert "Sample" in result.content
        if output_format in PYTHON_FORMATS:
            compile(result.content, "<generated>", "exec")

    @pytest.mark.parametrize("output_format", ALL_FORMATS)
    def test_emission_is_deterministic(self, output_format, make_options, user_samples) -> None:
        first = generate_from_value(user_samples, make_options(output_format, "Users"))
        second = generate_from_value(user_samples, make_options(output_format, "Users"))
        assert first.content == second.content

    @pytest.mark.parametrize("output_format", ALL_FORMATS)
    def test_nested_names_are_not_reused(self, output_format, make_options) -> None:
        value = {"left": {"x": {"y": 1}}, "right": {"x": {"y": 1}}}
        content = generate_from_value(value, make_options(output_format, "Tree")).content

        for name in ("TreeNested", "TreeNested0", "TreeNested1", "TreeNested2"):
            assert name in content
        assert "TreeNested3" not in content

    def test_generated_type_to_dict(self, make_options) -> None:
        result = generate_from_value({"a": 1}, make_options("typescript", "A"))
        assert result.to_dict() == {"name": "A", "content": "interface A {\n  a: number;\n}\n", "dependencies": []}


class TestGenerateFromText:
    """Parsing and emitting in one call"""

    def test_valid_text(self, make_options) -> None:
        result = generate_from_text('{"name": "John", "age": 30}', make_options("pydantic-v2", "User"))
        assert "class User(BaseModel):" in result.content

    @pytest.mark.parametrize("text", ["", "   \n", "{not json", "[1, 2"])
    def test_invalid_text(self, text, make_options) -> None:
        with pytest.raises(JSONParseError):
            generate_from_text(text, make_options("typescript"))

    def test_input_too_large(self, make_options) -> None:
        text = '"' + "x" * 2048 + '"'
        with pytest.raises(InputTooLargeError):
            generate_from_text(text, make_options("typescript"), max_input_kb=1)

    def test_size_limit_can_be_disabled(self, make_options) -> None:
        text = '"' + "x" * 2048 + '"'
        result = generate_from_text(text, make_options("typescript"), max_input_kb=None)
        assert result.content == "type Root = string;\n"

    def test_depth_limit(self, make_options) -> None:
        with pytest.raises(SchemaDepthError):
            generate_from_text("[[[[[1]]]]]", make_options("jsdoc"), max_depth=3)

    def test_deeply_nested_text_within_size_limit(self, make_options) -> None:
        text = "[" * 50000 + "]" * 50000

        with pytest.raises(SchemaDepthError) as exc_info:
            generate_from_text(text, make_options("typescript"))
        assert "too deeply nested" in str(exc_info.value)

    def test_unsupported_format_is_reported_before_parsing(self) -> None:
        options = TypeGenerationOptions(format="rust", root_type_name="Root")
        with pytest.raises(UnsupportedFormatError):
            generate_from_text("not json", options)


class TestParseJsonSafely:
    """The non-raising parser"""

    def test_valid(self) -> None:
        result = parse_json_safely('{"name": "John", "age": 30}')

        assert result.ok
        assert result.data == {"name": "John", "age": 30}
        assert result.error is None

    def test_invalid(self) -> None:
        result = parse_json_safely("{invalid json}")

        assert not result.ok
        assert result.data is None
        assert result.error

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty(self, text) -> None:
        assert parse_json_safely(text).error == "Input is empty"

    def test_too_large(self) -> None:
        result = parse_json_safely("[" + "1," * 1000 + "1]", max_input_kb=1)
        assert "exceeds maximum allowed size (1KB)" in result.error

    def test_literal_null(self) -> None:
        result = parse_json_safely("null")
        assert result.ok
        assert result.data is None

    def test_deeply_nested_text_is_reported(self) -> None:
        """Nesting beyond what the decoder can recurse into is an error, not a crash"""
        text = "[" * 50000 + "]" * 50000
        result = parse_json_safely(text, max_input_kb=None)

        assert not result.ok
        assert result.data is None
        assert "too deeply nested" in result.error


class TestRegistry:
    """The format registry"""

    def test_every_format_has_an_emitter(self) -> None:
        from jsontypegen.emitters import EMITTERS

        assert set(EMITTERS) == set(OutputFormat)
        for output_format, emitter_cls in EMITTERS.items():
            assert emitter_cls.format is output_format
