"""
Command-line interface for jsontypegen.
"""

import argparse
import json
import sys
from typing import List, Optional

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from .config import DEFAULT_FORMAT, DEFAULT_MAX_DEPTH, DEFAULT_ROOT_TYPE_NAME, DEFAULT_SAMPLE_SIZE
from .errors import TypeGenerationError
from .models import OutputFormat

console = Console()

# Lexer used by rich to highlight generated code
_SYNTAX_LEXERS = {
    OutputFormat.TYPESCRIPT: "typescript",
    OutputFormat.JSDOC: "javascript",
    OutputFormat.PYTHON_TYPEDDICT: "python",
    OutputFormat.PYTHON_DATACLASS: "python",
    OutputFormat.PYDANTIC_V2: "python",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsontypegen",
        description="Generate TypeScript, JSDoc and Python type definitions from sample JSON",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    generate_parser = subparsers.add_parser("generate", help="Generate type definitions from sample files")
    generate_parser.add_argument("files", nargs="+", help="JSON, JSON Lines, CSV or Parquet sample files")
    generate_parser.add_argument(
        "-f", "--format",
        default=DEFAULT_FORMAT,
        choices=[f.value for f in OutputFormat],
        help=f"Output format (default: {DEFAULT_FORMAT})",
    )
    generate_parser.add_argument(
        "-n", "--name",
        default=DEFAULT_ROOT_TYPE_NAME,
        help=f"Name of the root type (default: {DEFAULT_ROOT_TYPE_NAME})",
    )
    generate_parser.add_argument(
        "-o", "--output",
        help="Write the definitions to this file instead of printing them",
    )
    generate_parser.add_argument(
        "--no-optional",
        dest="use_optional_fields",
        action="store_false",
        help="Emit every field as required, even when missing from some samples",
    )
    _add_sampling_arguments(generate_parser)

    # Schema command
    schema_parser = subparsers.add_parser("schema", help="Infer and print the schema of sample files")
    schema_parser.add_argument("files", nargs="+", help="JSON, JSON Lines, CSV or Parquet sample files")
    dump_group = schema_parser.add_mutually_exclusive_group()
    dump_group.add_argument("--json", action="store_true", help="Print the schema as JSON")
    dump_group.add_argument("--yaml", action="store_true", help="Print the schema as YAML")
    _add_sampling_arguments(schema_parser)

    # Formats command
    subparsers.add_parser("formats", help="List supported output formats")

    return parser


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _add_sampling_arguments(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--sample-size",
        type=_positive_int,
        default=DEFAULT_SAMPLE_SIZE,
        help=f"Number of samples to read (default: {DEFAULT_SAMPLE_SIZE})",
    )
    parser.add_argument(
        "--max-depth",
        type=_positive_int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum nesting depth accepted (default: {DEFAULT_MAX_DEPTH})",
    )


def print_formats():
    from .emitters import EMITTERS

    table = Table(title="Output Formats")
    table.add_column("Format", style="cyan")
    table.add_column("Dependencies", style="magenta")
    for output_format, emitter_cls in EMITTERS.items():
        table.add_row(output_format.value, ", ".join(emitter_cls.dependencies) or "-")
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from jsontypegen import __version__
        console.print(f"jsontypegen version {__version__}")
        return 0

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "formats":
        print_formats()
        return 0

    # Import here to avoid slow startup for --help
    from jsontypegen import JsonSampleStream, TypeGenerationOptions, generate_types

    try:
        stream = JsonSampleStream(args.files, max_depth=args.max_depth)

        if args.command == "generate":
            options = TypeGenerationOptions(
                format=args.format,
                root_type_name=args.name,
                use_optional_fields=args.use_optional_fields,
            )
            if args.output:
                stream.generate_type_definitions(args.output, options, sample_size=args.sample_size)
            else:
                generated = generate_types(stream.infer_schema(args.sample_size), options)
                lexer = _SYNTAX_LEXERS[OutputFormat.parse(args.format)]
                console.print(Syntax(generated.content, lexer))

        elif args.command == "schema":
            if args.json or args.yaml:
                schema = stream.infer_schema(args.sample_size).to_dict()
                if args.json:
                    console.print_json(json.dumps(schema))
                else:
                    import yaml
                    console.print(yaml.dump(schema, default_flow_style=False, sort_keys=False), markup=False)
            else:
                stream.print_schema(args.sample_size)

    except FileNotFoundError as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        return 1
    except TypeGenerationError as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        return 130
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
