import json
from pathlib import Path
from typing import Any, Generator, List, Optional

import ijson
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from .config import DEFAULT_MAX_DEPTH, DEFAULT_SAMPLE_SIZE
from .generator import generate_types
from .models import GeneratedType, OutputFormat, TypeGenerationOptions
from .schema import Schema, analyze_samples, iter_schema_paths

console = Console()

JSON_LINES_SUFFIXES = (".jsonl", ".ndjson")
TABULAR_SUFFIXES = (".csv", ".parquet")


class JsonSampleStream:
    """
    Streams sample documents out of one or more files and infers a schema from them.

    Supported inputs:
        .json            a top-level array yields one sample per element,
                         any other top-level value is a single sample
        .jsonl, .ndjson  one sample per non-blank line
        .csv, .parquet   one sample per row, read with pandas
    """

    def __init__(self, file_paths: str | Path | List[str | Path], max_depth: int = DEFAULT_MAX_DEPTH):
        if isinstance(file_paths, (str, Path)):
            file_paths = [file_paths]

        self.file_paths = [Path(p) for p in file_paths]
        for p in self.file_paths:
            if not p.exists():
                raise FileNotFoundError(f"File not found: {p}")

        self.max_depth = max_depth
        self.schema_cache: Optional[Schema] = None

    def _get_item_generator(self) -> Generator[Any, None, None]:
        """
        Returns a generator that yields samples from every file in turn.
        JSON files are streamed with ijson so large arrays are never fully loaded.
        """
        for file_path in self.file_paths:
            suffix = file_path.suffix.lower()
            if suffix in JSON_LINES_SUFFIXES:
                yield from self._read_json_lines(file_path)
            elif suffix in TABULAR_SUFFIXES:
                yield from self._read_tabular(file_path)
            else:
                yield from self._read_json(file_path)

    def _read_json(self, file_path: Path) -> Generator[Any, None, None]:
        with open(file_path, 'rb') as f:
            first = _first_significant_byte(f)
            f.seek(0)
            if not first:
                return
            # 'item' matches the elements of a top-level list, '' the whole document.
            # use_float=True keeps numbers as int/float instead of Decimal
            prefix = 'item' if first == b'[' else ''
            count = 0
            for item in ijson.items(f, prefix, use_float=True):
                count += 1
                yield item
            if prefix and not count:
                # A top-level empty array is itself the only sample
                yield []

    def _read_json_lines(self, file_path: Path) -> Generator[Any, None, None]:
        with open(file_path, 'r', encoding='utf-8') as f:
            for line in f:
                if line.strip():
                    yield json.loads(line)

    def _read_tabular(self, file_path: Path) -> Generator[Any, None, None]:
        try:
            import pandas as pd
        except ImportError:
            console.print("[bold red]pandas is required to read CSV and Parquet samples. Please install it.[/bold red]")
            raise

        if file_path.suffix.lower() == ".parquet":
            df = pd.read_parquet(file_path)
        else:
            df = pd.read_csv(file_path)

        # Round-trip through JSON so cells become plain Python values and NaN becomes null
        yield from json.loads(df.to_json(orient="records"))

    def infer_schema(self, sample_size: Optional[int] = DEFAULT_SAMPLE_SIZE) -> Schema:
        """
        Infers a schema describing the first sample_size samples.
        Raises ValueError when sample_size is below one or the files contain no samples.
        """
        if sample_size is not None and sample_size < 1:
            raise ValueError(f"sample_size must be at least 1, got {sample_size}")

        console.print(f"[bold blue]Inferring schema from {len(self.file_paths)} files...[/bold blue]")

        collected = []
        with tqdm(desc="Reading samples", unit=" items", total=sample_size) as pbar:
            for item in self._get_item_generator():
                collected.append(item)
                pbar.update(1)
                if sample_size is not None and len(collected) >= sample_size:
                    break

        self.schema_cache = analyze_samples(collected, self.max_depth)
        return self.schema_cache

    def print_schema(self, sample_size: Optional[int] = DEFAULT_SAMPLE_SIZE):
        if self.schema_cache is None:
            self.infer_schema(sample_size)

        table = Table(title="Inferred Schema")
        table.add_column("Field", style="cyan")
        table.add_column("Type", style="magenta")
        table.add_column("Required", style="green")
        table.add_column("Nullable", style="yellow")

        table.add_row("<root>", self.schema_cache.kind.value, "", "yes" if self.schema_cache.nullable else "")
        for path, schema, required in iter_schema_paths(self.schema_cache):
            table.add_row(path, schema.kind.value, "yes" if required else "", "yes" if schema.nullable else "")

        console.print(table)

    def count_items(self) -> int:
        """
        Counts the total number of samples in the files.
        """
        console.print(f"[bold blue]Counting items in {len(self.file_paths)} files...[/bold blue]")
        count = 0
        for _ in tqdm(self._get_item_generator(), desc="Counting"):
            count += 1
        return count

    def generate_type_definitions(self, output_file: str | Path, options: TypeGenerationOptions,
                                  sample_size: Optional[int] = DEFAULT_SAMPLE_SIZE) -> GeneratedType:
        """
        Infers a schema from the first sample_size samples and writes type
        definitions for it in the format selected by options.
        """
        schema = self.infer_schema(sample_size)

        console.print(f"[bold blue]Generating {OutputFormat.parse(options.format).value} definitions...[/bold blue]")
        generated = generate_types(schema, options)

        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(generated.content)
        console.print(f"[bold green]Generated type definitions in {output_file}[/bold green]")
        return generated


def _first_significant_byte(f) -> bytes:
    while True:
        chunk = f.read(1)
        if not chunk or not chunk.isspace():
            return chunk
