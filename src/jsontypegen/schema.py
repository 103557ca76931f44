"""
Structural schema inference for JSON values.

`analyze` walks a parsed JSON value and describes its shape as a `Schema`
tree. Elements of the same array are reconciled with `merge_schemas`, which
is the only place where information from several values is combined.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, FrozenSet, Generator, Iterable, List, Optional, Tuple

from .config import DEFAULT_MAX_DEPTH
from .errors import SchemaDepthError


class SchemaKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass(frozen=True)
class Schema:
    """Inferred shape of a JSON value."""
    kind: SchemaKind
    # Only set for objects
    properties: Optional[Dict[str, "Schema"]] = None
    # Names present and non-null in every observed object; None when empty
    required: Optional[FrozenSet[str]] = None
    # Only set for arrays
    items: Optional["Schema"] = None
    nullable: bool = False

    def is_required(self, name: str) -> bool:
        return self.required is not None and name in self.required

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"type": self.kind.value}
        if self.properties is not None:
            result["properties"] = {k: v.to_dict() for k, v in self.properties.items()}
        if self.required:
            result["required"] = sorted(self.required)
        if self.items is not None:
            result["items"] = self.items.to_dict()
        if self.nullable:
            result["nullable"] = True
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Schema":
        """Build a schema from the dict form produced by `to_dict`."""
        kind = SchemaKind(data["type"])
        properties = data.get("properties")
        items = data.get("items")
        required = data.get("required")
        return cls(
            kind=kind,
            properties={k: cls.from_dict(v) for k, v in properties.items()} if properties is not None else None,
            required=frozenset(required) if required else None,
            items=cls.from_dict(items) if items is not None else None,
            nullable=bool(data.get("nullable", False)),
        )


NULL_SCHEMA = Schema(SchemaKind.NULL)

# Arrays whose elements disagree on more than one non-null kind degrade to this
AMBIGUOUS_SCHEMA = Schema(SchemaKind.STRING, nullable=True)


def analyze(value: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> Schema:
    """
    Infers the schema of a parsed JSON value.

    Raises SchemaDepthError when the value nests deeper than max_depth.
    """
    return _analyze(value, 0, max_depth)


def analyze_samples(values: Iterable[Any], max_depth: int = DEFAULT_MAX_DEPTH) -> Schema:
    """
    Infers a single schema describing several independent sample documents.
    The samples are reconciled exactly like the elements of one array.
    """
    schemas = [analyze(v, max_depth) for v in values]
    if not schemas:
        raise ValueError("At least one sample is required to infer a schema")
    return merge_schemas(schemas)


def _analyze(value: Any, depth: int, max_depth: int) -> Schema:
    if depth > max_depth:
        raise SchemaDepthError(max_depth)

    if value is None:
        return NULL_SCHEMA

    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return Schema(SchemaKind.BOOLEAN)
    if isinstance(value, (int, float, Decimal)):
        return Schema(SchemaKind.NUMBER)
    if isinstance(value, str):
        return Schema(SchemaKind.STRING)

    if isinstance(value, (list, tuple)):
        if not value:
            return Schema(SchemaKind.ARRAY, items=NULL_SCHEMA)
        item_schemas = [_analyze(item, depth + 1, max_depth) for item in value]
        return Schema(SchemaKind.ARRAY, items=merge_schemas(item_schemas))

    if isinstance(value, dict):
        properties = {}
        required = []
        for key, item in value.items():
            properties[key] = _analyze(item, depth + 1, max_depth)
            if item is not None:
                required.append(key)
        return Schema(
            SchemaKind.OBJECT,
            properties=properties,
            required=frozenset(required) if required else None,
        )

    raise TypeError(f"Value of type {type(value).__name__} is not a JSON value")


def merge_schemas(schemas: List[Schema]) -> Schema:
    """
    Combines the schemas observed at one array position into a single schema.

    A property of merged objects is required only if every object had it and
    had it non-null. Two or more distinct non-null kinds collapse to a
    nullable string instead of a union.
    """
    if not schemas:
        raise ValueError("merge_schemas() requires at least one schema")
    if len(schemas) == 1:
        return schemas[0]

    non_null = [s for s in schemas if s.kind is not SchemaKind.NULL]
    # Inputs produced by an earlier merge may already carry the flag
    had_null = len(non_null) < len(schemas) or any(s.nullable for s in non_null)

    if not non_null:
        return NULL_SCHEMA

    kinds = {s.kind for s in non_null}
    if len(kinds) > 1:
        return AMBIGUOUS_SCHEMA

    kind = non_null[0].kind
    if kind is SchemaKind.OBJECT:
        return _merge_objects(non_null, had_null)
    if kind is SchemaKind.ARRAY:
        item_schemas = [s.items for s in non_null if s.items is not None]
        items = merge_schemas(item_schemas) if item_schemas else NULL_SCHEMA
        return Schema(SchemaKind.ARRAY, items=items, nullable=had_null)

    return Schema(kind, nullable=had_null)


def _merge_objects(objects: List[Schema], had_null: bool) -> Schema:
    observed: Dict[str, List[Schema]] = {}
    # Number of objects in which the key was present and non-null
    required_counts: Dict[str, int] = {}

    for obj in objects:
        for key, prop in (obj.properties or {}).items():
            observed.setdefault(key, []).append(prop)
            if obj.is_required(key):
                required_counts[key] = required_counts.get(key, 0) + 1

    properties = {key: merge_schemas(props) for key, props in observed.items()}
    required = [key for key in properties if required_counts.get(key, 0) == len(objects)]

    return Schema(
        SchemaKind.OBJECT,
        properties=properties,
        required=frozenset(required) if required else None,
        nullable=had_null,
    )


def iter_schema_paths(schema: Schema, prefix: str = "") -> Generator[Tuple[str, Schema, bool], None, None]:
    """
    Yields (dotted path, schema, required) for every property and array
    element below `schema`. Array elements are reported as `path[]` and are
    always required.
    """
    if schema.kind is SchemaKind.OBJECT:
        for key, prop in (schema.properties or {}).items():
            path = f"{prefix}.{key}" if prefix else key
            yield path, prop, schema.is_required(key)
            yield from iter_schema_paths(prop, path)
    elif schema.kind is SchemaKind.ARRAY and schema.items is not None:
        path = f"{prefix}[]"
        yield path, schema.items, True
        yield from iter_schema_paths(schema.items, path)
