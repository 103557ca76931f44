"""
Python type definitions: TypedDict, dataclasses and pydantic v2 models.

All three use builtin generics and PEP 604 unions (`list[str]`, `str | None`),
and map every JSON number to `float`.
"""

import json
import keyword
import re
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

from ..models import OutputFormat
from ..schema import SchemaKind
from .base import FieldSpec, TypeEmitter

_NON_IDENTIFIER_CHARS = re.compile(r"\W")


def is_plain_identifier(key: str) -> bool:
    return key.isidentifier() and not keyword.iskeyword(key)


def python_field_name(key: str, taken: Set[str], allow_leading_underscore: bool = True,
                      reserved: Iterable[str] = (), reserved_prefixes: Tuple[str, ...] = ()) -> str:
    """
    Turn a JSON key into an attribute name not already in `taken`.

    Names in `reserved` get a trailing underscore and names starting with one
    of `reserved_prefixes` get a `field_` prefix.
    """
    name = _NON_IDENTIFIER_CHARS.sub("_", key)
    if not allow_leading_underscore:
        name = name.lstrip("_")
    if not name or not name.isidentifier() or name.startswith(reserved_prefixes):
        name = f"field_{name}"
    if keyword.iskeyword(name) or name in reserved:
        name = f"{name}_"
    while name in taken:
        name = f"{name}_"
    taken.add(name)
    return name


def _with_none(type_expr: str) -> str:
    return type_expr if type_expr.endswith(" | None") else f"{type_expr} | None"


class PythonEmitter(TypeEmitter):
    primitive_types = {
        SchemaKind.STRING: "str",
        SchemaKind.NUMBER: "float",
        SchemaKind.BOOLEAN: "bool",
    }
    null_type = "None"
    empty_object_type = "dict"

    # Names the generated class bodies read; an attribute with a default would shadow them
    reserved_names: FrozenSet[str] = frozenset({"str", "float", "bool", "dict", "list"})
    reserved_prefixes: Tuple[str, ...] = ()

    def array_type(self, element: Optional[str]) -> str:
        return "list" if element is None else f"list[{element}]"

    def nullable_type(self, base: str) -> str:
        return f"{base} | None"

    def alias_declaration(self, name: str, type_expr: str) -> str:
        return f"{name} = {type_expr}"

    def attribute_name(self, key: str, taken: Set[str], allow_leading_underscore: bool = True) -> str:
        return python_field_name(
            key,
            taken,
            allow_leading_underscore=allow_leading_underscore,
            reserved=self.reserved_names | set(self.namer.issued),
            reserved_prefixes=self.reserved_prefixes,
        )

    def import_lines(self) -> List[str]:
        raise NotImplementedError

    def render(self, declarations: List[str]) -> str:
        header = "\n".join(self.import_lines())
        return header + "\n\n\n" + "\n\n\n".join(declarations) + "\n"


class TypedDictEmitter(PythonEmitter):
    format = OutputFormat.PYTHON_TYPEDDICT
    dependencies = ["typing"]

    def __init__(self, options):
        super().__init__(options)
        self._needs_not_required = False

    def import_lines(self) -> List[str]:
        if self._needs_not_required:
            return ["from typing import NotRequired, TypedDict"]
        return ["from typing import TypedDict"]

    def _annotation(self, spec: FieldSpec) -> str:
        if spec.optional:
            self._needs_not_required = True
            return f"NotRequired[{spec.type_expr}]"
        return spec.type_expr

    def object_declaration(self, name: str, fields: List[FieldSpec]) -> str:
        # Bare annotations bind nothing, so only keywords and non-identifiers force the functional syntax
        if all(is_plain_identifier(spec.key) for spec in fields):
            lines = [f"class {name}(TypedDict):"]
            lines.extend(f"    {spec.key}: {self._annotation(spec)}" for spec in fields)
            return "\n".join(lines)

        lines = [f"{name} = TypedDict({json.dumps(name)}, {{"]
        lines.extend(f"    {json.dumps(spec.key)}: {self._annotation(spec)}," for spec in fields)
        lines.append("})")
        return "\n".join(lines)


class DataclassEmitter(PythonEmitter):
    format = OutputFormat.PYTHON_DATACLASS
    dependencies = ["dataclasses"]
    reserved_names = PythonEmitter.reserved_names | {"dataclass", "field"}

    def __init__(self, options):
        super().__init__(options)
        self._needs_field = False

    def import_lines(self) -> List[str]:
        if self._needs_field:
            return ["from dataclasses import dataclass, field"]
        return ["from dataclasses import dataclass"]

    def object_declaration(self, name: str, fields: List[FieldSpec]) -> str:
        taken: Set[str] = set()
        required_lines = []
        default_lines = []
        for spec in fields:
            attr = self.attribute_name(spec.key, taken)
            if not spec.optional:
                required_lines.append(f"    {attr}: {spec.type_expr}")
            elif spec.schema.kind is SchemaKind.ARRAY:
                self._needs_field = True
                default_lines.append(f"    {attr}: {spec.type_expr} = field(default_factory=list)")
            else:
                default_lines.append(f"    {attr}: {_with_none(spec.type_expr)} = None")

        # Fields without defaults must come before fields with defaults
        return "\n".join(["@dataclass", f"class {name}:"] + required_lines + default_lines)


class PydanticEmitter(PythonEmitter):
    format = OutputFormat.PYDANTIC_V2
    dependencies = ["pydantic"]
    reserved_names = PythonEmitter.reserved_names | {"BaseModel", "Field"}
    # pydantic reserves model_config and the other model_ attributes of BaseModel
    reserved_prefixes = ("model_",)

    def import_lines(self) -> List[str]:
        return ["from pydantic import BaseModel, Field"]

    def object_declaration(self, name: str, fields: List[FieldSpec]) -> str:
        taken: Set[str] = set()
        lines = [f"class {name}(BaseModel):"]
        for spec in fields:
            # pydantic treats underscore-prefixed attributes as private
            attr = self.attribute_name(spec.key, taken, allow_leading_underscore=False)
            alias = f"alias={json.dumps(spec.key)}" if attr != spec.key else None
            lines.append(f"    {attr}: {self._field_body(spec, alias)}")
        return "\n".join(lines)

    def _field_body(self, spec: FieldSpec, alias: Optional[str]) -> str:
        if not spec.optional:
            if alias:
                return f"{spec.type_expr} = Field({alias})"
            return spec.type_expr

        if spec.schema.kind is SchemaKind.ARRAY:
            args = ", ".join(a for a in ("default_factory=list", alias) if a)
            return f"{spec.type_expr} = Field({args})"

        type_expr = _with_none(spec.type_expr)
        if alias:
            return f"{type_expr} = Field(default=None, {alias})"
        return f"{type_expr} = None"
