"""
TypeScript interfaces and JSDoc typedefs.
"""

import json
import re
from typing import List, Optional

from ..models import OutputFormat
from ..schema import SchemaKind
from .base import FieldSpec, TypeEmitter

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

_JS_PRIMITIVES = {
    SchemaKind.STRING: "string",
    SchemaKind.NUMBER: "number",
    SchemaKind.BOOLEAN: "boolean",
}


def _property_key(key: str) -> str:
    return key if _JS_IDENTIFIER.match(key) else json.dumps(key)


class TypeScriptEmitter(TypeEmitter):
    format = OutputFormat.TYPESCRIPT

    primitive_types = _JS_PRIMITIVES
    null_type = "null"
    empty_object_type = "Record<string, unknown>"

    def array_type(self, element: Optional[str]) -> str:
        if element is None:
            return "unknown[]"
        if " | " in element:
            return f"({element})[]"
        return f"{element}[]"

    def nullable_type(self, base: str) -> str:
        return f"{base} | null"

    def alias_declaration(self, name: str, type_expr: str) -> str:
        return f"type {name} = {type_expr};"

    def object_declaration(self, name: str, fields: List[FieldSpec]) -> str:
        lines = [f"interface {name} {{"]
        for spec in fields:
            marker = "?" if spec.optional else ""
            lines.append(f"  {_property_key(spec.key)}{marker}: {spec.type_expr};")
        lines.append("}")
        return "\n".join(lines)


class JSDocEmitter(TypeEmitter):
    format = OutputFormat.JSDOC

    primitive_types = _JS_PRIMITIVES
    null_type = "null"
    empty_object_type = "Object"

    def array_type(self, element: Optional[str]) -> str:
        return f"Array<{element if element is not None else '*'}>"

    def nullable_type(self, base: str) -> str:
        return f"({base}|null)"

    def alias_declaration(self, name: str, type_expr: str) -> str:
        return f"/**\n * @typedef {{{type_expr}}} {name}\n */"

    def object_declaration(self, name: str, fields: List[FieldSpec]) -> str:
        lines = ["/**", f" * @typedef {{Object}} {name}"]
        for spec in fields:
            key = _property_key(spec.key)
            if spec.optional:
                key = f"[{key}]"
            lines.append(f" * @property {{{spec.type_expr}}} {key}")
        lines.append(" */")
        return "\n".join(lines)
