"""
Traversal shared by every type emitter.

An emitter walks a Schema tree once. Each property becomes a `FieldSpec`
carrying its type expression and whether it is optional; every nested
object with properties is declared separately under a name from the
`NestedTypeNamer`. Declarations are collected leaves first and the root
declaration is appended last. Subclasses only supply target syntax.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..models import GeneratedType, OutputFormat, TypeGenerationOptions
from ..naming import NestedTypeNamer
from ..schema import Schema, SchemaKind


@dataclass
class FieldSpec:
    key: str
    schema: Schema
    type_expr: str
    optional: bool


class TypeEmitter:
    """
    Base class for one target format. Construct a fresh instance per emission.
    """

    # Key of the emitter in the format registry
    format: OutputFormat
    dependencies: List[str] = []

    primitive_types: Dict[SchemaKind, str] = {}
    null_type = "null"
    # Spelling for an object observed with no properties at all
    empty_object_type = "object"

    def __init__(self, options: TypeGenerationOptions):
        self.options = options
        self.root_name = options.root_type_name
        self.namer = NestedTypeNamer(self.root_name)
        self.declarations: List[str] = []

    def emit(self, schema: Schema) -> GeneratedType:
        self.declarations.append(self.declare(schema, self.root_name))
        return GeneratedType(
            name=self.root_name,
            content=self.render(self.declarations),
            dependencies=list(self.dependencies),
        )

    def declare(self, schema: Schema, name: str) -> str:
        if schema.kind is not SchemaKind.OBJECT or not schema.properties:
            return self.alias_declaration(name, self.type_expression(schema))
        fields = [self.field_spec(schema, key, prop) for key, prop in schema.properties.items()]
        return self.object_declaration(name, fields)

    def field_spec(self, parent: Schema, key: str, prop: Schema) -> FieldSpec:
        # Pure null properties are always present with the null type
        if prop.kind is SchemaKind.NULL:
            optional = False
        elif not self.options.use_optional_fields:
            optional = False
        else:
            optional = not parent.is_required(key)
        return FieldSpec(key=key, schema=prop, type_expr=self.type_expression(prop), optional=optional)

    def type_expression(self, schema: Schema) -> str:
        kind = schema.kind
        if kind is SchemaKind.NULL:
            return self.null_type

        if kind is SchemaKind.ARRAY:
            items = schema.items
            if items is None or items.kind is SchemaKind.NULL:
                base = self.array_type(None)
            else:
                base = self.array_type(self.type_expression(items))
        elif kind is SchemaKind.OBJECT:
            if schema.properties:
                # Allocate before descending so parents are named before their children
                nested_name = self.namer.next_name()
                self.declarations.append(self.declare(schema, nested_name))
                base = nested_name
            else:
                base = self.empty_object_type
        else:
            base = self.primitive_types[kind]

        return self.nullable_type(base) if schema.nullable else base

    def render(self, declarations: List[str]) -> str:
        return "\n\n".join(declarations) + "\n"

    # Target syntax

    def array_type(self, element: Optional[str]) -> str:
        """Array of `element`; None means the element type is unknown."""
        raise NotImplementedError

    def nullable_type(self, base: str) -> str:
        raise NotImplementedError

    def alias_declaration(self, name: str, type_expr: str) -> str:
        raise NotImplementedError

    def object_declaration(self, name: str, fields: List[FieldSpec]) -> str:
        raise NotImplementedError
