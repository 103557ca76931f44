"""
Type emitters, one per output format.
"""

from typing import Dict, Type

from ..models import OutputFormat
from .base import FieldSpec, TypeEmitter
from .python import DataclassEmitter, PydanticEmitter, TypedDictEmitter
from .typescript import JSDocEmitter, TypeScriptEmitter

EMITTERS: Dict[OutputFormat, Type[TypeEmitter]] = {
    emitter_cls.format: emitter_cls
    for emitter_cls in (TypeScriptEmitter, JSDocEmitter, TypedDictEmitter, DataclassEmitter, PydanticEmitter)
}

__all__ = [
    "EMITTERS",
    "FieldSpec",
    "TypeEmitter",
    "TypeScriptEmitter",
    "JSDocEmitter",
    "TypedDictEmitter",
    "DataclassEmitter",
    "PydanticEmitter",
]
