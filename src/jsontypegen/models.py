"""
Options and results passed in and out of the type emitters.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .config import DEFAULT_ROOT_TYPE_NAME
from .errors import UnsupportedFormatError


class OutputFormat(str, Enum):
    TYPESCRIPT = "typescript"
    JSDOC = "jsdoc"
    PYTHON_TYPEDDICT = "python-typeddict"
    PYTHON_DATACLASS = "python-dataclass"
    PYDANTIC_V2 = "pydantic-v2"

    @classmethod
    def parse(cls, value: "OutputFormat | str") -> "OutputFormat":
        """Accept either a member or its string id."""
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedFormatError(value) from None


@dataclass
class TypeGenerationOptions:
    """Caller-supplied settings for a single emission."""
    format: OutputFormat | str = OutputFormat.TYPESCRIPT
    root_type_name: str = DEFAULT_ROOT_TYPE_NAME
    # When False every property is emitted as required
    use_optional_fields: bool = True

    def __post_init__(self):
        if not self.root_type_name:
            raise ValueError("root_type_name must be a non-empty identifier")


@dataclass
class GeneratedType:
    """Emitted declarations for a root type and all of its nested types."""
    name: str
    content: str
    dependencies: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "content": self.content,
            "dependencies": list(self.dependencies),
        }
