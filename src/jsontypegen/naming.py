"""
Unique names for nested type declarations.
"""

from typing import List, Set

from .config import NESTED_SUFFIX


class NestedTypeNamer:
    """
    Hands out RootNested, RootNested0, RootNested1, ... in that order.

    Each emission owns its own namer, so two emissions of the same schema
    produce the same names.
    """

    def __init__(self, root_name: str, suffix: str = NESTED_SUFFIX):
        self.root_name = root_name
        self._base = f"{root_name}{suffix}"
        self._counter = -1
        self._taken: Set[str] = {root_name}
        self.issued: List[str] = []

    def next_name(self) -> str:
        while True:
            candidate = self._base if self._counter < 0 else f"{self._base}{self._counter}"
            self._counter += 1
            if candidate not in self._taken:
                break
        self._taken.add(candidate)
        self.issued.append(candidate)
        return candidate
