# tests/test_naming.py

"""Tests for nested type name allocation"""

# Local imports
from jsontypegen import NestedTypeNamer


class TestNestedTypeNamer:
    """Name sequence and uniqueness"""

    def test_sequence(self) -> None:
        """Names follow Nested, Nested0, Nested1, ..."""
        namer = NestedTypeNamer("Root")
        names = [namer.next_name() for _ in range(4)]

        assert names == ["RootNested", "RootNested0", "RootNested1", "RootNested2"]
        assert namer.issued == names

    def test_never_reuses_root_name(self) -> None:
        """A candidate equal to the root name is skipped"""
        namer = NestedTypeNamer("Item", suffix="")
        assert namer.next_name() == "Item0"

    def test_instances_are_independent(self) -> None:
        """Two namers with the same root produce the same names"""
        first = NestedTypeNamer("User")
        second = NestedTypeNamer("User")

        first_names = [first.next_name() for _ in range(3)]
        second_names = [second.next_name() for _ in range(3)]

        assert first_names == second_names
        assert len(set(first_names)) == 3
