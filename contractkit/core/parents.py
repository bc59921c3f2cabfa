"""Ordered set of parent contracts / traits."""

from __future__ import annotations

from collections.abc import Iterator

from .models import ParentReference


class ParentSet:
    """Parents in first-added order, unique by identifier.

    The order is the inheritance order of the emitted contract and the order
    in which parent-owned constructor arguments are concatenated.  Re-adding
    an identifier is a no-op: the first reference (and its arguments) wins.
    """

    def __init__(self) -> None:
        self._parents: dict[str, ParentReference] = {}

    def add(self, ref: ParentReference) -> bool:
        """Add *ref*; return ``False`` if its identifier is already present."""
        if ref.identifier in self._parents:
            return False
        self._parents[ref.identifier] = ref
        return True

    def get(self, identifier: str) -> ParentReference | None:
        return self._parents.get(identifier)

    def order(self) -> list[str]:
        """Parent identifiers in inheritance order."""
        return list(self._parents)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._parents

    def __iter__(self) -> Iterator[ParentReference]:
        return iter(list(self._parents.values()))

    def __len__(self) -> int:
        return len(self._parents)
