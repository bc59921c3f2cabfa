"""Function table keyed by name and argument type signature."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .errors import DuplicateBodyError
from .models import FunctionEntry, FunctionSpec


class FunctionTable:
    """Accumulates function definitions contributed by several features.

    A function is requested any number of times, defined (given a body) by
    exactly one feature and decorated with modifiers and override targets by
    any of them.  Iteration follows first-request order.
    """

    def __init__(self) -> None:
        self._entries: dict[str, FunctionEntry] = {}

    def add(self, spec: FunctionSpec) -> FunctionEntry:
        """Return the entry for *spec*, creating it on first request."""
        entry = self._entries.get(spec.signature)
        if entry is None:
            entry = FunctionEntry(spec=spec)
            self._entries[spec.signature] = entry
        return entry

    def get(self, spec_or_signature: FunctionSpec | str) -> FunctionEntry | None:
        key = (
            spec_or_signature.signature
            if isinstance(spec_or_signature, FunctionSpec)
            else spec_or_signature
        )
        return self._entries.get(key)

    def set_body(self, entry: FunctionEntry, lines: Iterable[str]) -> None:
        """Define the body of *entry*.

        Raises:
            DuplicateBodyError: If the entry already has a non-empty body.
        """
        if entry.body:
            raise DuplicateBodyError(entry.signature)
        entry.body = list(lines)

    def add_modifier(self, entry: FunctionEntry, modifier: str) -> bool:
        """Append *modifier* unless the same text is already applied."""
        if modifier in entry.modifiers:
            return False
        entry.modifiers.append(modifier)
        return True

    def add_override(self, entry: FunctionEntry, identifier: str) -> None:
        entry.overrides.add(identifier)

    def add_storage_access(self, entry: FunctionEntry, label: str) -> bool:
        """Mark *entry* as needing the accessor statement for namespace *label*."""
        if label in entry.storage_labels:
            return False
        entry.storage_labels.append(label)
        return True

    def __iter__(self) -> Iterator[FunctionEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, spec: object) -> bool:
        if isinstance(spec, FunctionSpec):
            return spec.signature in self._entries
        return spec in self._entries
