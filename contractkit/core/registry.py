"""Symbol registry: one definition per named entity."""

from __future__ import annotations

from typing import Any

from .errors import SymbolConflict
from .models import SymbolKind


class SymbolRegistry:
    """Tracks imports, constants, events, errors and variables by key.

    Registration is idempotent: the same key with an identical payload is
    accepted silently, a different payload raises :class:`SymbolConflict`.
    """

    def __init__(self) -> None:
        self._entries: dict[SymbolKind, dict[str, Any]] = {kind: {} for kind in SymbolKind}

    def register(self, kind: SymbolKind, key: str, payload: Any) -> bool:
        """Register *payload* under *key*.

        Returns:
            ``True`` if the key was newly added, ``False`` if it was already
            present with an identical payload.

        Raises:
            SymbolConflict: If *key* is present with a different payload.
        """
        bucket = self._entries[kind]
        if key in bucket:
            existing = bucket[key]
            if existing != payload:
                raise SymbolConflict(kind.value, key, existing, payload)
            return False
        bucket[key] = payload
        return True

    def get(self, kind: SymbolKind, key: str) -> Any:
        return self._entries[kind].get(key)

    def contains(self, kind: SymbolKind, key: str) -> bool:
        return key in self._entries[kind]

    def entries(self, kind: SymbolKind) -> list[Any]:
        """Payloads registered under *kind*, in insertion order."""
        return list(self._entries[kind].values())

    def keys(self, kind: SymbolKind) -> list[str]:
        return list(self._entries[kind])

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._entries.values())
