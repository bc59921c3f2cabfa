"""Tests for SymbolRegistry (contractkit.core.registry).

Covers:
- Idempotent registration of identical payloads
- Conflict detection for differing payloads
- Independent namespaces per symbol kind
- Insertion-ordered views
"""

from __future__ import annotations

import pytest

from contractkit.core.errors import SymbolConflict
from contractkit.core.models import SymbolKind
from contractkit.core.registry import SymbolRegistry

pytestmark = pytest.mark.unit


class TestRegister:
    def test_new_key_returns_true(self):
        registry = SymbolRegistry()
        assert registry.register(SymbolKind.IMPORT, "Ownable", "access/Ownable.sol") is True
        assert registry.contains(SymbolKind.IMPORT, "Ownable")
        assert len(registry) == 1

    def test_identical_payload_is_idempotent(self):
        registry = SymbolRegistry()
        registry.register(SymbolKind.CONSTANT, "MINTER_ROLE", "bytes32 x")
        assert registry.register(SymbolKind.CONSTANT, "MINTER_ROLE", "bytes32 x") is False
        assert len(registry) == 1

    def test_differing_payload_raises(self):
        registry = SymbolRegistry()
        registry.register(SymbolKind.VARIABLE, "_owner", "address")
        with pytest.raises(SymbolConflict) as exc_info:
            registry.register(SymbolKind.VARIABLE, "_owner", "uint256")
        err = exc_info.value
        assert err.kind == "variable"
        assert err.key == "_owner"
        assert err.existing == "address"
        assert err.incoming == "uint256"

    def test_conflict_leaves_original_payload(self):
        registry = SymbolRegistry()
        registry.register(SymbolKind.IMPORT, "ECDSA", "a.sol")
        with pytest.raises(SymbolConflict):
            registry.register(SymbolKind.IMPORT, "ECDSA", "b.sol")
        assert registry.get(SymbolKind.IMPORT, "ECDSA") == "a.sol"

    def test_kinds_are_separate_namespaces(self):
        registry = SymbolRegistry()
        registry.register(SymbolKind.EVENT, "Paused", "event Paused();")
        assert registry.register(SymbolKind.ERROR, "Paused", "error Paused();") is True
        assert len(registry) == 2


class TestViews:
    def test_entries_and_keys_keep_insertion_order(self):
        registry = SymbolRegistry()
        for key in ("c", "a", "b"):
            registry.register(SymbolKind.CONSTANT, key, key.upper())
        assert registry.keys(SymbolKind.CONSTANT) == ["c", "a", "b"]
        assert registry.entries(SymbolKind.CONSTANT) == ["C", "A", "B"]

    def test_get_missing_returns_none(self):
        assert SymbolRegistry().get(SymbolKind.IMPORT, "Nope") is None
