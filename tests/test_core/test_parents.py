"""Tests for ParentSet (contractkit.core.parents)."""

from __future__ import annotations

import pytest

from contractkit.core.models import ParentArgument, ParentReference
from contractkit.core.parents import ParentSet

pytestmark = pytest.mark.unit


def _ref(identifier: str, *args: str) -> ParentReference:
    return ParentReference(
        identifier=identifier,
        path=f"{identifier}.sol",
        args=tuple(ParentArgument.ref(a) for a in args),
    )


class TestParentSet:
    def test_first_added_order(self):
        parents = ParentSet()
        for name in ("ERC20", "Ownable", "ERC20Permit"):
            parents.add(_ref(name))
        assert parents.order() == ["ERC20", "Ownable", "ERC20Permit"]
        assert [ref.identifier for ref in parents] == parents.order()

    def test_readd_returns_false(self):
        parents = ParentSet()
        assert parents.add(_ref("Ownable")) is True
        assert parents.add(_ref("Ownable")) is False
        assert len(parents) == 1

    def test_first_reference_wins(self):
        parents = ParentSet()
        parents.add(_ref("Ownable", "initialOwner"))
        parents.add(_ref("Ownable", "someoneElse"))
        assert parents.get("Ownable").args[0].value == "initialOwner"

    def test_readd_keeps_position(self):
        parents = ParentSet()
        parents.add(_ref("A"))
        parents.add(_ref("B"))
        parents.add(_ref("A"))
        assert parents.order() == ["A", "B"]

    def test_contains_and_get(self):
        parents = ParentSet()
        parents.add(_ref("Pausable"))
        assert "Pausable" in parents
        assert "Ownable" not in parents
        assert parents.get("Ownable") is None
