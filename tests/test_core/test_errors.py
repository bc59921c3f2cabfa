"""Tests for build errors and option parsing (contractkit.core.errors, .options)."""

from __future__ import annotations

import pytest

from contractkit.core.errors import (
    ArgumentNameCollision,
    ContractBuildError,
    DuplicateBodyError,
    ModelFrozenError,
    SymbolConflict,
    UnknownEnumValue,
)
from contractkit.core.models import ParentArgument, ParentReference, Visibility
from contractkit.core.options import parse_enum

pytestmark = pytest.mark.unit


class TestDiagnostics:
    @pytest.mark.parametrize(
        "error, code",
        [
            (SymbolConflict("import", "A", "a.sol", "b.sol"), "symbol_conflict"),
            (DuplicateBodyError("f()"), "duplicate_body"),
            (ArgumentNameCollision("x", "Ownable", "own"), "argument_name_collision"),
            (ModelFrozenError("C", "add_parent"), "model_frozen"),
            (UnknownEnumValue("access", "root", ["none"]), "unknown_enum_value"),
        ],
    )
    def test_codes(self, error, code):
        assert isinstance(error, ContractBuildError)
        assert error.to_diagnostic()["code"] == code

    def test_diagnostic_is_plain_data(self):
        ref = ParentReference(identifier="A", path="a.sol", args=(ParentArgument.lit("x"),))
        diagnostic = SymbolConflict("parent", "A", ref, None).to_diagnostic()
        assert diagnostic["details"]["existing"]["identifier"] == "A"
        assert diagnostic["details"]["incoming"] is None
        assert "Conflicting parent 'A'" in diagnostic["message"]

    def test_unknown_enum_message_lists_allowed(self):
        err = UnknownEnumValue("access", "root", ["none", "ownable"])
        assert "none, ownable" in str(err)
        assert err.to_diagnostic()["details"]["allowed"] == ["none", "ownable"]


class TestParseEnum:
    def test_member_passthrough(self):
        assert parse_enum(Visibility, "kind", Visibility.PUBLIC) is Visibility.PUBLIC

    def test_value(self):
        assert parse_enum(Visibility, "kind", "external") is Visibility.EXTERNAL

    @pytest.mark.parametrize("value", [None, False, ""])
    def test_disabled_values(self, value):
        assert parse_enum(Visibility, "kind", value, disabled=Visibility.PRIVATE) is (
            Visibility.PRIVATE
        )

    def test_disabled_requires_default(self):
        with pytest.raises(UnknownEnumValue):
            parse_enum(Visibility, "kind", None)

    def test_unknown(self):
        with pytest.raises(UnknownEnumValue) as exc_info:
            parse_enum(Visibility, "kind", "protected")
        assert exc_info.value.option == "kind"
        assert exc_info.value.value == "protected"
