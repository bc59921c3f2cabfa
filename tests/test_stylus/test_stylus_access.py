"""Tests for Stylus access control (contractkit.stylus.access)."""

from __future__ import annotations

import pytest

from contractkit.core.errors import UnknownEnumValue
from contractkit.core.models import FunctionSpec, Visibility
from contractkit.stylus.access import (
    Access,
    parse_access,
    require_access_control,
    set_access_control,
)

pytestmark = pytest.mark.unit

SET_URI = FunctionSpec(name="setUri", kind=Visibility.PUBLIC)


class TestSetAccessControl:
    def test_managed_is_not_a_stylus_mode(self):
        with pytest.raises(UnknownEnumValue):
            parse_access("managed")

    def test_ownable(self, stylus_model):
        set_access_control(stylus_model, Access.OWNABLE)
        ref = stylus_model.parents.get("Ownable")
        assert ref.storage_field == "ownable"
        assert [a.render() for a in ref.args] == ["initial_owner"]
        [arg] = stylus_model.constructor_arguments()
        assert (arg.name, arg.type, arg.owner) == ("initial_owner", "Address", "Ownable")

    def test_roles(self, stylus_model):
        set_access_control(stylus_model, Access.ROLES)
        assert stylus_model.parents.order() == ["AccessControl"]
        assert [i.identifier for i in stylus_model.imports] == [
            "AccessControl",
            "IAccessControl",
            "Address",
        ]
        assert stylus_model.constructor.code == [
            "self.access._grant_role(AccessControl::DEFAULT_ADMIN_ROLE.into(), default_admin);"
        ]

    def test_idempotent(self, stylus_model):
        set_access_control(stylus_model, Access.ROLES)
        set_access_control(stylus_model, Access.ROLES)
        assert len(stylus_model.constructor.code) == 1
        assert len(stylus_model.imports) == 3

    def test_accepts_raw_option_value(self, stylus_model):
        set_access_control(stylus_model, "ownable")
        assert stylus_model.parents.order() == ["Ownable"]

    def test_managed_rejected_by_set_access_control(self, stylus_model):
        with pytest.raises(UnknownEnumValue):
            set_access_control(stylus_model, "managed")
        assert len(stylus_model.parents) == 0


class TestRequireAccessControl:
    def test_defaults_to_ownable(self, stylus_model):
        require_access_control(stylus_model, SET_URI, Access.NONE, "URI_SETTER")
        assert stylus_model.functions.get(SET_URI).modifiers == ["self.ownable.only_owner()?;"]

    def test_roles_guard_and_constant(self, stylus_model):
        require_access_control(stylus_model, SET_URI, Access.ROLES, "URI_SETTER", "uri_setter")
        [constant] = stylus_model.definitions
        assert constant.text == (
            "pub const URI_SETTER_ROLE: [u8; 32] = "
            'keccak_const::Keccak256::new().update(b"URI_SETTER_ROLE").finalize();'
        )
        assert stylus_model.functions.get(SET_URI).modifiers == [
            "self.access.only_role(URI_SETTER_ROLE.into())?;"
        ]
        assert [a.name for a in stylus_model.constructor_arguments()] == [
            "default_admin",
            "uri_setter",
        ]
