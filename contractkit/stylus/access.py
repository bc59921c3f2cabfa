"""Access control for Stylus (Rust) contracts.

Traits from ``openzeppelin_stylus`` are composed into the contract's
storage struct; functions are restricted by guard statements that run
before the body (the Stylus counterpart of Solidity modifiers).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..core.catalog import Catalog, default_catalog
from ..core.contract import ContractModel
from ..core.errors import UnknownEnumValue
from ..core.models import Dialect, FunctionArgument, FunctionSpec, ParentArgument
from ..core.options import parse_enum


class Access(str, Enum):
    """Access control modes available for Stylus."""
    NONE = "none"
    OWNABLE = "ownable"
    ROLES = "roles"


DEFAULT_ACCESS_CONTROL = Access.OWNABLE


def parse_access(value: Any) -> Access:
    return parse_enum(Access, "access", value, disabled=Access.NONE)


def set_access_control(
    c: ContractModel, access: Access, catalog: Catalog | None = None
) -> None:
    """Compose the ``Ownable`` or ``AccessControl`` trait into *c*."""
    catalog = catalog or default_catalog()
    access = parse_access(access)

    if access is Access.NONE:
        return

    if access is Access.OWNABLE:
        ownable = catalog.parent(
            "Ownable", ParentArgument.ref("initial_owner"), dialect=Dialect.STYLUS
        )
        if c.add_parent(ownable):
            c.add_import_only(catalog.import_entry("Address", Dialect.STYLUS))
            c.add_constructor_argument(
                FunctionArgument(name="initial_owner", type="Address"), owner="Ownable"
            )
    elif access is Access.ROLES:
        if c.add_parent(catalog.parent("AccessControl", dialect=Dialect.STYLUS)):
            c.add_import_only(catalog.import_entry("IAccessControl", Dialect.STYLUS))
            c.add_import_only(catalog.import_entry("Address", Dialect.STYLUS))
            c.add_constructor_argument(FunctionArgument(name="default_admin", type="Address"))
            c.add_constructor_code(
                "self.access._grant_role(AccessControl::DEFAULT_ADMIN_ROLE.into(), default_admin);"
            )
    else:
        raise UnknownEnumValue("access", access, [a.value for a in Access])


def require_access_control(
    c: ContractModel,
    fn: FunctionSpec,
    access: Access,
    role_id_prefix: str,
    role_owner: str | None = None,
    catalog: Catalog | None = None,
) -> None:
    """Enable access control on *c* and guard *fn* with it.

    ``Access.NONE`` falls back to :data:`DEFAULT_ACCESS_CONTROL`.
    """
    access = parse_access(access)
    if access is Access.NONE:
        access = DEFAULT_ACCESS_CONTROL

    set_access_control(c, access, catalog)

    if access is Access.OWNABLE:
        c.add_modifier("self.ownable.only_owner()?;", fn)
    elif access is Access.ROLES:
        role = role_id_prefix if role_id_prefix.endswith("_ROLE") else f"{role_id_prefix}_ROLE"
        added = c.add_definition(
            f"pub const {role}: [u8; 32] = "
            f'keccak_const::Keccak256::new().update(b"{role}").finalize();',
            name=role,
        )
        if role_owner and added:
            c.add_constructor_argument(FunctionArgument(name=role_owner, type="Address"))
            c.add_constructor_code(f"self.access._grant_role({role}.into(), {role_owner});")
        c.add_modifier(f"self.access.only_role({role}.into())?;", fn)
    else:
        raise UnknownEnumValue("access", access, [a.value for a in Access])
