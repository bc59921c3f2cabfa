"""Access control for Solidity contracts.

``set_access_control`` makes the contract inherit the OpenZeppelin base for
the chosen mode; ``require_access_control`` additionally restricts one
function.  Both are safe to call repeatedly: the parent, its constructor
arguments and its validation code are only added the first time.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..core.catalog import Catalog, default_catalog
from ..core.contract import ContractModel
from ..core.errors import UnknownEnumValue
from ..core.models import FunctionArgument, FunctionSpec, ParentArgument
from ..core.options import parse_enum
from .common_functions import SUPPORTS_INTERFACE


class Access(str, Enum):
    """Access control mode."""
    NONE = "none"
    OWNABLE = "ownable"
    ROLES = "roles"
    MANAGED = "managed"


#: Mode used when a feature needs access control but none was requested.
DEFAULT_ACCESS_CONTROL = Access.OWNABLE

#: Role granted to the default admin by AccessControl itself.
DEFAULT_ADMIN_ROLE = "DEFAULT_ADMIN_ROLE"


def parse_access(value: Any) -> Access:
    """Coerce an option value (``False``/``None`` meaning "none") into :class:`Access`."""
    return parse_enum(Access, "access", value, disabled=Access.NONE)


def role_id(prefix: str) -> str:
    """``MINTER`` -> ``MINTER_ROLE``; names already ending in ``_ROLE`` are kept."""
    return prefix if prefix.endswith("_ROLE") else f"{prefix}_ROLE"


def set_access_control(
    c: ContractModel, access: Access, catalog: Catalog | None = None
) -> None:
    """Add the access control base contract for *access* to *c*.

    * ownable: ``Ownable(initialOwner)``; requires a non-zero initial owner.
    * roles: ``AccessControl``; requires a non-zero default admin, who is
      granted ``DEFAULT_ADMIN_ROLE``.
    * managed: ``AccessManaged(initialAuthority)``; requires a non-zero
      authority.
    """
    catalog = catalog or default_catalog()
    access = parse_access(access)

    if access is Access.NONE:
        return

    if access is Access.OWNABLE:
        if c.add_parent(catalog.parent("Ownable", ParentArgument.ref("initialOwner"))):
            c.add_constructor_argument(
                FunctionArgument(name="initialOwner", type="address"), owner="Ownable"
            )
            c.add_constructor_code(
                'require(initialOwner != address(0), "Ownable: initial owner is zero address");'
            )
    elif access is Access.ROLES:
        if c.add_parent(catalog.parent("AccessControl")):
            c.add_constructor_argument(FunctionArgument(name="defaultAdmin", type="address"))
            c.add_constructor_code(
                'require(defaultAdmin != address(0), "AccessControl: default admin is zero address");'
            )
            c.add_constructor_code(f"_grantRole({DEFAULT_ADMIN_ROLE}, defaultAdmin);")
        c.add_override("AccessControl", SUPPORTS_INTERFACE)
    elif access is Access.MANAGED:
        if c.add_parent(catalog.parent("AccessManaged", ParentArgument.ref("initialAuthority"))):
            c.add_constructor_argument(
                FunctionArgument(name="initialAuthority", type="address"), owner="AccessManaged"
            )
            c.add_constructor_code(
                'require(initialAuthority != address(0), '
                '"AccessManaged: initial authority is zero address");'
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
    """Enable access control on *c* and restrict *fn* with it.

    ``Access.NONE`` falls back to :data:`DEFAULT_ACCESS_CONTROL`.  In roles
    mode the role constant is declared once; when *role_owner* is given and
    the constant is new, the owner becomes a constructor argument and is
    granted the role.
    """
    access = parse_access(access)
    if access is Access.NONE:
        access = DEFAULT_ACCESS_CONTROL

    set_access_control(c, access, catalog)

    if access is Access.OWNABLE:
        c.add_modifier("onlyOwner", fn)
    elif access is Access.ROLES:
        role = role_id(role_id_prefix)
        added = False
        if role != DEFAULT_ADMIN_ROLE:
            added = c.add_definition(
                f'bytes32 public constant {role} = keccak256("{role}");', name=role
            )
        if role_owner and added:
            c.add_constructor_argument(FunctionArgument(name=role_owner, type="address"))
            c.add_constructor_code(
                f'require({role_owner} != address(0), "AccessControl: role owner is zero address");'
            )
            c.add_constructor_code(f"_grantRole({role}, {role_owner});")
        c.add_modifier(f"onlyRole({role})", fn)
    elif access is Access.MANAGED:
        c.add_modifier("restricted", fn)
    else:
        raise UnknownEnumValue("access", access, [a.value for a in Access])
