"""Upgradeability for Solidity contracts (transparent proxy or UUPS)."""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..core.catalog import Catalog, default_catalog
from ..core.contract import ContractModel
from ..core.errors import UnknownEnumValue
from ..core.options import parse_enum
from .access import Access, require_access_control
from .common_functions import AUTHORIZE_UPGRADE


class Upgradeable(str, Enum):
    """Upgradeability mode."""
    NONE = "none"
    TRANSPARENT = "transparent"
    UUPS = "uups"


def parse_upgradeable(value: Any) -> Upgradeable:
    return parse_enum(Upgradeable, "upgradeable", value, disabled=Upgradeable.NONE)


def set_upgradeable_base(
    c: ContractModel, upgradeable: Upgradeable, catalog: Catalog | None = None
) -> None:
    """Make ``Initializable`` the first parent of an upgradeable contract.

    Applied before any other feature so that it heads the inheritance list.
    """
    catalog = catalog or default_catalog()
    upgradeable = parse_upgradeable(upgradeable)

    if upgradeable is Upgradeable.NONE:
        return
    if upgradeable in (Upgradeable.TRANSPARENT, Upgradeable.UUPS):
        c.add_parent(catalog.parent("Initializable"))
        return
    raise UnknownEnumValue("upgradeable", upgradeable, [u.value for u in Upgradeable])


def set_upgradeable(
    c: ContractModel,
    upgradeable: Upgradeable,
    access: Access,
    catalog: Catalog | None = None,
) -> None:
    """Finish an upgradeable contract.

    UUPS contracts inherit ``UUPSUpgradeable`` and restrict
    ``_authorizeUpgrade`` with access control (``ownable`` when none was
    requested, ``UPGRADER_ROLE`` in roles mode).
    """
    catalog = catalog or default_catalog()
    upgradeable = parse_upgradeable(upgradeable)

    if upgradeable is Upgradeable.NONE:
        return

    set_upgradeable_base(c, upgradeable, catalog)

    if upgradeable is Upgradeable.TRANSPARENT:
        return
    if upgradeable is Upgradeable.UUPS:
        uups = catalog.parent("UUPSUpgradeable")
        c.add_parent(uups)
        c.add_override(uups, AUTHORIZE_UPGRADE)
        require_access_control(c, AUTHORIZE_UPGRADE, access, "UPGRADER", "upgrader", catalog)
        c.set_function_body([], AUTHORIZE_UPGRADE)
        return
    raise UnknownEnumValue("upgradeable", upgradeable, [u.value for u in Upgradeable])
