"""Solidity dialect: feature modules, builder and emitter.

Quick usage::

    from contractkit.solidity import SolidityEmitter, SolidityOptions, build_solidity

    model = build_solidity(SolidityOptions(name="Vault", access="roles"))
    source = SolidityEmitter().emit(model)
"""

from .access import Access, require_access_control, set_access_control
from .address_verification import add_address_verification
from .build import ContractInfo, SolidityOptions, build_solidity
from .emitter import SolidityEmitter
from .upgradeable import Upgradeable, set_upgradeable

__all__ = [
    "Access",
    "ContractInfo",
    "SolidityEmitter",
    "SolidityOptions",
    "Upgradeable",
    "add_address_verification",
    "build_solidity",
    "require_access_control",
    "set_access_control",
    "set_upgradeable",
]
