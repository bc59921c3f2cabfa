"""Options model and builder for Solidity contracts.

Features are applied in a fixed order: the upgradeable base first (so that
``Initializable`` heads the inheritance list), then access control, so that
every later feature needing a restricting modifier finds it configured.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..core.catalog import Catalog, default_catalog
from ..core.contract import ContractModel
from ..core.models import Dialect
from ..core.storage import DEFAULT_NAMESPACE_LABEL
from ..utils import is_identifier, sanitize_contract_name
from .access import Access, parse_access, set_access_control
from .address_verification import add_address_verification
from .upgradeable import Upgradeable, parse_upgradeable, set_upgradeable, set_upgradeable_base


class ContractInfo(BaseModel):
    """Licensing and contact metadata printed in the file header."""

    license: str = Field(default="MIT", min_length=1, description="SPDX license identifier")
    security_contact: str = Field(default="", description="Security contact e-mail")


class SolidityOptions(BaseModel):
    """Feature selection for one Solidity contract."""

    name: str = Field(default="MyContract", description="Contract name")
    access: Access = Field(default=Access.NONE)
    upgradeable: Upgradeable = Field(default=Upgradeable.NONE)
    address_verification: bool = Field(
        default=False, description="Add ECDSA-based address ownership verification"
    )
    info: ContractInfo = Field(default_factory=ContractInfo)

    @field_validator("name")
    @classmethod
    def _valid_name(cls, value: str) -> str:
        name = sanitize_contract_name(value)
        if not is_identifier(name):
            raise ValueError(f"Contract name {value!r} has no usable characters")
        return name

    @field_validator("access", mode="before")
    @classmethod
    def _coerce_access(cls, value: Any) -> Access:
        return parse_access(value)

    @field_validator("upgradeable", mode="before")
    @classmethod
    def _coerce_upgradeable(cls, value: Any) -> Upgradeable:
        return parse_upgradeable(value)


def set_info(c: ContractModel, info: ContractInfo) -> None:
    """Apply the license and security contact to *c*."""
    c.set_license(info.license)
    if info.security_contact:
        c.add_natspec_tag("security-contact", info.security_contact)


def build_solidity(
    options: SolidityOptions,
    catalog: Catalog | None = None,
    namespace_label: str = DEFAULT_NAMESPACE_LABEL,
) -> ContractModel:
    """Build the contract model described by *options*."""
    catalog = catalog or default_catalog()
    c = ContractModel(
        options.name,
        dialect=Dialect.SOLIDITY,
        upgradeable=options.upgradeable is not Upgradeable.NONE,
        namespace_label=namespace_label,
    )

    set_upgradeable_base(c, options.upgradeable, catalog)
    set_access_control(c, options.access, catalog)
    if options.address_verification:
        add_address_verification(c, options.access, catalog)
    set_upgradeable(c, options.upgradeable, options.access, catalog)
    set_info(c, options.info)

    return c
