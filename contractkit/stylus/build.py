"""Options model and builder for Stylus contracts."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..core.catalog import Catalog, default_catalog
from ..core.contract import ContractModel
from ..core.models import Dialect
from ..utils import is_identifier, sanitize_contract_name
from .access import Access, parse_access, set_access_control


class StylusOptions(BaseModel):
    """Feature selection for one Stylus contract."""

    name: str = Field(default="MyContract", description="Contract (storage struct) name")
    access: Access = Field(default=Access.NONE)
    license: str = Field(default="MIT", min_length=1)
    security_contact: str = Field(default="")

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


def build_stylus(options: StylusOptions, catalog: Catalog | None = None) -> ContractModel:
    """Build the contract model described by *options*."""
    catalog = catalog or default_catalog()
    c = ContractModel(options.name, dialect=Dialect.STYLUS)

    set_access_control(c, options.access, catalog)

    c.set_license(options.license)
    if options.security_contact:
        c.add_natspec_tag("security-contact", options.security_contact)
    return c
