"""Function requests shared by several Solidity features."""

from __future__ import annotations

from ..core.models import FunctionArgument, FunctionSpec, Mutability, Visibility

SUPPORTS_INTERFACE = FunctionSpec(
    name="supportsInterface",
    args=(FunctionArgument(name="interfaceId", type="bytes4"),),
    returns=("bool",),
    kind=Visibility.PUBLIC,
    mutability=Mutability.VIEW,
)

AUTHORIZE_UPGRADE = FunctionSpec(
    name="_authorizeUpgrade",
    args=(FunctionArgument(name="newImplementation", type="address"),),
    kind=Visibility.INTERNAL,
)
