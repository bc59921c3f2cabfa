"""Contract composition engine.

Feature modules write into a :class:`ContractModel`; dialect emitters read
it back out.  Everything here is dialect-neutral.

Usage::

    from contractkit.core import ContractModel, FunctionSpec, default_catalog

    c = ContractModel("Vault")
    c.add_parent(default_catalog().parent("Ownable"))
"""

from .catalog import Catalog, CatalogEntry, default_catalog
from .contract import ContractModel, ModelState
from .errors import (
    ArgumentNameCollision,
    ContractBuildError,
    DuplicateBodyError,
    ModelFrozenError,
    SymbolConflict,
    UnknownCatalogEntry,
    UnknownEnumValue,
)
from .models import (
    OWN,
    ConstructorArgument,
    Dialect,
    FunctionArgument,
    FunctionDocs,
    FunctionEntry,
    FunctionSpec,
    ImportEntry,
    Mutability,
    ParentArgument,
    ParentReference,
    StateVariable,
    SymbolKind,
    Visibility,
)
from .storage import DEFAULT_NAMESPACE_LABEL, compute_storage_slot, keccak256, namespace_id

__all__ = [
    "ArgumentNameCollision",
    "Catalog",
    "CatalogEntry",
    "ConstructorArgument",
    "ContractBuildError",
    "ContractModel",
    "DEFAULT_NAMESPACE_LABEL",
    "Dialect",
    "DuplicateBodyError",
    "FunctionArgument",
    "FunctionDocs",
    "FunctionEntry",
    "FunctionSpec",
    "ImportEntry",
    "ModelFrozenError",
    "ModelState",
    "Mutability",
    "OWN",
    "ParentArgument",
    "ParentReference",
    "StateVariable",
    "SymbolConflict",
    "SymbolKind",
    "UnknownCatalogEntry",
    "UnknownEnumValue",
    "Visibility",
    "compute_storage_slot",
    "default_catalog",
    "keccak256",
    "namespace_id",
]
