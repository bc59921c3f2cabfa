"""Read-only catalog of known base contracts, traits and libraries.

The catalog is built once per process by :func:`default_catalog` and handed
to feature modules; nothing mutates it afterwards.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnknownCatalogEntry
from .models import Dialect, ImportEntry, ParentArgument, ParentReference


class CatalogEntry(BaseModel):
    """Descriptor of one reusable building block."""
    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    dialect: Dialect = Dialect.SOLIDITY
    library: bool = Field(default=False, description="Imported only, never inherited")
    upgradeable_name: str | None = None
    upgradeable_path: str | None = None
    initializer: str | None = None
    storage_field: str | None = None
    storage_type: str | None = None


class Catalog:
    """Immutable lookup of :class:`CatalogEntry` by ``(dialect, name)``."""

    def __init__(self, entries: Iterable[CatalogEntry]) -> None:
        self._entries: Mapping[tuple[Dialect, str], CatalogEntry] = MappingProxyType(
            {(entry.dialect, entry.name): entry for entry in entries}
        )

    @property
    def entries(self) -> Mapping[tuple[Dialect, str], CatalogEntry]:
        return self._entries

    def get(self, name: str, dialect: Dialect = Dialect.SOLIDITY) -> CatalogEntry:
        try:
            return self._entries[(dialect, name)]
        except KeyError:
            raise UnknownCatalogEntry(name, dialect.value) from None

    def parent(
        self,
        name: str,
        *args: ParentArgument,
        dialect: Dialect = Dialect.SOLIDITY,
    ) -> ParentReference:
        """Build a :class:`ParentReference` for *name* with construction *args*."""
        entry = self.get(name, dialect)
        return ParentReference(
            identifier=entry.name,
            path=entry.path,
            args=args,
            upgradeable_name=entry.upgradeable_name,
            upgradeable_path=entry.upgradeable_path,
            initializer=entry.initializer,
            storage_field=entry.storage_field,
            storage_type=entry.storage_type,
        )

    def import_entry(self, name: str, dialect: Dialect = Dialect.SOLIDITY) -> ImportEntry:
        entry = self.get(name, dialect)
        return ImportEntry(identifier=entry.name, path=entry.path, import_only=True)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# ---------------------------------------------------------------------------
# Built-in entries
# ---------------------------------------------------------------------------

_OZ = "@openzeppelin/contracts"
_OZ_UP = "@openzeppelin/contracts-upgradeable"


def _transpiled(name: str, subpath: str) -> CatalogEntry:
    return CatalogEntry(
        name=name,
        path=f"{_OZ}/{subpath}/{name}.sol",
        upgradeable_name=f"{name}Upgradeable",
        upgradeable_path=f"{_OZ_UP}/{subpath}/{name}Upgradeable.sol",
        initializer=f"__{name}_init",
    )


_SOLIDITY_ENTRIES: tuple[CatalogEntry, ...] = (
    _transpiled("Ownable", "access"),
    _transpiled("AccessControl", "access"),
    _transpiled("AccessManaged", "access/manager"),
    CatalogEntry(name="Initializable", path=f"{_OZ_UP}/proxy/utils/Initializable.sol"),
    CatalogEntry(
        name="UUPSUpgradeable",
        path=f"{_OZ_UP}/proxy/utils/UUPSUpgradeable.sol",
        initializer="__UUPSUpgradeable_init",
    ),
    CatalogEntry(name="ECDSA", path=f"{_OZ}/utils/cryptography/ECDSA.sol", library=True),
    CatalogEntry(
        name="MessageHashUtils",
        path=f"{_OZ}/utils/cryptography/MessageHashUtils.sol",
        library=True,
    ),
)

_STYLUS_ENTRIES: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        name="Ownable",
        path="openzeppelin_stylus::access::ownable",
        dialect=Dialect.STYLUS,
        storage_field="ownable",
        storage_type="Ownable",
    ),
    CatalogEntry(
        name="AccessControl",
        path="openzeppelin_stylus::access::control",
        dialect=Dialect.STYLUS,
        storage_field="access",
        storage_type="AccessControl",
    ),
    CatalogEntry(
        name="IAccessControl",
        path="openzeppelin_stylus::access::control",
        dialect=Dialect.STYLUS,
        library=True,
    ),
    CatalogEntry(name="Address", path="alloy_primitives", dialect=Dialect.STYLUS, library=True),
)


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """The process-wide catalog of OpenZeppelin building blocks."""
    return Catalog(_SOLIDITY_ENTRIES + _STYLUS_ENTRIES)
