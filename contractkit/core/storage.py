"""Storage layout resolution and ERC-7201 namespaced storage locations.

Non-upgradeable contracts declare state variables directly.  Upgradeable
contracts group them into one struct per namespace label, stored at the
location derived from the namespace id::

    keccak256(abi.encode(uint256(keccak256(id)) - 1)) & ~bytes32(uint256(0xff))
"""

from __future__ import annotations

from Crypto.Hash import keccak
from pydantic import BaseModel, Field

from ..utils import to_pascal
from .models import StateVariable

DEFAULT_NAMESPACE_LABEL = "openzeppelin"

_WORD = 2**256
_LOW_BYTE_MASK = (_WORD - 1) ^ 0xFF


def keccak256(data: bytes) -> bytes:
    """Ethereum keccak-256 (not NIST SHA3-256)."""
    return keccak.new(digest_bits=256, data=data).digest()


def namespace_id(label: str, contract_name: str) -> str:
    """Namespace id for *contract_name* under *label*, e.g. ``openzeppelin.storage.MyToken``."""
    return f"{label}.storage.{contract_name}"


def compute_storage_slot(namespace: str) -> str:
    """ERC-7201 storage location of *namespace* as a ``0x``-prefixed 32-byte hex string."""
    inner = (int.from_bytes(keccak256(namespace.encode("utf-8")), "big") - 1) % _WORD
    outer = int.from_bytes(keccak256(inner.to_bytes(32, "big")), "big")
    return "0x" + format(outer & _LOW_BYTE_MASK, "064x")


class StorageLayoutEntry(BaseModel):
    """A namespaced storage record: one struct at one deterministic slot."""

    contract_name: str
    label: str = DEFAULT_NAMESPACE_LABEL
    fields: list[str] = Field(default_factory=list)

    @property
    def namespace_id(self) -> str:
        return namespace_id(self.label, self.contract_name)

    @property
    def slot(self) -> str:
        return compute_storage_slot(self.namespace_id)

    @property
    def _suffix(self) -> str:
        return "" if self.label == DEFAULT_NAMESPACE_LABEL else to_pascal(self.label)

    @property
    def struct_name(self) -> str:
        return f"{self.contract_name}{self._suffix}Storage"

    @property
    def location_constant(self) -> str:
        return f"{self.struct_name}Location"

    @property
    def getter_name(self) -> str:
        return f"_get{self.struct_name}"

    @property
    def variable(self) -> str:
        """Local variable bound by the accessor statement."""
        return "$" if not self._suffix else f"${self._suffix}"

    def accessor_statement(self) -> str:
        return f"{self.struct_name} storage {self.variable} = {self.getter_name}();"


class StorageLayoutResolver:
    """Decides where each state variable of one contract lives."""

    def __init__(self, contract_name: str, upgradeable: bool) -> None:
        self.contract_name = contract_name
        self.upgradeable = upgradeable
        self._variables: list[StateVariable] = []
        self._records: dict[str, StorageLayoutEntry] = {}
        self._locations: dict[str, str] = {}

    def add(self, variable: StateVariable, label: str = DEFAULT_NAMESPACE_LABEL) -> bool:
        """Place *variable*; return ``False`` if the same declaration is already placed."""
        if not self.upgradeable:
            if variable in self._variables:
                return False
            self._variables.append(variable)
            return True

        record = self._records.get(label)
        if record is None:
            record = StorageLayoutEntry(contract_name=self.contract_name, label=label)
            self._records[label] = record
        text = variable.field()
        if text in record.fields:
            return False
        record.fields.append(text)
        self._locations[variable.name] = label
        return True

    def record(self, label: str = DEFAULT_NAMESPACE_LABEL) -> StorageLayoutEntry | None:
        """The record for *label*, or ``None`` while no variable lives there."""
        return self._records.get(label)

    def reference(self, name: str) -> str:
        """Expression that reads or writes variable *name* inside a function body."""
        label = self._locations.get(name)
        if label is None:
            return name
        return f"{self._records[label].variable}.{name}"

    def label_of(self, name: str) -> str | None:
        return self._locations.get(name)

    @property
    def variables(self) -> list[StateVariable]:
        return list(self._variables)

    @property
    def records(self) -> list[StorageLayoutEntry]:
        return list(self._records.values())
