"""The contract model: the aggregate every feature module writes into.

A ``ContractModel`` lives for exactly one build session.  Feature modules
call its ``add_*`` operations in any order, then a dialect emitter renders
it once (or several times, with identical output).  After the first
successful emission the model is frozen and every mutation raises
:class:`ModelFrozenError`.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .constructor import ConstructorAssembler
from .errors import ModelFrozenError
from .functions import FunctionTable
from .models import (
    OWN,
    ConstructorArgument,
    Dialect,
    FunctionArgument,
    FunctionEntry,
    FunctionSpec,
    ImportEntry,
    NamedConstant,
    ParentReference,
    StateVariable,
    SymbolKind,
)
from .parents import ParentSet
from .registry import SymbolRegistry
from .storage import DEFAULT_NAMESPACE_LABEL, StorageLayoutResolver


class ModelState(str, Enum):
    """Lifecycle of a contract model."""
    BUILDING = "building"
    EMITTED = "emitted"


_DEFINITION_PREFIXES: tuple[tuple[str, SymbolKind], ...] = (
    ("event ", SymbolKind.EVENT),
    ("error ", SymbolKind.ERROR),
)


class ContractModel:
    """Mutable aggregate of everything one contract is made of.

    Attributes:
        name: Contract name.
        dialect: Target dialect the features write for.
        upgradeable: Whether state lives in namespaced storage records and the
            constructor becomes an initializer.
        license: SPDX license identifier.
        natspec_tags: Contract-level ``@custom`` tags, in insertion order.
    """

    def __init__(
        self,
        name: str,
        *,
        dialect: Dialect = Dialect.SOLIDITY,
        upgradeable: bool = False,
        namespace_label: str = DEFAULT_NAMESPACE_LABEL,
    ) -> None:
        self.name = name
        self.dialect = dialect
        self.upgradeable = upgradeable
        self.namespace_label = namespace_label
        self.license = "MIT"
        self.natspec_tags: list[str] = []

        self.registry = SymbolRegistry()
        self.parents = ParentSet()
        self.functions = FunctionTable()
        self.constructor = ConstructorAssembler()
        self.storage = StorageLayoutResolver(name, upgradeable)

        self._imports: list[ImportEntry] = []
        self._definitions: list[NamedConstant] = []
        self._state = ModelState.BUILDING

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def state(self) -> ModelState:
        return self._state

    @property
    def frozen(self) -> bool:
        return self._state is ModelState.EMITTED

    def mark_emitted(self) -> None:
        """Transition Building -> Emitted.  Called by emitters after rendering."""
        self._state = ModelState.EMITTED

    def _ensure_building(self, operation: str) -> None:
        if self._state is not ModelState.BUILDING:
            raise ModelFrozenError(self.name, operation)

    # ------------------------------------------------------------------
    # Read-only views for emitters
    # ------------------------------------------------------------------

    @property
    def imports(self) -> list[ImportEntry]:
        return list(self._imports)

    @property
    def definitions(self) -> list[NamedConstant]:
        """Constants, errors and events in insertion order."""
        return list(self._definitions)

    def constructor_arguments(self) -> list[ConstructorArgument]:
        return self.constructor.arguments(self.parents.order())

    # ------------------------------------------------------------------
    # Imports & parents
    # ------------------------------------------------------------------

    def _register_import(self, entry: ImportEntry) -> bool:
        if self.registry.register(SymbolKind.IMPORT, entry.identifier, entry.path):
            self._imports.append(entry)
            return True
        return False

    def add_import_only(self, entry: ImportEntry) -> bool:
        """Import a library without inheriting from it."""
        self._ensure_building("add_import_only")
        return self._register_import(entry.model_copy(update={"import_only": True}))

    def add_parent(self, ref: ParentReference) -> bool:
        """Inherit from *ref*.

        Returns ``False`` when the parent is already present, in which case
        callers must not re-add the parent's constructor arguments.
        """
        self._ensure_building("add_parent")
        if ref.identifier in self.parents:
            return False
        self._register_import(ImportEntry(identifier=ref.identifier, path=ref.path))
        return self.parents.add(ref)

    def has_parent(self, identifier: str) -> bool:
        return identifier in self.parents

    # ------------------------------------------------------------------
    # Functions
    # ------------------------------------------------------------------

    def add_function(self, spec: FunctionSpec) -> FunctionEntry:
        self._ensure_building("add_function")
        return self.functions.add(spec)

    def set_function_body(self, code: str | Iterable[str], spec: FunctionSpec) -> FunctionEntry:
        """Define the body of *spec*; a string is split into lines."""
        self._ensure_building("set_function_body")
        entry = self.functions.add(spec)
        lines = code.splitlines() if isinstance(code, str) else list(code)
        self.functions.set_body(entry, lines)
        return entry

    def add_modifier(self, modifier: str, spec: FunctionSpec) -> FunctionEntry:
        self._ensure_building("add_modifier")
        entry = self.functions.add(spec)
        self.functions.add_modifier(entry, modifier)
        return entry

    def add_override(self, parent: ParentReference | str, spec: FunctionSpec) -> FunctionEntry:
        """Declare that *spec* overrides the definition inherited from *parent*."""
        self._ensure_building("add_override")
        identifier = parent if isinstance(parent, str) else parent.identifier
        entry = self.functions.add(spec)
        self.functions.add_override(entry, identifier)
        return entry

    def add_storage_access(
        self, spec: FunctionSpec, label: str | None = None
    ) -> FunctionEntry:
        """Have *spec*'s body open with the storage accessor statement for *label*.

        A no-op for non-upgradeable contracts, whose variables are declared
        directly.  The statement is only emitted once a variable lives under
        *label*.
        """
        self._ensure_building("add_storage_access")
        entry = self.functions.add(spec)
        if self.upgradeable:
            label = label or self.namespace_label
            self.functions.add_storage_access(entry, label)
        return entry

    # ------------------------------------------------------------------
    # Constructor
    # ------------------------------------------------------------------

    def add_constructor_argument(self, arg: FunctionArgument, owner: str = OWN) -> bool:
        self._ensure_building("add_constructor_argument")
        return self.constructor.add_argument(arg, owner)

    def add_constructor_code(self, statement: str) -> None:
        self._ensure_building("add_constructor_code")
        self.constructor.add_code(statement)

    # ------------------------------------------------------------------
    # Constants, events, errors
    # ------------------------------------------------------------------

    def add_definition(
        self,
        text: str,
        docs: Iterable[str] = (),
        *,
        name: str | None = None,
        kind: SymbolKind | None = None,
    ) -> bool:
        """Declare a constant, event or error.

        The uniqueness key is *name* when given, else the full declaration
        text.  Returns ``False`` for a duplicate of an existing declaration.
        """
        self._ensure_building("add_definition")
        kind = kind or _infer_kind(text)
        key = name or text
        if not self.registry.register(kind, key, text):
            return False
        self._definitions.append(
            NamedConstant(kind=kind, key=key, text=text, docs=tuple(docs))
        )
        return True

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def add_state_variable(self, variable: StateVariable, label: str | None = None) -> bool:
        """Declare *variable*, directly or inside the namespaced record for *label*.

        Raises:
            SymbolConflict: If a variable of the same name was declared with a
                different type or visibility, or under another namespace.
        """
        self._ensure_building("add_state_variable")
        label = label or self.namespace_label
        placement = label if self.upgradeable else None
        self.registry.register(SymbolKind.VARIABLE, variable.name, (variable, placement))
        return self.storage.add(variable, label)

    def storage_reference(self, name: str) -> str:
        """Expression for state variable *name* inside a function body."""
        return self.storage.reference(name)

    # ------------------------------------------------------------------
    # Info
    # ------------------------------------------------------------------

    def set_license(self, license: str) -> None:
        self._ensure_building("set_license")
        self.license = license

    def add_natspec_tag(self, key: str, value: str) -> None:
        self._ensure_building("add_natspec_tag")
        tag = f"@custom:{key} {value}"
        if tag not in self.natspec_tags:
            self.natspec_tags.append(tag)


def _infer_kind(text: str) -> SymbolKind:
    stripped = text.lstrip()
    for prefix, kind in _DEFINITION_PREFIXES:
        if stripped.startswith(prefix):
            return kind
    return SymbolKind.CONSTANT
