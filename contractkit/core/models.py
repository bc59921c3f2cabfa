"""Pydantic v2 models for the contract composition engine.

Defines the value types that feature modules hand to a ``ContractModel``:
parent references, imports, function requests and their accumulated entries,
constructor arguments, named constants and state variables.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils import is_identifier


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Dialect(str, Enum):
    """Target chain dialect of the emitted source file."""
    SOLIDITY = "solidity"
    STYLUS = "stylus"


class Visibility(str, Enum):
    """Function or state variable visibility."""
    PUBLIC = "public"
    EXTERNAL = "external"
    INTERNAL = "internal"
    PRIVATE = "private"


class Mutability(str, Enum):
    """Function state mutability."""
    NONPAYABLE = "nonpayable"
    PAYABLE = "payable"
    VIEW = "view"
    PURE = "pure"


class SymbolKind(str, Enum):
    """Namespaces tracked by the symbol registry."""
    IMPORT = "import"
    CONSTANT = "constant"
    EVENT = "event"
    ERROR = "error"
    VARIABLE = "variable"


class ArgumentKind(str, Enum):
    """How a parent construction argument is rendered."""
    LITERAL = "literal"
    REFERENCE = "reference"


#: Owner tag for constructor arguments contributed by the contract itself.
OWN = "own"


def _check_identifier(value: str) -> str:
    if not is_identifier(value):
        raise ValueError(f"{value!r} is not a valid identifier")
    return value


# ---------------------------------------------------------------------------
# Parents & imports
# ---------------------------------------------------------------------------

class ParentArgument(BaseModel):
    """A single argument passed to a parent's constructor or initializer."""
    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Literal text or referenced name")
    kind: ArgumentKind = Field(default=ArgumentKind.REFERENCE)

    @classmethod
    def ref(cls, name: str) -> "ParentArgument":
        return cls(value=name, kind=ArgumentKind.REFERENCE)

    @classmethod
    def lit(cls, value: str) -> "ParentArgument":
        return cls(value=value, kind=ArgumentKind.LITERAL)

    def render(self) -> str:
        if self.kind is ArgumentKind.LITERAL:
            escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return self.value


class ParentReference(BaseModel):
    """A base contract (Solidity) or trait (Stylus) the contract inherits from."""
    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="Contract or trait name, e.g. 'Ownable'")
    path: str = Field(..., description="Source locator the identifier is imported from")
    args: tuple[ParentArgument, ...] = Field(default=())
    upgradeable_name: str | None = Field(
        default=None, description="Name of the upgradeable variant, if any"
    )
    upgradeable_path: str | None = Field(default=None)
    initializer: str | None = Field(
        default=None, description="Initializer called from initialize(), e.g. '__Ownable_init'"
    )
    storage_field: str | None = Field(
        default=None, description="Stylus storage field holding the trait state"
    )
    storage_type: str | None = Field(default=None)

    def with_args(self, *args: ParentArgument) -> "ParentReference":
        """Return a copy of this reference carrying *args*."""
        return self.model_copy(update={"args": tuple(args)})


class ImportEntry(BaseModel):
    """An imported identifier."""
    model_config = ConfigDict(frozen=True)

    identifier: str
    path: str
    import_only: bool = Field(
        default=False, description="True for libraries that are imported but not inherited"
    )


# ---------------------------------------------------------------------------
# Functions
# ---------------------------------------------------------------------------

class FunctionArgument(BaseModel):
    """A named, typed function or constructor argument."""
    model_config = ConfigDict(frozen=True)

    name: str
    type: str

    @field_validator("name")
    @classmethod
    def _identifier_name(cls, value: str) -> str:
        return _check_identifier(value)


class FunctionDocs(BaseModel):
    """NatSpec-style documentation attached to a function."""
    model_config = ConfigDict(frozen=True)

    notice: str = ""
    details: str = ""
    params: dict[str, str] = Field(default_factory=dict)
    returns: dict[str, str] = Field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (self.notice or self.details or self.params or self.returns)


class FunctionSpec(BaseModel):
    """An immutable request for a function, identified by its signature."""
    model_config = ConfigDict(frozen=True)

    name: str
    args: tuple[FunctionArgument, ...] = Field(default=())
    returns: tuple[str, ...] = Field(default=())
    kind: Visibility = Field(default=Visibility.INTERNAL)
    mutability: Mutability = Field(default=Mutability.NONPAYABLE)
    docs: FunctionDocs = Field(default_factory=FunctionDocs)

    @property
    def signature(self) -> str:
        """Identity key: name plus argument types, e.g. ``f(address,bytes)``."""
        return f"{self.name}({','.join(arg.type for arg in self.args)})"


class FunctionEntry(BaseModel):
    """A function accumulated in the function table.

    ``body`` is ``None`` until some feature defines it.  An explicitly empty
    list is a defined, empty body.
    """

    spec: FunctionSpec
    body: list[str] | None = None
    modifiers: list[str] = Field(default_factory=list)
    overrides: set[str] = Field(default_factory=set)
    storage_labels: list[str] = Field(default_factory=list)

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def signature(self) -> str:
        return self.spec.signature

    def sorted_overrides(self) -> list[str]:
        return sorted(self.overrides)


# ---------------------------------------------------------------------------
# Constructor, constants, variables
# ---------------------------------------------------------------------------

class ConstructorArgument(BaseModel):
    """A constructor argument tagged with the parent (or ``OWN``) that contributed it."""
    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    owner: str = OWN


class NamedConstant(BaseModel):
    """A constant, event or error declaration."""
    model_config = ConfigDict(frozen=True)

    kind: SymbolKind
    key: str
    text: str
    docs: tuple[str, ...] = Field(default=())


class StateVariable(BaseModel):
    """A structured state variable declaration."""
    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    visibility: Visibility = Field(default=Visibility.PRIVATE)

    @field_validator("name")
    @classmethod
    def _identifier_name(cls, value: str) -> str:
        return _check_identifier(value)

    def declaration(self) -> str:
        """Plain contract-level declaration, e.g. ``uint256 private _x;``."""
        return f"{self.type} {self.visibility.value} {self.name};"

    def field(self) -> str:
        """Struct member declaration used inside a namespaced storage record."""
        return f"{self.type} {self.name};"
