"""Build-time errors raised by the contract composition engine.

Every error is local to one build session.  None of them is retried: the
caller reports the failure (see :func:`contractkit.generate.generate`) and
discards the model.
"""

from __future__ import annotations

from typing import Any


class ContractBuildError(Exception):
    """Base class for all errors raised while composing a contract."""

    code = "build_error"

    def __init__(self, message: str, **details: Any) -> None:
        self.details = details
        super().__init__(message)

    def to_diagnostic(self) -> dict[str, Any]:
        """Return a JSON-serialisable description of the failure."""
        return {
            "code": self.code,
            "message": str(self),
            "details": {k: _plain(v) for k, v in self.details.items()},
        }


class SymbolConflict(ContractBuildError):
    """Raised when a key is registered twice with different payloads."""

    code = "symbol_conflict"

    def __init__(self, kind: str, key: str, existing: Any, incoming: Any) -> None:
        self.kind = kind
        self.key = key
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"Conflicting {kind} '{key}': already registered as {existing!r}, "
            f"cannot register {incoming!r}",
            kind=kind,
            key=key,
            existing=existing,
            incoming=incoming,
        )


class DuplicateBodyError(ContractBuildError):
    """Raised when a feature tries to redefine the body of a function."""

    code = "duplicate_body"

    def __init__(self, signature: str) -> None:
        self.signature = signature
        super().__init__(
            f"Function '{signature}' already has a body",
            signature=signature,
        )


class ArgumentNameCollision(ContractBuildError):
    """Raised when two owners contribute a constructor argument with the same name."""

    code = "argument_name_collision"

    def __init__(self, name: str, existing_owner: str, incoming_owner: str) -> None:
        self.name = name
        self.existing_owner = existing_owner
        self.incoming_owner = incoming_owner
        super().__init__(
            f"Constructor argument '{name}' is contributed by both "
            f"'{existing_owner}' and '{incoming_owner}'",
            name=name,
            existing_owner=existing_owner,
            incoming_owner=incoming_owner,
        )


class ModelFrozenError(ContractBuildError):
    """Raised when a model is mutated after it has been emitted."""

    code = "model_frozen"

    def __init__(self, contract_name: str, operation: str) -> None:
        self.contract_name = contract_name
        self.operation = operation
        super().__init__(
            f"Contract '{contract_name}' has already been emitted; "
            f"'{operation}' is not allowed",
            contract_name=contract_name,
            operation=operation,
        )


class UnknownEnumValue(ContractBuildError):
    """Raised when an option holds a value outside its declared variants."""

    code = "unknown_enum_value"

    def __init__(self, option: str, value: Any, allowed: list[str]) -> None:
        self.option = option
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Unknown value for `{option}`: {value!r} (expected one of {', '.join(allowed)})",
            option=option,
            value=value,
            allowed=allowed,
        )


class UnknownCatalogEntry(ContractBuildError):
    """Raised when a building block is not in the catalog."""

    code = "unknown_catalog_entry"

    def __init__(self, name: str, dialect: str) -> None:
        self.name = name
        self.dialect = dialect
        super().__init__(
            f"No {dialect} building block named '{name}'",
            name=name,
            dialect=dialect,
        )


def _plain(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    return str(value)
