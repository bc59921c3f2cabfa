"""Solidity emitter: renders a ``ContractModel`` into one ``.sol`` file.

The pass is deterministic and read-only: imports and definitions in
insertion order, inheritance in parent order, constructor arguments in
parent-then-own order, functions in request order with their accumulated
modifiers and a sorted override clause.
"""

from __future__ import annotations

from typing import Any

from ..config import GeneratorConfig
from ..core.contract import ContractModel
from ..core.errors import UnknownEnumValue
from ..core.models import (
    ConstructorArgument,
    Dialect,
    FunctionArgument,
    FunctionDocs,
    FunctionEntry,
    Mutability,
    NamedConstant,
    ParentReference,
    Visibility,
)
from ..core.storage import StorageLayoutEntry
from ..templates import TemplateRenderer

_REFERENCE_TYPES = ("bytes", "string")
_DATA_LOCATIONS = (" memory", " calldata", " storage")


class SolidityEmitter:
    """Serialises a Solidity contract model.

    The first successful call to :meth:`emit` freezes the model; later calls
    return identical text.
    """

    template = "solidity/contract.sol.j2"

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer()
        self._indent = self.config.indent_str

    # -- Public API --------------------------------------------------------

    def emit(self, model: ContractModel) -> str:
        if model.dialect is not Dialect.SOLIDITY:
            raise UnknownEnumValue("dialect", model.dialect.value, [Dialect.SOLIDITY.value])
        text = self.renderer.render(self.template, self._build_context(model))
        model.mark_emitted()
        return text

    # -- Context building --------------------------------------------------

    def _build_context(self, model: ContractModel) -> dict[str, Any]:
        sections: list[list[str]] = []
        sections.extend(self._definition_sections(model.definitions))
        sections.extend(self._storage_sections(model))
        sections.extend(self._constructor_sections(model))
        for entry in model.functions:
            lines = self._function(model, entry)
            if lines:
                sections.append(lines)

        body = "\n\n".join(
            "\n".join(self._indent_line(line, 1) for line in section)
            for section in sections
        )

        return {
            "license": model.license,
            "compatible_with": self.config.compatible_with,
            "pragma": self.config.solidity_pragma,
            "imports": self._imports(model),
            "natspec": [f"/// {tag}" for tag in model.natspec_tags],
            "header": self._header(model),
            "body": body,
        }

    # -- Names -------------------------------------------------------------

    def _parent_name(self, model: ContractModel, ref: ParentReference) -> str:
        if model.upgradeable and ref.upgradeable_name:
            return ref.upgradeable_name
        return ref.identifier

    def _symbol_name(self, model: ContractModel, identifier: str) -> str:
        ref = model.parents.get(identifier)
        return self._parent_name(model, ref) if ref else identifier

    # -- Header & imports --------------------------------------------------

    def _imports(self, model: ContractModel) -> list[str]:
        lines = []
        for entry in model.imports:
            name, path = entry.identifier, entry.path
            ref = model.parents.get(entry.identifier)
            if ref is not None and model.upgradeable and ref.upgradeable_name:
                name, path = ref.upgradeable_name, ref.upgradeable_path or path
            lines.append(f'import {{{name}}} from "{path}";')
        return lines

    def _header(self, model: ContractModel) -> str:
        parents = [self._parent_name(model, ref) for ref in model.parents]
        if parents:
            return f"contract {model.name} is {', '.join(parents)}"
        return f"contract {model.name}"

    # -- Definitions -------------------------------------------------------

    def _definition_sections(self, definitions: list[NamedConstant]) -> list[list[str]]:
        """Undocumented definitions are grouped; documented ones stand alone."""
        sections: list[list[str]] = []
        group: list[str] = []
        for definition in definitions:
            if definition.docs:
                if group:
                    sections.append(group)
                    group = []
                sections.append([*definition.docs, *definition.text.splitlines()])
            else:
                group.extend(definition.text.splitlines())
        if group:
            sections.append(group)
        return sections

    # -- Storage -----------------------------------------------------------

    def _storage_sections(self, model: ContractModel) -> list[list[str]]:
        if not model.upgradeable:
            declarations = [variable.declaration() for variable in model.storage.variables]
            return [declarations] if declarations else []

        sections: list[list[str]] = []
        for record in model.storage.records:
            sections.extend(self._storage_record(record))
        return sections

    def _storage_record(self, record: StorageLayoutEntry) -> list[list[str]]:
        ns = record.namespace_id
        struct = [
            f"/// @custom:storage-location erc7201:{ns}",
            f"struct {record.struct_name} {{",
            *(self._indent_line(field, 1) for field in record.fields),
            "}",
        ]
        location = [
            f'// keccak256(abi.encode(uint256(keccak256("{ns}")) - 1)) & ~bytes32(uint256(0xff))',
            f"bytes32 private constant {record.location_constant} = {record.slot};",
        ]
        getter = [
            f"function {record.getter_name}() private pure returns "
            f"({record.struct_name} storage {record.variable}) {{",
            self._indent_line("assembly {", 1),
            self._indent_line(f"{record.variable}.slot := {record.location_constant}", 2),
            self._indent_line("}", 1),
            "}",
        ]
        return [struct, location, getter]

    # -- Constructor -------------------------------------------------------

    def _constructor_sections(self, model: ContractModel) -> list[list[str]]:
        args = ", ".join(self._constructor_arg(arg) for arg in model.constructor_arguments())
        code = model.constructor.code

        if model.upgradeable:
            return self._initializer_sections(model, args, code)

        invocations = [
            f"{self._parent_name(model, ref)}({', '.join(a.render() for a in ref.args)})"
            for ref in model.parents
            if ref.args
        ]
        if not (args or code or invocations):
            return []

        header = " ".join([f"constructor({args})", *invocations])
        return [self._block(header, code)]

    def _initializer_sections(
        self, model: ContractModel, args: str, code: list[str]
    ) -> list[list[str]]:
        sections = [[
            "/// @custom:oz-upgrades-unsafe-allow constructor",
            "constructor() {",
            self._indent_line("_disableInitializers();", 1),
            "}",
        ]]
        init_calls = [
            f"{ref.initializer}({', '.join(a.render() for a in ref.args)});"
            for ref in model.parents
            if ref.initializer
        ]
        if args or code or init_calls:
            sections.append(
                self._block(f"function initialize({args}) public initializer", init_calls + code)
            )
        return sections

    def _constructor_arg(self, arg: ConstructorArgument) -> str:
        return f"{_with_location(arg.type, 'memory')} {arg.name}"

    # -- Functions ---------------------------------------------------------

    def _function(self, model: ContractModel, entry: FunctionEntry) -> list[str]:
        spec = entry.spec
        if entry.body is None and not entry.modifiers and len(entry.overrides) <= 1:
            return []

        location = "calldata" if spec.kind is Visibility.EXTERNAL else "memory"
        args = ", ".join(self._function_arg(arg, location) for arg in spec.args)

        parts = [f"function {spec.name}({args})", spec.kind.value]
        if spec.mutability is not Mutability.NONPAYABLE:
            parts.append(spec.mutability.value)
        parts.extend(entry.modifiers)
        overrides = [self._symbol_name(model, name) for name in entry.sorted_overrides()]
        if len(overrides) == 1:
            parts.append("override")
        elif overrides:
            parts.append(f"override({', '.join(sorted(overrides))})")
        if spec.returns:
            returns = ", ".join(_with_location(t, "memory") for t in spec.returns)
            parts.append(f"returns ({returns})")

        body: list[str] = []
        for label in entry.storage_labels:
            record = model.storage.record(label)
            if record is not None:
                body.append(record.accessor_statement())
        if entry.body is None:
            call = f"super.{spec.name}({', '.join(arg.name for arg in spec.args)});"
            body.append(f"return {call}" if spec.returns else call)
        else:
            body.extend(entry.body)

        return [*_natspec(spec.docs), *self._block(" ".join(parts), body)]

    def _function_arg(self, arg: FunctionArgument, location: str) -> str:
        return f"{_with_location(arg.type, location)} {arg.name}"

    # -- Formatting --------------------------------------------------------

    def _block(self, header: str, lines: list[str]) -> list[str]:
        if not lines:
            return [f"{header} {{}}"]
        return [f"{header} {{", *(self._indent_line(line, 1) for line in lines), "}"]

    def _indent_line(self, line: str, level: int) -> str:
        return f"{self._indent * level}{line}" if line.strip() else ""


def _with_location(type_name: str, location: str) -> str:
    if type_name.endswith(_DATA_LOCATIONS):
        return type_name
    if type_name in _REFERENCE_TYPES or type_name.endswith("]"):
        return f"{type_name} {location}"
    return type_name


def _natspec(docs: FunctionDocs) -> list[str]:
    lines: list[str] = []
    if docs.notice:
        lines.append(f"/// @notice {docs.notice}")
    if docs.details:
        lines.append(f"/// @dev {docs.details}")
    for name, description in docs.params.items():
        lines.append(f"/// @param {name} {description}")
    for name, description in docs.returns.items():
        if name.startswith("_"):
            lines.append(f"/// @return {description}")
        else:
            lines.append(f"/// @return {name} {description}")
    return lines
