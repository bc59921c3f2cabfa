"""Stylus emitter: renders a ``ContractModel`` into one ``lib.rs`` file.

Parents become traits stored as fields of the ``#[storage]`` struct and
listed in ``#[inherit(...)]``; modifiers become guard statements at the top
of the function body.  Override sets have no Rust counterpart and are not
rendered.
"""

from __future__ import annotations

from typing import Any

from ..config import GeneratorConfig
from ..core.contract import ContractModel
from ..core.errors import UnknownEnumValue
from ..core.models import (
    Dialect,
    FunctionDocs,
    FunctionEntry,
    Mutability,
    SymbolKind,
    Visibility,
)
from ..templates import TemplateRenderer
from ..utils import to_snake

_PRELUDE = ("alloc::vec::Vec", "stylus_sdk::prelude::*")
_EXPORTED = (Visibility.PUBLIC, Visibility.EXTERNAL)


class StylusEmitter:
    """Serialises a Stylus contract model."""

    template = "stylus/lib.rs.j2"

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer()
        self._indent = self.config.indent_str

    def emit(self, model: ContractModel) -> str:
        if model.dialect is not Dialect.STYLUS:
            raise UnknownEnumValue("dialect", model.dialect.value, [Dialect.STYLUS.value])
        if model.upgradeable:
            raise UnknownEnumValue("upgradeable", True, ["none"])
        text = self.renderer.render(self.template, self._build_context(model))
        model.mark_emitted()
        return text

    # -- Context building --------------------------------------------------

    def _build_context(self, model: ContractModel) -> dict[str, Any]:
        definitions = model.definitions
        constants = [d for d in definitions if d.kind is SymbolKind.CONSTANT]
        solidity_items = [d for d in definitions if d.kind is not SymbolKind.CONSTANT]

        sections: list[str] = []
        if constants:
            sections.append("\n".join(d.text for d in constants))
        if solidity_items:
            lines = ["sol! {"]
            for item in solidity_items:
                lines.extend(self._indent_line(doc, 1) for doc in item.docs)
                lines.append(self._indent_line(item.text, 1))
            lines.append("}")
            sections.append("\n".join(lines))
        sections.append("\n".join(self._storage_struct(model)))

        public = [e for e in model.functions if e.spec.kind in _EXPORTED]
        internal = [e for e in model.functions if e.spec.kind not in _EXPORTED]
        sections.append("\n".join(self._public_impl(model, public)))
        internal_impl = self._internal_impl(model, internal)
        if internal_impl:
            sections.append("\n".join(internal_impl))

        return {
            "license": model.license,
            "compatible_with": self.config.stylus_compatible_with,
            "uses": self._uses(model, bool(solidity_items)),
            "sections": sections,
        }

    def _uses(self, model: ContractModel, needs_sol: bool) -> list[str]:
        """``use`` clauses grouped by path, paths in first-seen order."""
        grouped: dict[str, list[str]] = {path: [] for path in _PRELUDE}
        if needs_sol:
            grouped.setdefault("alloy_sol_types::sol", [])
        for entry in model.imports:
            grouped.setdefault(entry.path, []).append(entry.identifier)

        lines = []
        for path, names in grouped.items():
            if not names:
                lines.append(f"use {path};")
            elif len(names) == 1:
                lines.append(f"use {path}::{names[0]};")
            else:
                lines.append(f"use {path}::{{{', '.join(names)}}};")
        return lines

    # -- Storage -----------------------------------------------------------

    def _storage_struct(self, model: ContractModel) -> list[str]:
        fields = [
            f"{ref.storage_field}: {ref.storage_type or ref.identifier},"
            for ref in model.parents
            if ref.storage_field
        ]
        fields.extend(f"{var.name}: {var.type}," for var in model.storage.variables)
        return [
            *(f"/// {tag}" for tag in model.natspec_tags),
            "#[entrypoint]",
            "#[storage]",
            f"pub struct {model.name} {{",
            *(self._indent_line(field, 1) for field in fields),
            "}",
        ]

    # -- Impl blocks -------------------------------------------------------

    def _public_impl(self, model: ContractModel, entries: list[FunctionEntry]) -> list[str]:
        members: list[list[str]] = []
        constructor = self._constructor(model)
        if constructor:
            members.append(constructor)
        members.extend(lines for lines in (self._function(e) for e in entries) if lines)

        header = ["#[public]"]
        parents = [ref.identifier for ref in model.parents]
        if parents:
            header.append(f"#[inherit({', '.join(parents)})]")
        return [*header, *self._impl_block(model.name, members)]

    def _internal_impl(self, model: ContractModel, entries: list[FunctionEntry]) -> list[str]:
        members = [lines for lines in (self._function(e) for e in entries) if lines]
        if not members:
            return []
        return self._impl_block(model.name, members)

    def _impl_block(self, name: str, members: list[list[str]]) -> list[str]:
        lines = [f"impl {name} {{"]
        for i, member in enumerate(members):
            if i:
                lines.append("")
            lines.extend(self._indent_line(line, 1) for line in member)
        lines.append("}")
        return lines

    def _constructor(self, model: ContractModel) -> list[str]:
        args = model.constructor_arguments()
        init = [
            f"self.{ref.storage_field}.constructor({', '.join(a.render() for a in ref.args)})?;"
            for ref in model.parents
            if ref.storage_field and ref.args
        ]
        code = model.constructor.code
        if not (args or init or code):
            return []
        params = ", ".join(["&mut self", *(f"{arg.name}: {arg.type}" for arg in args)])
        return [
            "#[constructor]",
            f"pub fn constructor({params}) -> Result<(), Vec<u8>> {{",
            *(self._indent_line(line, 1) for line in [*init, *code, "Ok(())"]),
            "}",
        ]

    def _function(self, entry: FunctionEntry) -> list[str]:
        spec = entry.spec
        if entry.body is None and not entry.modifiers and len(entry.overrides) <= 1:
            return []

        receiver = {
            Mutability.VIEW: ["&self"],
            Mutability.PURE: [],
            Mutability.NONPAYABLE: ["&mut self"],
            Mutability.PAYABLE: ["&mut self"],
        }[spec.mutability]
        params = ", ".join([*receiver, *(f"{to_snake(a.name)}: {a.type}" for a in spec.args)])
        if not spec.returns:
            returns = "()"
        elif len(spec.returns) == 1:
            returns = spec.returns[0]
        else:
            returns = f"({', '.join(spec.returns)})"

        body = list(entry.modifiers)
        if entry.body is None:
            body.append("Ok(Default::default())" if spec.returns else "Ok(())")
        else:
            body.extend(entry.body)

        visibility = "pub fn" if spec.kind in _EXPORTED else "fn"
        lines = _rust_docs(spec.docs)
        if spec.mutability is Mutability.PAYABLE:
            lines.append("#[payable]")
        lines.append(
            f"{visibility} {to_snake(spec.name)}({params}) -> Result<{returns}, Vec<u8>> {{"
        )
        lines.extend(self._indent_line(line, 1) for line in body)
        lines.append("}")
        return lines

    def _indent_line(self, line: str, level: int) -> str:
        return f"{self._indent * level}{line}" if line.strip() else ""


def _rust_docs(docs: FunctionDocs) -> list[str]:
    lines: list[str] = []
    if docs.notice:
        lines.append(f"/// {docs.notice}")
    if docs.details:
        if lines:
            lines.append("///")
        lines.append(f"/// {docs.details}")
    if docs.params:
        if lines:
            lines.append("///")
        lines.append("/// # Arguments")
        lines.extend(f"/// * `{to_snake(name)}` - {text}" for name, text in docs.params.items())
    return lines
