"""Contract generation entry point.

Builds a contract model from an options payload, renders it with the
emitter of its dialect and reports build errors as diagnostics.

Usage::

    python -m contractkit.generate options.json
    python -m contractkit.generate options.json -o MyToken.sol --verbose
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, Field
from rich.panel import Panel

from .config import GeneratorConfig
from .core.catalog import Catalog, default_catalog
from .core.contract import ContractModel
from .core.errors import ContractBuildError
from .core.models import Dialect
from .core.options import parse_enum
from .solidity import SolidityEmitter, SolidityOptions, build_solidity
from .stylus import StylusEmitter, StylusOptions, build_stylus
from .utils import console, print_error, print_success, print_summary_table, print_warning

Options = Union[SolidityOptions, StylusOptions]


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class Diagnostic(BaseModel):
    """A build failure reported back to the caller."""

    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_error(cls, exc: ContractBuildError) -> "Diagnostic":
        return cls.model_validate(exc.to_diagnostic())


class BuildResult(BaseModel):
    """Outcome of one :func:`generate` call."""

    contract_name: str
    dialect: Dialect
    source: str | None = None
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.source is not None and not self.diagnostics


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


def parse_options(payload: Options | dict[str, Any]) -> Options:
    """Validate a raw payload into dialect options.

    The ``dialect`` key selects the options model (``solidity`` when absent).

    Raises:
        pydantic.ValidationError: If the payload does not validate.
        UnknownEnumValue: If an enumerated option holds an unknown value.
    """
    if isinstance(payload, (SolidityOptions, StylusOptions)):
        return payload
    data = dict(payload)
    dialect = data.pop("dialect", Dialect.SOLIDITY.value)
    if parse_enum(Dialect, "dialect", dialect) is Dialect.STYLUS:
        return StylusOptions.model_validate(data)
    return SolidityOptions.model_validate(data)


def build(options: Options, config: GeneratorConfig, catalog: Catalog) -> ContractModel:
    """Build the contract model for *options*."""
    if isinstance(options, StylusOptions):
        return build_stylus(options, catalog)
    return build_solidity(options, catalog, namespace_label=config.namespace_label)


def generate(
    options: Options | dict[str, Any],
    config: GeneratorConfig | None = None,
    catalog: Catalog | None = None,
) -> BuildResult:
    """Build and render one contract.

    Build errors are returned as diagnostics; anything else propagates.
    """
    config = config or GeneratorConfig()
    catalog = catalog or default_catalog()

    dialect = Dialect.SOLIDITY
    name = "?"
    try:
        opts = parse_options(options)
        dialect = Dialect.STYLUS if isinstance(opts, StylusOptions) else Dialect.SOLIDITY
        name = opts.name
        model = build(opts, config, catalog)
        if dialect is Dialect.STYLUS:
            source = StylusEmitter(config).emit(model)
        else:
            source = SolidityEmitter(config).emit(model)
    except ContractBuildError as exc:
        return BuildResult(
            contract_name=name, dialect=dialect, diagnostics=[Diagnostic.from_error(exc)]
        )

    if config.verbose:
        print_summary_table(summarize(model), title=f"{model.name} ({dialect.value})")
    return BuildResult(contract_name=model.name, dialect=dialect, source=source)


def summarize(model: ContractModel) -> dict[str, str]:
    """Key facts about *model* for the verbose summary table."""
    args = model.constructor_arguments()
    return {
        "Parents": ", ".join(model.parents.order()) or "-",
        "Functions": ", ".join(entry.signature for entry in model.functions) or "-",
        "Constructor args": ", ".join(f"{a.type} {a.name}" for a in args) or "-",
        "Definitions": str(len(model.definitions)),
        "Upgradeable": "yes" if model.upgradeable else "no",
    }


def print_diagnostics(result: BuildResult) -> None:
    """Print the diagnostics of a failed build."""
    if result.success:
        print_success(f"{result.contract_name}: generated {result.dialect.value} source")
        return
    for diagnostic in result.diagnostics:
        print_error(f"{result.contract_name}: [{diagnostic.code}] {diagnostic.message}")
        if diagnostic.details:
            console.print(
                Panel(json.dumps(diagnostic.details, indent=2, default=str), style="dim")
            )


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m contractkit.generate``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="contractkit -- compose OpenZeppelin-based contracts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m contractkit.generate options.json\n"
            "  python -m contractkit.generate options.json -o MyToken.sol\n"
        ),
    )
    parser.add_argument("options", help="Path to a JSON file with the contract options")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the source to this file instead of stdout",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to a saved GeneratorConfig JSON file",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Print a build summary")

    args = parser.parse_args(argv)

    options_path = Path(args.options)
    if not options_path.exists():
        console.print(f"[bold red]Error:[/bold red] Options file not found: {options_path}")
        sys.exit(1)

    config = GeneratorConfig.load(Path(args.config)) if args.config else GeneratorConfig.from_env()
    if args.verbose:
        config = config.model_copy(update={"verbose": True})

    payload = json.loads(options_path.read_text(encoding="utf-8"))
    result = generate(payload, config)
    if not result.success:
        print_diagnostics(result)
        sys.exit(1)

    if args.output:
        output_path = Path(args.output)
        if output_path.exists():
            print_warning(f"Overwriting existing file {output_path}")
        output_path.write_text(result.source or "", encoding="utf-8")
        print_success(f"Wrote {args.output}")
    else:
        sys.stdout.write(result.source or "")


if __name__ == "__main__":
    main()
