"""contractkit configuration.

Centralised, typed configuration for the emitters.  All settings use Pydantic
v2 models so they can be validated at construction time and serialised to/from
JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .core.storage import DEFAULT_NAMESPACE_LABEL


class GeneratorConfig(BaseModel):
    """Rendering options shared by every build.

    Instances are typically created once per process (``from_env`` or
    ``load``) and passed to :func:`contractkit.generate.generate`.
    """

    solidity_pragma: str = Field(default="^0.8.27", description="Solidity version pragma")
    compatible_with: str = Field(
        default="^5.0.0", description="OpenZeppelin Contracts version banner"
    )
    stylus_compatible_with: str = Field(
        default="^0.2.0", description="OpenZeppelin Contracts for Stylus version banner"
    )
    indent: int = Field(default=4, ge=1, le=8, description="Spaces per indentation level")
    namespace_label: str = Field(
        default=DEFAULT_NAMESPACE_LABEL,
        min_length=1,
        description="Label of the default ERC-7201 namespace",
    )
    verbose: bool = Field(default=False, description="Print a build summary to the console")

    @property
    def indent_str(self) -> str:
        return " " * self.indent

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            CONTRACTKIT_SOLIDITY_PRAGMA, CONTRACTKIT_COMPATIBLE_WITH,
            CONTRACTKIT_STYLUS_COMPATIBLE_WITH, CONTRACTKIT_INDENT,
            CONTRACTKIT_NAMESPACE_LABEL, CONTRACTKIT_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CONTRACTKIT_SOLIDITY_PRAGMA"):
            kwargs["solidity_pragma"] = os.environ["CONTRACTKIT_SOLIDITY_PRAGMA"]
        if os.environ.get("CONTRACTKIT_COMPATIBLE_WITH"):
            kwargs["compatible_with"] = os.environ["CONTRACTKIT_COMPATIBLE_WITH"]
        if os.environ.get("CONTRACTKIT_STYLUS_COMPATIBLE_WITH"):
            kwargs["stylus_compatible_with"] = os.environ["CONTRACTKIT_STYLUS_COMPATIBLE_WITH"]
        if os.environ.get("CONTRACTKIT_INDENT"):
            kwargs["indent"] = int(os.environ["CONTRACTKIT_INDENT"])
        if os.environ.get("CONTRACTKIT_NAMESPACE_LABEL"):
            kwargs["namespace_label"] = os.environ["CONTRACTKIT_NAMESPACE_LABEL"]

        verbose = os.environ.get("CONTRACTKIT_VERBOSE", "").strip().lower()
        kwargs["verbose"] = verbose in ("1", "true", "yes", "on")

        return cls(**kwargs)
