"""Shared utility functions for contractkit.

Provides identifier case conversion used when naming generated symbols and
Rich-based console helpers used to report build results.  The composition
engine itself never prints; only :mod:`contractkit.generate` does.
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.table import Table

console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Identifier helpers
# ---------------------------------------------------------------------------


def to_pascal(name: str) -> str:
    """Convert ``some-thing``, ``some_thing`` or ``some.thing`` to ``SomeThing``.

    Words that already contain capitals keep them::

        to_pascal("openzeppelin.storage") -> "OpenzeppelinStorage"
        to_pascal("myToken") -> "MyToken"
    """
    parts = re.split(r"[-_.\s]+", name)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


def to_snake(name: str) -> str:
    """Convert ``SomeThing``, ``someThing`` or ``some-thing`` to ``some_thing``.

    Examples::

        to_snake("initialOwner") -> "initial_owner"
        to_snake("DEFAULT_ADMIN") -> "default_admin"
    """
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


def to_camel(name: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = to_pascal(name)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_identifier(name: str) -> bool:
    """Return ``True`` if *name* is a valid Solidity / Rust identifier."""
    return bool(_IDENTIFIER_RE.match(name))


def sanitize_contract_name(name: str) -> str:
    """Turn free-form text into a PascalCase contract name.

    Non-alphanumeric characters separate words; a leading digit is prefixed
    with an underscore.

    Examples::

        sanitize_contract_name("my token") -> "MyToken"
        sanitize_contract_name("2fa vault") -> "_2faVault"
    """
    words = re.split(r"[^A-Za-z0-9]+", name.strip())
    result = "".join(word[:1].upper() + word[1:] for word in words if word)
    if result and result[0].isdigit():
        result = "_" + result
    return result


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
