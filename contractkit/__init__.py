"""contractkit: compose smart contracts from reusable OpenZeppelin building blocks.

Usage::

    from contractkit import generate

    result = generate({"name": "Vault", "access": "roles", "upgradeable": "uups"})
    print(result.source)
"""

from .config import GeneratorConfig
from .generate import BuildResult, Diagnostic, generate, print_diagnostics

__version__ = "0.1.0"

__all__ = [
    "BuildResult",
    "Diagnostic",
    "GeneratorConfig",
    "generate",
    "print_diagnostics",
]
