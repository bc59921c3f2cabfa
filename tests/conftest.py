"""Shared pytest fixtures for the contractkit test suite.

Provides reusable fixtures for:
- The built-in catalog and parent references
- Fresh Solidity / Stylus contract models (plain and upgradeable)
- Emitters wired to a default configuration
- Common function requests
"""

from __future__ import annotations

from pathlib import Path

import pytest

from contractkit.config import GeneratorConfig
from contractkit.core.catalog import Catalog, default_catalog
from contractkit.core.contract import ContractModel
from contractkit.core.models import (
    Dialect,
    FunctionArgument,
    FunctionSpec,
    Mutability,
    ParentArgument,
    ParentReference,
    Visibility,
)
from contractkit.solidity.emitter import SolidityEmitter
from contractkit.stylus.emitter import StylusEmitter


# ---------------------------------------------------------------------------
# Configuration & catalog
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> GeneratorConfig:
    """Default generator configuration."""
    return GeneratorConfig()


@pytest.fixture
def catalog() -> Catalog:
    """The process-wide built-in catalog."""
    return default_catalog()


@pytest.fixture
def tmp_config_path(tmp_path: Path) -> Path:
    """Location for a saved configuration file (auto-cleanup)."""
    return tmp_path / "config" / "contractkit.json"


# ---------------------------------------------------------------------------
# Parent references
# ---------------------------------------------------------------------------

@pytest.fixture
def ownable_ref(catalog: Catalog) -> ParentReference:
    """``Ownable(initialOwner)``."""
    return catalog.parent("Ownable", ParentArgument.ref("initialOwner"))


@pytest.fixture
def erc20_ref() -> ParentReference:
    """A token parent constructed with two literal arguments."""
    return ParentReference(
        identifier="ERC20",
        path="@openzeppelin/contracts/token/ERC20/ERC20.sol",
        args=(ParentArgument.lit("MyToken"), ParentArgument.lit("MTK")),
    )


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

@pytest.fixture
def model() -> ContractModel:
    """An empty, non-upgradeable Solidity contract."""
    return ContractModel("MyContract")


@pytest.fixture
def upgradeable_model() -> ContractModel:
    """An empty, upgradeable Solidity contract."""
    return ContractModel("MyContract", upgradeable=True)


@pytest.fixture
def stylus_model() -> ContractModel:
    """An empty Stylus contract."""
    return ContractModel("MyContract", dialect=Dialect.STYLUS)


# ---------------------------------------------------------------------------
# Emitters
# ---------------------------------------------------------------------------

@pytest.fixture
def solidity_emitter(config: GeneratorConfig) -> SolidityEmitter:
    return SolidityEmitter(config)


@pytest.fixture
def stylus_emitter(config: GeneratorConfig) -> StylusEmitter:
    return StylusEmitter(config)


# ---------------------------------------------------------------------------
# Function requests
# ---------------------------------------------------------------------------

@pytest.fixture
def transfer_fn() -> FunctionSpec:
    """``_update(address from, address to, uint256 value) internal``."""
    return FunctionSpec(
        name="_update",
        args=(
            FunctionArgument(name="from", type="address"),
            FunctionArgument(name="to", type="address"),
            FunctionArgument(name="value", type="uint256"),
        ),
        kind=Visibility.INTERNAL,
    )


@pytest.fixture
def pause_fn() -> FunctionSpec:
    """``pause() public``."""
    return FunctionSpec(name="pause", kind=Visibility.PUBLIC)


@pytest.fixture
def view_fn() -> FunctionSpec:
    """``nonces(address owner) public view returns (uint256)``."""
    return FunctionSpec(
        name="nonces",
        args=(FunctionArgument(name="owner", type="address"),),
        returns=("uint256",),
        kind=Visibility.PUBLIC,
        mutability=Mutability.VIEW,
    )
