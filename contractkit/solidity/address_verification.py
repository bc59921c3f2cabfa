"""Address ownership verification via ECDSA signatures.

Callers prove they control an address by signing a message; verified
addresses are recorded on-chain and can be revoked by an administrator
when the contract has access control.
"""

from __future__ import annotations

from ..core.catalog import Catalog, default_catalog
from ..core.contract import ContractModel
from ..core.models import (
    FunctionArgument,
    FunctionDocs,
    FunctionSpec,
    Mutability,
    StateVariable,
    Visibility,
)
from .access import Access, require_access_control

VERIFIED_ADDRESSES = StateVariable(
    name="_verifiedAddresses",
    type="mapping(address account => bool verified)",
)

IS_ADDRESS_VERIFIED = FunctionSpec(
    name="isAddressVerified",
    args=(FunctionArgument(name="account", type="address"),),
    returns=("bool",),
    kind=Visibility.PUBLIC,
    mutability=Mutability.VIEW,
    docs=FunctionDocs(
        notice="Check if an address has been verified",
        params={"account": "The address to check"},
        returns={"_0": "True if the address is verified, false otherwise"},
    ),
)

VERIFY_ADDRESS_OWNERSHIP = FunctionSpec(
    name="verifyAddressOwnership",
    args=(
        FunctionArgument(name="message", type="bytes32"),
        FunctionArgument(name="signature", type="bytes"),
    ),
    kind=Visibility.PUBLIC,
    docs=FunctionDocs(
        notice="Verify address ownership by providing a signature",
        details=(
            "The caller must provide a signature of a message signed with their private key. "
            "The signature is verified to ensure the caller controls the private key associated "
            "with their address. This allows verification of address ownership without exposing "
            "the private key."
        ),
        params={
            "message": "The original message that was signed",
            "signature": "The signature of the message, signed by the caller",
        },
    ),
)

REVOKE_ADDRESS_VERIFICATION = FunctionSpec(
    name="revokeAddressVerification",
    args=(FunctionArgument(name="account", type="address"),),
    kind=Visibility.PUBLIC,
    docs=FunctionDocs(
        notice="Revoke address verification (admin only)",
        params={"account": "The address to revoke verification for"},
    ),
)


def add_address_verification(
    c: ContractModel, access: Access, catalog: Catalog | None = None
) -> None:
    """Add signature-based address verification to *c*.

    The revocation function is only added when *access* enables access
    control; it is restricted to the default admin.
    """
    catalog = catalog or default_catalog()

    c.add_import_only(catalog.import_entry("ECDSA"))
    c.add_import_only(catalog.import_entry("MessageHashUtils"))

    c.add_definition(
        "event AddressVerified(address indexed account);",
        ["/// @dev Emitted when an address is verified"],
    )
    c.add_definition(
        "event VerificationRevoked(address indexed account);",
        ["/// @dev Emitted when address verification is revoked"],
    )
    c.add_definition(
        "error InvalidSignature();",
        ["/// @dev Error thrown when signature verification fails"],
    )
    c.add_definition(
        "error AlreadyVerified();",
        ["/// @dev Error thrown when address is already verified"],
    )

    c.add_state_variable(VERIFIED_ADDRESSES)

    _add_is_address_verified(c)
    _add_verify_address_ownership(c)
    if access is not Access.NONE:
        _add_revoke_address_verification(c, access, catalog)


def _add_is_address_verified(c: ContractModel) -> None:
    verified = c.storage_reference(VERIFIED_ADDRESSES.name)
    c.add_storage_access(IS_ADDRESS_VERIFIED)
    c.set_function_body([f"return {verified}[account];"], IS_ADDRESS_VERIFIED)


def _add_verify_address_ownership(c: ContractModel) -> None:
    verified = c.storage_reference(VERIFIED_ADDRESSES.name)
    c.add_storage_access(VERIFY_ADDRESS_OWNERSHIP)
    c.set_function_body(
        [
            "// Hash the message according to EIP-191",
            "bytes32 ethSignedMessageHash = MessageHashUtils.toEthSignedMessageHash(message);",
            "// Recover the signer address from the signature",
            "address recoveredAddress = ECDSA.recover(ethSignedMessageHash, signature);",
            "// Check if the recovered address matches the sender",
            "if (recoveredAddress != msg.sender) {",
            "    revert InvalidSignature();",
            "}",
            "// Check if already verified",
            f"if ({verified}[msg.sender]) {{",
            "    revert AlreadyVerified();",
            "}",
            "// Mark the address as verified",
            f"{verified}[msg.sender] = true;",
            "// Emit verification event",
            "emit AddressVerified(msg.sender);",
        ],
        VERIFY_ADDRESS_OWNERSHIP,
    )


def _add_revoke_address_verification(
    c: ContractModel, access: Access, catalog: Catalog
) -> None:
    require_access_control(c, REVOKE_ADDRESS_VERIFICATION, access, "DEFAULT_ADMIN", catalog=catalog)

    verified = c.storage_reference(VERIFIED_ADDRESSES.name)
    c.add_storage_access(REVOKE_ADDRESS_VERIFICATION)
    c.set_function_body(
        [
            "// Revoke verification",
            f"{verified}[account] = false;",
            "// Emit revocation event",
            "emit VerificationRevoked(account);",
        ],
        REVOKE_ADDRESS_VERIFICATION,
    )
