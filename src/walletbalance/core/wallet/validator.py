"""Wallet address validation logic.

Lexical validation of Solana-style wallet addresses (base58 alphabet,
32-44 characters). This is a syntactic pre-filter only: no checksum,
no decoding and no on-chain lookup.
"""

# Solana base58 alphabet (excludes 0, O, I, l to avoid confusion)
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

# Solana addresses are typically 32-44 characters
SOLANA_ADDRESS_MIN_LENGTH = 32
SOLANA_ADDRESS_MAX_LENGTH = 44

_BASE58_CHARS = frozenset(BASE58_ALPHABET)


def is_valid_solana_address(address: str | None) -> bool:
    """Validate Solana address format (base58).

    Performs local validation without network calls:
    - Checks for None/non-string values
    - Validates length (32-44 characters)
    - Verifies all characters are in base58 alphabet

    Whitespace is not stripped; a padded address is invalid.

    Args:
        address: Potential Solana wallet address to validate.

    Returns:
        True if address has valid format, False otherwise.

    Example:
        >>> is_valid_solana_address("ALiCEqZUF4VYuxTu1UQvzDqbpGYYFrxH6kQxWFB8Nqp3")
        True
        >>> is_valid_solana_address("invalid_0OIl")
        False
    """
    if address is None or not isinstance(address, str):
        return False

    if not (SOLANA_ADDRESS_MIN_LENGTH <= len(address) <= SOLANA_ADDRESS_MAX_LENGTH):
        return False

    return all(c in _BASE58_CHARS for c in address)


validate_address = is_valid_solana_address
