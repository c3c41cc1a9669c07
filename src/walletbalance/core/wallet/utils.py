"""Wallet utility functions.

Shared utilities for wallet operations used by the calculator and logging.
"""


def truncate_address(address: str) -> str:
    """Truncate wallet address for display: AbCd...xYz1.

    Args:
        address: Full wallet address.

    Returns:
        Truncated address for log output (first 4 + last 4 chars).

    Example:
        >>> truncate_address("ALiCEqZUF4VYuxTu1UQvzDqbpGYYFrxH6kQxWFB8Nqp3")
        'ALiC...Nqp3'
    """
    if len(address) > 12:
        return f"{address[:4]}...{address[-4:]}"
    return address
