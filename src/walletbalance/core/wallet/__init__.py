"""Wallet validation module."""

from walletbalance.core.wallet.utils import truncate_address
from walletbalance.core.wallet.validator import (
    is_valid_solana_address,
    validate_address,
)

__all__ = ["is_valid_solana_address", "truncate_address", "validate_address"]
