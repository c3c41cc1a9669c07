"""Test data factories using factory_boy.

These factories generate realistic test data for WalletBalance models.
"""

from tests.factories.transaction import DepositFactory, TransactionFactory, WithdrawalFactory
from tests.factories.wallet import generate_invalid_solana_address, generate_valid_solana_address

__all__ = [
    "DepositFactory",
    "TransactionFactory",
    "WithdrawalFactory",
    "generate_invalid_solana_address",
    "generate_valid_solana_address",
]
