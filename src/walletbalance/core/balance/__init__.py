"""Balance calculation module."""

from walletbalance.core.balance.calculator import (
    calculate_balance,
    calculate_balances,
    calculate_wallet_balance,
    sum_for_wallet,
)

__all__ = [
    "calculate_balance",
    "calculate_balances",
    "calculate_wallet_balance",
    "sum_for_wallet",
]
