"""Data models for WalletBalance."""

from walletbalance.data.models.transaction import Transaction, TransactionType

__all__ = ["Transaction", "TransactionType"]
