"""WalletBalance - net balance calculation for Solana wallet histories."""

__version__ = "1.0.0"
