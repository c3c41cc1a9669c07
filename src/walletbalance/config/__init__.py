"""Configuration module for WalletBalance.

Usage:
    from walletbalance.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.app_name)
"""

from walletbalance.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
