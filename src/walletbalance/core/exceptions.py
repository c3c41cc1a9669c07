"""WalletBalance exception hierarchy.

This module defines the base exception class and the closed set of
failures a balance calculation can end with.
"""


class WalletBalanceError(Exception):
    """Base exception for all WalletBalance errors.

    All custom exceptions in WalletBalance should inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class ConfigurationError(WalletBalanceError):
    """Raised when configuration is invalid or missing.

    Example:
        raise ConfigurationError("DEFAULT_WALLET_ADDRESS is not a valid address")
    """

    pass


class TransactionError(WalletBalanceError):
    """Base for failures of a balance calculation.

    Exactly three subclasses exist: InvalidWalletAddressError,
    NoTransactionsError and ZeroAmountError. Catch this class to handle
    every calculation failure, or a subclass to handle one kind.
    """

    pass


class InvalidWalletAddressError(TransactionError):
    """Raised when the queried wallet address is empty or malformed.

    Attributes:
        detail: "Empty address" for an empty query, otherwise the
            rejected address itself.

    Example:
        raise InvalidWalletAddressError("not-a-wallet")
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid wallet address: {detail}")


class NoTransactionsError(TransactionError):
    """Raised when the transaction history is empty.

    Attributes:
        wallet_address: The wallet address that was queried.
    """

    def __init__(self, wallet_address: str) -> None:
        self.wallet_address = wallet_address
        super().__init__(f"No transactions found for wallet {wallet_address}")


class ZeroAmountError(TransactionError):
    """Raised when a transaction for the queried wallet has a zero amount."""

    def __init__(self) -> None:
        super().__init__("Amount cannot be zero")
