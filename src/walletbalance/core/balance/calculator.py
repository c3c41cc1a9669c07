"""Wallet balance calculation from transaction history.

Two entry points share a single fold:

- ``calculate_wallet_balance``: validating variant. Rejects empty or
  malformed addresses, empty histories and zero-amount transactions.
- ``sum_for_wallet``: relaxed variant. Performs no validation at all and
  treats zero-amount transactions as no-ops.

Both are pure: they never mutate the input and hold no state between calls.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence

import structlog

from walletbalance.core.exceptions import (
    InvalidWalletAddressError,
    NoTransactionsError,
    ZeroAmountError,
)
from walletbalance.core.wallet.utils import truncate_address
from walletbalance.core.wallet.validator import is_valid_solana_address
from walletbalance.data.models.transaction import Transaction

log = structlog.get_logger(__name__)

EMPTY_ADDRESS_DETAIL = "Empty address"


def _fold_balance(
    wallet_address: str,
    transactions: Iterable[Transaction],
    *,
    strict: bool,
) -> int:
    """Fold the transactions matching ``wallet_address`` into a balance.

    Raises:
        ZeroAmountError: If ``strict`` and a matching transaction has a
            zero amount.
    """
    balance = 0
    for tx in transactions:
        if tx.wallet_address != wallet_address:
            continue
        if tx.amount == 0:
            if strict:
                log.warning(
                    "zero_amount_transaction",
                    wallet_address=truncate_address(wallet_address),
                )
                raise ZeroAmountError()
            continue
        balance += tx.signed_amount
    return balance


def calculate_wallet_balance(
    wallet_address: str,
    transactions: Sequence[Transaction],
) -> int:
    """Calculate the balance of a wallet from its transaction history.

    Checks run in order and stop at the first failure:
    1. Address must be non-empty
    2. Address must be a well-formed Solana address
    3. History must contain at least one transaction (of any wallet)

    Transactions of other wallets are ignored. Deposits add their amount,
    withdrawals subtract it. The balance may be negative.

    Args:
        wallet_address: Wallet to calculate the balance for.
        transactions: Full transaction history. Order does not matter.

    Returns:
        Net balance of the wallet.

    Raises:
        InvalidWalletAddressError: If the address is empty or malformed.
        NoTransactionsError: If ``transactions`` is empty.
        ZeroAmountError: If a transaction of this wallet has a zero amount.

    Example:
        balance = calculate_wallet_balance(
            "ALiCEqZUF4VYuxTu1UQvzDqbpGYYFrxH6kQxWFB8Nqp3", transactions
        )
    """
    transactions = list(transactions)

    if not wallet_address:
        log.info("balance_calculation_rejected", reason="empty_address")
        raise InvalidWalletAddressError(EMPTY_ADDRESS_DETAIL)

    truncated = truncate_address(wallet_address)

    if not is_valid_solana_address(wallet_address):
        log.info(
            "balance_calculation_rejected",
            reason="invalid_address",
            wallet_address=truncated,
        )
        raise InvalidWalletAddressError(wallet_address)

    if not transactions:
        log.info(
            "balance_calculation_rejected",
            reason="no_transactions",
            wallet_address=truncated,
        )
        raise NoTransactionsError(wallet_address)

    log.debug(
        "balance_calculation_started",
        wallet_address=truncated,
        transaction_count=len(transactions),
    )

    balance = _fold_balance(wallet_address, transactions, strict=True)

    log.debug("balance_calculated", wallet_address=truncated, balance=balance)
    return balance


def sum_for_wallet(wallet_address: str, transactions: Iterable[Transaction]) -> int:
    """Sum the transactions of a wallet WITHOUT any validation.

    Unlike ``calculate_wallet_balance`` this never raises for domain
    reasons: the address is not checked, an empty history gives 0 and
    zero-amount transactions are skipped instead of aborting.

    Args:
        wallet_address: Wallet to sum for (compared by exact equality).
        transactions: Transaction history.

    Returns:
        Deposits minus withdrawals for the wallet.
    """
    return _fold_balance(wallet_address, transactions, strict=False)


def calculate_balances(transactions: Iterable[Transaction]) -> dict[str, int]:
    """Compute unvalidated balances for every wallet in a history.

    Same relaxed semantics as ``sum_for_wallet``, applied per address.

    Returns:
        Mapping of wallet address to balance, in first-seen order.
    """
    balances: dict[str, int] = defaultdict(int)
    for tx in transactions:
        balances[tx.wallet_address] += tx.signed_amount
    return dict(balances)


calculate_balance = calculate_wallet_balance
