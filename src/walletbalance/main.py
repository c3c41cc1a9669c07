"""WalletBalance - demonstration entry point.

Builds a fixed example history and prints the balance of one wallet.
"""

import argparse
import sys
from collections.abc import Sequence

from walletbalance.config import get_settings
from walletbalance.config.logging import configure_logging, get_logger
from walletbalance.core.balance import calculate_balances, calculate_wallet_balance
from walletbalance.core.exceptions import WalletBalanceError
from walletbalance.data.models import Transaction, TransactionType

log = get_logger(__name__)

ALICE_ADDRESS = "ALiCEqZUF4VYuxTu1UQvzDqbpGYYFrxH6kQxWFB8Nqp3"
BOB_ADDRESS = "BoBqZUF4VYuxTu1UQvzDqbpGYYFrxH6kQxWFB8Nqp3"


def example_transactions() -> list[Transaction]:
    """Return the fixed example history used by the demonstration."""
    return [
        Transaction(
            transaction_type=TransactionType.DEPOSIT,
            wallet_address=ALICE_ADDRESS,
            amount=100,
        ),
        Transaction(
            transaction_type=TransactionType.WITHDRAWAL,
            wallet_address=ALICE_ADDRESS,
            amount=50,
        ),
        Transaction(
            transaction_type=TransactionType.DEPOSIT,
            wallet_address=BOB_ADDRESS,
            amount=200,
        ),
        Transaction(
            transaction_type=TransactionType.WITHDRAWAL,
            wallet_address=BOB_ADDRESS,
            amount=75,
        ),
        Transaction(
            transaction_type=TransactionType.DEPOSIT,
            wallet_address=ALICE_ADDRESS,
            amount=25,
        ),
    ]


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="walletbalance",
        description="Print a wallet balance computed from an example history.",
    )
    parser.add_argument(
        "wallet_address",
        nargs="?",
        default=settings.default_wallet_address,
        help="Wallet address to query (default: %(default)s)",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Print unvalidated balances of every wallet in the history",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{settings.app_name} {settings.app_version}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration.

    Errors are reported on stderr; the exit code is always 0.
    """
    configure_logging()
    args = build_parser().parse_args(argv)
    transactions = example_transactions()

    if args.all:
        for address, balance in calculate_balances(transactions).items():
            print(f"Balance for {address}: {balance}")
        return 0

    try:
        balance = calculate_wallet_balance(args.wallet_address, transactions)
    except WalletBalanceError as e:
        log.warning("demo_balance_failed", error=str(e))
        print(f"Error calculating balance: {e}", file=sys.stderr)
        return 0

    print(f"Balance for {args.wallet_address}: {balance}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
