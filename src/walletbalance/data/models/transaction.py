"""Transaction Pydantic models.

This module defines the immutable transaction record consumed by the
balance calculator.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Amounts are signed 64-bit integers
AMOUNT_MIN = -(2**63)
AMOUNT_MAX = 2**63 - 1


class TransactionType(str, Enum):
    """Kind of wallet transaction.

    Values:
        DEPOSIT: Adds funds to the wallet.
        WITHDRAWAL: Removes funds from the wallet.
    """

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class Transaction(BaseModel):
    """A single deposit or withdrawal for a wallet.

    Instances are frozen: any attempt to assign a field raises.

    Zero amounts are accepted here and rejected by
    ``calculate_wallet_balance`` instead, so that ``sum_for_wallet`` can
    still treat them as no-ops.

    Attributes:
        transaction_type: Deposit or withdrawal.
        wallet_address: Address of the wallet the transaction belongs to.
        amount: Transaction amount (signed 64-bit integer).

    Example:
        tx = Transaction(
            transaction_type=TransactionType.DEPOSIT,
            wallet_address="ALiCEqZUF4VYuxTu1UQvzDqbpGYYFrxH6kQxWFB8Nqp3",
            amount=100,
        )
    """

    model_config = ConfigDict(frozen=True)

    transaction_type: TransactionType = Field(description="Deposit or withdrawal")
    wallet_address: str = Field(description="Wallet address the transaction belongs to")
    amount: int = Field(
        strict=True,
        ge=AMOUNT_MIN,
        le=AMOUNT_MAX,
        description="Transaction amount (signed 64-bit integer)",
    )

    @property
    def is_deposit(self) -> bool:
        """Check if this transaction adds funds."""
        return self.transaction_type == TransactionType.DEPOSIT

    @property
    def signed_amount(self) -> int:
        """Amount as it affects the balance: positive for deposits."""
        return self.amount if self.is_deposit else -self.amount
