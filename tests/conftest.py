"""Shared pytest fixtures for WalletBalance tests.

This module provides fixtures for:
- Environment and settings isolation
- Structlog configuration reset
- Test data factories

Usage:
    @pytest.mark.unit
    def test_something(transaction_factory):
        tx = transaction_factory(amount=10)
        assert tx.amount == 10
"""

import os
from collections.abc import Generator

import pytest
import structlog

from tests.factories.transaction import DepositFactory, TransactionFactory, WithdrawalFactory
from tests.factories.wallet import generate_valid_solana_address

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file if present and restores the environment afterwards.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_settings_and_logging() -> Generator[None, None, None]:
    """Clear cached settings and structlog config around each test."""
    from walletbalance.config.settings import get_settings

    get_settings.cache_clear()
    structlog.reset_defaults()

    yield

    get_settings.cache_clear()
    structlog.reset_defaults()


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def transaction_factory() -> type[TransactionFactory]:
    """Provide transaction factory for creating test transactions."""
    return TransactionFactory


@pytest.fixture
def deposit_factory() -> type[DepositFactory]:
    """Provide factory for deposit transactions."""
    return DepositFactory


@pytest.fixture
def withdrawal_factory() -> type[WithdrawalFactory]:
    """Provide factory for withdrawal transactions."""
    return WithdrawalFactory


@pytest.fixture
def wallet_address() -> str:
    """Random valid wallet address."""
    return generate_valid_solana_address()


# =============================================================================
# Example Histories
# =============================================================================

ALICE = "ALiCEqZUF4VYuxTu1UQvzDqbpGYYFrxH6kQxWFB8Nqp3"
BOB = "BoBqZUF4VYuxTu1UQvzDqbpGYYFrxH6kQxWFB8Nqp3"


@pytest.fixture
def alice_address() -> str:
    """Address of the example wallet queried by the demonstration."""
    return ALICE


@pytest.fixture
def bob_address() -> str:
    """Address of the second wallet in the example histories."""
    return BOB
