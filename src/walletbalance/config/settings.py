"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from walletbalance.core.exceptions import ConfigurationError
from walletbalance.core.wallet.validator import is_valid_solana_address

EXAMPLE_WALLET_ADDRESS = "ALiCEqZUF4VYuxTu1UQvzDqbpGYYFrxH6kQxWFB8Nqp3"


class Settings(BaseSettings):
    """WalletBalance configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="WalletBalance", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING", description="Minimum log level"
    )

    # Demonstration
    default_wallet_address: str = Field(
        default=EXAMPLE_WALLET_ADDRESS,
        description="Wallet queried by the demonstration when none is given",
    )

    @field_validator("default_wallet_address")
    @classmethod
    def validate_default_wallet_address(cls, v: str) -> str:
        """Validate default wallet address format."""
        if not is_valid_solana_address(v):
            raise ValueError("Default wallet address must be a valid Solana address")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises:
        ConfigurationError: If environment values fail validation.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e
