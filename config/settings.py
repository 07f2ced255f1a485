"""Pydantic settings for the Morpho vaults client."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from web3 import Web3

from src.protocols.morpho.config import MORPHO_API_URL, MORPHO_BLUE_ADDRESS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Morpho API
    morpho_graphql_url: str = Field(
        default=MORPHO_API_URL,
        description="Morpho GraphQL API URL",
    )

    # Morpho Blue contract
    morpho_contract_address: str = Field(
        default=MORPHO_BLUE_ADDRESS,
        description="Deployed Morpho Blue contract address",
    )

    # Ethereum RPC
    eth_rpc_url: Optional[str] = Field(default=None, description="Explicit Ethereum RPC URL")
    eth_alchemy_api_key: Optional[str] = Field(default=None, description="Alchemy API key for Ethereum RPC")

    # Transactions
    transaction_receipt_timeout: int = Field(
        default=120, ge=1, le=3600, description="Seconds to wait for a transaction receipt"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Root log level for the CLI")

    @field_validator("morpho_contract_address", mode="before")
    @classmethod
    def parse_contract_address(cls, v):
        """Normalize the contract address to checksum form."""
        if isinstance(v, str):
            return Web3.to_checksum_address(v.strip())
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        """Accept any standard logging level name, case-insensitively."""
        if isinstance(v, str):
            level = v.strip().upper()
            if level not in logging.getLevelNamesMapping():
                raise ValueError(f"Unknown log level: {v}")
            return level
        return v

    @property
    def rpc_url(self) -> Optional[str]:
        """RPC URL, preferring the explicit URL over the Alchemy key."""
        if self.eth_rpc_url:
            return self.eth_rpc_url
        if self.eth_alchemy_api_key:
            return f"https://eth-mainnet.g.alchemy.com/v2/{self.eth_alchemy_api_key}"
        return None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
