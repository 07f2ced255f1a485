"""Core data models for the Morpho vaults client."""

from .vault import (
    VaultRecord,
    VaultAsset,
    DailyApy,
    VaultWarning,
    VaultLiquidity,
    VaultChain,
)
from .deposit import MarketParams, DepositRequest, DepositResult

__all__ = [
    "VaultRecord",
    "VaultAsset",
    "DailyApy",
    "VaultWarning",
    "VaultLiquidity",
    "VaultChain",
    "MarketParams",
    "DepositRequest",
    "DepositResult",
]
