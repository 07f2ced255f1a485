"""Core module - models, constants and exceptions."""

from .models import VaultRecord, MarketParams, DepositRequest, DepositResult
from .constants import WAD
from .exceptions import (
    MorphoClientError,
    VaultQueryError,
    VaultQueryErrorKind,
    DepositError,
    DepositErrorKind,
    TransactionRevertedError,
)

__all__ = [
    "VaultRecord",
    "MarketParams",
    "DepositRequest",
    "DepositResult",
    "WAD",
    "MorphoClientError",
    "VaultQueryError",
    "VaultQueryErrorKind",
    "DepositError",
    "DepositErrorKind",
    "TransactionRevertedError",
]
