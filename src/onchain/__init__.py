"""On-chain operations: signing capability and Morpho Blue deposits."""

from src.onchain.signer import (
    ContractCall,
    EmittedEvent,
    PendingTransaction,
    Signer,
    TransactionConfirmation,
    Web3PendingTransaction,
    Web3Signer,
)
from src.onchain.deposit import MorphoDepositor, deposit, resolve_shares

__all__ = [
    "ContractCall",
    "EmittedEvent",
    "PendingTransaction",
    "Signer",
    "TransactionConfirmation",
    "Web3PendingTransaction",
    "Web3Signer",
    "MorphoDepositor",
    "deposit",
    "resolve_shares",
]
