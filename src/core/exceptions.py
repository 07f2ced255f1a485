"""Domain exceptions for vault queries and deposits.

Each operation wraps every failure exactly once in its own error type. The
``kind`` tag tells callers which stage failed without parsing the message.
"""

from enum import Enum
from typing import Optional


class VaultQueryErrorKind(Enum):
    """Failure stages of a vault list query."""

    TRANSPORT = "transport"
    REMOTE_QUERY = "remote_query"
    SCHEMA_MISMATCH = "schema_mismatch"


class DepositErrorKind(Enum):
    """Failure stages of a deposit."""

    ADDRESS_RESOLUTION = "address_resolution"
    SUBMISSION = "submission"
    CONFIRMATION = "confirmation"


class MorphoClientError(Exception):
    """Base class for errors raised by this package."""

    prefix = ""

    def __init__(self, kind: Enum, detail: str, cause: Optional[BaseException] = None):
        self.kind = kind
        self.detail = detail
        self.cause = cause
        super().__init__(f"{self.prefix}{detail}")


class VaultQueryError(MorphoClientError):
    """Vault list could not be fetched."""

    prefix = "Failed to fetch vault list: "


class DepositError(MorphoClientError):
    """Supply transaction could not be submitted or confirmed."""

    prefix = "Deposit failed: "


class TransactionRevertedError(Exception):
    """A mined transaction has a failed status."""

    def __init__(self, tx_hash: str, receipt=None):
        self.tx_hash = tx_hash
        self.receipt = receipt
        super().__init__(f"Transaction {tx_hash} reverted")
