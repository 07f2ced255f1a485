"""Core constants module.

Re-exports all constants for convenience.
"""

from src.core.constants.generic import (
    WAD,
    ZERO_SHARES,
    EMPTY_CALLDATA,
    DEFAULT_VAULT_PAGE_SIZE,
)

from src.protocols.morpho.config import (
    MORPHO_BLUE_ADDRESS,
    MORPHO_API_URL,
)

__all__ = [
    # Generic
    "WAD",
    "ZERO_SHARES",
    "EMPTY_CALLDATA",
    "DEFAULT_VAULT_PAGE_SIZE",
    # Morpho-specific
    "MORPHO_BLUE_ADDRESS",
    "MORPHO_API_URL",
]
