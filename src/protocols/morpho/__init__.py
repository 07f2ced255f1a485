"""Morpho protocol-specific implementations.

Configuration: src.protocols.morpho.config
Contract ABI: src.protocols.morpho.abi
Market ids: src.protocols.morpho.market
GraphQL Queries: src.protocols.morpho.queries
"""

# Export config constants directly (no circular import issues)
from .config import (
    MORPHO_BLUE_ADDRESS,
    MORPHO_API_URL,
    SUPPLY_CONFIRMATIONS,
)
from .abi import MORPHO_BLUE_ABI, SUPPLY_FUNCTION_NAME
from .market import compute_market_id
from .queries import MorphoQueries

__all__ = [
    "MORPHO_BLUE_ADDRESS",
    "MORPHO_API_URL",
    "SUPPLY_CONFIRMATIONS",
    "MORPHO_BLUE_ABI",
    "SUPPLY_FUNCTION_NAME",
    "compute_market_id",
    "MorphoQueries",
]
