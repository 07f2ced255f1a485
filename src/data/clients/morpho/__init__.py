"""Morpho protocol client module."""

from src.data.clients.morpho.client import MorphoVaultClient, fetch_vaults
from src.data.clients.morpho.parser import MorphoParser

__all__ = [
    "MorphoVaultClient",
    "MorphoParser",
    "fetch_vaults",
]
