"""Data layer for the Morpho vaults client."""

from .clients.morpho import MorphoVaultClient, MorphoParser, fetch_vaults

__all__ = [
    "MorphoVaultClient",
    "MorphoParser",
    "fetch_vaults",
]
