"""Protocol clients module."""

from src.data.clients.morpho import MorphoVaultClient, MorphoParser, fetch_vaults

__all__ = [
    "MorphoVaultClient",
    "MorphoParser",
    "fetch_vaults",
]
