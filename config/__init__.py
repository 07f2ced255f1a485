"""Configuration module for the Morpho vaults client."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
