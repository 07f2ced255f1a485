"""Morpho API response parser.

Converts ``FetchVaults`` response items into vault records. Values are copied
as returned; a requested key missing from an item raises ``KeyError`` so the
client can report a schema mismatch.
"""

from typing import Any, Dict, List, Optional, Tuple

from src.core.models import (
    DailyApy,
    VaultAsset,
    VaultChain,
    VaultLiquidity,
    VaultRecord,
    VaultWarning,
)


class MorphoParser:
    """Parser for Morpho GraphQL API responses."""

    @staticmethod
    def parse_asset(data: Optional[Dict[str, Any]]) -> Optional[VaultAsset]:
        if data is None:
            return None
        return VaultAsset(
            address=data["address"],
            name=data["name"],
            symbol=data["symbol"],
            decimals=data["decimals"],
        )

    @staticmethod
    def parse_liquidity(data: Optional[Dict[str, Any]]) -> Optional[VaultLiquidity]:
        if data is None:
            return None
        return VaultLiquidity(underlying=data["underlying"], usd=data["usd"])

    @staticmethod
    def parse_chain(data: Optional[Dict[str, Any]]) -> Optional[VaultChain]:
        if data is None:
            return None
        return VaultChain(
            id=data["id"],
            network=data["network"],
            currency=data["currency"],
        )

    @staticmethod
    def parse_list(data: Optional[List[Dict[str, Any]]], parse) -> Optional[Tuple[Any, ...]]:
        if data is None:
            return None
        return tuple(parse(item) for item in data)

    @classmethod
    def parse_vault(cls, data: Dict[str, Any]) -> VaultRecord:
        """Parse a single vault item."""
        return VaultRecord(
            address=data["address"],
            name=data["name"],
            symbol=data["symbol"],
            whitelisted=data["whitelisted"],
            asset=cls.parse_asset(data["asset"]),
            daily_apys=cls.parse_list(data["dailyApys"], lambda d: DailyApy(apy=d["apy"])),
            warnings=cls.parse_list(data["warnings"], lambda w: VaultWarning(level=w["level"])),
            liquidity=cls.parse_liquidity(data["liquidity"]),
            chain=cls.parse_chain(data["chain"]),
        )

    @classmethod
    def parse_vaults(cls, items: List[Dict[str, Any]]) -> List[VaultRecord]:
        """Parse vault items, preserving response order."""
        return [cls.parse_vault(item) for item in items]
