"""Vault data models for Morpho vault listings."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class VaultAsset:
    """Underlying asset of a vault."""

    address: str
    name: str
    symbol: str
    decimals: int


@dataclass(frozen=True)
class DailyApy:
    """Aggregated daily APY value."""

    apy: float


@dataclass(frozen=True)
class VaultWarning:
    """Risk warning attached to a vault by the API."""

    level: str


@dataclass(frozen=True)
class VaultLiquidity:
    """Liquidity available for withdrawal."""

    underlying: float
    usd: float


@dataclass(frozen=True)
class VaultChain:
    """Chain the vault is deployed on."""

    id: int
    network: str
    currency: str


@dataclass(frozen=True)
class VaultRecord:
    """Morpho vault as returned by the ``FetchVaults`` query.

    Values are copied verbatim from the API response. Nested records and lists
    the API returned as ``null`` are kept as ``None``.
    """

    address: str
    name: str
    symbol: str
    whitelisted: bool
    asset: Optional[VaultAsset]
    daily_apys: Optional[Tuple[DailyApy, ...]] = field(default_factory=tuple)
    warnings: Optional[Tuple[VaultWarning, ...]] = field(default_factory=tuple)
    liquidity: Optional[VaultLiquidity] = None
    chain: Optional[VaultChain] = None

    @property
    def latest_apy(self) -> Optional[float]:
        """First daily APY entry (the API lists the most recent first)."""
        if self.daily_apys:
            return self.daily_apys[0].apy
        return None

    @property
    def warning_levels(self) -> Tuple[str, ...]:
        """Levels of all attached warnings, in response order."""
        return tuple(w.level for w in self.warnings or ())
