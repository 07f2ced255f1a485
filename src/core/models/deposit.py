"""Deposit data models for Morpho Blue supply transactions."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

from web3 import Web3

from src.core.constants.generic import WAD
from src.protocols.morpho.market import compute_market_id


@dataclass(frozen=True)
class MarketParams:
    """Morpho Blue market parameters.

    ``lltv`` is wad-scaled (0.86 = 860000000000000000). ``id`` is carried as
    an opaque string and is not checked against the other fields.
    """

    loan_token: str
    collateral_token: str
    oracle: str
    irm: str
    lltv: int
    id: str

    def as_tuple(self) -> Tuple[str, str, str, str, int]:
        """ABI tuple in ``MarketParams`` struct order with checksummed addresses."""
        return (
            Web3.to_checksum_address(self.loan_token),
            Web3.to_checksum_address(self.collateral_token),
            Web3.to_checksum_address(self.oracle),
            Web3.to_checksum_address(self.irm),
            int(self.lltv),
        )

    def compute_id(self) -> str:
        """Market id derived from the four addresses and lltv."""
        return compute_market_id(
            self.loan_token,
            self.collateral_token,
            self.oracle,
            self.irm,
            self.lltv,
        )

    @property
    def lltv_ratio(self) -> Decimal:
        """Liquidation LTV as a plain ratio (e.g. 0.86)."""
        return Decimal(self.lltv) / Decimal(WAD)


@dataclass(frozen=True)
class DepositRequest:
    """Parameters for depositing assets into a market."""

    market_params: MarketParams
    deposit_amount: int  # smallest token unit
    on_behalf: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.deposit_amount, bool) or not isinstance(self.deposit_amount, int):
            raise ValueError(f"deposit_amount must be an integer, got {self.deposit_amount!r}")
        if self.deposit_amount < 0:
            raise ValueError(f"deposit_amount must be non-negative, got {self.deposit_amount}")


@dataclass(frozen=True)
class DepositResult:
    """Outcome of a confirmed supply transaction."""

    assets: int
    shares: int
    tx_hash: Optional[str] = None
