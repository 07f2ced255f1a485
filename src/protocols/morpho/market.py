"""Morpho Blue market identifier helpers."""

from eth_abi import encode
from web3 import Web3

MARKET_PARAMS_TYPES = ["address", "address", "address", "address", "uint256"]


def compute_market_id(
    loan_token: str,
    collateral_token: str,
    oracle: str,
    irm: str,
    lltv: int,
) -> str:
    """Compute the market id Morpho Blue derives from its parameters.

    The id is ``keccak256(abi.encode(marketParams))`` over the five struct
    fields in declaration order.

    Returns:
        0x-prefixed lowercase hex string of the 32-byte id
    """
    encoded = encode(
        MARKET_PARAMS_TYPES,
        [
            Web3.to_checksum_address(loan_token),
            Web3.to_checksum_address(collateral_token),
            Web3.to_checksum_address(oracle),
            Web3.to_checksum_address(irm),
            int(lltv),
        ],
    )
    return "0x" + Web3.keccak(encoded).hex().removeprefix("0x")
