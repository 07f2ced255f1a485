"""Minimal Morpho Blue ABI.

Only the entry points and events this client touches: the ``supply`` call and
the events it may emit (``AccrueInterest`` is emitted first whenever interest
accrues in the same transaction).
"""

# MarketParams struct: (loanToken, collateralToken, oracle, irm, lltv)
MARKET_PARAMS_COMPONENTS = [
    {"internalType": "address", "name": "loanToken", "type": "address"},
    {"internalType": "address", "name": "collateralToken", "type": "address"},
    {"internalType": "address", "name": "oracle", "type": "address"},
    {"internalType": "address", "name": "irm", "type": "address"},
    {"internalType": "uint256", "name": "lltv", "type": "uint256"},
]

MORPHO_BLUE_ABI = [
    {
        "type": "function",
        "name": "supply",
        "stateMutability": "nonpayable",
        "inputs": [
            {
                "internalType": "struct MarketParams",
                "name": "marketParams",
                "type": "tuple",
                "components": MARKET_PARAMS_COMPONENTS,
            },
            {"internalType": "uint256", "name": "assets", "type": "uint256"},
            {"internalType": "uint256", "name": "shares", "type": "uint256"},
            {"internalType": "address", "name": "onBehalf", "type": "address"},
            {"internalType": "bytes", "name": "data", "type": "bytes"},
        ],
        "outputs": [
            {"internalType": "uint256", "name": "", "type": "uint256"},
            {"internalType": "uint256", "name": "", "type": "uint256"},
        ],
    },
    {
        "type": "event",
        "name": "AccrueInterest",
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "Id", "name": "id", "type": "bytes32"},
            {"indexed": False, "internalType": "uint256", "name": "prevBorrowRate", "type": "uint256"},
            {"indexed": False, "internalType": "uint256", "name": "interest", "type": "uint256"},
            {"indexed": False, "internalType": "uint256", "name": "feeShares", "type": "uint256"},
        ],
    },
    {
        "type": "event",
        "name": "Supply",
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "Id", "name": "id", "type": "bytes32"},
            {"indexed": True, "internalType": "address", "name": "caller", "type": "address"},
            {"indexed": True, "internalType": "address", "name": "onBehalf", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "assets", "type": "uint256"},
            {"indexed": False, "internalType": "uint256", "name": "shares", "type": "uint256"},
        ],
    },
]

SUPPLY_FUNCTION_NAME = "supply"


def event_names(abi: list) -> list:
    """Return the names of all events declared in an ABI."""
    return [entry["name"] for entry in abi if entry.get("type") == "event"]
