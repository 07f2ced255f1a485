"""Pytest configuration and fixtures."""

import pytest
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock

from config.settings import Settings
from src.core.models import DepositRequest, MarketParams
from src.onchain.signer import EmittedEvent, TransactionConfirmation

SIGNER_ADDRESS = "0x1111111111111111111111111111111111111111"
USDC_ADDRESS = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
WETH_ADDRESS = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
ORACLE_ADDRESS = "0x48F7E36EB6B826B2dF4B2E630B62Cd25e89E40e2"
IRM_ADDRESS = "0x870aC11D48B15DB9a138Cf899d20F13F79Ba00BC"
TX_HASH = "0x" + "ab" * 32


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the process environment and .env files."""
    return Settings(
        _env_file=None,
        morpho_graphql_url="https://example.test/graphql",
        morpho_contract_address="0xBBBBBbbBBb9cC5e90e3b3Af64bdAF62C37EEFFCb",
        eth_rpc_url=None,
        eth_alchemy_api_key=None,
    )


@pytest.fixture
def vault_item() -> Dict[str, Any]:
    """Sample vault item as returned by the FetchVaults query."""
    return {
        "address": "0xBEEF01735c132Ada46AA9aA4c54623cAA92A64CB",
        "name": "Steakhouse USDC",
        "symbol": "steakUSDC",
        "whitelisted": True,
        "asset": {
            "address": USDC_ADDRESS,
            "name": "USD Coin",
            "symbol": "USDC",
            "decimals": 6,
        },
        "dailyApys": [{"apy": 0.0523}, {"apy": 0.0498}],
        "warnings": [{"level": "YELLOW"}],
        "liquidity": {"underlying": 125000000.5, "usd": 125010000.25},
        "chain": {"id": 1, "network": "ethereum", "currency": "eth"},
    }


@pytest.fixture
def market_params() -> MarketParams:
    """USDC/WETH 86% market on Ethereum Mainnet."""
    return MarketParams(
        loan_token=USDC_ADDRESS,
        collateral_token=WETH_ADDRESS,
        oracle=ORACLE_ADDRESS,
        irm=IRM_ADDRESS,
        lltv=860000000000000000,
        id="0xb323495f7e4148be5643a4ea4a8221eef163e4bccfdedc2a6f4696baacbc86cc",
    )


@pytest.fixture
def deposit_request(market_params) -> DepositRequest:
    """50 USDC (6 decimals) deposit without an explicit beneficiary."""
    return DepositRequest(market_params=market_params, deposit_amount=50_000000)


def make_confirmation(events: List[EmittedEvent]) -> TransactionConfirmation:
    """Build a successful confirmation carrying the given events."""
    return TransactionConfirmation(tx_hash=TX_HASH, block_number=19000000, status=1, events=events)


def make_event(name, args, log_index=0) -> EmittedEvent:
    """Build a decoded event emitted by the Morpho contract."""
    return EmittedEvent(
        name=name,
        args=args,
        address="0xBBBBBbbBBb9cC5e90e3b3Af64bdAF62C37EEFFCb",
        log_index=log_index,
    )


@pytest.fixture
def pending_tx():
    """Pending transaction whose wait() yields a Supply event."""
    pending = MagicMock()
    pending.tx_hash = TX_HASH
    pending.wait = AsyncMock(
        return_value=make_confirmation(
            [make_event("Supply", {"assets": 50_000000, "shares": 49_731_102_000000})]
        )
    )
    return pending


@pytest.fixture
def signer(pending_tx):
    """Signer double recording the contract calls it is asked to send."""
    mock_signer = MagicMock()
    mock_signer.get_address = AsyncMock(return_value=SIGNER_ADDRESS)
    mock_signer.send_transaction = AsyncMock(return_value=pending_tx)
    return mock_signer


@pytest.fixture
def confirmation_factory():
    return make_confirmation


@pytest.fixture
def event_factory():
    return make_event
