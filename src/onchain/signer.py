"""Signing capability for contract transactions.

The deposit path only depends on the ``Signer`` protocol: something that knows
its own address and can send a contract call, handing back a pending
transaction that can be awaited for confirmation. ``Web3Signer`` implements it
with an ``AsyncWeb3`` connection and a local ``eth_account`` account.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from eth_account.signers.local import LocalAccount
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import LogTopicError, MismatchedABI

from config.settings import Settings, get_settings
from src.core.exceptions import TransactionRevertedError
from src.protocols.morpho.abi import event_names

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContractCall:
    """A state-changing contract call ready to be signed and sent."""

    address: str
    abi: List[Dict[str, Any]]
    function_name: str
    args: Tuple[Any, ...]


@dataclass(frozen=True)
class EmittedEvent:
    """A log from a mined transaction.

    ``name`` is ``None`` and ``args`` empty when the log could not be decoded
    against the called contract's ABI.
    """

    name: Optional[str]
    args: Dict[str, Any]
    address: str
    log_index: int


@dataclass(frozen=True)
class TransactionConfirmation:
    """Receipt summary of a mined transaction."""

    tx_hash: str
    block_number: int
    status: int
    events: List[EmittedEvent] = field(default_factory=list)


class PendingTransaction(Protocol):
    """A submitted transaction that has not necessarily been mined yet."""

    tx_hash: str

    async def wait(self, confirmations: int = 1) -> TransactionConfirmation:
        ...


class Signer(Protocol):
    """Externally supplied signing capability."""

    async def get_address(self) -> str:
        ...

    async def send_transaction(self, call: ContractCall) -> PendingTransaction:
        ...


def _to_hex(value: Any) -> str:
    """Render bytes-like hashes as 0x-prefixed hex."""
    if isinstance(value, str):
        return value if value.startswith("0x") else f"0x{value}"
    raw = bytes(value).hex()
    return f"0x{raw}"


class Web3PendingTransaction:
    """Pending transaction backed by an ``AsyncWeb3`` connection."""

    def __init__(
        self,
        web3: AsyncWeb3,
        contract,
        tx_hash: Any,
        timeout: int = 120,
        poll_interval: float = 1.0,
    ):
        self._web3 = web3
        self._contract = contract
        self._raw_hash = tx_hash
        self._timeout = timeout
        self._poll_interval = poll_interval
        self.tx_hash = _to_hex(tx_hash)

    async def wait(self, confirmations: int = 1) -> TransactionConfirmation:
        """Wait until the transaction is mined and decode its logs.

        The receipt counts as the first confirmation. For larger counts the
        chain head is polled until the mined block is ``confirmations`` deep,
        within the same timeout as the receipt wait.
        """
        receipt = await self._web3.eth.wait_for_transaction_receipt(
            self._raw_hash, timeout=self._timeout
        )
        if receipt["status"] == 0:
            raise TransactionRevertedError(self.tx_hash, receipt)

        if confirmations > 1:
            await asyncio.wait_for(
                self._wait_for_depth(receipt["blockNumber"], confirmations),
                timeout=self._timeout,
            )

        logger.info(f"Transaction {self.tx_hash} mined in block {receipt['blockNumber']}")
        return TransactionConfirmation(
            tx_hash=self.tx_hash,
            block_number=receipt["blockNumber"],
            status=receipt["status"],
            events=self._decode_logs(receipt["logs"]),
        )

    async def _wait_for_depth(self, mined_block: int, confirmations: int) -> None:
        while await self._web3.eth.get_block_number() - mined_block + 1 < confirmations:
            await asyncio.sleep(self._poll_interval)

    def _decode_logs(self, logs: Sequence[Dict[str, Any]]) -> List[EmittedEvent]:
        """Decode receipt logs in emission order."""
        contract_address = self._contract.address.lower()
        names = event_names(self._contract.abi)
        events = []

        for log in logs:
            name, args = None, {}
            if str(log["address"]).lower() == contract_address:
                for event_name in names:
                    try:
                        decoded = getattr(self._contract.events, event_name)().process_log(log)
                    except (MismatchedABI, LogTopicError):
                        continue
                    name, args = decoded["event"], dict(decoded["args"])
                    break

            events.append(
                EmittedEvent(
                    name=name,
                    args=args,
                    address=log["address"],
                    log_index=log["logIndex"],
                )
            )

        return events


class Web3Signer:
    """Signer that signs locally and broadcasts through an RPC node."""

    def __init__(self, web3: AsyncWeb3, account: LocalAccount, receipt_timeout: int = 120):
        self.web3 = web3
        self._account = account
        self._receipt_timeout = receipt_timeout

    @classmethod
    def from_settings(cls, account: LocalAccount, settings: Optional[Settings] = None) -> "Web3Signer":
        """Build a signer connected to the configured RPC node."""
        settings = settings or get_settings()
        rpc_url = settings.rpc_url
        if not rpc_url:
            raise ValueError("RPC URL not configured. Set ETH_RPC_URL or ETH_ALCHEMY_API_KEY in .env")
        return cls(
            AsyncWeb3(AsyncHTTPProvider(rpc_url)),
            account,
            receipt_timeout=settings.transaction_receipt_timeout,
        )

    @property
    def address(self) -> str:
        return self._account.address

    def __repr__(self) -> str:
        return f"Web3Signer(address={self.address})"

    async def get_address(self) -> str:
        return self._account.address

    async def send_transaction(self, call: ContractCall) -> Web3PendingTransaction:
        """Build, sign and broadcast a contract call."""
        contract = self.web3.eth.contract(
            address=self.web3.to_checksum_address(call.address),
            abi=call.abi,
        )
        function = getattr(contract.functions, call.function_name)(*call.args)

        tx = await function.build_transaction(
            {
                "from": self.address,
                "nonce": await self.web3.eth.get_transaction_count(self.address, "pending"),
                "chainId": await self.web3.eth.chain_id,
            }
        )
        signed = self._account.sign_transaction(tx)
        raw_tx = getattr(signed, "raw_transaction", None) or getattr(signed, "rawTransaction", None)
        tx_hash = await self.web3.eth.send_raw_transaction(raw_tx)

        pending = Web3PendingTransaction(self.web3, contract, tx_hash, timeout=self._receipt_timeout)
        logger.info(f"Sent {call.function_name} to {call.address}: {pending.tx_hash}")
        return pending
