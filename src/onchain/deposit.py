"""Deposits into Morpho Blue markets through the ``supply`` entry point."""

import logging
from typing import Optional

from web3 import Web3

from config.settings import Settings, get_settings
from src.core.constants import EMPTY_CALLDATA, ZERO_SHARES
from src.core.exceptions import DepositError, DepositErrorKind
from src.core.models import DepositRequest, DepositResult
from src.onchain.signer import ContractCall, Signer, TransactionConfirmation
from src.protocols.morpho.abi import MORPHO_BLUE_ABI, SUPPLY_FUNCTION_NAME
from src.protocols.morpho.config import SUPPLY_CONFIRMATIONS

logger = logging.getLogger(__name__)


def _error_text(error: BaseException) -> str:
    return str(error) or type(error).__name__


def resolve_shares(confirmation: TransactionConfirmation, fallback: int) -> int:
    """Read ``shares`` from the first emitted event, else return ``fallback``.

    Only the first event is inspected and its name is not checked. When
    interest accrues in the same transaction the first event is
    ``AccrueInterest``, which has no ``shares`` argument, so the fallback is
    returned even though a ``Supply`` event follows.
    """
    if not confirmation.events:
        return fallback
    shares = confirmation.events[0].args.get("shares")
    if not shares:
        return fallback
    return int(shares)


class MorphoDepositor:
    """Submits supply transactions to the Morpho Blue contract."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def build_supply_call(self, request: DepositRequest, on_behalf: str) -> ContractCall:
        """Compose ``supply(marketParams, assets, 0, onBehalf, "")``."""
        return ContractCall(
            address=self.settings.morpho_contract_address,
            abi=MORPHO_BLUE_ABI,
            function_name=SUPPLY_FUNCTION_NAME,
            args=(
                request.market_params.as_tuple(),
                request.deposit_amount,
                ZERO_SHARES,
                Web3.to_checksum_address(on_behalf),
                EMPTY_CALLDATA,
            ),
        )

    async def deposit(self, request: DepositRequest, signer: Signer) -> DepositResult:
        """Deposit ``request.deposit_amount`` into the request's market.

        The amount is supplied as the assets leg with zero shares, so the
        contract computes the shares minted. There is no slippage or
        minimum-shares protection, and every call submits a new transaction.

        Args:
            request: Market, amount and optional beneficiary
            signer: Signing capability that sends the transaction

        Returns:
            Deposited assets and the shares read from the confirmation

        Raises:
            DepositError: if address resolution, submission or confirmation fails
        """
        stage = DepositErrorKind.ADDRESS_RESOLUTION
        try:
            on_behalf = request.on_behalf or await signer.get_address()

            stage = DepositErrorKind.SUBMISSION
            call = self.build_supply_call(request, on_behalf)
            pending = await signer.send_transaction(call)
            logger.info(
                f"Submitted supply of {request.deposit_amount} to market "
                f"{request.market_params.id} on behalf of {on_behalf}: {pending.tx_hash}"
            )

            stage = DepositErrorKind.CONFIRMATION
            confirmation = await pending.wait(SUPPLY_CONFIRMATIONS)
            shares = resolve_shares(confirmation, ZERO_SHARES)

        except Exception as e:
            logger.error(f"Deposit failed during {stage.value}: {e}")
            raise DepositError(stage, _error_text(e), e) from e

        return DepositResult(
            assets=request.deposit_amount,
            shares=shares,
            tx_hash=pending.tx_hash,
        )


async def deposit(
    request: DepositRequest,
    signer: Signer,
    *,
    settings: Optional[Settings] = None,
) -> DepositResult:
    """Deposit with a one-off depositor."""
    return await MorphoDepositor(settings).deposit(request, signer)
