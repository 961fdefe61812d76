"""Parameter shapes for building swap transactions.

A quoted route is serialised into on-chain instructions as nested routes,
paths and mega-paths. Sell swaps use percent-weighted routes, buy swaps
carry explicit per-route amounts.
"""

import logging
from decimal import Decimal
from typing import Generic, Iterable, Optional, TypeVar

from pydantic import Field

from swapmodel.amounts import Amount, NumberString, parse_amount, parse_number
from swapmodel.contracts.base import SwapContract
from swapmodel.contracts.common import Address
from swapmodel.errors import PercentageError

logger = logging.getLogger(__name__)


class TransactionRoute(SwapContract):
    """One exchange call inside a path."""

    exchange: Address = Field(..., description="Adapter contract address")
    target_exchange: Optional[Address] = Field(None, description="Underlying DEX contract")
    payload: str = Field(..., description="Exchange-specific encoded payload")
    network_fee: Amount = Field(..., description="Network fee for this hop in wei")


class TransactionSellRoute(TransactionRoute):
    """Sell route weighted by share of the path's input."""

    percent: NumberString


class TransactionBuyRoute(TransactionRoute):
    """Buy route with explicit input and output amounts."""

    from_amount: Amount
    to_amount: Amount


RouteT = TypeVar("RouteT", bound=TransactionRoute)


class TransactionPath(SwapContract, Generic[RouteT]):
    """Routes that all swap into the same intermediate token.

    Always parameterise with the route type, e.g.
    `TransactionPath[TransactionSellRoute]`. A bare TransactionPath validates
    routes as plain TransactionRoute and drops `percent`, `fromAmount` and
    `toAmount`.
    """

    to: Address = Field(..., description="Token this path swaps into")
    total_network_fee: Amount = Field(..., description="Sum of route network fees in wei")
    routes: list[RouteT]

    @property
    def route_network_fee(self) -> int:
        """Network fee summed over the routes."""
        return sum(parse_amount(route.network_fee) for route in self.routes)


class TransactionMegaPath(SwapContract, Generic[RouteT]):
    """Sequence of paths executed with a share of the source amount.

    Parameterise with the route type, as for TransactionPath.
    """

    from_amount_percent: NumberString = Field(..., description="Share of the source amount")
    path: list[TransactionPath[RouteT]]


def check_mega_path_percentages(mega_paths: Iterable[TransactionMegaPath]) -> Decimal:
    """Verify that mega-paths split the whole source amount.

    Returns:
        The total percentage, always 100

    Raises:
        PercentageError: If the shares do not add up to 100
    """
    mega_paths = list(mega_paths)
    total = sum((parse_number(mp.from_amount_percent) for mp in mega_paths), Decimal(0))
    if total != 100:
        logger.warning(f"Mega-path split of {len(mega_paths)} entries totals {total}%")
        raise PercentageError(f"Mega-path percentages add up to {total}, expected 100")
    return total


class TransactionBuyParams(SwapContract):
    """Arguments for a path-based buy call."""

    value: Amount = Field(..., description="Native value to send in wei")
    from_token: Optional[Address] = None
    to_token: Optional[Address] = None
    from_amount: Amount
    to_amount: Amount
    expected_amount: Amount
    route: list[TransactionBuyRoute]
    beneficiary: Address = Field(..., description="Address receiving the output")
    referrer: str


class TransactionSellParams(SwapContract):
    """Arguments for a path-based sell call."""

    from_token: Address
    to_token: Address
    from_amount: Amount
    to_amount: Amount = Field(..., description="Minimum output after slippage")
    expected_amount: Amount
    path: list[TransactionPath[TransactionSellRoute]]
    beneficiary: Address
    referrer: str


class LegacyTransactionSellParams(SwapContract):
    """Sell call arguments for the older contract with gas-token minting and donations."""

    from_token: Address
    to_token: Address
    from_amount: Amount
    to_amount: Amount
    expected_amount: Amount
    path: list[TransactionPath[TransactionSellRoute]]
    mint_price: str
    beneficiary: Address
    donation_basis_points: str
    referrer: str


class SimpleSwapTransactionParams(SwapContract):
    """Arguments for the flattened simple-swap call.

    `exchange_data` is the concatenated calldata of all callees;
    `start_indexes` marks where each callee's slice begins.
    """

    from_token: Address
    to_token: Address
    from_amount: Amount
    to_amount: Amount
    expected_amount: Amount
    callees: list[Address]
    exchange_data: str
    start_indexes: list[int]
    values: list[Amount]
    beneficiary: Address
    referrer: str
