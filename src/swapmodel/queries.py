"""Query parameter assembly for rate requests."""

import logging
from typing import Optional, Union

from pydantic import TypeAdapter

from swapmodel.amounts import Amount
from swapmodel.config import get_settings
from swapmodel.constants import SwapSide
from swapmodel.contracts.common import AddressOrSymbol, APIQuery
from swapmodel.contracts.options import RateOptions

logger = logging.getLogger(__name__)

_amount_adapter = TypeAdapter(Amount)


def build_rates_query(
    src_token: AddressOrSymbol,
    dest_token: AddressOrSymbol,
    amount: Union[str, int],
    side: SwapSide = SwapSide.SELL,
    network: Optional[int] = None,
    options: Optional[RateOptions] = None,
) -> APIQuery:
    """
    Build the query parameters for a rate request.

    Args:
        src_token: Source token address or symbol
        dest_token: Destination token address or symbol
        amount: Exact source (SELL) or destination (BUY) amount in base units
        side: Swap direction
        network: Network ID (defaults to the configured network)
        options: Optional DEX/method filters

    Returns:
        Mapping of query parameter names to values

    Raises:
        pydantic.ValidationError: If amount is not a decimal uint256
    """
    if network is None:
        network = get_settings().default_network

    query: APIQuery = {
        "srcToken": src_token,
        "destToken": dest_token,
        "amount": _amount_adapter.validate_python(amount),
        "side": SwapSide(side).value,
        "network": int(network),
    }
    query.update((options or RateOptions()).to_query())

    logger.debug(f"Rates query {src_token} -> {dest_token} ({query['side']}): {query}")
    return query
