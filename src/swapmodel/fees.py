"""Partner-fee arithmetic for populating fee-adjusted quote fields.

Fees are expressed in basis points (100 = 1%). All arithmetic is done on
Python ints so amounts up to 2^256 - 1 stay exact.
"""

import logging
from decimal import Decimal
from typing import Optional, Union

from swapmodel.amounts import format_amount, parse_amount, parse_number
from swapmodel.config import get_settings
from swapmodel.errors import AmountError

logger = logging.getLogger(__name__)

BPS_DENOMINATOR = 10_000


def _resolve_fee(fee_bps: Optional[int]) -> int:
    if fee_bps is None:
        fee_bps = get_settings().partner_fee_bps
    if isinstance(fee_bps, bool) or not 0 <= fee_bps <= BPS_DENOMINATOR:
        raise AmountError(f"Fee must be between 0 and {BPS_DENOMINATOR} bps, got {fee_bps!r}")
    return fee_bps


def fee_percent_to_bps(percent: Union[str, int, float, Decimal]) -> int:
    """Convert a fee percentage (e.g. "0.25") to basis points."""
    bps = parse_number(percent) * 100
    if bps != bps.to_integral_value():
        raise AmountError(f"Fee {percent}% is finer than one basis point")
    return int(bps)


def apply_sell_fee(dest_amount: Union[str, int], fee_bps: Optional[int] = None) -> str:
    """Destination amount left after deducting the partner fee.

    Rounds down, so the user is never promised more than is paid out.
    """
    fee_bps = _resolve_fee(fee_bps)
    amount = parse_amount(dest_amount)
    net = amount * (BPS_DENOMINATOR - fee_bps) // BPS_DENOMINATOR
    logger.debug(f"Sell fee {fee_bps}bps: {amount} -> {net}")
    return format_amount(net)


def apply_buy_fee(src_amount: Union[str, int], fee_bps: Optional[int] = None) -> str:
    """Source amount including the partner fee on top.

    Rounds up, so the fee is never under-collected.
    """
    fee_bps = _resolve_fee(fee_bps)
    amount = parse_amount(src_amount)
    gross = -(-amount * (BPS_DENOMINATOR + fee_bps) // BPS_DENOMINATOR)
    logger.debug(f"Buy fee {fee_bps}bps: {amount} -> {gross}")
    return format_amount(gross)
