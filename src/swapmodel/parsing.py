"""Conversion between wire payloads and contract models."""

import logging
from typing import Any, Optional, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from swapmodel.constants import SwapSide
from swapmodel.contracts.common import APIError
from swapmodel.contracts.rates import (
    OptimalRates,
    OptimalRatesWithPartnerFees,
    OptimalRatesWithPartnerFeesBuy,
    OptimalRatesWithPartnerFeesSell,
)
from swapmodel.errors import VariantMismatchError

logger = logging.getLogger(__name__)

_fee_quote_adapter = TypeAdapter(OptimalRatesWithPartnerFees)

DEFAULT_ERROR_MESSAGE = "Unknown API error"


def _side_of(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        side = payload.get("side")
        if isinstance(side, SwapSide):
            return side.value
        return side
    return None


def parse_optimal_rates(payload: dict) -> OptimalRates:
    """Parse a quote without partner fees."""
    try:
        rates = OptimalRates.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Rejected quote payload: {e.error_count()} error(s)")
        raise
    logger.debug(
        f"Parsed {rates.side.value} quote at block {rates.block_number}: "
        f"{rates.src_amount} -> {rates.dest_amount}"
    )
    return rates


def parse_rates_with_fees(
    payload: dict,
) -> Union[OptimalRatesWithPartnerFeesSell, OptimalRatesWithPartnerFeesBuy]:
    """Parse a partner-fee quote into its sell or buy variant.

    Raises:
        VariantMismatchError: If `side` is missing or not SELL/BUY
        pydantic.ValidationError: If the payload does not match the variant
    """
    side = _side_of(payload)
    if side not in (SwapSide.SELL.value, SwapSide.BUY.value):
        logger.warning(f"Quote payload has unknown side: {side!r}")
        raise VariantMismatchError(str(side), ["side"], f"Unknown quote side: {side!r}")

    try:
        rates = _fee_quote_adapter.validate_python({**payload, "side": side})
    except ValidationError as e:
        logger.warning(f"Rejected {side} fee quote payload: {e.error_count()} error(s)")
        raise
    logger.debug(f"Parsed {side} fee quote at block {rates.block_number}")
    return rates


def parse_api_error(payload: Any, status: Optional[int] = None) -> APIError:
    """Build an APIError from an error response body.

    Accepts {"error": ...} and {"message": ...} bodies as well as plain
    strings; anything else gets a generic message.
    """
    message = None
    if isinstance(payload, dict):
        message = payload.get("error") or payload.get("message")
        if status is None and isinstance(payload.get("status"), int):
            status = payload["status"]
    elif isinstance(payload, str) and payload.strip():
        message = payload.strip()

    if not isinstance(message, str) or not message:
        message = DEFAULT_ERROR_MESSAGE

    return APIError(message=message, status=status)


def to_wire(model: BaseModel) -> dict:
    """Dump a contract to its camelCase wire form, leaving out unset optionals."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)
