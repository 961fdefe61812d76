"""Swap data model for a DEX price-aggregation API.

Quotes, optimal routes and transaction-building parameters as immutable
Pydantic models, with amounts carried as decimal strings.
"""

from swapmodel.amounts import Amount, NumberString, format_amount, parse_amount, parse_number
from swapmodel.constants import (
    ETHER_ADDRESS,
    MAX_UINT256,
    UNLIMITED_ALLOWANCE,
    ContractMethod,
    Network,
    PricingMethod,
    SwapSide,
    is_ether_address,
)
from swapmodel.errors import (
    AmountError,
    APIRequestError,
    PercentageError,
    SwapModelError,
    VariantMismatchError,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "ETHER_ADDRESS",
    "MAX_UINT256",
    "UNLIMITED_ALLOWANCE",
    "ContractMethod",
    "Network",
    "PricingMethod",
    "SwapSide",
    "is_ether_address",
    # Amounts
    "Amount",
    "NumberString",
    "format_amount",
    "parse_amount",
    "parse_number",
    # Errors
    "APIRequestError",
    "AmountError",
    "PercentageError",
    "SwapModelError",
    "VariantMismatchError",
]
