"""Request and response contracts for the aggregation API.

These Pydantic models define the shapes exchanged with the pricing API and
the transaction builder. Amounts are decimal strings throughout.
"""

from swapmodel.contracts.common import (
    Address,
    AddressOrSymbol,
    Adapters,
    Allowance,
    APIError,
    APIQuery,
    DexConf,
    NumberAsString,
    PriceString,
    Symbol,
    Transaction,
    TransactionData,
)
from swapmodel.contracts.options import BuildOptions, RateOptions
from swapmodel.contracts.rates import (
    OnChainOptimalRates,
    OptimalRate,
    OptimalRates,
    OptimalRatesWithPartnerFees,
    OptimalRatesWithPartnerFeesBuy,
    OptimalRatesWithPartnerFeesSell,
    OptimalRateWithFee,
    OptimalRateWithFeeBuy,
    OptimalRateWithFeeSell,
    OptimalRoute,
    OthersRate,
    Rate,
    RouteDetails,
    SimpleComputedRate,
    SimpleComputedRateWithFee,
    SimpleComputedRateWithFeeBuy,
    SimpleComputedRateWithFeeSell,
)
from swapmodel.contracts.transactions import (
    LegacyTransactionSellParams,
    SimpleSwapTransactionParams,
    TransactionBuyParams,
    TransactionBuyRoute,
    TransactionMegaPath,
    TransactionPath,
    TransactionRoute,
    TransactionSellParams,
    TransactionSellRoute,
    check_mega_path_percentages,
)
from swapmodel.contracts.user import Token, User

__all__ = [
    # Primitive aliases
    "Address",
    "AddressOrSymbol",
    "NumberAsString",
    "PriceString",
    "Symbol",
    # Common contracts
    "APIError",
    "APIQuery",
    "Adapters",
    "Allowance",
    "DexConf",
    "Transaction",
    "TransactionData",
    # Rate contracts
    "OnChainOptimalRates",
    "OptimalRate",
    "OptimalRateWithFee",
    "OptimalRateWithFeeBuy",
    "OptimalRateWithFeeSell",
    "OptimalRates",
    "OptimalRatesWithPartnerFees",
    "OptimalRatesWithPartnerFeesBuy",
    "OptimalRatesWithPartnerFeesSell",
    "OptimalRoute",
    "OthersRate",
    "Rate",
    "RouteDetails",
    "SimpleComputedRate",
    "SimpleComputedRateWithFee",
    "SimpleComputedRateWithFeeBuy",
    "SimpleComputedRateWithFeeSell",
    # Transaction contracts
    "LegacyTransactionSellParams",
    "SimpleSwapTransactionParams",
    "TransactionBuyParams",
    "TransactionBuyRoute",
    "TransactionMegaPath",
    "TransactionPath",
    "TransactionRoute",
    "TransactionSellParams",
    "TransactionSellRoute",
    "check_mega_path_percentages",
    # Options
    "BuildOptions",
    "RateOptions",
    # Holders
    "Token",
    "User",
]
