"""Rate and optimal-route contracts returned by the pricing API.

Partner-fee quotes come in two mutually exclusive shapes: a sell quote
reports destination amounts net of the fee, a buy quote reports source and
destination amounts before the fee was added. Which one applies is decided
by `side`, and each variant refuses the other's fields.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field

from swapmodel.amounts import Amount, NumberString
from swapmodel.constants import ContractMethod, SwapSide
from swapmodel.contracts.base import BuyVariant, SellVariant, SwapContract


class Rate(SwapContract):
    """Quote from a single liquidity source."""

    dest_amount: Amount = Field(..., description="Destination amount")
    exchange: str = Field(..., description="Exchange name")
    percent: NumberString = Field(..., description="Share of the source amount")
    src_amount: Amount = Field(..., description="Source amount")
    data: Optional[Any] = Field(None, description="Exchange-specific payload")


class OthersRate(SwapContract):
    """Alternative rate from an exchange not used in the best route."""

    exchange: str
    rate: NumberString
    unit: NumberString


class OnChainOptimalRates(SwapContract):
    """Best route as computed by the on-chain rate oracle."""

    amount: Amount
    best_route: list[Rate]
    others: Optional[list[OthersRate]] = None


# ----------------------
# Simple computed rates
# ----------------------


class SimpleComputedRate(SwapContract):
    """Whole-amount rate quoted by one exchange."""

    exchange: str = Field(..., description="Exchange name")
    rate: NumberString = Field(..., description="Destination amount for the full source amount")
    slippage: Optional[NumberString] = Field(None, description="Slippage relative to the best rate")
    unit: Optional[NumberString] = Field(None, description="Destination amount for one source unit")
    data: Optional[Any] = Field(None, description="Exchange-specific payload")


class SimpleComputedRateWithFeeSell(SimpleComputedRate, SellVariant):
    """Simple rate with the partner fee deducted from the output."""

    rate_fee_deducted: NumberString
    unit_fee_deducted: Optional[NumberString] = None


class SimpleComputedRateWithFeeBuy(SimpleComputedRate, BuyVariant):
    """Simple rate reported before the partner fee was added to the input."""

    rate_no_fee_added: NumberString
    unit_no_fee_added: Optional[NumberString] = None


SimpleComputedRateWithFee = Union[SimpleComputedRateWithFeeSell, SimpleComputedRateWithFeeBuy]


# ----------------------
# Optimal route hops
# ----------------------


class OptimalRate(SwapContract):
    """One hop of the chosen execution route."""

    exchange: str = Field(..., description="Exchange identifier")
    address: Optional[str] = Field(None, description="Exchange contract address")
    src_amount: Amount = Field(..., description="Source amount routed through this hop")
    dest_amount: Amount = Field(..., description="Destination amount received")
    percent: NumberString = Field(..., description="Share of the swap routed here")
    rate: Optional[NumberString] = Field(None, description="Hop rate")
    data: Optional[Any] = Field(None, description="Exchange-specific payload")


class OptimalRateWithFeeSell(OptimalRate, SellVariant):
    """Sell-side hop with the destination amount net of the partner fee."""

    dest_amount_fee_deducted: Amount


class OptimalRateWithFeeBuy(OptimalRate, BuyVariant):
    """Buy-side hop with amounts before the partner fee was added."""

    src_amount_no_fee_added: Amount
    dest_amount_no_fee_added: Amount


OptimalRateWithFee = Union[OptimalRateWithFeeSell, OptimalRateWithFeeBuy]


class OptimalRoute(SwapContract):
    """Percent-weighted set of parallel multi-hop routes."""

    percent: NumberString = Field(..., description="Share of the source amount")
    route: list[list[OptimalRate]] = Field(
        ..., description="Routes, each an ordered list of hops"
    )


class RouteDetails(SwapContract):
    """Diagnostic description of how the route was found."""

    routes: Optional[list[str]] = None
    token_from: str
    token_to: str
    connector: Optional[str] = None
    src_amount: NumberString
    dest_amount: NumberString


# ----------------------
# Top-level quotes
# ----------------------


class OptimalRates(SwapContract):
    """Best-price quote for a swap."""

    block_number: int = Field(..., description="Block the quote was computed at")
    dest_amount: Amount = Field(..., description="Total destination amount")
    src_amount: Amount = Field(..., description="Total source amount")
    price_with_slippage: Optional[Amount] = Field(None, description="Limit amount after slippage")
    multi_path: Optional[bool] = None
    mega_path: Optional[bool] = None
    best_route: list[OptimalRate] = Field(..., description="Best single route")
    best_route_gas_cost_usd: Optional[NumberString] = Field(None, alias="bestRouteGasCostUSD")
    contract_method: ContractMethod = Field(..., description="Contract entry point to use")
    adapter_version: str
    best_route_gas: Optional[Amount] = None
    multi_route: Optional[list[list[OptimalRate]]] = None
    mega_route: Optional[list[OptimalRoute]] = None
    others: list[SimpleComputedRate] = Field(default_factory=list)
    from_usd: Optional[NumberString] = Field(None, alias="fromUSD")
    to_usd: Optional[NumberString] = Field(None, alias="toUSD")
    side: SwapSide
    details: Optional[RouteDetails] = None

    @property
    def exchanges(self) -> list[str]:
        """Exchanges used by the best route, in order of first use."""
        seen: list[str] = []
        for hop in self.best_route:
            if hop.exchange not in seen:
                seen.append(hop.exchange)
        return seen


class OptimalRatesWithPartnerFeesSell(OptimalRates, SellVariant):
    """Sell quote with the partner fee deducted from the output."""

    side: Literal[SwapSide.SELL]
    dest_amount_fee_deducted: Amount
    best_route: list[OptimalRateWithFeeSell]
    multi_route: Optional[list[list[OptimalRateWithFeeSell]]] = None
    others: list[SimpleComputedRateWithFeeSell] = Field(default_factory=list)
    to_usd_fee_deducted: Optional[NumberString] = Field(None, alias="toUSDFeeDeducted")


class OptimalRatesWithPartnerFeesBuy(OptimalRates, BuyVariant):
    """Buy quote with amounts reported before the partner fee was added."""

    side: Literal[SwapSide.BUY]
    src_amount_no_fee_added: Amount
    dest_amount_no_fee_added: Amount
    best_route: list[OptimalRateWithFeeBuy]
    multi_route: Optional[list[list[OptimalRateWithFeeBuy]]] = None
    others: list[SimpleComputedRateWithFeeBuy] = Field(default_factory=list)
    from_usd_no_fee_added: Optional[NumberString] = Field(None, alias="fromUSDNoFeeAdded")
    to_usd_no_fee_added: Optional[NumberString] = Field(None, alias="toUSDNoFeeAdded")


OptimalRatesWithPartnerFees = Annotated[
    Union[OptimalRatesWithPartnerFeesSell, OptimalRatesWithPartnerFeesBuy],
    Field(discriminator="side"),
]
