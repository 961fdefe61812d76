"""Well-known constants and enumerations shared by all swap contracts."""

from enum import Enum, IntEnum

# Reserved address standing in for the chain's native asset (ETH, BNB, MATIC)
ETHER_ADDRESS = "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee"

MAX_UINT256 = 2**256 - 1

# Max uint256 for "approve once" token allowances
UNLIMITED_ALLOWANCE = str(MAX_UINT256)


class SwapSide(str, Enum):
    """Direction of a swap quote."""

    SELL = "SELL"  # Exact source amount, destination amount computed
    BUY = "BUY"  # Exact destination amount, source amount computed


class ContractMethod(str, Enum):
    """Swap contract entry points a route can be executed with."""

    SWAP_ON_UNISWAP = "swapOnUniswap"
    BUY_ON_UNISWAP = "buyOnUniswap"
    SWAP_ON_UNISWAP_FORK = "swapOnUniswapFork"
    BUY_ON_UNISWAP_FORK = "buyOnUniswapFork"
    SWAP_ON_UNISWAP_V2_FORK = "swapOnUniswapV2Fork"
    BUY_ON_UNISWAP_V2_FORK = "buyOnUniswapV2Fork"
    SIMPLE_SWAP = "simpleSwap"
    SIMPLE_BUY = "simpleBuy"
    MULTI_SWAP = "multiSwap"
    MEGA_SWAP = "megaSwap"
    BUY = "buy"
    SWAP_ON_ZERO_X_V2 = "swapOnZeroXv2"
    SWAP_ON_ZERO_X_V4 = "swapOnZeroXv4"


class PricingMethod(str, Enum):
    """Route search strategies offered by the pricing API."""

    MEGAPATH = "megapath"
    MULTIPATH = "multipath"
    SIMPLEPATH = "simplepath"


class Network(IntEnum):
    """Networks the aggregation API serves."""

    MAINNET = 1
    ROPSTEN = 3
    RINKEBY = 4
    KOVAN = 42
    BSC = 56
    POLYGON = 137


def is_ether_address(address: str) -> bool:
    """Check whether an address is the native-asset sentinel."""
    return address.lower() == ETHER_ADDRESS
