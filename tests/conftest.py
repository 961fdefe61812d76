"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment
os.environ["SWAPMODEL_DEFAULT_NETWORK"] = "1"
os.environ["SWAPMODEL_DEBUG"] = "true"
os.environ.pop("SWAPMODEL_REFERRER", None)
os.environ.pop("SWAPMODEL_ADAPTER_VERSION", None)
os.environ.pop("SWAPMODEL_PARTNER_FEE_BPS", None)

from swapmodel.config import get_settings

DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings for every test so env changes take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def hop_payload() -> dict:
    """Single route hop as returned by the pricing API."""
    return {
        "exchange": "UniswapV2",
        "srcAmount": "1000000000000000000",
        "destAmount": "998000000",
        "percent": "100",
        "data": {"router": "0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D", "path": [DAI, USDC]},
    }


@pytest.fixture
def quote_payload(hop_payload) -> dict:
    """SELL quote without partner fees."""
    return {
        "blockNumber": 13000000,
        "srcAmount": "1000000000000000000",
        "destAmount": "998000000",
        "priceWithSlippage": "988020000",
        "multiPath": False,
        "bestRoute": [hop_payload],
        "bestRouteGasCostUSD": "12.5",
        "contractMethod": "multiSwap",
        "adapterVersion": "4.0.0",
        "bestRouteGas": "150000",
        "others": [
            {"exchange": "UniswapV2", "rate": "998000000", "unit": "998000000"},
            {"exchange": "SushiSwap", "rate": "997000000", "slippage": "0.1"},
        ],
        "fromUSD": "1.0",
        "toUSD": "0.998",
        "side": "SELL",
        "details": {
            "routes": ["UniswapV2"],
            "tokenFrom": DAI,
            "tokenTo": USDC,
            "srcAmount": "1",
            "destAmount": "0.998",
        },
    }


@pytest.fixture
def sell_fee_payload(quote_payload) -> dict:
    """SELL quote with a 1% partner fee deducted."""
    payload = dict(quote_payload)
    payload["destAmountFeeDeducted"] = "988020000"
    payload["toUSDFeeDeducted"] = "0.988"
    payload["bestRoute"] = [
        dict(quote_payload["bestRoute"][0], destAmountFeeDeducted="988020000")
    ]
    payload["others"] = [
        {"exchange": "UniswapV2", "rate": "998000000", "rateFeeDeducted": "988020000"}
    ]
    return payload


@pytest.fixture
def buy_fee_payload(hop_payload) -> dict:
    """BUY quote reported before a 1% partner fee was added."""
    return {
        "blockNumber": 13000001,
        "srcAmount": "1010000000000000000",
        "destAmount": "1000000000",
        "srcAmountNoFeeAdded": "1000000000000000000",
        "destAmountNoFeeAdded": "1000000000",
        "bestRoute": [
            dict(
                hop_payload,
                srcAmount="1010000000000000000",
                destAmount="1000000000",
                srcAmountNoFeeAdded="1000000000000000000",
                destAmountNoFeeAdded="1000000000",
            )
        ],
        "contractMethod": "buy",
        "adapterVersion": "4.0.0",
        "others": [
            {"exchange": "UniswapV2", "rate": "1010000000000000000", "rateNoFeeAdded": "1000000000000000000"}
        ],
        "fromUSDNoFeeAdded": "1.0",
        "side": "BUY",
    }
