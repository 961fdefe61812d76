"""Tests for well-known constants."""

import re

from swapmodel import (
    ETHER_ADDRESS,
    MAX_UINT256,
    UNLIMITED_ALLOWANCE,
    ContractMethod,
    Network,
    PricingMethod,
    SwapSide,
    is_ether_address,
)


class TestSentinels:
    """Tests for the native-asset and allowance sentinels."""

    def test_unlimited_allowance_is_max_uint256(self):
        """Test that the unlimited allowance is 2^256 - 1 as a decimal string."""
        assert UNLIMITED_ALLOWANCE == str(2**256 - 1)
        assert UNLIMITED_ALLOWANCE == (
            "115792089237316195423570985008687907853269984665640564039457584007913129639935"
        )
        assert int(UNLIMITED_ALLOWANCE) == MAX_UINT256

    def test_ether_address_format(self):
        """Test that the native-asset address is 0x followed by 40 lowercase e's."""
        assert ETHER_ADDRESS == "0x" + "e" * 40
        assert re.fullmatch(r"0x[e]{40}", ETHER_ADDRESS)

    def test_is_ether_address_case_insensitive(self):
        """Test native-asset detection ignores case."""
        assert is_ether_address(ETHER_ADDRESS)
        assert is_ether_address("0x" + "E" * 40)
        assert not is_ether_address("0x6B175474E89094C44Da98b954EedeAC495271d0F")


class TestEnums:
    """Tests for enumerations sent over the wire."""

    def test_swap_side_values(self):
        """Test swap sides serialise as upper-case strings."""
        assert SwapSide.SELL == "SELL"
        assert SwapSide.BUY == "BUY"
        assert SwapSide("BUY") is SwapSide.BUY

    def test_contract_methods(self):
        """Test contract method wire names."""
        assert ContractMethod.MULTI_SWAP.value == "multiSwap"
        assert ContractMethod.MEGA_SWAP.value == "megaSwap"
        assert ContractMethod("simpleSwap") is ContractMethod.SIMPLE_SWAP

    def test_pricing_methods(self):
        """Test pricing method wire names."""
        assert {m.value for m in PricingMethod} == {"megapath", "multipath", "simplepath"}

    def test_networks(self):
        """Test supported network IDs."""
        assert Network.MAINNET == 1
        assert {int(n) for n in Network} == {1, 3, 4, 42, 56, 137}
