"""Wallet holder and token metadata."""

from dataclasses import dataclass, field
from typing import Optional

from pydantic import Field

from swapmodel.amounts import Amount
from swapmodel.config import get_settings
from swapmodel.constants import Network, is_ether_address
from swapmodel.contracts.base import SwapContract
from swapmodel.contracts.common import Address


class Token(SwapContract):
    """Tradable asset known to the API."""

    address: Address = Field(..., description="Token contract address")
    decimals: int = Field(..., ge=0, description="Token decimals")
    symbol: Optional[str] = Field(None, description="Token symbol")
    token_type: Optional[str] = Field(None, description="Token standard, e.g. ERC20 or ETH")
    network: int = Field(default=Network.MAINNET, description="Network ID")
    img: Optional[str] = Field(None, description="Logo URL")
    allowance: Optional[Amount] = Field(None, description="Allowance granted to the swap contract")
    balance: Optional[Amount] = Field(None, description="Wallet balance in base units")

    @property
    def is_native(self) -> bool:
        """Whether this token is the chain's native asset."""
        return is_ether_address(self.address)


@dataclass
class User:
    """Wallet address with its network and known tokens."""

    address: Address
    network: int = field(default_factory=lambda: get_settings().default_network)
    tokens: Optional[list[Token]] = None

    def get_token(self, address_or_symbol: str) -> Optional[Token]:
        """Find a known token by address (case-insensitive) or symbol."""
        if not self.tokens:
            return None
        needle = address_or_symbol.lower()
        for token in self.tokens:
            if token.address.lower() == needle:
                return token
            if token.symbol and token.symbol.lower() == needle:
                return token
        return None
