"""Shared API shapes: queries, errors, allowances and raw transactions."""

from typing import Optional, Union

from pydantic import ConfigDict, Field, model_validator

from swapmodel.amounts import Amount
from swapmodel.contracts.base import SwapContract

Symbol = str
Address = str
AddressOrSymbol = Union[Address, Symbol]
PriceString = str
NumberAsString = str

# Query string parameters sent to the pricing API
APIQuery = dict[str, Union[str, int, float, bool]]


class APIError(SwapContract):
    """Error reported by the aggregation API."""

    message: str = Field(..., description="Human-readable error message")
    status: Optional[int] = Field(None, description="HTTP status code, when known")


class Allowance(SwapContract):
    """ERC-20 allowance granted to the swap contract."""

    token_address: Address = Field(..., description="Token contract address")
    allowance: Amount = Field(..., description="Approved amount in token base units")


class DexConf(SwapContract):
    """Exchange and target-exchange addresses for one adapter."""

    exchange: Address = Field(..., description="Adapter contract address")
    target_exchange: Optional[Address] = Field(None, description="Underlying DEX contract")


class Adapters(SwapContract):
    """Adapter configuration keyed by adapter name.

    The `augustus` entry holds the main swapper contract; every other key
    maps an exchange name to its DexConf.
    """

    model_config = ConfigDict(extra="allow")

    augustus: DexConf = Field(..., description="Main swapper contract")

    @model_validator(mode="after")
    def validate_extra_adapters(self) -> "Adapters":
        """Coerce every extra adapter entry into a DexConf."""
        extra = self.__pydantic_extra__ or {}
        for name, conf in list(extra.items()):
            if not isinstance(conf, DexConf):
                extra[name] = DexConf.model_validate(conf)
        return self

    def get(self, name: str) -> Optional[DexConf]:
        """Look up an adapter by name."""
        if name == "augustus":
            return self.augustus
        return (self.__pydantic_extra__ or {}).get(name)

    @property
    def names(self) -> list[str]:
        """All adapter names, augustus first."""
        return ["augustus", *(self.__pydantic_extra__ or {}).keys()]


class Transaction(SwapContract):
    """Raw call to submit to a node."""

    from_: Address = Field(..., alias="from", description="Sender address")
    to: Address = Field(..., description="Recipient contract address")
    value: Amount = Field(..., description="Native value in wei")
    data: str = Field(..., description="Encoded call data (hex)")
    chain_id: int = Field(..., description="EVM chain ID")


class TransactionData(SwapContract):
    """Transaction produced by the transaction builder."""

    from_: Address = Field(..., alias="from", description="Sender address")
    to: Address = Field(..., description="Swap contract address")
    data: str = Field(..., description="Encoded call data (hex)")
    chain_id: int = Field(..., description="EVM chain ID")
    value: Amount = Field(..., description="Native value in wei")
    gas_price: Optional[Amount] = Field(None, description="Gas price in wei")
    gas: Optional[Amount] = Field(None, description="Gas limit")
