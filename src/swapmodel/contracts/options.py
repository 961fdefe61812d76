"""Options for rate queries and transaction building."""

from typing import Optional

from pydantic import Field

from swapmodel.amounts import Amount
from swapmodel.config import get_settings
from swapmodel.constants import ContractMethod, PricingMethod
from swapmodel.contracts.base import SwapContract
from swapmodel.contracts.common import APIQuery


class RateOptions(SwapContract):
    """Filters applied to a rate request."""

    exclude_dexs: Optional[str] = Field(
        None, alias="excludeDEXS", description="Comma-separated DEX names to skip"
    )
    include_dexs: Optional[str] = Field(
        None, alias="includeDEXS", description="Comma-separated DEX names to restrict to"
    )
    exclude_pools: Optional[str] = Field(None, description="Comma-separated pool addresses to skip")
    exclude_pricing_methods: Optional[list[PricingMethod]] = None
    exclude_contract_methods: Optional[list[ContractMethod]] = None
    include_contract_methods: Optional[list[ContractMethod]] = None
    adapter_version: Optional[str] = None
    referrer: Optional[str] = None

    def to_query(self) -> APIQuery:
        """Render the options as query parameters.

        Unset options are left out; `referrer` and `adapterVersion` fall back
        to the configured defaults.
        """
        settings = get_settings()
        query: APIQuery = {}

        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if name == "referrer" and value is None:
                value = settings.referrer
            elif name == "adapter_version" and value is None:
                value = settings.adapter_version

            if value is None or value == [] or value == "":
                continue
            if isinstance(value, list):
                value = ",".join(item.value for item in value)
            query[field.alias or name] = value

        return query


class BuildOptions(SwapContract):
    """Switches for the transaction builder."""

    ignore_checks: Optional[bool] = Field(None, description="Skip balance and allowance checks")
    only_params: Optional[bool] = Field(None, description="Return call parameters without encoding")
    simple: Optional[bool] = Field(None, description="Use the simple-swap encoding")
    gas_price: Optional[Amount] = Field(None, description="Gas price override in wei")
    use_redux_token: Optional[bool] = Field(None, description="Use the gas-token allowance mechanism")
