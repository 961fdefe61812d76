"""Base model shared by every swap contract."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from swapmodel.errors import VariantMismatchError

# Fields that only exist on sell-side (fee deducted) quotes: wire name -> attribute
SELL_ONLY_FIELDS = {
    "destAmountFeeDeducted": "dest_amount_fee_deducted",
    "toUSDFeeDeducted": "to_usd_fee_deducted",
    "rateFeeDeducted": "rate_fee_deducted",
    "unitFeeDeducted": "unit_fee_deducted",
}

# Fields that only exist on buy-side (fee added) quotes
BUY_ONLY_FIELDS = {
    "srcAmountNoFeeAdded": "src_amount_no_fee_added",
    "destAmountNoFeeAdded": "dest_amount_no_fee_added",
    "fromUSDNoFeeAdded": "from_usd_no_fee_added",
    "toUSDNoFeeAdded": "to_usd_no_fee_added",
    "rateNoFeeAdded": "rate_no_fee_added",
    "unitNoFeeAdded": "unit_no_fee_added",
}


class SwapContract(BaseModel):
    """Immutable value shape exchanged with the aggregation API.

    Python attributes are snake_case; the wire uses camelCase aliases.
    Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    # Fields this shape must never carry (set by fee variants)
    forbidden_fields: ClassVar[dict[str, str]] = {}
    variant_name: ClassVar[str] = ""

    @model_validator(mode="before")
    @classmethod
    def reject_foreign_variant_fields(cls, data: Any) -> Any:
        """Refuse input that carries the other swap direction's fee fields."""
        if not cls.forbidden_fields or not isinstance(data, dict):
            return data
        present = sorted(
            wire_name
            for wire_name, attr in cls.forbidden_fields.items()
            if wire_name in data or attr in data
        )
        if present:
            raise VariantMismatchError(cls.variant_name or cls.__name__, present)
        return data


class SellVariant(SwapContract):
    """Sell-side fee variant: rejects buy-only fields."""

    forbidden_fields: ClassVar[dict[str, str]] = BUY_ONLY_FIELDS
    variant_name: ClassVar[str] = "SELL"


class BuyVariant(SwapContract):
    """Buy-side fee variant: rejects sell-only fields."""

    forbidden_fields: ClassVar[dict[str, str]] = SELL_ONLY_FIELDS
    variant_name: ClassVar[str] = "BUY"
