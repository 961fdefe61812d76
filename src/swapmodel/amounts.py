"""String-encoded numeric types for on-chain quantities.

Token amounts routinely exceed 2^53, so they travel as decimal strings and
are only turned into Python ints (arbitrary precision) at the point where
arithmetic happens. Rates, percents and USD values use NumberString, which
allows a fractional part.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Union

from pydantic import BeforeValidator

from swapmodel.constants import MAX_UINT256
from swapmodel.errors import AmountError

_UINT_RE = re.compile(r"[0-9]+")
_NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def parse_amount(value: Union[str, int]) -> int:
    """Parse a decimal-string unsigned integer into an int.

    Raises:
        AmountError: If the value is not a uint256 in decimal form
    """
    if isinstance(value, bool):
        raise AmountError(f"Invalid amount: {value!r}")
    if isinstance(value, int):
        amount = value
    elif isinstance(value, str) and _UINT_RE.fullmatch(value):
        amount = int(value)
    else:
        raise AmountError(f"Invalid amount: {value!r} (expected decimal digits)")

    if amount < 0:
        raise AmountError(f"Amount cannot be negative: {value!r}")
    if amount > MAX_UINT256:
        raise AmountError(f"Amount exceeds uint256: {value!r}")
    return amount


def format_amount(value: int) -> str:
    """Format an int amount as its decimal string."""
    return str(parse_amount(value))


def parse_number(value: Union[str, int, float, Decimal]) -> Decimal:
    """Parse a rate, percent or USD value into a Decimal."""
    if isinstance(value, bool):
        raise AmountError(f"Invalid number: {value!r}")
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise AmountError(f"Invalid number: {value!r}")
        # repr gives the shortest string that round-trips the float
        value = repr(value)
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, str) and value != value.strip():
        raise AmountError(f"Invalid number: {value!r} (surrounding whitespace)")
    try:
        number = Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise AmountError(f"Invalid number: {value!r}") from e
    if not number.is_finite():
        raise AmountError(f"Invalid number: {value!r}")
    return number


def _validate_amount(value: Any) -> str:
    if isinstance(value, str):
        parse_amount(value)
        return value
    return format_amount(value)


def _validate_number(value: Any) -> str:
    if isinstance(value, str) and _NUMBER_RE.fullmatch(value):
        return value
    # Exponent forms and floats are normalised to plain notation
    return format(parse_number(value), "f")


# Token amount, allowance, fee or gas value as a decimal string
Amount = Annotated[str, BeforeValidator(_validate_amount)]

# Rate, percent or USD value as a decimal string
NumberString = Annotated[str, BeforeValidator(_validate_number)]
