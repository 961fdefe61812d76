"""Exceptions raised by the swap data model."""

from typing import Optional


class SwapModelError(Exception):
    """Base class for swap data model errors."""

    pass


class AmountError(SwapModelError, ValueError):
    """Raised when an on-chain amount or numeric string is malformed."""

    pass


class PercentageError(SwapModelError, ValueError):
    """Raised when split percentages do not add up to 100."""

    pass


class VariantMismatchError(SwapModelError, ValueError):
    """Raised when a quote mixes sell-side and buy-side fee fields."""

    def __init__(self, variant: str, fields: list[str], message: Optional[str] = None):
        self.variant = variant
        self.fields = fields
        super().__init__(message or f"{variant} quote cannot carry {', '.join(fields)}")


class APIRequestError(SwapModelError):
    """Error reported by the aggregation API.

    Wraps the APIError shape so callers always have a message and,
    when the transport knows it, the HTTP status.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        self.message = message
        self.status = status
        super().__init__(f"[{status}] {message}" if status is not None else message)

    @classmethod
    def from_payload(cls, payload: object, status: Optional[int] = None) -> "APIRequestError":
        """Build from an error response body."""
        # Local import: parsing depends on the contracts, which depend on this module
        from swapmodel.parsing import parse_api_error

        error = parse_api_error(payload, status=status)
        return cls(error.message, error.status)
