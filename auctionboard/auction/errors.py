"""Typed failures raised by the auction store and its input boundary."""

from __future__ import annotations


class AuctionError(Exception):
    """Base class for auction-specific errors."""


class ValidationError(AuctionError, ValueError):
    """Raised when creation input or a bid amount fails boundary checks."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class NotFoundError(AuctionError, KeyError):
    """Raised when an auction id does not exist in the store."""

    def __init__(self, auction_id: int) -> None:
        super().__init__(f"auction {auction_id} not found")
        self.auction_id = auction_id

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidBidError(AuctionError, ValueError):
    """Raised when a bid does not beat the auction's current bid."""

    def __init__(
        self,
        auction_id: int,
        amount: object,
        current_bid: int | float,
        minimum_bid: int | float,
    ) -> None:
        super().__init__(
            f"bid {amount!r} for auction {auction_id} must be at least {minimum_bid}"
        )
        self.auction_id = auction_id
        self.amount = amount
        self.current_bid = current_bid
        self.minimum_bid = minimum_bid
