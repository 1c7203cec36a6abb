"""Shared auction data structures."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .errors import ValidationError


# Largest amount a JSON client can round-trip exactly (2**53 - 1).
MAX_AMOUNT = 9_007_199_254_740_991


class SortCriterion(str, Enum):
    LATEST = "latest"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    ENDING_SOON = "ending-soon"


@dataclass
class Auction:
    id: int
    title: str
    description: str
    current_bid: int | float
    time_left: str
    image_url: str
    created_at: datetime


_TEXT_FIELDS = ("title", "description", "image_url", "time_left")


@dataclass(frozen=True)
class AuctionInput:
    """Validated creation input; strings are stored trimmed."""

    title: str
    description: str
    starting_bid: int
    image_url: str
    time_left: str

    def __post_init__(self) -> None:
        for name in _TEXT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValidationError(f"{name} must be a string", field=name)
            trimmed = value.strip()
            if not trimmed:
                raise ValidationError(f"{name} is required", field=name)
            object.__setattr__(self, name, trimmed)
        bid = self.starting_bid
        if isinstance(bid, bool) or not isinstance(bid, int):
            raise ValidationError("starting_bid must be an integer", field="starting_bid")
        if bid < 0:
            raise ValidationError("starting_bid must not be negative", field="starting_bid")
        if bid > MAX_AMOUNT:
            raise ValidationError(
                f"starting_bid must not exceed {MAX_AMOUNT}", field="starting_bid"
            )
