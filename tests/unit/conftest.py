"""Shared fixtures for auction store tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from auctionboard.auction.models import AuctionInput
from auctionboard.store.in_memory import InMemoryAuctionStore


class FakeClock:
    """Clock that advances one minute per call so creation order is observable."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 3, 16, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(minutes=1)
        return self.now


def _build_input(title: str, starting_bid: int, time_left: str = "2d 5h") -> AuctionInput:
    return AuctionInput(
        title=title,
        description=f"{title} description",
        starting_bid=starting_bid,
        image_url=f"https://example.com/{title.lower().replace(' ', '-')}.jpg",
        time_left=time_left,
    )


@pytest.fixture
def make_input():
    """Factory for valid ``AuctionInput`` values."""
    return _build_input


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InMemoryAuctionStore(clock=clock)


@pytest.fixture
def scenario_store(store):
    """Store holding auctions priced 12500, 45000, 25000 created in that order."""
    store.create(_build_input("Vintage Leather Watch", 12500, "2d 5h"))
    store.create(_build_input("Antique Bronze Statue", 45000, "1d 12h"))
    store.create(_build_input("Modern Art Painting", 25000, "3d 8h"))
    return store
