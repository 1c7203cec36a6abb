"""Auction store factory."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Protocol

import yaml

from ..auction.models import Auction, AuctionInput, SortCriterion
from ..config import ServerConfig
from .in_memory import InMemoryAuctionStore

logger = logging.getLogger(__name__)


class AuctionStore(Protocol):
    def __len__(self) -> int: ...

    def create(
        self,
        auction_input: AuctionInput | Mapping[str, Any],
        *,
        created_at: datetime | None = None,
    ) -> Auction: ...

    def accept_bid(self, auction_id: int, amount: int | float) -> Auction: ...

    def sorted_view(self, criterion: str | SortCriterion | None) -> list[Auction]: ...

    def get(self, auction_id: int) -> Auction: ...

    def list_auctions(self) -> list[Auction]: ...

    def stats(self) -> dict[str, Any]: ...


def _parse_created_at(value: Any) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def seed_store(store: AuctionStore, seed_path: Path) -> int:
    """Load auctions from a YAML seed file; returns how many were created."""
    data = yaml.safe_load(seed_path.read_text()) or {}
    created = 0
    for item in data.get("auctions", []):
        auction_input = AuctionInput(
            title=item["title"],
            description=item["description"],
            starting_bid=int(item["starting_bid"]),
            image_url=item["image_url"],
            time_left=str(item["time_left"]),
        )
        store.create(auction_input, created_at=_parse_created_at(item.get("created_at")))
        created += 1
    logger.info(f"Seeded {created} auctions from {seed_path}")
    return created


def build_store(config: ServerConfig) -> AuctionStore:
    backend = config.store.backend
    if backend != "in_memory":
        raise ValueError(f"unknown store backend {backend}")
    store = InMemoryAuctionStore()
    if config.store.seed_path is not None:
        seed_store(store, config.store.seed_path)
    return store
