"""In-memory auction store."""

from __future__ import annotations

import logging
from copy import deepcopy
from decimal import Decimal
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from ..auction.bidding import is_acceptable, minimum_bid
from ..auction.errors import InvalidBidError, NotFoundError
from ..auction.models import Auction, AuctionInput, SortCriterion
from ..auction.sorting import sort_auctions
from ..forms.parsing import parse_auction_form

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryAuctionStore:
    """Owns the auction collection; callers only ever receive copies."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._auctions: list[Auction] = []
        self._clock = clock or _utcnow
        self._accepted_bids = 0
        self._rejected_bids = 0

    def __len__(self) -> int:
        return len(self._auctions)

    def create(
        self,
        auction_input: AuctionInput | Mapping[str, Any],
        *,
        created_at: datetime | None = None,
    ) -> Auction:
        if not isinstance(auction_input, AuctionInput):
            auction_input = parse_auction_form(auction_input)
        auction = Auction(
            id=len(self._auctions) + 1,
            title=auction_input.title,
            description=auction_input.description,
            current_bid=auction_input.starting_bid,
            time_left=auction_input.time_left,
            image_url=auction_input.image_url,
            created_at=created_at or self._clock(),
        )
        self._auctions.append(auction)
        logger.info(
            f"Created auction {auction.id} '{auction.title}' starting at {auction.current_bid}"
        )
        return deepcopy(auction)

    def accept_bid(self, auction_id: int, amount: int | float | Decimal) -> Auction:
        auction = self._find(auction_id)
        if not is_acceptable(auction.current_bid, amount):
            self._rejected_bids += 1
            logger.warning(
                f"Rejected bid {amount!r} for auction {auction_id}; current bid is {auction.current_bid}"
            )
            raise InvalidBidError(
                auction_id,
                amount,
                current_bid=auction.current_bid,
                minimum_bid=minimum_bid(auction.current_bid),
            )
        if isinstance(amount, (float, Decimal)):
            amount = int(amount) if amount == int(amount) else float(amount)
        auction.current_bid = amount
        self._accepted_bids += 1
        logger.info(f"Accepted bid {amount} for auction {auction_id}")
        return deepcopy(auction)

    def sorted_view(self, criterion: str | SortCriterion | None) -> list[Auction]:
        return deepcopy(sort_auctions(self._auctions, criterion))

    def get(self, auction_id: int) -> Auction:
        return deepcopy(self._find(auction_id))

    def list_auctions(self) -> list[Auction]:
        return deepcopy(self._auctions)

    def stats(self) -> dict[str, Any]:
        highest = max((auction.current_bid for auction in self._auctions), default=None)
        return {
            "total_auctions": len(self._auctions),
            "accepted_bids": self._accepted_bids,
            "rejected_bids": self._rejected_bids,
            "highest_current_bid": highest,
        }

    def _find(self, auction_id: int) -> Auction:
        for auction in self._auctions:
            if auction.id == auction_id:
                return auction
        raise NotFoundError(auction_id)
