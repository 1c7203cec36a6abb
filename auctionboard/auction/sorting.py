"""Orderings for the auction list view."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from .models import Auction, SortCriterion

# criterion -> (key, reverse); sorted() is stable in both directions
_ORDERINGS: dict[SortCriterion, tuple[Callable[[Auction], Any], bool]] = {
    SortCriterion.LATEST: (lambda auction: auction.created_at, True),
    SortCriterion.PRICE_LOW: (lambda auction: auction.current_bid, False),
    SortCriterion.PRICE_HIGH: (lambda auction: auction.current_bid, True),
    # Raw string comparison: "10d" sorts before "2d".
    SortCriterion.ENDING_SOON: (lambda auction: auction.time_left, False),
}


def parse_criterion(value: str | SortCriterion | None) -> SortCriterion | None:
    if isinstance(value, SortCriterion):
        return value
    try:
        return SortCriterion(value)
    except ValueError:
        return None


def sort_auctions(
    auctions: Iterable[Auction], criterion: str | SortCriterion | None
) -> list[Auction]:
    """Return a new list ordered by ``criterion``; unknown criteria keep input order."""
    ordered = list(auctions)
    known = parse_criterion(criterion)
    if known is None:
        return ordered
    key, reverse = _ORDERINGS[known]
    return sorted(ordered, key=key, reverse=reverse)
