"""Operational stats endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from ..config import ServerConfig
from ..display.currency import format_price
from ..store import AuctionStore

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_store(request: Request) -> AuctionStore:
    return request.app.state.store


def _get_config(request: Request) -> ServerConfig:
    return request.app.state.server_config


@router.get("/stats")
async def stats(
    store: AuctionStore = Depends(_get_store),
    config: ServerConfig = Depends(_get_config),
) -> dict[str, Any]:
    summary = store.stats()
    attempts = summary["accepted_bids"] + summary["rejected_bids"]
    rejection_rate = (summary["rejected_bids"] / attempts) if attempts else 0.0
    highest = summary["highest_current_bid"]
    return {
        **summary,
        "bid_rejection_rate": round(rejection_rate, 4),
        "highest_current_bid_display": (
            format_price(highest, config.display.currency) if highest is not None else None
        ),
    }
