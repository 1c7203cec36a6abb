from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

import uvicorn
from fastapi import Body, Depends, FastAPI, HTTPException, Request, status

from .admin import config as admin_config
from .admin import health as admin_health
from .admin import stats as admin_stats
from .auction.bidding import minimum_bid
from .auction.errors import InvalidBidError, NotFoundError, ValidationError
from .auction.models import Auction
from .config import ServerConfig, get_server_config
from .display.currency import format_price
from .forms.parsing import parse_auction_form, parse_bid_form
from .session import sign_in as session_sign_in
from .store import AuctionStore, build_store
from .transport.responses import OrjsonResponse
from .validation.validator import SchemaRegistry, get_schema_registry


@asynccontextmanager
async def lifespan(app: FastAPI):
    server_config = get_server_config()
    logging.basicConfig(level=server_config.logging.level)
    schema_registry = get_schema_registry()
    store = build_store(server_config)

    app.state.server_config = server_config
    app.state.schema_registry = schema_registry
    app.state.store = store
    app.state.start_time = datetime.now(timezone.utc)

    yield


app = FastAPI(
    title="Auction Board",
    version="1.0.0",
    docs_url="/docs",
    lifespan=lifespan,
    default_response_class=OrjsonResponse,
)

app.include_router(admin_health.router)
app.include_router(admin_stats.router)
app.include_router(admin_config.router)
app.include_router(session_sign_in.router)


# Dependency helpers ---------------------------------------------------------


def get_server_settings(request: Request) -> ServerConfig:
    return request.app.state.server_config


def get_schema_service(request: Request) -> SchemaRegistry:
    return request.app.state.schema_registry


def get_store(request: Request) -> AuctionStore:
    return request.app.state.store


# Routes ---------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root(settings: ServerConfig = Depends(get_server_settings)) -> dict[str, Any]:
    return {
        "service": "auctionboard",
        "version": app.version,
        "store": {"backend": settings.store.backend},
        "display": {
            "currency": settings.display.currency,
            "default_sort": settings.display.default_sort,
        },
    }


@app.get("/ping", tags=["meta"])
async def ping() -> dict[str, Any]:
    return {"status": "ok", "version": app.version}


@app.get("/auctions", tags=["auctions"])
async def list_auctions(
    sort: str | None = None,
    store: AuctionStore = Depends(get_store),
    settings: ServerConfig = Depends(get_server_settings),
) -> dict[str, Any]:
    criterion = sort or settings.display.default_sort
    auctions = store.sorted_view(criterion)
    return {
        "sort": criterion,
        "auctions": [serialize_auction(auction, settings.display.currency) for auction in auctions],
    }


@app.get("/auctions/{auction_id}", tags=["auctions"])
async def get_auction(
    auction_id: int,
    store: AuctionStore = Depends(get_store),
    settings: ServerConfig = Depends(get_server_settings),
) -> dict[str, Any]:
    try:
        auction = store.get(auction_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return serialize_auction(auction, settings.display.currency)


@app.post("/auctions", tags=["auctions"], status_code=status.HTTP_201_CREATED)
async def create_auction(
    payload: dict[str, Any] = Body(...),
    store: AuctionStore = Depends(get_store),
    schemas: SchemaRegistry = Depends(get_schema_service),
    settings: ServerConfig = Depends(get_server_settings),
) -> dict[str, Any]:
    try:
        auction_input = parse_auction_form(payload, schemas)
        auction = store.create(auction_input)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=validation_detail(exc)) from exc
    return serialize_auction(auction, settings.display.currency)


@app.post("/auctions/{auction_id}/bids", tags=["auctions"])
async def place_bid(
    auction_id: int,
    payload: dict[str, Any] = Body(...),
    store: AuctionStore = Depends(get_store),
    schemas: SchemaRegistry = Depends(get_schema_service),
    settings: ServerConfig = Depends(get_server_settings),
) -> dict[str, Any]:
    currency = settings.display.currency
    try:
        amount = parse_bid_form(payload, schemas)
        auction = store.accept_bid(auction_id, amount)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=validation_detail(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except InvalidBidError as exc:
        raise HTTPException(
            status_code=409,
            detail={
                "message": f"Bid must be at least {format_price(exc.minimum_bid, currency)}",
                "current_bid": exc.current_bid,
                "minimum_bid": exc.minimum_bid,
                "minimum_bid_display": format_price(exc.minimum_bid, currency),
            },
        ) from exc
    return serialize_auction(auction, currency)


def validation_detail(exc: ValidationError) -> dict[str, Any]:
    return {"message": exc.message, "field": exc.field}


def serialize_auction(auction: Auction, currency: str) -> dict[str, Any]:
    floor = minimum_bid(auction.current_bid)
    created_at = auction.created_at.astimezone(timezone.utc)
    return {
        "id": auction.id,
        "title": auction.title,
        "description": auction.description,
        "current_bid": auction.current_bid,
        "current_bid_display": format_price(auction.current_bid, currency),
        "minimum_bid": floor,
        "minimum_bid_display": format_price(floor, currency),
        "time_left": auction.time_left,
        "image_url": auction.image_url,
        "created_at": created_at.isoformat().replace("+00:00", "Z"),
    }


if __name__ == "__main__":
    listen = get_server_config().listen
    uvicorn.run(app, host=listen.get("host", "localhost"), port=int(listen.get("port", 8000)))
