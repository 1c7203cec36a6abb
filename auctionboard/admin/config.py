"""Expose currently loaded server config for debugging."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ..auction.models import SortCriterion
from ..config import ServerConfig

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_config(request: Request) -> ServerConfig:
    return request.app.state.server_config


@router.get("/config")
async def config(
    request: Request,
    config: ServerConfig = Depends(_get_config),
) -> dict:
    seed_path = config.store.seed_path
    return {
        "version": request.app.version,
        "store_backend": config.store.backend,
        "seed_path": str(seed_path) if seed_path else None,
        "display_currency": config.display.currency,
        "default_sort": config.display.default_sort,
        "sort_criteria": [criterion.value for criterion in SortCriterion],
        "log_level": config.logging.level,
    }
