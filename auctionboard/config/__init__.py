"""Configuration helpers for the auction board service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

_DEFAULT_SERVER_CONFIG = Path(__file__).resolve().parent / "server.yaml"


@dataclass(frozen=True)
class StoreConfig:
    backend: str
    seed_path: Path | None


@dataclass(frozen=True)
class DisplayConfig:
    currency: str
    default_sort: str


@dataclass(frozen=True)
class LoggingConfig:
    level: str


@dataclass(frozen=True)
class ServerConfig:
    listen: Mapping[str, Any]
    store: StoreConfig
    display: DisplayConfig
    logging: LoggingConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    return yaml.safe_load(path.read_text()) or {}


def _resolve_seed_path(raw: Any, base_dir: Path) -> Path | None:
    if not raw:
        return None
    path = Path(str(raw))
    if not path.is_absolute():
        path = base_dir / path
    return path


def load_server_config(path: Path) -> ServerConfig:
    data = _load_yaml(path)
    store = data.get("store", {})
    display = data.get("display", {})
    logging_section = data.get("logging", {})
    return ServerConfig(
        listen=data.get("listen", {}),
        store=StoreConfig(
            backend=str(store.get("backend", "in_memory")),
            seed_path=_resolve_seed_path(store.get("seed_path"), path.resolve().parent),
        ),
        display=DisplayConfig(
            currency=str(display.get("currency", "INR")).upper(),
            default_sort=str(display.get("default_sort", "latest")),
        ),
        logging=LoggingConfig(
            level=str(logging_section.get("level", "INFO")).upper(),
        ),
    )


@lru_cache(maxsize=1)
def get_server_config() -> ServerConfig:
    path = Path(os.getenv("AUCTIONBOARD_CONFIG_PATH", _DEFAULT_SERVER_CONFIG))
    return load_server_config(path)
