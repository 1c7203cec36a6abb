"""Checks the form schemas and the bundled seed file."""

from pathlib import Path
import json

import yaml
from jsonschema import Draft202012Validator

from auctionboard.auction.models import AuctionInput


PACKAGE_DIR = Path(__file__).resolve().parent.parent / "auctionboard"
SCHEMA_DIR = PACKAGE_DIR / "schemas"
SEED_PATH = PACKAGE_DIR / "config" / "seed_auctions.yaml"


def validate() -> None:
    for schema in SCHEMA_DIR.glob("*.json"):
        data = json.loads(schema.read_text())
        Draft202012Validator.check_schema(data)
    seed = yaml.safe_load(SEED_PATH.read_text()) or {}
    for item in seed.get("auctions", []):
        AuctionInput(
            title=item["title"],
            description=item["description"],
            starting_bid=int(item["starting_bid"]),
            image_url=item["image_url"],
            time_left=str(item["time_left"]),
        )


if __name__ == "__main__":
    validate()
