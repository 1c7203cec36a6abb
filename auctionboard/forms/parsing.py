"""Conversion of raw, string-typed form fields into typed store input."""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from jsonschema import ValidationError as SchemaValidationError

from ..auction.errors import ValidationError
from ..auction.models import MAX_AMOUNT, AuctionInput
from ..validation.validator import SchemaRegistry, get_schema_registry

_INTEGER_PATTERN = re.compile(r"\d+")

# form field -> AuctionInput attribute
CREATE_FIELDS = {
    "title": "title",
    "description": "description",
    "startingBid": "starting_bid",
    "imageUrl": "image_url",
    "timeLeft": "time_left",
}


def _schema_error(exc: SchemaValidationError, default_field: str | None) -> ValidationError:
    field = default_field
    if exc.absolute_path:
        field = str(exc.absolute_path[0])
    elif exc.validator == "required":
        missing = re.search(r"'([^']+)' is a required property", exc.message)
        if missing:
            field = missing.group(1)
    return ValidationError(exc.message, field=field)


def _validate(
    schemas: SchemaRegistry | None, schema_name: str, payload: Any, default_field: str | None = None
) -> None:
    registry = schemas or get_schema_registry()
    try:
        registry.validate(schema_name, payload)
    except SchemaValidationError as exc:
        raise _schema_error(exc, default_field) from exc


def parse_starting_bid(raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValidationError("startingBid must be a non-negative integer", field="startingBid")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip() if raw is not None else ""
        if not text:
            raise ValidationError("startingBid is required", field="startingBid")
        if not _INTEGER_PATTERN.fullmatch(text):
            raise ValidationError(
                "startingBid must be a non-negative integer", field="startingBid"
            )
        value = int(text)
    if value < 0:
        raise ValidationError("startingBid must be a non-negative integer", field="startingBid")
    if value > MAX_AMOUNT:
        raise ValidationError(f"startingBid must not exceed {MAX_AMOUNT}", field="startingBid")
    return value


def parse_auction_form(
    payload: Mapping[str, Any], schemas: SchemaRegistry | None = None
) -> AuctionInput:
    """Validate a raw create-auction form and build an ``AuctionInput``."""
    _validate(schemas, "auction_create", payload)
    values: dict[str, Any] = {}
    for form_field, attribute in CREATE_FIELDS.items():
        raw = payload[form_field]
        if form_field == "startingBid":
            values[attribute] = parse_starting_bid(raw)
            continue
        text = raw.strip()
        if not text:
            raise ValidationError(f"{form_field} is required", field=form_field)
        values[attribute] = text
    return AuctionInput(**values)


def parse_bid_amount(raw: Any) -> int | float:
    """Parse a bid amount from a number or numeric string.

    Integral amounts come back as ``int``; NaN, the infinities, bools and
    negative values are rejected, as is anything above ``MAX_AMOUNT``.
    """
    if isinstance(raw, bool) or raw is None:
        raise ValidationError("amount must be a number", field="amount")
    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and not math.isfinite(raw):
            raise ValidationError("amount must be a finite number", field="amount")
        value = Decimal(raw)
    else:
        text = str(raw).strip()
        if not text:
            raise ValidationError("amount is required", field="amount")
        try:
            value = Decimal(text)
        except InvalidOperation as exc:
            raise ValidationError("amount must be a number", field="amount") from exc
        if not value.is_finite():
            raise ValidationError("amount must be a finite number", field="amount")
    if value < 0:
        raise ValidationError("amount must not be negative", field="amount")
    if value > MAX_AMOUNT:
        raise ValidationError(f"amount must not exceed {MAX_AMOUNT}", field="amount")
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def parse_bid_form(payload: Mapping[str, Any], schemas: SchemaRegistry | None = None) -> int | float:
    _validate(schemas, "bid_submit", payload, default_field="amount")
    return parse_bid_amount(payload["amount"])
