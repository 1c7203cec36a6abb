"""Bid acceptance rules."""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Integral, Real


def is_acceptable(current_bid: int | float, proposed_amount: object) -> bool:
    """Return True when ``proposed_amount`` strictly beats ``current_bid``.

    Anything that is not a finite real number (including bools, NaN and the
    infinities) is never acceptable.
    """
    if isinstance(proposed_amount, bool):
        return False
    if isinstance(proposed_amount, Decimal):
        if not proposed_amount.is_finite():
            return False
    elif isinstance(proposed_amount, Real):
        # ints are always finite and may be too large for a float
        if not isinstance(proposed_amount, Integral) and not math.isfinite(proposed_amount):
            return False
    else:
        return False
    return proposed_amount > current_bid


def minimum_bid(current_bid: int | float) -> int | float:
    return current_bid + 1
