"""Currency formatting for auction prices (Indian rupees, whole units)."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

RUPEE_SYMBOL = "₹"

CURRENCY_SYMBOLS = {
    "INR": RUPEE_SYMBOL,
}


def group_indian(digits: str) -> str:
    """Group a digit string the Indian way: 1234567 -> 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount: int | float | Decimal) -> str:
    whole = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if whole < 0 else ""
    return f"{sign}{RUPEE_SYMBOL}{group_indian(str(abs(int(whole))))}"


def format_price(amount: int | float | Decimal, currency: str = "INR") -> str:
    if currency.upper() not in CURRENCY_SYMBOLS:
        raise ValueError(f"unsupported display currency {currency}")
    return format_inr(amount)
