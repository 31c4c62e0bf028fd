"""
Deterministic point rules.

Each rule takes a receipt and returns the points it contributes.
Rules are independent of each other; the score is their sum.
"""
from __future__ import annotations

import math

from app.rules.parsing import parse_date_parts, parse_time_parts
from app.schemas import Receipt

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
DESCRIPTION_MULTIPLE = 3
DESCRIPTION_PRICE_FACTOR = 0.2
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16


def _is_ascii_alnum(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or ("0" <= c <= "9")


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def retailer_alnum(receipt: Receipt) -> int:
    """One point per ASCII letter or digit in the retailer name."""
    return sum(1 for c in receipt.retailer if _is_ascii_alnum(c))


def round_dollar(receipt: Receipt) -> int:
    """Total has no cents."""
    if receipt.total == float(int(receipt.total)):
        return ROUND_DOLLAR_POINTS
    return 0


def quarter_multiple(receipt: Receipt) -> int:
    """Total is a multiple of 0.25, judged on ``int(total * 4)``.

    Scored independently of :func:`round_dollar`, so a round total earns both.
    A total too large to quadruple without overflowing scores nothing.
    """
    quarters = receipt.total * 4
    if math.isfinite(quarters) and int(quarters) % 4 == 0:
        return QUARTER_MULTIPLE_POINTS
    return 0


def item_pairs(receipt: Receipt) -> int:
    """Five points for every two items."""
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def description_length(receipt: Receipt) -> int:
    """``price * 0.2`` rounded half up, for items whose raw description
    length is a multiple of three.

    Rounding is ``int(x + 0.5)``, which truncates toward zero and is only
    round-half-up for non-negative prices.
    """
    points = 0
    for item in receipt.items:
        if len(item.description) % DESCRIPTION_MULTIPLE == 0:
            points += int(item.price * DESCRIPTION_PRICE_FACTOR + 0.5)
    return points


def odd_day(receipt: Receipt) -> int:
    _, _, day = parse_date_parts(receipt.purchase_date)
    if day % 2 != 0:
        return ODD_DAY_POINTS
    return 0


def afternoon_window(receipt: Receipt) -> int:
    """Purchased between 14:00 and 15:59."""
    hour, _ = parse_time_parts(receipt.purchase_time)
    if AFTERNOON_START_HOUR <= hour < AFTERNOON_END_HOUR:
        return AFTERNOON_POINTS
    return 0


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

POINT_RULES = [
    retailer_alnum,
    round_dollar,
    quarter_multiple,
    item_pairs,
    description_length,
    odd_day,
    afternoon_window,
]
