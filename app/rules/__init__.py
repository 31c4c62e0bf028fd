"""
Receipt points engine.

Runs every registered rule over a receipt and adds up the results.
"""
import logging

from app.rules.checks import POINT_RULES
from app.schemas import Receipt

logger = logging.getLogger(__name__)


def score_breakdown(receipt: Receipt) -> dict[str, int]:
    """Return the points contributed by each rule, keyed by rule name."""
    return {rule.__name__: rule(receipt) for rule in POINT_RULES}


def calculate_points(receipt: Receipt) -> int:
    """Compute the loyalty points for ``receipt``. Never raises."""
    breakdown = score_breakdown(receipt)
    points = sum(breakdown.values())
    logger.debug("Points breakdown: %s  total=%d", breakdown, points)
    return points
