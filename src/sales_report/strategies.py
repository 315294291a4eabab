"""Default calculation strategies.

A revenue strategy maps ``(line_item, product)`` to the money received for
that line. A bonus strategy maps ``(rank_index, total_sellers, seller)`` to
the seller's bonus. Both must be pure functions.
"""

from __future__ import annotations

from typing import Callable

from sales_report.model import LineItem, Product, SellerStats

RevenueStrategy = Callable[[LineItem, Product], float]
BonusStrategy = Callable[[int, int, SellerStats], float]

FIRST_PLACE_RATE = 0.15
PODIUM_RATE = 0.10  # Ranks 1 and 2
LAST_PLACE_RATE = 0.0
DEFAULT_RATE = 0.05


def calculate_simple_revenue(item: LineItem, _product: Product) -> float:
    """Return ``sale_price * quantity`` reduced by the percentage discount."""
    discount_coefficient = 1 - item.discount / 100
    return item.sale_price * item.quantity * discount_coefficient


def bonus_rate(index: int, total: int) -> float:
    """Rate for a 0-based rank.

    Checks run in order: first place, podium, last place, everyone else.
    A single seller is both first and last and gets the first-place rate.
    """
    if index == 0:
        return FIRST_PLACE_RATE
    if index in (1, 2):
        return PODIUM_RATE
    if index == total - 1:
        return LAST_PLACE_RATE
    return DEFAULT_RATE


def calculate_bonus_by_profit(index: int, total: int, seller: SellerStats) -> float:
    return seller.profit * bonus_rate(index, total)


__all__ = [
    "BonusStrategy",
    "RevenueStrategy",
    "bonus_rate",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
]
