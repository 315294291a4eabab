"""Run configuration for the sales report pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from sales_report.errors import InvalidInputError
from sales_report.model import RevenueSource
from sales_report.strategies import (
    BonusStrategy,
    RevenueStrategy,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
)

TOP_PRODUCTS_LIMIT = 10  # Products listed per seller
REVENUE_SOURCES = ("items", "receipt_total")


@dataclass(slots=True, frozen=True)
class AnalysisOptions:
    """Strategies and knobs passed to :func:`analyze_sales_data`."""

    calculate_revenue: RevenueStrategy = calculate_simple_revenue
    calculate_bonus: BonusStrategy = calculate_bonus_by_profit
    top_products_limit: int = TOP_PRODUCTS_LIMIT
    revenue_source: RevenueSource = "items"


def validate_options(options: object) -> AnalysisOptions:
    """Return ``options`` if usable, otherwise raise :class:`InvalidInputError`."""

    if not isinstance(options, AnalysisOptions):
        raise InvalidInputError("Options must be an AnalysisOptions instance")
    if not callable(options.calculate_revenue):
        raise InvalidInputError("Revenue strategy is not callable")
    if not callable(options.calculate_bonus):
        raise InvalidInputError("Bonus strategy is not callable")
    limit = options.top_products_limit
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidInputError(
            f"top_products_limit must be a positive integer, got {limit!r}"
        )
    if options.revenue_source not in REVENUE_SOURCES:
        raise InvalidInputError(
            f"revenue_source must be one of {REVENUE_SOURCES}, "
            f"got {options.revenue_source!r}"
        )
    return options


__all__ = ["AnalysisOptions", "TOP_PRODUCTS_LIMIT", "validate_options"]
