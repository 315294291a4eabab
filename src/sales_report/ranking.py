"""Ranking of sellers by profit and construction of report rows."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Mapping, Tuple

from sales_report.errors import InvalidInputError
from sales_report.model import ReportRow, SellerStats, TopProduct
from sales_report.options import TOP_PRODUCTS_LIMIT
from sales_report.strategies import BonusStrategy

MONEY_QUANTUM = Decimal("0.01")


def round_money(value: float | Decimal) -> float:
    """Round to cents, half away from zero.

    Any real number is accepted (``Fraction``, ``numpy.float64``...). Floats
    go through ``repr`` so ``2.675`` rounds to ``2.68`` rather than following
    its binary approximation down to ``2.67``.
    """
    if not isinstance(value, Decimal):
        value = Decimal(repr(float(value)))
    rounded = value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
    return float(rounded) + 0.0  # Drop negative zero


def top_products(
    products_sold: Mapping[str, float], limit: int = TOP_PRODUCTS_LIMIT
) -> Tuple[TopProduct, ...]:
    """Best sellers by quantity; equal quantities keep discovery order."""
    ordered = sorted(products_sold.items(), key=lambda pair: pair[1], reverse=True)
    return tuple(TopProduct(sku=sku, quantity=qty) for sku, qty in ordered[:limit])


def rank_sellers(seller_index: Mapping[str, SellerStats]) -> List[SellerStats]:
    # sorted() is stable, so equal profits keep seller list order
    return sorted(seller_index.values(), key=lambda s: s.profit, reverse=True)


def build_report_rows(
    seller_index: Mapping[str, SellerStats],
    calculate_bonus: BonusStrategy,
    *,
    top_products_limit: int = TOP_PRODUCTS_LIMIT,
) -> List[ReportRow]:
    """Rank sellers, compute bonuses and emit rounded report rows."""

    if not callable(calculate_bonus):
        raise InvalidInputError("Bonus strategy is not callable")

    ranked = rank_sellers(seller_index)
    total = len(ranked)

    rows: List[ReportRow] = []
    for index, seller in enumerate(ranked):
        bonus = calculate_bonus(index, total, seller)
        rows.append(
            ReportRow(
                seller_id=seller.id,
                name=seller.name,
                revenue=round_money(seller.revenue),
                profit=round_money(seller.profit),
                sales_count=seller.sales_count,
                top_products=top_products(seller.products_sold, top_products_limit),
                bonus=round_money(bonus),
            )
        )
    return rows


__all__ = ["build_report_rows", "rank_sellers", "round_money", "top_products"]
