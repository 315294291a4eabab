"""Aggregation of receipts into per-seller statistics."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from sales_report.coerce import coerce_all, coerce_purchase_record, index_key
from sales_report.errors import InvalidInputError
from sales_report.model import AggregationStats, Product, RevenueSource, SellerStats
from sales_report.strategies import RevenueStrategy

logger = logging.getLogger(__name__)


def accumulate_purchases(
    purchase_records: Iterable[object],
    seller_index: Mapping[str, SellerStats],
    product_index: Mapping[str, Product],
    calculate_revenue: RevenueStrategy,
    *,
    revenue_source: RevenueSource = "items",
) -> AggregationStats:
    """Fold every receipt into the matching seller's running totals.

    Receipts for unknown sellers are skipped entirely. Line items for unknown
    skus are skipped but the receipt still counts toward ``sales_count``.
    Revenue comes from ``calculate_revenue`` per line item, or from the
    receipt's ``total_amount`` when ``revenue_source="receipt_total"``; profit
    always uses the per-item revenue.
    """

    if not callable(calculate_revenue):
        raise InvalidInputError("Revenue strategy is not callable")
    # Convert everything before mutating any seller
    records = coerce_all(purchase_records, "purchase_records", coerce_purchase_record)

    stats = AggregationStats()
    use_receipt_total = revenue_source == "receipt_total"

    for record in records:
        seller = seller_index.get(index_key(record.seller_id))
        if seller is None:
            logger.debug("Skipping receipt for unknown seller %s", record.seller_id)
            stats.skipped_records += 1
            continue

        stats.processed_records += 1
        seller.sales_count += 1
        if use_receipt_total:
            seller.revenue += record.total_amount

        for item in record.items:
            product = product_index.get(index_key(item.sku))
            if product is None:
                logger.debug(
                    "Skipping item with unknown sku %s (seller %s)",
                    item.sku,
                    seller.id,
                )
                stats.skipped_items += 1
                continue

            revenue = calculate_revenue(item, product)
            cost = product.purchase_price * item.quantity

            if not use_receipt_total:
                seller.revenue += revenue
            seller.profit += revenue - cost
            seller.products_sold[item.sku] = (
                seller.products_sold.get(item.sku, 0) + item.quantity
            )

    return stats


__all__ = ["accumulate_purchases"]
