from __future__ import annotations

import logging
from typing import Any, List, Mapping

from sales_report.aggregate import accumulate_purchases
from sales_report.errors import InvalidInputError
from sales_report.indexer import build_indexes
from sales_report.model import ReportRow, SalesReport
from sales_report.options import AnalysisOptions, validate_options
from sales_report.ranking import build_report_rows

logger = logging.getLogger(__name__)

DATASETS = ("sellers", "products", "purchase_records")


def run_sales_report(
    data: Mapping[str, Any] | None,
    options: AnalysisOptions | None = None,
) -> SalesReport:
    """Build the per-seller report together with aggregation counters.

    Options are checked first; each stage then converts its own dataset in a
    single pass, and every receipt is converted before any seller total is
    touched. An :class:`InvalidInputError` means nothing was computed.
    """

    if options is None:
        options = AnalysisOptions()
    options = validate_options(options)

    # 1. Validate the top-level payload
    if not isinstance(data, Mapping):
        raise InvalidInputError("Sales data must be a mapping of datasets")
    missing = [name for name in DATASETS if name not in data]
    if missing:
        raise InvalidInputError(f"Sales data is missing dataset(s): {missing}")

    # 2. Index reference data
    seller_index, product_index = build_indexes(data["sellers"], data["products"])

    # 3. Accumulate receipts
    stats = accumulate_purchases(
        data["purchase_records"],
        seller_index,
        product_index,
        options.calculate_revenue,
        revenue_source=options.revenue_source,
    )

    # 4. Rank and format
    rows = build_report_rows(
        seller_index,
        options.calculate_bonus,
        top_products_limit=options.top_products_limit,
    )

    logger.info(
        "Sales report built: %d sellers, %d products, %d receipts "
        "(%d skipped receipts, %d skipped items)",
        len(seller_index),
        len(product_index),
        stats.processed_records + stats.skipped_records,
        stats.skipped_records,
        stats.skipped_items,
    )
    return SalesReport(rows=rows, stats=stats)


def analyze_sales_data(
    data: Mapping[str, Any] | None,
    options: AnalysisOptions | None = None,
) -> List[ReportRow]:
    """Return one report row per seller, ordered by profit descending."""
    return run_sales_report(data, options).rows


__all__ = ["analyze_sales_data", "run_sales_report"]
