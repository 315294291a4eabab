from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

from sales_report.model import AggregationStats, ReportRow, SalesReport, TopProduct


def iso_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _serialise_product(product: TopProduct) -> Dict[str, Any]:
    return {"sku": product.sku, "quantity": product.quantity}


def serialise_row(row: ReportRow) -> Dict[str, Any]:
    return {
        "seller_id": row.seller_id,
        "name": row.name,
        "revenue": row.revenue,
        "profit": row.profit,
        "sales_count": row.sales_count,
        "top_products": [_serialise_product(p) for p in row.top_products],
        "bonus": row.bonus,
    }


def rows_to_payload(rows: Iterable[ReportRow]) -> List[Dict[str, Any]]:
    """Plain list-of-dicts form of the report, in rank order."""
    return [serialise_row(row) for row in rows]


def _serialise_stats(stats: AggregationStats) -> Dict[str, int]:
    return {
        "processed_records": stats.processed_records,
        "skipped_records": stats.skipped_records,
        "skipped_items": stats.skipped_items,
    }


def build_report_payload(report: SalesReport) -> Dict[str, Any]:
    """Build a JSON-ready payload with the rows and aggregation counters."""

    return {
        "status": "success",
        "timestamp": iso_timestamp(),
        "seller_count": len(report.rows),
        "stats": _serialise_stats(report.stats),
        "sellers": rows_to_payload(report.rows),
    }


__all__ = ["build_report_payload", "rows_to_payload", "serialise_row"]
