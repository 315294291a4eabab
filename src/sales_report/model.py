"""Domain models for the seller performance report.

These dataclasses represent the entities shared throughout the pipeline:
reference data (sellers, products), receipts with their line items, the
per-seller accumulator filled during aggregation and the final report rows.
"""

from __future__ import annotations  # Postponed evaluation of annotations (PEP 563)

from dataclasses import dataclass, field  # Dataclass utilities
from typing import Any, Dict, Hashable, Literal, Mapping, Tuple, Union

RevenueSource = Literal["items", "receipt_total"]  # What feeds SellerStats.revenue
Quantity = Union[int, float]  # Integer quantities are kept as given


@dataclass(slots=True, frozen=True)
class Seller:
    """A seller from the directory."""

    id: Hashable  # Unique seller identifier, as given
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(slots=True, frozen=True)
class Product:
    """Catalog entry with its cost basis.

    ``attributes`` keeps any extra catalog fields (sale price, category...)
    so that custom revenue strategies can use them.
    """

    sku: Hashable  # Stock-keeping identifier
    purchase_price: float  # Cost basis per unit
    attributes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class LineItem:
    """A single product line within a receipt."""

    sku: Hashable
    quantity: Quantity
    sale_price: float
    discount: float = 0.0  # Percent, 0-100


@dataclass(slots=True, frozen=True)
class PurchaseRecord:
    """One receipt recorded by one seller."""

    seller_id: Hashable
    items: Tuple[LineItem, ...]
    total_amount: float = 0.0  # Stated receipt total
    attributes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SellerStats:
    """Running totals for one seller, mutated only during aggregation."""

    id: Hashable
    name: str  # "First Last"
    revenue: float = 0.0
    profit: float = 0.0
    sales_count: int = 0  # Number of receipts
    products_sold: Dict[Hashable, Quantity] = field(
        default_factory=dict
    )  # catalog sku -> quantity

    def __str__(self) -> str:
        return (
            f"seller(id={self.id}, name={self.name}, "
            f"revenue={self.revenue}, profit={self.profit})"
        )


@dataclass(slots=True, frozen=True)
class TopProduct:
    sku: Hashable
    quantity: Quantity


@dataclass(slots=True, frozen=True)
class ReportRow:
    """Final, rounded figures for one seller in rank order."""

    seller_id: Hashable
    name: str
    revenue: float
    profit: float
    sales_count: int
    top_products: Tuple[TopProduct, ...]
    bonus: float


@dataclass(slots=True)
class AggregationStats:
    """Counters describing what the aggregation stage consumed or skipped."""

    processed_records: int = 0
    skipped_records: int = 0  # Unknown seller_id
    skipped_items: int = 0  # Unknown sku


@dataclass(slots=True)
class SalesReport:
    """Groups the report rows with the aggregation counters."""

    rows: list[ReportRow] = field(default_factory=list)
    stats: AggregationStats = field(default_factory=AggregationStats)


__all__ = [
    "AggregationStats",
    "LineItem",
    "Product",
    "PurchaseRecord",
    "ReportRow",
    "Quantity",
    "RevenueSource",
    "SalesReport",
    "Seller",
    "SellerStats",
    "TopProduct",
]
