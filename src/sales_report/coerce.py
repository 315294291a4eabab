"""Coercion of raw in-memory datasets into domain models.

Each dataset arrives as a list whose elements are either plain mappings with
the documented keys or already-built model instances. Everything is converted
up front so that a malformed element aborts the run before any seller
statistics are touched.
"""

from __future__ import annotations

from collections.abc import Hashable
from decimal import Decimal
from numbers import Integral, Real  # int, float, Fraction
from typing import Any, Callable, List, Mapping, Sequence, TypeVar

from sales_report.errors import InvalidInputError
from sales_report.model import LineItem, Product, PurchaseRecord, Seller

T = TypeVar("T")

PRODUCT_FIELDS = ("sku", "purchase_price")
RECORD_FIELDS = ("seller_id", "items", "total_amount")


def is_list_shaped(value: object) -> bool:
    """True for lists and tuples; strings and mappings do not count."""
    return isinstance(value, (list, tuple))


def require_list(value: object, dataset: str) -> Sequence[Any]:
    """Return ``value`` if it is a non-empty list, else raise."""
    if value is None:
        raise InvalidInputError(f"{dataset}: dataset is missing")
    if not is_list_shaped(value):
        raise InvalidInputError(
            f"{dataset}: expected a list, got {type(value).__name__}"
        )
    if len(value) == 0:
        raise InvalidInputError(f"{dataset}: dataset is empty")
    return value


def require_id(raw: object, where: str) -> Hashable:
    """Return the identifier unchanged if it is usable as a key."""
    if raw is None or isinstance(raw, bool):
        raise InvalidInputError(f"{where}: identifier is missing")
    if not isinstance(raw, Hashable) or str(raw) == "":
        raise InvalidInputError(f"{where}: identifier is blank or unusable")
    return raw


def index_key(raw: Hashable) -> str:
    """Lookup key for an identifier: ``7``, ``7.0`` and ``"7"`` all map to ``"7"``.

    Whitespace is significant.
    """
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)  # Normalise numerics coming from spreadsheets
    return str(raw)


def to_number(raw: object, where: str) -> float:
    """Money figures are carried as floats; ``Decimal`` prices are accepted."""
    if isinstance(raw, bool) or not isinstance(raw, (Real, Decimal)):
        raise InvalidInputError(f"{where}: expected a number, got {raw!r}")
    return float(raw)


def to_quantity(raw: object, where: str) -> int | float:
    # Integer quantities stay integers so reported totals keep their type
    if isinstance(raw, Integral) and not isinstance(raw, bool):
        return int(raw)
    return to_number(raw, where)


def _field(row: Mapping[str, Any], key: str, where: str) -> Any:
    # Helper to fetch a required key with a readable error
    if key not in row:
        raise InvalidInputError(f"{where}: missing required field '{key}'")
    return row[key]


def _as_mapping(row: object, where: str) -> Mapping[str, Any]:
    if not isinstance(row, Mapping):
        raise InvalidInputError(
            f"{where}: expected a mapping, got {type(row).__name__}"
        )
    return row


def coerce_seller(row: object, where: str = "sellers") -> Seller:
    if isinstance(row, Seller):
        return row
    row = _as_mapping(row, where)
    return Seller(
        id=require_id(_field(row, "id", where), where),
        first_name=str(_field(row, "first_name", where)),
        last_name=str(_field(row, "last_name", where)),
    )


def coerce_product(row: object, where: str = "products") -> Product:
    if isinstance(row, Product):
        return row
    row = _as_mapping(row, where)
    return Product(
        sku=require_id(_field(row, "sku", where), where),
        purchase_price=to_number(_field(row, "purchase_price", where), where),
        # Everything else is passed through for revenue strategies
        attributes={k: v for k, v in row.items() if k not in PRODUCT_FIELDS},
    )


def coerce_line_item(row: object, where: str = "items") -> LineItem:
    if isinstance(row, LineItem):
        return row
    row = _as_mapping(row, where)
    return LineItem(
        sku=require_id(_field(row, "sku", where), where),
        quantity=to_quantity(_field(row, "quantity", where), where),
        sale_price=to_number(_field(row, "sale_price", where), where),
        discount=to_number(row.get("discount", 0), where),
    )


def coerce_purchase_record(row: object, where: str = "purchase_records") -> PurchaseRecord:
    if isinstance(row, PurchaseRecord):
        return row
    row = _as_mapping(row, where)

    raw_items = _field(row, "items", where)
    if not is_list_shaped(raw_items):
        raise InvalidInputError(f"{where}: 'items' must be a list")
    items = tuple(
        coerce_line_item(item, f"{where}.items[{idx}]")
        for idx, item in enumerate(raw_items)
    )

    return PurchaseRecord(
        seller_id=require_id(_field(row, "seller_id", where), where),
        items=items,
        total_amount=to_number(row.get("total_amount", 0), where),
        attributes={k: v for k, v in row.items() if k not in RECORD_FIELDS},
    )


def coerce_all(
    rows: object, dataset: str, convert: Callable[[object, str], T]
) -> List[T]:
    """Validate ``rows`` as a non-empty list and convert every element."""
    rows = require_list(rows, dataset)
    return [convert(row, f"{dataset}[{idx}]") for idx, row in enumerate(rows)]


__all__ = [
    "coerce_all",
    "coerce_line_item",
    "coerce_product",
    "coerce_purchase_record",
    "coerce_seller",
    "index_key",
    "is_list_shaped",
    "require_id",
    "require_list",
]
