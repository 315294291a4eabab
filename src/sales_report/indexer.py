from __future__ import annotations

from typing import Dict, Iterable, Tuple

from sales_report.coerce import (
    coerce_all,
    coerce_product,
    coerce_seller,
    index_key,
)
from sales_report.errors import InvalidInputError
from sales_report.model import Product, SellerStats


def build_indexes(
    sellers: Iterable[object],
    products: Iterable[object],
) -> Tuple[Dict[str, SellerStats], Dict[str, Product]]:
    """Index sellers and products by identifier.

    Returns a zero-initialised :class:`SellerStats` per seller, in seller list
    order, and the product catalog keyed by sku. Keys come from
    :func:`index_key`; the stats keep the seller id exactly as given. Seller
    ids must be unique; a repeated sku replaces the earlier catalog entry.
    """

    seller_rows = coerce_all(sellers, "sellers", coerce_seller)
    product_rows = coerce_all(products, "products", coerce_product)

    seller_index: Dict[str, SellerStats] = {}
    for seller in seller_rows:
        key = index_key(seller.id)
        if key in seller_index:
            raise InvalidInputError(f"sellers: duplicate seller id {seller.id!r}")
        seller_index[key] = SellerStats(id=seller.id, name=seller.full_name)

    product_index: Dict[str, Product] = {index_key(p.sku): p for p in product_rows}

    return seller_index, product_index


__all__ = ["build_indexes"]
