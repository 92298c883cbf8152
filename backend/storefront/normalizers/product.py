# storefront/normalizers/product.py
from __future__ import annotations

import logging
from typing import Any, Dict

from storefront.domain.catalog import CatalogItem
from storefront.domain.exceptions import PriceParseError
from storefront.domain.pricing import format_money, percent_off, resolve_price
from storefront.utils.links import resolve_link

logger = logging.getLogger(__name__)


def normalize_product(item: CatalogItem, *, base_url: str) -> Dict[str, Any]:
    """
    Storefront view of a catalog item with its resolved price.

    A bad price only blanks this item's pricing; it is never raised.
    """
    try:
        resolved = resolve_price(item)
    except PriceParseError as exc:
        logger.warning("Product %s has an unparsable price: %s", item.id, exc)
        price = sale_price = None
        discount = 0
    else:
        price = format_money(resolved.display_price)
        sale_price = (
            format_money(resolved.sale_price)
            if resolved.sale_price is not None
            else None
        )
        discount = percent_off(resolved)

    images = [resolve_link(base_url, url) for url in item.images if url]

    return {
        "id": item.id,
        "name": item.name,
        "category": item.category,
        "stock": item.stock,
        "inStock": item.in_stock,
        "isHot": bool(item.is_hot),
        "image": images[0] if images else None,
        "images": images,
        "price": price,
        "salePrice": sale_price,
        "percentOff": discount,
    }
