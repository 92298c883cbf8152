# storefront/feed/exporter.py
"""
Google Merchant style product feed (RSS 2.0 + ``g:`` namespace).

Items are written in the order given. A single bad item never aborts the
export: an unparsable base price is exported as 0.00 with no sale price.
"""
from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from decimal import Decimal
from typing import Iterable

from storefront.domain.catalog import CatalogItem
from storefront.domain.exceptions import PriceParseError
from storefront.domain.pricing import ResolvedPrice, format_money, resolve_price
from storefront.utils.links import resolve_link

logger = logging.getLogger(__name__)

GOOGLE_NS = "http://base.google.com/ns/1.0"
ET.register_namespace("g", GOOGLE_NS)

CONDITION = "new"
HOT_DEAL_LABEL = "Hot Deal"

# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]"
)


def _g(parent: ET.Element, tag: str, text: str | None = None) -> ET.Element:
    element = ET.SubElement(parent, f"{{{GOOGLE_NS}}}{tag}")
    element.text = INVALID_XML_CHARS.sub("", text or "")
    return element


def _resolve_or_zero(item: CatalogItem) -> ResolvedPrice:
    try:
        return resolve_price(item)
    except PriceParseError as exc:
        logger.warning("Feed item %s exported with zero price: %s", item.id, exc)
        return ResolvedPrice(display_price=Decimal("0"), sale_price=None)


def availability(item: CatalogItem) -> str:
    return "in stock" if item.stock > 0 else "out of stock"


def _write_item(
    channel: ET.Element,
    item: CatalogItem,
    *,
    base_url: str,
    currency: str,
    brand: str,
    product_category: str,
) -> None:
    entry = ET.SubElement(channel, "item")
    price = _resolve_or_zero(item)

    _g(entry, "id", str(item.id))
    _g(entry, "title", item.name)
    _g(entry, "description", item.description)
    _g(entry, "link", f"{base_url.rstrip('/')}/product/{item.id}")
    _g(entry, "image_link", resolve_link(base_url, item.primary_image))

    for extra in item.images[1:]:
        if extra:
            _g(entry, "additional_image_link", resolve_link(base_url, extra))

    _g(entry, "brand", brand)
    _g(entry, "condition", CONDITION)
    _g(entry, "availability", availability(item))
    _g(entry, "price", f"{format_money(price.display_price)} {currency}")

    if price.sale_price is not None:
        _g(entry, "sale_price", f"{format_money(price.sale_price)} {currency}")

    _g(entry, "product_type", item.category)
    _g(entry, "google_product_category", product_category)

    # Custom labels for ad targeting
    if item.is_hot:
        _g(entry, "custom_label_0", HOT_DEAL_LABEL)
    _g(entry, "custom_label_1", item.category)


def export_feed(
    items: Iterable[CatalogItem],
    *,
    base_url: str,
    currency: str = "BDT",
    brand: str = "LUNAVEIL",
    product_category: str = "1604",
    title: str = "Product feed",
) -> bytes:
    """Render the feed as a UTF-8 XML document."""
    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    ET.SubElement(channel, "title").text = title
    ET.SubElement(channel, "link").text = base_url

    count = 0
    for item in items:
        _write_item(
            channel,
            item,
            base_url=base_url,
            currency=currency,
            brand=brand,
            product_category=product_category,
        )
        count += 1

    logger.info("Exported product feed with %d items", count)
    return ET.tostring(rss, encoding="utf-8", xml_declaration=True)
