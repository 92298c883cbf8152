# storefront/domain/pricing.py
"""
Effective selling price of a catalog item.

Both the storefront composer and the product feed call ``resolve_price``;
there is no other place that decides which price a customer pays.
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, NamedTuple, Optional

from storefront.domain.catalog import CatalogItem
from storefront.domain.exceptions import PriceParseError

CENTS = Decimal("0.01")


class ResolvedPrice(NamedTuple):
    display_price: Decimal
    sale_price: Optional[Decimal]


def round_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def parse_price(value: Any, field: str = "price") -> Decimal:
    """
    Parse a decimal-as-string price.

    Raises:
    - PriceParseError for missing, non-numeric or non-finite values
    """
    if value is None or isinstance(value, bool):
        raise PriceParseError(field, value)

    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise PriceParseError(field, value) from exc

    if not amount.is_finite():
        raise PriceParseError(field, value)

    return round_money(amount)


def _positive_or_none(value: Any, field: str) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    try:
        amount = parse_price(value, field)
    except PriceParseError:
        return None
    return amount if amount > 0 else None


def resolve_price(item: CatalogItem) -> ResolvedPrice:
    """
    Resolution order:
    1. hot deal price, when the item is flagged hot
    2. standing discount
    3. no sale price

    The display price is always the base price.
    """
    display_price = parse_price(item.base_price, "base_price")

    sale_price = None
    if item.is_hot is True:
        sale_price = _positive_or_none(item.hot_price, "hot_price")

    if sale_price is None:
        sale_price = _positive_or_none(item.discounted_price, "discounted_price")

    return ResolvedPrice(display_price=display_price, sale_price=sale_price)


def format_money(amount: Decimal) -> str:
    return f"{round_money(amount):.2f}"


def percent_off(resolved: ResolvedPrice) -> int:
    """Whole-percent saving of the sale price against the display price."""
    if resolved.sale_price is None or resolved.display_price <= 0:
        return 0

    ratio = (1 - resolved.sale_price / resolved.display_price) * 100
    return max(0, int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP)))
