# storefront/domain/sections.py
"""
Per-type section dispatch.

Each handler maps a decoded payload to the fields of a section view. New
section types are added by registering a handler in ``SECTION_HANDLERS``;
types without a handler are passed through unchanged.

Handlers validate the shape they need and raise ``ValidationError`` when the
payload cannot be rendered; the composer turns that into a degraded section.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol

from storefront.domain.catalog import CatalogItem
from storefront.domain.exceptions import ValidationError
from storefront.normalizers.product import normalize_product

DEFAULT_GRID_LIMIT = 8
FEATURED_GRID_LIMIT = 5
MAX_GRID_LIMIT = 100


class CatalogSource(Protocol):
    def list(self, *, hot_only: bool = False, limit: Optional[int] = None) -> List[CatalogItem]:
        ...

    def by_ids(self, ids: Iterable[str]) -> List[CatalogItem]:
        ...


@dataclass(frozen=True)
class RenderContext:
    catalog: CatalogSource
    base_url: str
    default_limit: int = DEFAULT_GRID_LIMIT
    max_limit: int = MAX_GRID_LIMIT


Handler = Callable[[Dict[str, Any], RenderContext], Dict[str, Any]]


def _passthrough(content: Dict[str, Any], ctx: RenderContext) -> Dict[str, Any]:
    return {"content": content}


def _grid_limit(content: Dict[str, Any], ctx: RenderContext) -> int:
    raw = content.get("limit")

    if raw is None or raw == "":
        if content.get("layout") == "featured":
            return FEATURED_GRID_LIMIT
        return ctx.default_limit

    if isinstance(raw, bool):
        raise ValidationError("limit must be a positive integer", field="limit")

    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)

    if isinstance(raw, str):
        try:
            raw = int(raw.strip())
        except ValueError as exc:
            raise ValidationError("limit must be a positive integer", field="limit") from exc

    if not isinstance(raw, int) or raw <= 0:
        raise ValidationError("limit must be a positive integer", field="limit")

    if raw > ctx.max_limit:
        raise ValidationError(f"limit must not exceed {ctx.max_limit}", field="limit")

    return raw


def _product_grid(content: Dict[str, Any], ctx: RenderContext) -> Dict[str, Any]:
    limit = _grid_limit(content, ctx)
    hot_only = content.get("filterType") == "hot"

    items = ctx.catalog.list(hot_only=hot_only, limit=limit)[:limit]

    return {
        "content": content,
        "products": [normalize_product(item, base_url=ctx.base_url) for item in items],
    }


def _shoppable(content: Dict[str, Any], ctx: RenderContext) -> Dict[str, Any]:
    ids = content.get("productIds", [])
    if not isinstance(ids, list):
        raise ValidationError("productIds must be a list", field="productIds")

    items = ctx.catalog.by_ids(ids)

    return {
        "content": content,
        "products": [normalize_product(item, base_url=ctx.base_url) for item in items],
    }


SECTION_HANDLERS: Dict[str, Handler] = {
    "hero": _passthrough,
    "banner": _passthrough,
    "marquee": _passthrough,
    "product_grid": _product_grid,
    "shoppable_image": _shoppable,
    "shoppable_video": _shoppable,
}


def render_section(section_type: str, content: Dict[str, Any], ctx: RenderContext) -> Dict[str, Any]:
    handler = SECTION_HANDLERS.get(section_type, _passthrough)
    return handler(content, ctx)
