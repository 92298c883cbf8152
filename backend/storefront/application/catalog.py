# storefront/application/catalog.py
"""
Read-only access to the product catalog.

Returns ``CatalogItem`` snapshots so pricing and presentation code never
touches ORM objects.
"""
from typing import Iterable, List, Optional

from storefront.domain.catalog import CatalogItem
from storefront.models.product import Product


class ProductCatalog:
    """Catalog source backed by the `products` table."""

    def list(self, *, hot_only: bool = False, limit: Optional[int] = None) -> List[CatalogItem]:
        """
        Default ordering is newest first. Hot deals are ordered by when
        they were flagged hot, most recent first.
        """
        query = Product.query

        if hot_only:
            query = query.filter(Product.is_hot.is_(True)).order_by(
                Product.hot_at.desc().nullslast(),
                Product.created_at.desc(),
                Product.id.asc(),
            )
        else:
            query = query.order_by(Product.created_at.desc(), Product.id.asc())

        if limit is not None:
            query = query.limit(limit)

        return [product.to_catalog_item() for product in query.all()]

    def by_ids(self, ids: Iterable[str]) -> List[CatalogItem]:
        """Items for the given ids, in the given order. Unknown ids are skipped."""
        wanted = [str(i) for i in ids]
        if not wanted:
            return []

        found = {
            product.id: product.to_catalog_item()
            for product in Product.query.filter(Product.id.in_(wanted)).all()
        }
        return [found[i] for i in wanted if i in found]
