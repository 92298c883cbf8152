from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class CatalogItem:
    """
    Read-only snapshot of a catalog product.

    Prices are kept as the decimal strings stored by inventory management;
    they are only parsed by the price resolver.
    """

    id: str
    name: str
    base_price: str
    stock: int = 0
    category: str = ""
    description: str = ""
    discounted_price: Optional[str] = None
    is_hot: Optional[bool] = False
    hot_price: Optional[str] = None
    images: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def primary_image(self) -> Optional[str]:
        return self.images[0] if self.images else None

    @property
    def in_stock(self) -> bool:
        return self.stock > 0
