from storefront.extensions import db
from storefront.domain.catalog import CatalogItem
from .base import BaseModel

class Product(BaseModel):
    """
    Catalog product. Owned by inventory management; the storefront only reads it.
    """
    __tablename__ = "products"

    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")

    # Prices are stored as decimal strings
    price = db.Column(db.String(32), nullable=False)
    discounted_price = db.Column(db.String(32), nullable=True)
    is_hot = db.Column(db.Boolean, default=False, index=True)
    hot_price = db.Column(db.String(32), nullable=True)
    hot_at = db.Column(db.DateTime(timezone=True), nullable=True, index=True)  # when flagged hot

    stock = db.Column(db.Integer, nullable=False, default=0)
    category = db.Column(db.String(120), nullable=False, default="")
    images = db.Column(db.JSON, nullable=False, default=list)

    def to_catalog_item(self) -> CatalogItem:
        return CatalogItem(
            id=self.id,
            name=self.name,
            description=self.description or "",
            base_price=self.price,
            discounted_price=self.discounted_price,
            is_hot=self.is_hot,
            hot_price=self.hot_price,
            stock=self.stock or 0,
            category=self.category or "",
            images=tuple(self.images or ()),
        )
