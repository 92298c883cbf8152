from storefront.extensions import db
from .base import BaseModel

class Section(BaseModel):
    __tablename__ = "storefront_sections"

    type = db.Column(db.String(100), nullable=False)  # hero, marquee, product_grid, banner
    order = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    content = db.Column(db.JSON, nullable=False, default=dict)

    # Insertion sequence; breaks ties between equal `order` values
    position = db.Column(db.Integer, nullable=False, index=True)

    __table_args__ = (
        db.Index("idx_section_active_order", "is_active", "order", "position"),
    )
