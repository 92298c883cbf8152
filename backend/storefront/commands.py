from datetime import datetime, timezone
import click
from flask import current_app
from flask.cli import with_appcontext
from storefront.extensions import db
from storefront.models.product import Product
from storefront.models.section import Section
from storefront.application.sections import create_section
from storefront.utils.transaction import transactional


DEMO_PRODUCTS = [
    {
        "name": "Luminous Glow Serum",
        "description": "Vitamin C serum for a brighter, even skin tone.",
        "price": "2500",
        "discounted_price": "2200",
        "stock": 25,
        "category": "Skincare",
        "images": ["https://images.unsplash.com/photo-1620916566398-39f1143ab7be?w=800"],
    },
    {
        "name": "Velvet Matte Lipstick",
        "description": "Long-wearing matte colour with a soft finish.",
        "price": "1200",
        "is_hot": True,
        "hot_price": "950",
        "stock": 40,
        "category": "Makeup",
        "images": ["https://images.unsplash.com/photo-1586495777744-4413f21062fa?w=800"],
    },
    {
        "name": "Hydra Boost Moisturizer",
        "description": "Lightweight daily moisturizer with hyaluronic acid.",
        "price": "1800",
        "stock": 0,
        "category": "Skincare",
        "images": ["https://images.unsplash.com/photo-1631729371254-42c2892f0e6e?w=800"],
    },
    {
        "name": "Signature Eau de Parfum",
        "description": "Warm amber and vanilla, 50ml.",
        "price": "5200",
        "discounted_price": "4800",
        "is_hot": True,
        "hot_price": "4500",
        "stock": 8,
        "category": "Fragrance",
        "images": ["https://images.unsplash.com/photo-1571781535009-5363218b1759?w=800"],
    },
]

DEFAULT_SECTIONS = [
    {
        "type": "hero",
        "order": 0,
        "content": {
            "title": "Redefine Your Beauty",
            "subtitle": "Premium skincare and cosmetics designed to enhance your natural glow.",
            "image": "https://images.unsplash.com/photo-1596462502278-27bfdd403cc2?w=1200",
            "ctaText": "Shop Collection",
            "ctaLink": "/products",
        },
    },
    {
        "type": "marquee",
        "order": 1,
        "content": {
            "text": "New Arrivals  •  Free Shipping on Orders Over ৳2000  •  100% Authentic",
            "speed": "slow",
        },
    },
    {
        "type": "product_grid",
        "order": 2,
        "content": {
            "title": "Hot Deals",
            "layout": "featured",
            "filterType": "hot",
            "styles": {"textColor": "#ffffff"},
        },
    },
    {
        "type": "product_grid",
        "order": 3,
        "content": {
            "title": "New Arrivals",
            "layout": "carousel",
            "limit": 6,
            "filterType": "all",
        },
    },
]


@click.command("seed-storefront")
@click.option("--reset", is_flag=True, help="Remove existing sections first.")
@with_appcontext
def seed_storefront(reset):
    """Seed demo products and the default home page sections."""
    if reset:
        with transactional():
            deleted = Section.query.delete()
        current_app.logger.info("Removed %s existing sections", deleted)

    if Product.query.count() == 0:
        with transactional():
            for data in DEMO_PRODUCTS:
                product = Product(**data)
                if product.is_hot:
                    product.hot_at = datetime.now(timezone.utc)
                db.session.add(product)
        click.echo(f"Added {len(DEMO_PRODUCTS)} demo products")

    for section in DEFAULT_SECTIONS:
        create_section(**section)

    click.echo(f"Created {len(DEFAULT_SECTIONS)} storefront sections")


def register_commands(app):
    app.cli.add_command(seed_storefront)
