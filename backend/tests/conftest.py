"""Shared pytest fixtures for storefront tests."""

from datetime import datetime, timedelta, timezone

import pytest

from storefront import create_app
from storefront.extensions import db as _db
from storefront.models.product import Product
from storefront.models.section import Section


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def make_product(db):
    """Insert a product; later calls are newer than earlier ones."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    def factory(**fields):
        counter["n"] += 1
        defaults = {
            "name": f"Product {counter['n']}",
            "description": "A product",
            "price": "1000",
            "stock": 10,
            "category": "Skincare",
            "images": ["/uploads/p.jpg"],
            "created_at": start + timedelta(minutes=counter["n"]),
        }
        defaults.update(fields)
        product = Product(**defaults)
        db.session.add(product)
        db.session.commit()
        return product

    return factory


@pytest.fixture
def raw_section(db):
    """
    Insert a section row directly, bypassing write-boundary validation.

    Simulates rows written by older code paths (e.g. content stored as text).
    """
    def factory(type="hero", order=0, content=None, is_active=True):
        max_position = db.session.query(db.func.max(Section.position)).scalar() or 0
        section = Section(
            type=type,
            order=order,
            content={} if content is None else content,
            is_active=is_active,
            position=max_position + 1,
        )
        db.session.add(section)
        db.session.commit()
        return section

    return factory
