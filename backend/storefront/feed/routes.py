from flask import Blueprint, Response, current_app
from storefront.application.catalog import ProductCatalog
from .exporter import export_feed

feed_bp = Blueprint("feed", __name__)


@feed_bp.route("/feed.xml", methods=["GET"])
def product_feed():
    config = current_app.config

    # Generated fresh on every request
    document = export_feed(
        ProductCatalog().list(),
        base_url=config["STOREFRONT_BASE_URL"],
        currency=config["FEED_CURRENCY"],
        brand=config["FEED_BRAND"],
        product_category=config["FEED_PRODUCT_CATEGORY"],
    )

    return Response(document, mimetype="application/xml")
