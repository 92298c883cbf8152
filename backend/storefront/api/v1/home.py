from flask import current_app, jsonify, request
from storefront.application.catalog import ProductCatalog
from storefront.application.home.compose import compose_active
from storefront.normalizers.product import normalize_product
from . import v1_bp


@v1_bp.route("/storefront", methods=["GET"])
def home_page():
    config = current_app.config

    sections = compose_active(
        base_url=config["STOREFRONT_BASE_URL"],
        default_limit=config["STOREFRONT_GRID_LIMIT"],
        max_limit=config["STOREFRONT_GRID_MAX_LIMIT"],
    )

    return jsonify({"sections": sections})


@v1_bp.route("/products", methods=["GET"])
def list_products():
    base_url = current_app.config["STOREFRONT_BASE_URL"]
    hot_only = request.args.get("hot", "").lower() in ("1", "true", "yes")

    items = ProductCatalog().list(hot_only=hot_only)

    return jsonify({
        "items": [normalize_product(item, base_url=base_url) for item in items]
    })
