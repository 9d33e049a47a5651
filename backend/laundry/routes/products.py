# Overview: Flask API routes for product operations; parses input and returns JSON responses.

from flask import Blueprint, jsonify, request

from laundry.decorators import require_auth, require_feature
from laundry.permissions import Feature
from laundry.services import product_service
from laundry.services.record_store import get_record_store


products_bp = Blueprint("products", __name__, url_prefix="/api/products")


@products_bp.get("")
@require_auth
@require_feature(Feature.PRODUCTS)
def list_products():
    """
    List products.

    Query params:
    - q: str (optional) - case-insensitive name search
    - outlet_id: int (optional) - only products offered by this outlet
    """
    products = product_service.list_products(
        get_record_store(),
        search=request.args.get("q"),
        outlet_id=request.args.get("outlet_id", type=int),
    )
    return jsonify(products), 200


@products_bp.post("")
@require_auth
@require_feature(Feature.PRODUCTS)
def create_product():
    data = request.get_json(silent=True) or {}
    try:
        product = product_service.create_product(get_record_store(), data)
        return jsonify(product), 201
    except product_service.ProductError as exc:
        return jsonify({"error": str(exc)}), 400


@products_bp.get("/<int:product_id>")
@require_auth
@require_feature(Feature.PRODUCTS)
def get_product(product_id: int):
    product = product_service.get_product(get_record_store(), product_id)
    if not product:
        return jsonify({"error": "Product not found"}), 404
    return jsonify(product), 200


@products_bp.put("/<int:product_id>")
@require_auth
@require_feature(Feature.PRODUCTS)
def update_product(product_id: int):
    store = get_record_store()
    if not product_service.get_product(store, product_id):
        return jsonify({"error": "Product not found"}), 404
    data = request.get_json(silent=True) or {}
    try:
        product = product_service.update_product(store, product_id, data)
        return jsonify(product), 200
    except product_service.ProductError as exc:
        return jsonify({"error": str(exc)}), 400


@products_bp.delete("/<int:product_id>")
@require_auth
@require_feature(Feature.PRODUCTS)
def delete_product(product_id: int):
    product_service.delete_product(get_record_store(), product_id)
    return jsonify({"deleted": True, "id": product_id}), 200
