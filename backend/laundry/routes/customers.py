# Overview: Flask API routes for customer operations; parses input and returns JSON responses.

from flask import Blueprint, jsonify, request

from laundry.decorators import require_auth, require_feature
from laundry.permissions import Feature
from laundry.services import customer_service
from laundry.services.record_store import get_record_store


customers_bp = Blueprint("customers", __name__, url_prefix="/api/customers")


@customers_bp.get("")
@require_auth
@require_feature(Feature.CUSTOMERS)
def list_customers():
    customers = customer_service.list_customers(get_record_store(), search=request.args.get("q"))
    return jsonify(customers), 200


@customers_bp.post("")
@require_auth
@require_feature(Feature.CUSTOMERS)
def create_customer():
    data = request.get_json(silent=True) or {}
    try:
        customer = customer_service.create_customer(get_record_store(), data)
        return jsonify(customer), 201
    except customer_service.CustomerError as exc:
        return jsonify({"error": str(exc)}), 400


@customers_bp.get("/<int:customer_id>")
@require_auth
@require_feature(Feature.CUSTOMERS)
def get_customer(customer_id: int):
    customer = customer_service.get_customer(get_record_store(), customer_id)
    if not customer:
        return jsonify({"error": "Customer not found"}), 404
    return jsonify(customer), 200


@customers_bp.put("/<int:customer_id>")
@require_auth
@require_feature(Feature.CUSTOMERS)
def update_customer(customer_id: int):
    store = get_record_store()
    if not customer_service.get_customer(store, customer_id):
        return jsonify({"error": "Customer not found"}), 404
    data = request.get_json(silent=True) or {}
    try:
        customer = customer_service.update_customer(store, customer_id, data)
        return jsonify(customer), 200
    except customer_service.CustomerError as exc:
        return jsonify({"error": str(exc)}), 400


@customers_bp.delete("/<int:customer_id>")
@require_auth
@require_feature(Feature.CUSTOMERS)
def delete_customer(customer_id: int):
    customer_service.delete_customer(get_record_store(), customer_id)
    return jsonify({"deleted": True, "id": customer_id}), 200
