# Overview: Flask API routes for laundry items; intake, edits, status updates.

"""
Laundry item routes

Status changes go through PATCH /<id>/status, which is the only path that
can produce a transaction. PUT edits intake details and never touches the
code or the status fields.
"""

from flask import Blueprint, jsonify, request, current_app

from laundry.decorators import require_auth, require_feature
from laundry.permissions import Feature
from laundry.services import laundry_service
from laundry.services.record_store import get_record_store


laundry_items_bp = Blueprint("laundry_items", __name__, url_prefix="/api/laundry-items")


@laundry_items_bp.get("")
@require_auth
@require_feature(Feature.LAUNDRY_ITEMS)
def list_laundry_items():
    items = laundry_service.list_laundry_items(get_record_store(), search=request.args.get("q"))
    return jsonify(items), 200


@laundry_items_bp.post("")
@require_auth
@require_feature(Feature.LAUNDRY_ITEMS)
def create_laundry_item():
    """Register an intake order. The response carries the generated code."""
    data = request.get_json(silent=True) or {}
    try:
        item = laundry_service.create_laundry_item(get_record_store(), data)
        return jsonify(item), 201
    except laundry_service.LaundryItemError as exc:
        return jsonify({"error": str(exc)}), 400
    except Exception:
        current_app.logger.exception("Failed to create laundry item")
        return jsonify({"error": "Failed to create laundry item"}), 500


@laundry_items_bp.get("/<int:item_id>")
@require_auth
@require_feature(Feature.LAUNDRY_ITEMS)
def get_laundry_item(item_id: int):
    item = laundry_service.get_laundry_item(get_record_store(), item_id)
    if not item:
        return jsonify({"error": "Laundry item not found"}), 404
    return jsonify(item), 200


@laundry_items_bp.put("/<int:item_id>")
@require_auth
@require_feature(Feature.LAUNDRY_ITEMS)
def update_laundry_item(item_id: int):
    data = request.get_json(silent=True) or {}
    try:
        item = laundry_service.update_laundry_item(get_record_store(), item_id, data)
        return jsonify(item), 200
    except laundry_service.LaundryItemNotFoundError as exc:
        return jsonify({"error": str(exc)}), 404
    except laundry_service.LaundryItemError as exc:
        return jsonify({"error": str(exc)}), 400


@laundry_items_bp.patch("/<int:item_id>/status")
@require_auth
@require_feature(Feature.LAUNDRY_ITEMS)
def update_laundry_status(item_id: int):
    """
    Update processStatus and/or paymentStatus.

    Returns 409 with the reverted paymentStatus when a paid item would be
    moved away from 'sudah bayar'. When the item becomes finished and paid,
    the derived transaction is returned alongside the item.
    """
    data = request.get_json(silent=True) or {}
    try:
        item, transaction = laundry_service.update_laundry_status(
            get_record_store(),
            item_id,
            process_status=data.get("processStatus"),
            payment_status=data.get("paymentStatus"),
        )
        return jsonify({"item": item, "transaction": transaction}), 200
    except laundry_service.LaundryItemNotFoundError as exc:
        return jsonify({"error": str(exc)}), 404
    except laundry_service.PaymentStatusLockedError as exc:
        return jsonify({"error": str(exc), "paymentStatus": exc.payment_status}), 409
    except laundry_service.LaundryItemError as exc:
        return jsonify({"error": str(exc)}), 400
    except Exception:
        current_app.logger.exception("Failed to update laundry status")
        return jsonify({"error": "Failed to update laundry status"}), 500


@laundry_items_bp.delete("/<int:item_id>")
@require_auth
@require_feature(Feature.LAUNDRY_ITEMS)
def delete_laundry_item(item_id: int):
    laundry_service.delete_laundry_item(get_record_store(), item_id)
    return jsonify({"deleted": True, "id": item_id}), 200
