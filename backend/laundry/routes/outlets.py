# Overview: Flask API routes for outlet operations; parses input and returns JSON responses.

from flask import Blueprint, jsonify, request

from laundry.decorators import require_auth, require_feature
from laundry.permissions import Feature
from laundry.services import outlet_service
from laundry.services.record_store import get_record_store


outlets_bp = Blueprint("outlets", __name__, url_prefix="/api/outlets")


@outlets_bp.get("")
@require_auth
@require_feature(Feature.OUTLETS)
def list_outlets():
    outlets = outlet_service.list_outlets(get_record_store(), search=request.args.get("q"))
    return jsonify(outlets), 200


@outlets_bp.post("")
@require_auth
@require_feature(Feature.OUTLETS)
def create_outlet():
    data = request.get_json(silent=True) or {}
    try:
        outlet = outlet_service.create_outlet(get_record_store(), data)
        return jsonify(outlet), 201
    except outlet_service.OutletError as exc:
        return jsonify({"error": str(exc)}), 400


@outlets_bp.get("/<int:outlet_id>")
@require_auth
@require_feature(Feature.OUTLETS)
def get_outlet(outlet_id: int):
    outlet = outlet_service.get_outlet(get_record_store(), outlet_id)
    if not outlet:
        return jsonify({"error": "Outlet not found"}), 404
    return jsonify(outlet), 200


@outlets_bp.put("/<int:outlet_id>")
@require_auth
@require_feature(Feature.OUTLETS)
def update_outlet(outlet_id: int):
    store = get_record_store()
    if not outlet_service.get_outlet(store, outlet_id):
        return jsonify({"error": "Outlet not found"}), 404
    data = request.get_json(silent=True) or {}
    try:
        outlet = outlet_service.update_outlet(store, outlet_id, data)
        return jsonify(outlet), 200
    except outlet_service.OutletError as exc:
        return jsonify({"error": str(exc)}), 400


@outlets_bp.delete("/<int:outlet_id>")
@require_auth
@require_feature(Feature.OUTLETS)
def delete_outlet(outlet_id: int):
    outlet_service.delete_outlet(get_record_store(), outlet_id)
    return jsonify({"deleted": True, "id": outlet_id}), 200
