# Overview: Public laundry tracking by code; no authentication.

from flask import Blueprint, jsonify

from laundry.services import laundry_service
from laundry.services.record_store import get_record_store


track_bp = Blueprint("track", __name__, url_prefix="/api/track")


@track_bp.get("/<path:code>")
def track_laundry(code: str):
    try:
        result = laundry_service.track_laundry_item(get_record_store(), code)
    except laundry_service.LaundryItemError as exc:
        return jsonify({"error": str(exc)}), 400
    if result is None:
        return jsonify({
            "error": "Laundry item not found. Please check the code and try again."
        }), 404
    return jsonify(result), 200
