# Overview: Flask API routes for console user management; parses input and returns JSON responses.

from flask import Blueprint, jsonify, request, g

from laundry.decorators import require_auth, require_feature
from laundry.permissions import Feature
from laundry.services import session_service, user_service
from laundry.services.record_store import get_record_store
from laundry.services.user_service import public_user


users_bp = Blueprint("users", __name__, url_prefix="/api/users")


@users_bp.get("")
@require_auth
@require_feature(Feature.USERS)
def list_users():
    users = user_service.list_users(get_record_store(), search=request.args.get("q"))
    return jsonify([public_user(u) for u in users]), 200


@users_bp.post("")
@require_auth
@require_feature(Feature.USERS)
def create_user():
    data = request.get_json(silent=True) or {}
    try:
        user = user_service.create_user(get_record_store(), data)
        return jsonify(public_user(user)), 201
    except user_service.UserError as exc:
        return jsonify({"error": str(exc)}), 400


@users_bp.get("/<int:user_id>")
@require_auth
@require_feature(Feature.USERS)
def get_user(user_id: int):
    user = user_service.get_user(get_record_store(), user_id)
    if not user:
        return jsonify({"error": "User not found"}), 404
    return jsonify(public_user(user)), 200


@users_bp.put("/<int:user_id>")
@require_auth
@require_feature(Feature.USERS)
def update_user(user_id: int):
    """Update a user. An empty or missing password keeps the current one."""
    store = get_record_store()
    if not user_service.get_user(store, user_id):
        return jsonify({"error": "User not found"}), 404
    data = request.get_json(silent=True) or {}
    try:
        user = user_service.update_user(store, user_id, data)
        return jsonify(public_user(user)), 200
    except user_service.UserError as exc:
        return jsonify({"error": str(exc)}), 400


@users_bp.delete("/<int:user_id>")
@require_auth
@require_feature(Feature.USERS)
def delete_user(user_id: int):
    store = get_record_store()
    try:
        user_service.delete_user(store, user_id, acting_user_id=g.current_user.get("id"))
    except user_service.UserError as exc:
        return jsonify({"error": str(exc)}), 400
    session_service.revoke_user_sessions(store, user_id)
    return jsonify({"deleted": True, "id": user_id}), 200
