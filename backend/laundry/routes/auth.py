# Overview: Flask API routes for auth operations; parses input and returns JSON responses.

from flask import Blueprint, request, jsonify, current_app, g

from ..services import auth_service
from ..services import session_service
from ..services.record_store import get_record_store
from ..decorators import require_auth, bearer_token


auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


@auth_bp.post("/login")
def login_route():
    """
    Check credentials and create a session token.

    The token must be sent as "Authorization: Bearer <token>" on protected routes.
    """
    data = request.get_json(silent=True) or {}
    store = get_record_store()
    try:
        user = auth_service.authenticate(store, data.get("username"), data.get("password"))
    except auth_service.AuthError as exc:
        return jsonify({"error": str(exc)}), 400

    if not user:
        current_app.logger.info("Failed login for %r", data.get("username"))
        return jsonify({"error": "Invalid username or password"}), 401

    try:
        session, token = session_service.create_session(store, user["id"])
    except Exception:
        current_app.logger.exception("Failed to login user")
        return jsonify({"error": "Login failed"}), 500

    return jsonify({
        "user": auth_service.user_profile(user),
        "token": token,
        "expires_at": session["expiresAt"],
    }), 200


@auth_bp.post("/logout")
@require_auth
def logout_route():
    session_service.revoke_session(get_record_store(), bearer_token())
    return jsonify({"message": "Logged out"}), 200


@auth_bp.get("/me")
@require_auth
def me_route():
    return jsonify({"user": auth_service.user_profile(g.current_user)}), 200
