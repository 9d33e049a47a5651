# Overview: Request and feature-access decorators for API routes.

from functools import wraps
from flask import request, jsonify, g, current_app

from .permissions import Feature, has_access
from .services import session_service
from .services.record_store import get_record_store


def _is_authenticated() -> bool:
    return hasattr(g, 'current_user')


def bearer_token() -> str | None:
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        return None
    return auth_header.split(" ", 1)[1]


def require_auth(f):
    """
    Require a valid session token.

    Sets the following Flask g attributes:
    - g.current_user: the user record
    - g.session_context: the full SessionContext object

    Returns 401 if the Authorization header is missing, or the token is
    unknown or expired, or its user no longer exists.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = bearer_token()
        if not token:
            return jsonify({"error": "Authentication required"}), 401

        context = session_service.validate_session(get_record_store(), token)
        if not context:
            return jsonify({"error": "Invalid or expired token"}), 401

        g.current_user = context.user
        g.session_context = context

        return f(*args, **kwargs)

    return decorated_function


def require_feature(feature: Feature):
    """Require the current user's role to grant a console feature."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            # Ensure @require_auth was called first
            if not _is_authenticated():
                return jsonify({"error": "Authentication required"}), 401

            role = g.current_user.get("role")
            if not has_access(role, feature):
                current_app.logger.warning(
                    "Access denied: user=%s role=%s feature=%s path=%s",
                    g.current_user.get("username"),
                    role,
                    feature.value,
                    request.path,
                )
                return jsonify({
                    "error": "Permission denied",
                    "required_feature": feature.value,
                    "message": f"Role {role!r} cannot access {feature.value}",
                }), 403

            return f(*args, **kwargs)

        return decorated_function
    return decorator
