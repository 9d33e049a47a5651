# Overview: Service-layer operations for auth; credential checks against stored users.

from __future__ import annotations

from ..permissions import features_for_role
from .record_store import Record, RecordStore
from .user_service import get_user_by_username, public_user


class AuthError(Exception):
    """Raised when a login request is malformed."""
    pass


def authenticate(store: RecordStore, username: str, password: str) -> Record | None:
    """
    Return the user whose username and password both match, else None.

    Comparison is against the stored plaintext password.
    """
    if not username or not password:
        raise AuthError("username and password required")
    user = get_user_by_username(store, username)
    if user is None or user.get("password") != password:
        return None
    return user


def user_profile(user: Record) -> dict:
    """Public user fields plus the features the user's role unlocks."""
    return {
        **public_user(user),
        "features": features_for_role(user.get("role")),
    }

