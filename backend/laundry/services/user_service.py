# Overview: Service-layer operations for console users.

"""
Console Users

Passwords are stored as given (plaintext). That matches the console's trust
model: role checks are advisory and there is no credential security layer.
Passwords are stripped by public_user() before anything leaves the service.
"""

from __future__ import annotations

from ..constants import Entity
from ..permissions import parse_role
from .record_store import Record, RecordStore


class UserError(Exception):
    """Raised when user operations fail."""
    pass


def public_user(user: Record | None) -> dict | None:
    if user is None:
        return None
    return {k: v for k, v in user.items() if k != "password"}


def _username_taken(store: RecordStore, username: str, *, exclude_id: int | None = None) -> bool:
    for user in store.get_all(Entity.USERS):
        if user.get("id") == exclude_id:
            continue
        if (user.get("username") or "").lower() == username.lower():
            return True
    return False


def _clean(data: dict, *, partial: bool) -> dict:
    patch = {}
    for field in ("name", "username"):
        if field in data or not partial:
            value = str(data.get(field) or "").strip()
            if not value:
                raise UserError(f"User {field} is required")
            patch[field] = value

    if "role" in data or not partial:
        role = parse_role(data.get("role"))
        if role is None:
            raise UserError("User role must be one of: admin, kasir, owner")
        patch["role"] = role.value

    # An empty password on edit keeps the stored one
    password = data.get("password")
    if password:
        patch["password"] = str(password)
    elif not partial:
        raise UserError("User password is required")

    return patch


def list_users(store: RecordStore, search: str | None = None) -> list[Record]:
    users = store.get_all(Entity.USERS)
    if search:
        term = search.lower()
        users = [
            u for u in users
            if term in (u.get("name") or "").lower() or term in (u.get("username") or "").lower()
        ]
    return users


def get_user(store: RecordStore, user_id: int) -> Record | None:
    return store.get_by_id(Entity.USERS, user_id)


def get_user_by_username(store: RecordStore, username: str) -> Record | None:
    for user in store.get_all(Entity.USERS):
        if user.get("username") == username:
            return user
    return None


def create_user(store: RecordStore, data: dict) -> Record:
    patch = _clean(data, partial=False)
    if _username_taken(store, patch["username"]):
        raise UserError("Username already exists")
    return store.create(Entity.USERS, patch)


def update_user(store: RecordStore, user_id: int, data: dict) -> Record:
    if get_user(store, user_id) is None:
        raise UserError("User not found")
    patch = _clean(data, partial=True)
    if "username" in patch and _username_taken(store, patch["username"], exclude_id=user_id):
        raise UserError("Username already exists")
    return store.update(Entity.USERS, user_id, patch)


def delete_user(store: RecordStore, user_id: int, *, acting_user_id: int | None = None) -> bool:
    if acting_user_id is not None and user_id == acting_user_id:
        raise UserError("You cannot delete your own account!")
    return store.remove(Entity.USERS, user_id)
