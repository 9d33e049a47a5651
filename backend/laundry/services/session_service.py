# Overview: Service-layer operations for session tokens kept in the record store.

"""
Session Token Management

Login sessions are ordinary records in the "sessions" collection. The
plaintext token goes to the client once; only its SHA-256 hash is stored.
Sessions end on logout or after SESSION_TIMEOUT_HOURS.
"""

import hashlib
import secrets
from dataclasses import dataclass
from datetime import timedelta

from flask import current_app

from ..constants import Entity
from ..time_utils import parse_iso_datetime, to_utc_z, utcnow
from .record_store import Record, RecordStore


@dataclass
class SessionContext:
    """Resolved session: the user record and the session record."""
    user: Record
    session: Record


def generate_token() -> str:
    """64-character hex token (32 bytes of entropy)."""
    return secrets.token_hex(32)


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode('utf-8')).hexdigest()


def create_session(store: RecordStore, user_id: int) -> tuple[Record, str]:
    """
    Create a session for user_id.

    Returns (session_record, plaintext_token).
    """
    plaintext_token = generate_token()
    now = utcnow()
    timeout = timedelta(hours=current_app.config.get("SESSION_TIMEOUT_HOURS", 24))

    session = store.create(Entity.SESSIONS, {
        "userId": user_id,
        "tokenHash": hash_token(plaintext_token),
        "createdAt": to_utc_z(now),
        "expiresAt": to_utc_z(now + timeout),
    })
    return session, plaintext_token


def _find_session(store: RecordStore, token: str) -> Record | None:
    token_hash = hash_token(token)
    for session in store.get_all(Entity.SESSIONS):
        if session.get("tokenHash") == token_hash:
            return session
    return None


def validate_session(store: RecordStore, token: str) -> SessionContext | None:
    """
    Resolve a token to its session and user.

    Returns None if the token is unknown, the session has expired (the record
    is removed), or the user no longer exists.
    """
    if not token:
        return None
    session = _find_session(store, token)
    if session is None:
        return None

    expires_at = parse_iso_datetime(session.get("expiresAt"))
    if expires_at is not None and expires_at <= utcnow():
        store.remove(Entity.SESSIONS, session["id"])
        return None

    user = store.get_by_id(Entity.USERS, session.get("userId"))
    if user is None:
        return None
    return SessionContext(user=user, session=session)


def revoke_session(store: RecordStore, token: str) -> bool:
    session = _find_session(store, token)
    if session is None:
        return False
    store.remove(Entity.SESSIONS, session["id"])
    return True


def revoke_user_sessions(store: RecordStore, user_id: int) -> int:
    """Drop every session for a user. Returns how many were removed."""
    sessions = [s for s in store.get_all(Entity.SESSIONS) if s.get("userId") == user_id]
    for session in sessions:
        store.remove(Entity.SESSIONS, session["id"])
    return len(sessions)
