# backend/laundry/routes/system.py
"""
System health and version endpoints.
"""

import sys
import time
from flask import Blueprint, current_app

from ..constants import Entity
from ..services.record_store import get_record_store
from laundry.time_utils import utcnow

system_bp = Blueprint("system", __name__)

API_VERSION = "1.0.0"


def check_storage_health() -> dict:
    """
    Check that every known collection can be read and decoded.

    Returns dict with status and per-collection record counts.
    """
    start_time = time.time()
    try:
        store = get_record_store()
        counts = {entity: len(store.get_all(entity)) for entity in Entity.ALL}
        elapsed_ms = (time.time() - start_time) * 1000
        return {
            "status": "healthy",
            "latency_ms": round(elapsed_ms, 2),
            "backend": current_app.config.get("STORAGE_BACKEND", "sql"),
            "details": counts,
        }
    except Exception:
        elapsed_ms = (time.time() - start_time) * 1000
        current_app.logger.exception("Storage health check failed")
        return {
            "status": "unhealthy",
            "latency_ms": round(elapsed_ms, 2),
            "error": "Storage error",
        }


@system_bp.get("/health")
def health():
    """
    Returns:
    - 200: storage readable
    - 503: storage unreadable
    """
    storage_health = check_storage_health()
    http_status = 200 if storage_health["status"] == "healthy" else 503
    return {
        "status": storage_health["status"],
        "timestamp": utcnow().isoformat() + "Z",
        "checks": {"storage": storage_health},
    }, http_status


@system_bp.get("/version")
def version():
    """Non-sensitive deployment information."""
    env = "production" if not current_app.debug else "development"
    return {
        "api_version": API_VERSION,
        "environment": env,
        "python_version": sys.version.split()[0],
        "server_time": utcnow().isoformat() + "Z",
    }
