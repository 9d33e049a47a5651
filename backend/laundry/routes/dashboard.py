from flask import Blueprint, jsonify

from laundry.decorators import require_auth, require_feature
from laundry.permissions import Feature
from laundry.services import dashboard_service
from laundry.services.record_store import get_record_store


dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api/dashboard")


@dashboard_bp.get("")
@require_auth
@require_feature(Feature.DASHBOARD)
def dashboard():
    return jsonify(dashboard_service.dashboard_stats(get_record_store())), 200
