from flask import Blueprint, jsonify, request

from laundry.decorators import require_auth, require_feature
from laundry.permissions import Feature
from laundry.services import reporting_service
from laundry.services.record_store import get_record_store


reports_bp = Blueprint("reports", __name__, url_prefix="/api/reports")


@reports_bp.get("/summary")
@require_auth
@require_feature(Feature.REPORTS)
def summary_report():
    try:
        report = reporting_service.summary_report(
            get_record_store(),
            start=request.args.get("start"),
            end=request.args.get("end"),
            outlet_id=request.args.get("outlet_id", type=int),
            status=request.args.get("status"),
        )
        return jsonify(report), 200
    except reporting_service.ReportError as exc:
        return jsonify({"error": str(exc)}), 400
