# Overview: Flask API routes for transaction listing; parses input and returns JSON responses.

from flask import Blueprint, jsonify, request

from laundry.decorators import require_auth, require_feature
from laundry.permissions import Feature
from laundry.services import transaction_service
from laundry.services.record_store import get_record_store


transactions_bp = Blueprint("transactions", __name__, url_prefix="/api/transactions")


@transactions_bp.get("")
@require_auth
@require_feature(Feature.TRANSACTIONS)
def list_transactions():
    """
    List transactions with display names resolved.

    Query params:
    - q: str (optional) - search laundry code, service or customer name
    - period: all|daily|monthly|yearly|custom (default all)
    - start, end: YYYY-MM-DD (used when period=custom)
    - page: int (optional, 1-indexed)
    - page_size: all|10|50|100 (default all)
    """
    try:
        result = transaction_service.list_transactions(
            get_record_store(),
            search=request.args.get("q"),
            period=request.args.get("period", "all"),
            start=request.args.get("start"),
            end=request.args.get("end"),
            page=request.args.get("page", type=int),
            page_size=request.args.get("page_size", "all"),
        )
        return jsonify(result), 200
    except transaction_service.TransactionError as exc:
        return jsonify({"error": str(exc)}), 400
