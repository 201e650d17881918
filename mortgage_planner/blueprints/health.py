"""Health check blueprint."""

from flask import Blueprint, Response, jsonify

health_bp = Blueprint("health", __name__)

SERVICE_NAME = "mortgage-planner"


@health_bp.route("/healthz")
def health_check() -> Response:
    """Liveness probe for the planner API.

    Returns:
        JSON response with status and service name
    """
    return jsonify({"status": "ok", "service": SERVICE_NAME})
