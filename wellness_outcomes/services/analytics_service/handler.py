"""Analytics Service HTTP Handler - Employer Dashboard API.

Responses use a {"success": bool, "data" | "error": ...} envelope.
Unexpected failures are logged server side and returned as an opaque
500 message.

Endpoints:
- GET /api/health - Health check
- GET /api/organizations - List organizations
- GET /api/organizations/<org_id> - Organization details
- GET /api/analytics/<org_id> - Organization analytics
- GET /api/analytics - Analytics for all organizations
- GET /api/reports/<org_id> - HTML report download (minimum cohort required)
- GET /api/debug/stats - Cohort sizes per organization
"""
import logging
import os
from datetime import datetime, timezone
from typing import Optional

from flask import Flask, Response, jsonify, request

from wellness_outcomes.services.report_service import (
    ReportNotExportableError,
    ReportRenderer,
    ensure_exportable,
    report_filename,
)
from wellness_outcomes.shared.database import InMemoryCohortRepository

from .config import AnalyticsConfig
from .engine import AnalyticsEngine

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Global engine instance, built lazily from the environment
_engine: Optional[AnalyticsEngine] = None
_renderer: Optional[ReportRenderer] = None


def build_engine(config: Optional[AnalyticsConfig] = None) -> AnalyticsEngine:
    """Create an engine over the configured cohort source.

    Uses the JSON snapshot at COHORT_DATA_PATH if set, otherwise the
    seeded synthetic cohort.
    """
    config = config or AnalyticsConfig.from_env()
    if config.cohort_data_path:
        repository = InMemoryCohortRepository.from_json_file(config.cohort_data_path)
    else:
        repository = InMemoryCohortRepository.from_synthetic(seed=config.synthetic_seed)
    return AnalyticsEngine(repository, config=config)


def get_engine() -> AnalyticsEngine:
    """Get or create the global engine instance."""
    global _engine
    if _engine is None:
        _engine = build_engine()
    return _engine


def set_engine(engine: Optional[AnalyticsEngine]) -> None:
    """Set the global engine (for testing)."""
    global _engine
    _engine = engine


def get_renderer() -> ReportRenderer:
    global _renderer
    if _renderer is None:
        _renderer = ReportRenderer()
    return _renderer


def _success(data, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def _error(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


@app.after_request
def add_cors_headers(response: Response) -> Response:
    """Allow the dashboard origin to call the API."""
    origin = _engine.config.cors_allow_origin if _engine else os.getenv("CORS_ALLOW_ORIGIN", "*")
    response.headers["Access-Control-Allow-Origin"] = origin
    response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.route("/api/health", methods=["GET"])
def health():
    """Health check endpoint."""
    return jsonify({
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })


@app.route("/api/organizations", methods=["GET"])
def list_organizations():
    """List all organizations."""
    try:
        organizations = get_engine().repository.list_organizations()
        return _success([org.to_dict() for org in organizations])
    except Exception as e:
        logger.error("ORGANIZATIONS_LIST_ERROR", extra={"error": str(e)})
        return _error("Failed to fetch organizations", 500)


@app.route("/api/organizations/<org_id>", methods=["GET"])
def get_organization(org_id: str):
    """Get a single organization."""
    try:
        organization = get_engine().repository.get_organization(org_id)
        if organization is None:
            return _error("Organization not found", 404)
        return _success(organization.to_dict())
    except Exception as e:
        logger.error("ORGANIZATION_FETCH_ERROR", extra={"org_id": org_id, "error": str(e)})
        return _error("Failed to fetch organization", 500)


@app.route("/api/analytics/<org_id>", methods=["GET"])
def organization_analytics(org_id: str):
    """Get analytics for a single organization."""
    try:
        analytics = get_engine().get_organization_analytics(org_id)
        if analytics is None:
            return _error("Organization not found", 404)
        return _success(analytics.to_dict())
    except Exception:
        logger.exception("ANALYTICS_ERROR", extra={"org_id": org_id})
        return _error("Failed to compute analytics", 500)


@app.route("/api/analytics", methods=["GET"])
def all_analytics():
    """Get analytics for every organization."""
    try:
        results = get_engine().get_all_organizations_analytics()
        return _success([a.to_dict() for a in results])
    except Exception:
        logger.exception("ANALYTICS_ERROR", extra={"org_id": None})
        return _error("Failed to compute analytics", 500)


@app.route("/api/reports/<org_id>", methods=["GET"])
def download_report(org_id: str):
    """Download the HTML executive report for an organization.

    Returns 400 when the cohort is below the minimum size.
    """
    try:
        analytics = get_engine().get_organization_analytics(org_id)
        if analytics is None:
            return _error("Organization not found", 404)

        try:
            ensure_exportable(analytics)
        except ReportNotExportableError as e:
            return _error(str(e), 400)

        html = get_renderer().render_html(analytics)
        response = Response(html, mimetype="text/html")
        response.headers["Content-Disposition"] = (
            f'attachment; filename="{report_filename(analytics)}"'
        )
        return response
    except Exception:
        logger.exception("REPORT_GENERATION_ERROR", extra={"org_id": org_id})
        return _error("Failed to generate report", 500)


@app.route("/api/debug/stats", methods=["GET"])
def debug_stats():
    """Cohort sizes per organization."""
    try:
        repository = get_engine().repository
        organizations = repository.list_organizations()
        users_by_org = [
            {
                "orgId": org.org_id,
                "name": org.name,
                "userCount": repository.count_users(org.org_id),
            }
            for org in organizations
        ]
        return _success({
            "totalOrganizations": len(organizations),
            "totalUsers": sum(entry["userCount"] for entry in users_by_org),
            "usersByOrg": users_by_org,
        })
    except Exception as e:
        logger.error("STATS_ERROR", extra={"error": str(e)})
        return _error("Failed to fetch stats", 500)


def run_server(port: Optional[int] = None) -> None:
    """Run the development server."""
    engine = get_engine()
    logger.info(
        "ANALYTICS_SERVER_STARTING",
        extra={
            "organization_count": len(engine.repository.list_organizations()),
        }
    )
    app.run(host="0.0.0.0", port=port or int(os.getenv("PORT", "3001")), debug=False)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_server()
