"""Tests for the employer dashboard HTTP API."""
from unittest.mock import MagicMock

import pytest

from wellness_outcomes.conftest import improving_cohort, make_organization
from wellness_outcomes.services.analytics_service.config import AnalyticsConfig
from wellness_outcomes.services.analytics_service.engine import AnalyticsEngine
from wellness_outcomes.services.analytics_service.handler import app, set_engine
from wellness_outcomes.shared.database import InMemoryCohortRepository


@pytest.fixture
def client():
    """Flask test client."""
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def engine():
    """Fresh engine over two organizations for each test."""
    repository = InMemoryCohortRepository(
        organizations=[
            make_organization(org_id="org-a", name="Alpha Industries"),
            make_organization(org_id="org-small", name="Small Shop", enrolled_employees=2),
        ],
        users=improving_cohort("org-a", size=6) + improving_cohort("org-small", size=2),
    )
    e = AnalyticsEngine(repository, config=AnalyticsConfig(cors_allow_origin="https://dash.example"))
    set_engine(e)
    yield e
    set_engine(None)


@pytest.fixture
def failing_engine():
    """Engine whose every call raises."""
    e = MagicMock()
    e.config = AnalyticsConfig()
    e.get_organization_analytics.side_effect = RuntimeError("boom")
    e.get_all_organizations_analytics.side_effect = RuntimeError("boom")
    e.repository.list_organizations.side_effect = RuntimeError("boom")
    e.repository.get_organization.side_effect = RuntimeError("boom")
    set_engine(e)
    yield e
    set_engine(None)


class TestHealthEndpoint:

    def test_health_returns_200(self, client, engine):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.get_json()
        assert data["status"] == "ok"
        assert "timestamp" in data


class TestOrganizationsEndpoints:

    def test_list_organizations(self, client, engine):
        response = client.get("/api/organizations")

        assert response.status_code == 200
        body = response.get_json()
        assert body["success"] is True
        assert [o["orgId"] for o in body["data"]] == ["org-a", "org-small"]
        assert body["data"][0]["avgHourlyCost"] == 75

    def test_get_organization(self, client, engine):
        response = client.get("/api/organizations/org-a")

        assert response.status_code == 200
        assert response.get_json()["data"]["name"] == "Alpha Industries"

    def test_unknown_organization(self, client, engine):
        response = client.get("/api/organizations/nope")

        assert response.status_code == 404
        assert response.get_json() == {"success": False, "error": "Organization not found"}

    def test_list_failure_is_opaque(self, client, failing_engine):
        response = client.get("/api/organizations")

        assert response.status_code == 500
        assert response.get_json()["error"] == "Failed to fetch organizations"


class TestAnalyticsEndpoints:

    def test_organization_analytics(self, client, engine):
        response = client.get("/api/analytics/org-a")

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["minimumCohortMet"] is True
        assert data["clinical"]["phq9"]["meanChange"] == 10.0
        assert data["roi"]["programCost"] == 180000
        assert len(data["timeSeries"]) == 13

    def test_small_cohort_returns_data_with_flag(self, client, engine):
        response = client.get("/api/analytics/org-small")

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["minimumCohortMet"] is False
        assert [p["week"] for p in data["timeSeries"]] == [0]

    def test_unknown_organization(self, client, engine):
        response = client.get("/api/analytics/nope")

        assert response.status_code == 404
        assert response.get_json()["error"] == "Organization not found"

    def test_all_organizations(self, client, engine):
        response = client.get("/api/analytics")

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert [a["organization"]["orgId"] for a in data] == ["org-a", "org-small"]

    def test_failure_is_opaque(self, client, failing_engine):
        response = client.get("/api/analytics/org-a")

        assert response.status_code == 500
        body = response.get_json()
        assert body == {"success": False, "error": "Failed to compute analytics"}

    def test_all_failure_is_opaque(self, client, failing_engine):
        response = client.get("/api/analytics")

        assert response.status_code == 500


class TestReportEndpoint:

    def test_report_download(self, client, engine):
        response = client.get("/api/reports/org-a")

        assert response.status_code == 200
        assert response.mimetype == "text/html"
        disposition = response.headers["Content-Disposition"]
        assert disposition.startswith('attachment; filename="Alpha_Industries_Wellness_Report_')
        assert b"Alpha Industries" in response.data

    def test_filename_header_safe_for_imported_names(self, client):
        repository = InMemoryCohortRepository(
            organizations=[make_organization(org_id="org-q", name='Zoë "Quoted" GmbH')],
            users=improving_cohort("org-q", size=5),
        )
        set_engine(AnalyticsEngine(repository))
        try:
            response = client.get("/api/reports/org-q")
        finally:
            set_engine(None)

        assert response.status_code == 200
        assert response.headers["Content-Disposition"].startswith(
            'attachment; filename="Zo_Quoted_GmbH_Wellness_Report_'
        )

    def test_small_cohort_refused(self, client, engine):
        response = client.get("/api/reports/org-small")

        assert response.status_code == 400
        assert response.get_json() == {
            "success": False,
            "error": "Minimum cohort size not met for privacy compliance",
        }

    def test_unknown_organization(self, client, engine):
        response = client.get("/api/reports/nope")

        assert response.status_code == 404

    def test_failure_is_opaque(self, client, failing_engine):
        response = client.get("/api/reports/org-a")

        assert response.status_code == 500
        assert response.get_json()["error"] == "Failed to generate report"


class TestDebugStats:

    def test_stats(self, client, engine):
        response = client.get("/api/debug/stats")

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["totalOrganizations"] == 2
        assert data["totalUsers"] == 8
        assert data["usersByOrg"][1] == {"orgId": "org-small", "name": "Small Shop", "userCount": 2}

    def test_failure_is_opaque(self, client, failing_engine):
        response = client.get("/api/debug/stats")

        assert response.status_code == 500
        assert response.get_json()["error"] == "Failed to fetch stats"


class TestCors:

    def test_configured_origin_on_responses(self, client, engine):
        response = client.get("/api/health")

        assert response.headers["Access-Control-Allow-Origin"] == "https://dash.example"

    def test_preflight(self, client, engine):
        response = client.options("/api/analytics/org-a")

        assert response.status_code == 200
        assert "GET" in response.headers["Access-Control-Allow-Methods"]
        assert response.headers["Access-Control-Allow-Origin"] == "https://dash.example"
