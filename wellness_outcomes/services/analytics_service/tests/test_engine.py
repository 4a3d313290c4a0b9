"""Tests for the analytics engine."""
from unittest.mock import MagicMock

import pytest

from wellness_outcomes.conftest import improving_cohort, make_organization
from wellness_outcomes.services.analytics_service.config import DISCLAIMER, AnalyticsConfig
from wellness_outcomes.services.analytics_service.engine import AnalyticsEngine
from wellness_outcomes.shared.database import CohortRepository, InMemoryCohortRepository


@pytest.fixture
def repository():
    return InMemoryCohortRepository(
        organizations=[
            make_organization(org_id="org-a", name="Alpha"),
            make_organization(org_id="org-b", name="Beta", enrolled_employees=3),
        ],
        users=improving_cohort("org-a", size=6) + improving_cohort("org-b", size=3),
    )


@pytest.fixture
def engine(repository):
    return AnalyticsEngine(repository)


class TestOrganizationAnalytics:

    def test_unknown_organization_returns_none(self, engine):
        assert engine.get_organization_analytics("org-missing") is None

    def test_full_snapshot(self, engine):
        analytics = engine.get_organization_analytics("org-a")

        assert analytics.organization.org_id == "org-a"
        assert analytics.minimum_cohort_met is True
        assert analytics.disclaimer == DISCLAIMER
        assert analytics.clinical.phq9.mean_change == 10.0
        assert analytics.engagement.enrolled_count == 6
        assert len(analytics.time_series) == 13

    def test_small_cohort_still_computed(self, engine):
        analytics = engine.get_organization_analytics("org-b")

        assert analytics.minimum_cohort_met is False
        assert analytics.clinical.phq9.baseline_mean == 20.0
        assert [p.week for p in analytics.time_series] == [0]

    def test_deterministic_apart_from_timestamp(self, engine):
        first = engine.get_organization_analytics("org-a").to_dict()
        second = engine.get_organization_analytics("org-a").to_dict()

        first.pop("generatedAt")
        second.pop("generatedAt")
        assert first == second

    def test_generated_at_is_iso_timestamp(self, engine):
        analytics = engine.get_organization_analytics("org-a")

        assert "T" in analytics.generated_at

    def test_configured_minimum_cohort(self, repository):
        engine = AnalyticsEngine(repository, config=AnalyticsConfig(minimum_cohort_size=3))

        analytics = engine.get_organization_analytics("org-b")

        assert analytics.minimum_cohort_met is True
        assert len(analytics.time_series) == 13

    def test_configured_weeks(self, repository):
        engine = AnalyticsEngine(repository, config=AnalyticsConfig(time_series_weeks=4))

        analytics = engine.get_organization_analytics("org-a")

        assert [p.week for p in analytics.time_series] == [0, 1, 2, 3, 4]


class TestAllOrganizations:

    def test_one_entry_per_organization(self, engine):
        results = engine.get_all_organizations_analytics()

        assert [a.organization.org_id for a in results] == ["org-a", "org-b"]

    def test_empty_repository(self):
        engine = AnalyticsEngine(InMemoryCohortRepository(organizations=[], users=[]))

        assert engine.get_all_organizations_analytics() == []


class TestRepositoryInjection:

    def test_reads_only_through_repository(self):
        repository = MagicMock(spec=CohortRepository)
        repository.get_organization.return_value = make_organization(org_id="org-x")
        repository.list_users.return_value = improving_cohort("org-x", size=5)

        analytics = AnalyticsEngine(repository).get_organization_analytics("org-x")

        repository.get_organization.assert_called_once_with("org-x")
        repository.list_users.assert_called_once_with("org-x")
        assert analytics.minimum_cohort_met is True
