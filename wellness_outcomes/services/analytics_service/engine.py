"""Analytics engine: composes the calculators for one organization.

The engine reads through an injected CohortRepository and is otherwise
pure. Statistics are computed even below the minimum cohort size;
``minimum_cohort_met`` is advisory metadata for the display and export
paths.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from wellness_outcomes.shared.database import CohortRepository
from wellness_outcomes.shared.models import OrganizationAnalytics

from .clinical import calculate_clinical_outcomes
from .config import DISCLAIMER, AnalyticsConfig
from .engagement import calculate_engagement_metrics
from .k_anonymity import KAnonymityEnforcer
from .productivity import calculate_productivity_outcomes
from .roi import calculate_roi
from .time_series import build_time_series

logger = logging.getLogger(__name__)


class AnalyticsEngine:
    """Computes OrganizationAnalytics from a cohort repository."""

    def __init__(
        self,
        repository: CohortRepository,
        config: Optional[AnalyticsConfig] = None,
        k_enforcer: Optional[KAnonymityEnforcer] = None,
    ):
        """Initialize engine with dependencies.

        Args:
            repository: Read-only source of organizations and cohorts
            config: Analytics configuration
            k_enforcer: Minimum-cohort rule (injected for testing)
        """
        self.repository = repository
        self.config = config or AnalyticsConfig()
        self.k_enforcer = k_enforcer or KAnonymityEnforcer(
            k_threshold=self.config.minimum_cohort_size
        )

    def get_organization_analytics(self, org_id: str) -> Optional[OrganizationAnalytics]:
        """Compute the analytics snapshot for one organization.

        Args:
            org_id: Organization identifier

        Returns:
            OrganizationAnalytics, or None if the organization does not exist
        """
        organization = self.repository.get_organization(org_id)
        if organization is None:
            logger.info("ORGANIZATION_NOT_FOUND", extra={"org_id": org_id})
            return None

        users = self.repository.list_users(org_id)
        minimum_cohort_met = self.k_enforcer.meets_threshold(len(users))
        if not minimum_cohort_met:
            logger.warning(
                "COHORT_BELOW_MINIMUM",
                extra={
                    "org_id": org_id,
                    "cohort_size": len(users),
                    "k_threshold": self.k_enforcer.k_threshold,
                }
            )

        clinical = calculate_clinical_outcomes(users)
        productivity = calculate_productivity_outcomes(users, organization)
        engagement = calculate_engagement_metrics(users)
        roi = calculate_roi(productivity, organization)
        time_series = build_time_series(
            users,
            k_enforcer=self.k_enforcer,
            weeks=self.config.time_series_weeks,
        )

        logger.info(
            "ANALYTICS_COMPUTED",
            extra={
                "org_id": org_id,
                "cohort_size": len(users),
                "time_series_points": len(time_series),
                "minimum_cohort_met": minimum_cohort_met,
            }
        )

        return OrganizationAnalytics(
            organization=organization,
            clinical=clinical,
            productivity=productivity,
            engagement=engagement,
            roi=roi,
            time_series=tuple(time_series),
            generated_at=datetime.now(timezone.utc).isoformat(),
            disclaimer=DISCLAIMER,
            minimum_cohort_met=minimum_cohort_met,
        )

    def get_all_organizations_analytics(self) -> List[OrganizationAnalytics]:
        """Analytics for every organization in the repository."""
        results = []
        for organization in self.repository.list_organizations():
            analytics = self.get_organization_analytics(organization.org_id)
            if analytics is not None:
                results.append(analytics)
        return results
