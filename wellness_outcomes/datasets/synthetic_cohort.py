"""Synthetic cohort generator for demos and local development.

Produces realistic but entirely synthetic employee records for a fixed
set of demo organizations. Output is deterministic for a given seed.

Each user gets:
- A severity profile (mild, moderate or severe, moderate twice as likely)
  that sets baseline clinical and productivity ranges
- Engagement: ~18% drop out after 1-3 sessions, the rest attend 4-14
- 12 weekly follow-ups that improve faster for more severe and more
  engaged users, with diminishing returns and noise
- Current productivity that improves in proportion to PHQ-9 improvement

Usage:
    generator = SyntheticCohortGenerator(SyntheticCohortConfig(seed=7))
    organizations, users = generator.generate()
"""
import logging
import random
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from wellness_outcomes.shared.models import (
    ClinicalScores,
    EngagementData,
    FollowUpScore,
    Modality,
    Organization,
    ProductivityMetrics,
    ReportingPeriod,
    User,
)
from wellness_outcomes.shared.models.wellness import GAD7_MAX, PHQ9_MAX, WHO5_MAX
from wellness_outcomes.shared.utils import round_int

logger = logging.getLogger(__name__)

# Inclusive (low, high) ranges per severity profile
BASELINE_SCORE_RANGES: Dict[str, Dict[str, Tuple[int, int]]] = {
    "mild": {"phq9": (5, 12), "gad7": (4, 10), "who5": (45, 65)},
    "moderate": {"phq9": (10, 18), "gad7": (8, 15), "who5": (30, 50)},
    "severe": {"phq9": (15, 25), "gad7": (12, 20), "who5": (15, 35)},
}

BASELINE_PRODUCTIVITY_RANGES: Dict[str, Dict[str, Tuple[int, int]]] = {
    "mild": {"absenteeism": (4, 12), "presenteeism": (10, 25)},
    "moderate": {"absenteeism": (8, 20), "presenteeism": (20, 40)},
    "severe": {"absenteeism": (16, 32), "presenteeism": (35, 55)},
}

SEVERITY_PROFILES = ("mild", "moderate", "moderate", "severe")


@dataclass(frozen=True)
class DemoOrganization:
    """Static description of a demo organization."""
    org_id: str
    name: str
    industry: str
    total_employees: int
    enrolled_employees: int
    avg_hourly_cost: float
    program_cost: float


DEMO_ORGANIZATIONS: Tuple[DemoOrganization, ...] = (
    DemoOrganization("org-techcorp", "TechCorp Industries", "Technology", 2500, 320, 75, 180000),
    DemoOrganization("org-financeplus", "FinancePlus Bank", "Financial Services", 4200, 485, 85, 275000),
    DemoOrganization("org-healthwise", "HealthWise Medical", "Healthcare", 1800, 210, 65, 125000),
    DemoOrganization("org-retailmax", "RetailMax Group", "Retail", 8500, 680, 35, 320000),
)


@dataclass
class SyntheticCohortConfig:
    """Configuration for synthetic cohort generation."""
    seed: int = 12345
    week_count: int = 12
    dropout_rate: float = 0.18
    start_date: date = date(2025, 7, 1)
    end_date: date = date(2025, 9, 30)
    organizations: Sequence[DemoOrganization] = field(default_factory=lambda: DEMO_ORGANIZATIONS)


class SyntheticCohortGenerator:
    """Seeded generator of organizations and their enrolled users."""

    def __init__(self, config: Optional[SyntheticCohortConfig] = None):
        self.config = config or SyntheticCohortConfig()
        self._rng = random.Random(self.config.seed)

    def generate(self) -> Tuple[List[Organization], List[User]]:
        """Generate every configured organization and one user per enrollee.

        Returns:
            (organizations, users)
        """
        # Reset so repeated calls return identical data
        self._rng.seed(self.config.seed)

        period = ReportingPeriod(
            start=self.config.start_date.isoformat(),
            end=self.config.end_date.isoformat(),
        )
        organizations = [
            Organization(
                org_id=demo.org_id,
                name=demo.name,
                industry=demo.industry,
                total_employees=demo.total_employees,
                enrolled_employees=demo.enrolled_employees,
                avg_hourly_cost=demo.avg_hourly_cost,
                program_cost=demo.program_cost,
                reporting_period=period,
            )
            for demo in self.config.organizations
        ]

        users = [
            self.generate_user(f"user-{org.org_id}-{i}", org.org_id)
            for org in organizations
            for i in range(org.enrolled_employees)
        ]

        logger.info(
            "SYNTHETIC_COHORT_GENERATED",
            extra={
                "seed": self.config.seed,
                "organization_count": len(organizations),
                "user_count": len(users),
            }
        )
        return organizations, users

    def generate_user(self, user_id: str, org_id: str) -> User:
        """Generate one user's full longitudinal record."""
        profile = self._rng.choice(SEVERITY_PROFILES)
        baseline_scores = self._baseline_scores(profile)
        engagement = self._engagement()
        follow_ups = self._follow_up_scores(baseline_scores, engagement)
        baseline_productivity = self._baseline_productivity(profile)

        clinical_improvement = baseline_scores.phq9 - follow_ups[-1].phq9 if follow_ups else 0
        if engagement.dropout:
            engagement_factor = 0.3
        elif engagement.sessions >= 6:
            engagement_factor = 1.0
        else:
            engagement_factor = 0.6

        return User(
            user_id=user_id,
            org_id=org_id,
            enrollment_date=self.config.start_date.isoformat(),
            baseline_scores=baseline_scores,
            follow_up_scores=tuple(follow_ups),
            baseline_productivity=baseline_productivity,
            current_productivity=self._current_productivity(
                baseline_productivity, clinical_improvement, engagement_factor
            ),
            engagement=engagement,
        )

    def _randint(self, bounds: Tuple[int, int]) -> int:
        return self._rng.randint(bounds[0], bounds[1])

    def _baseline_scores(self, profile: str) -> ClinicalScores:
        ranges = BASELINE_SCORE_RANGES[profile]
        return ClinicalScores(
            phq9=self._randint(ranges["phq9"]),
            gad7=self._randint(ranges["gad7"]),
            who5=self._randint(ranges["who5"]),
        )

    def _baseline_productivity(self, profile: str) -> ProductivityMetrics:
        ranges = BASELINE_PRODUCTIVITY_RANGES[profile]
        return ProductivityMetrics(
            absenteeism_hours=self._randint(ranges["absenteeism"]),
            presenteeism_percent=self._randint(ranges["presenteeism"]),
        )

    def _engagement(self) -> EngagementData:
        dropout = self._rng.random() < self.config.dropout_rate
        sessions = self._rng.randint(1, 3) if dropout else self._rng.randint(4, 14)
        return EngagementData(
            sessions=sessions,
            modality=self._rng.choice(list(Modality)),
            time_to_first_session=self._rng.randint(1, 14),
            dropout=dropout,
        )

    def _follow_up_scores(
        self,
        baseline: ClinicalScores,
        engagement: EngagementData,
    ) -> List[FollowUpScore]:
        week_count = self.config.week_count

        if engagement.dropout:
            engagement_factor = 0.3
        elif engagement.sessions >= 8:
            engagement_factor = 1.0
        elif engagement.sessions >= 4:
            engagement_factor = 0.7
        else:
            engagement_factor = 0.4

        # Weekly improvement rates, higher for more severe cases
        phq9_rate = (0.8 if baseline.phq9 > 15 else 0.5 if baseline.phq9 > 10 else 0.3) * engagement_factor
        gad7_rate = (0.6 if baseline.gad7 > 12 else 0.4 if baseline.gad7 > 8 else 0.2) * engagement_factor
        who5_rate = (2.5 if baseline.who5 < 40 else 1.8 if baseline.who5 < 55 else 1.0) * engagement_factor

        phq9, gad7, who5 = float(baseline.phq9), float(baseline.gad7), float(baseline.who5)
        scores = []
        for week in range(1, week_count + 1):
            variance = 0.85 + self._rng.random() * 0.3
            diminishing = 1 - (week / (week_count + 5))

            phq9 = _clamp(
                phq9 - phq9_rate * diminishing * variance + (self._rng.random() - 0.6) * 1.5,
                PHQ9_MAX,
            )
            gad7 = _clamp(
                gad7 - gad7_rate * diminishing * variance + (self._rng.random() - 0.6) * 1.2,
                GAD7_MAX,
            )
            who5 = _clamp(
                who5 + who5_rate * diminishing * variance + (self._rng.random() - 0.4) * 3,
                WHO5_MAX,
            )

            scores.append(FollowUpScore(
                phq9=round_int(phq9),
                gad7=round_int(gad7),
                who5=round_int(who5),
                date=(self.config.start_date + timedelta(days=7 * week)).isoformat(),
                week_number=week,
            ))
        return scores

    def _current_productivity(
        self,
        baseline: ProductivityMetrics,
        clinical_improvement: float,
        engagement_factor: float,
    ) -> ProductivityMetrics:
        improvement = (clinical_improvement / 10) * engagement_factor
        absenteeism = baseline.absenteeism_hours * (
            1 - improvement * 0.4 - self._rng.random() * 0.15
        )
        presenteeism = baseline.presenteeism_percent * (
            1 - improvement * 0.35 - self._rng.random() * 0.1
        )
        return ProductivityMetrics(
            absenteeism_hours=max(0, round_int(absenteeism)),
            presenteeism_percent=min(100, max(0, round_int(presenteeism))),
        )


def _clamp(value: float, upper: float) -> float:
    return max(0.0, min(upper, value))
