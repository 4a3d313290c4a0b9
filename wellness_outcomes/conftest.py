"""Shared fixtures: small hand-built cohorts with known statistics."""
from datetime import date, timedelta
from typing import Optional, Sequence, Tuple

import pytest

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

ANCHOR = date(2025, 7, 1)


def make_user(
    user_id: str = "user-1",
    org_id: str = "org-test",
    baseline: Tuple[float, float, float] = (15, 12, 40),
    follow_ups: Sequence[Tuple[float, float, float]] = (),
    absenteeism: Tuple[float, float] = (10, 8),
    presenteeism: Tuple[float, float] = (30, 25),
    sessions: int = 6,
    modality: Modality = Modality.VIDEO,
    time_to_first_session: float = 3,
    dropout: bool = False,
) -> User:
    """Build a user; follow_ups are (phq9, gad7, who5) for weeks 1..n."""
    return User(
        user_id=user_id,
        org_id=org_id,
        enrollment_date=ANCHOR.isoformat(),
        baseline_scores=ClinicalScores(*baseline),
        follow_up_scores=tuple(
            FollowUpScore(
                phq9=phq9,
                gad7=gad7,
                who5=who5,
                date=(ANCHOR + timedelta(days=7 * week)).isoformat(),
                week_number=week,
            )
            for week, (phq9, gad7, who5) in enumerate(follow_ups, start=1)
        ),
        baseline_productivity=ProductivityMetrics(absenteeism[0], presenteeism[0]),
        current_productivity=ProductivityMetrics(absenteeism[1], presenteeism[1]),
        engagement=EngagementData(
            sessions=sessions,
            modality=modality,
            time_to_first_session=time_to_first_session,
            dropout=dropout,
        ),
    )


def make_organization(
    org_id: str = "org-test",
    name: str = "Test Corp",
    avg_hourly_cost: float = 75,
    program_cost: float = 180000,
    enrolled_employees: Optional[int] = None,
) -> Organization:
    return Organization(
        org_id=org_id,
        name=name,
        industry="Technology",
        total_employees=1000,
        enrolled_employees=enrolled_employees if enrolled_employees is not None else 5,
        avg_hourly_cost=avg_hourly_cost,
        program_cost=program_cost,
        reporting_period=ReportingPeriod(start="2025-07-01", end="2025-09-30"),
    )


def improving_cohort(org_id: str = "org-test", size: int = 5):
    """Users whose PHQ-9 falls 20 -> 10, GAD-7 15 -> 10, WHO-5 30 -> 45."""
    return [
        make_user(
            user_id=f"user-{org_id}-{i}",
            org_id=org_id,
            baseline=(20, 15, 30),
            follow_ups=[(18, 14, 33)] * 11 + [(10, 10, 45)],
        )
        for i in range(size)
    ]


@pytest.fixture
def user_factory():
    return make_user


@pytest.fixture
def organization_factory():
    return make_organization


@pytest.fixture
def cohort_factory():
    return improving_cohort
