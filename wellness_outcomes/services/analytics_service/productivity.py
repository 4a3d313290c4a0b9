"""Productivity outcomes: absenteeism, presenteeism and cost savings.

Hours-regained model:
- presenteeism hours = presenteeism % / 100 * 160 monthly work hours
- per employee = absenteeism reduction + presenteeism hours reduction
- total = per employee * cohort size, treated as one quarter
- annualized = total * 4

Cost savings value the quarterly total at the organization's average
hourly cost, with a 70%/130% range around the mid estimate.
"""
from typing import Sequence

from wellness_outcomes.shared.models import (
    CostSavings,
    HoursRegained,
    Organization,
    ProductivityChange,
    ProductivityOutcomes,
    User,
)
from wellness_outcomes.shared.utils import round1, round_int, safe_mean, safe_percent

from .config import (
    ANNUALIZATION_FACTOR,
    CONSERVATIVE_SAVINGS_FACTOR,
    MONTHLY_WORK_HOURS,
    OPTIMISTIC_SAVINGS_FACTOR,
)


def presenteeism_hours(presenteeism_percent: float) -> float:
    """Monthly hours lost to presenteeism at a given loss percentage."""
    return (presenteeism_percent / 100) * MONTHLY_WORK_HOURS


def _change(baseline_mean: float, current_mean: float) -> ProductivityChange:
    reduction = baseline_mean - current_mean
    return ProductivityChange(
        baseline_mean=round1(baseline_mean),
        current_mean=round1(current_mean),
        reduction=round1(reduction),
        reduction_percent=round1(safe_percent(reduction, baseline_mean)),
    )


def calculate_productivity_outcomes(
    users: Sequence[User],
    organization: Organization,
) -> ProductivityOutcomes:
    """Work-loss deltas and projected savings for a cohort.

    Args:
        users: Cohort of enrolled users
        organization: Organization supplying the average hourly cost

    Returns:
        ProductivityOutcomes with rounded reporting figures
    """
    baseline_absenteeism = safe_mean(u.baseline_productivity.absenteeism_hours for u in users)
    current_absenteeism = safe_mean(u.current_productivity.absenteeism_hours for u in users)
    baseline_presenteeism = safe_mean(u.baseline_productivity.presenteeism_percent for u in users)
    current_presenteeism = safe_mean(u.current_productivity.presenteeism_percent for u in users)

    absenteeism_reduction = baseline_absenteeism - current_absenteeism

    hours_per_employee = absenteeism_reduction + (
        presenteeism_hours(baseline_presenteeism) - presenteeism_hours(current_presenteeism)
    )
    total_hours = hours_per_employee * len(users)

    return ProductivityOutcomes(
        absenteeism=_change(baseline_absenteeism, current_absenteeism),
        presenteeism=_change(baseline_presenteeism, current_presenteeism),
        hours_regained=HoursRegained(
            total=round_int(total_hours),
            per_employee=round1(hours_per_employee),
            annualized=round_int(total_hours * ANNUALIZATION_FACTOR),
        ),
        cost_savings=project_cost_savings(total_hours, organization.avg_hourly_cost),
    )


def project_cost_savings(total_hours_regained: float, avg_hourly_cost: float) -> CostSavings:
    """Value quarterly hours regained as a low/mid/high savings range.

    Args:
        total_hours_regained: Quarterly hours regained across the cohort
        avg_hourly_cost: Fully loaded hourly cost per employee

    Returns:
        CostSavings rounded to whole currency units
    """
    mid = total_hours_regained * avg_hourly_cost
    return CostSavings(
        low=round_int(mid * CONSERVATIVE_SAVINGS_FACTOR),
        mid=round_int(mid),
        high=round_int(mid * OPTIMISTIC_SAVINGS_FACTOR),
        annualized=round_int(mid * ANNUALIZATION_FACTOR),
    )
