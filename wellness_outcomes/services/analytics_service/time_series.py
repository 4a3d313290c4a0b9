"""Weekly cohort means of the three clinical instruments.

Week 0 is the baseline of the whole cohort. Week w (1..12) averages the
w-th follow-up of every user who has at least w follow-ups. Weeks with
fewer than the minimum cohort of contributing users are omitted.
"""
import logging
from datetime import date, timedelta
from typing import List, Optional, Sequence

from wellness_outcomes.shared.models import ClinicalScores, TimeSeriesDataPoint, User
from wellness_outcomes.shared.utils import round1, safe_mean

from .config import TIME_SERIES_ANCHOR, TIME_SERIES_WEEKS
from .k_anonymity import KAnonymityEnforcer

logger = logging.getLogger(__name__)


def week_date(week: int, anchor: date = TIME_SERIES_ANCHOR) -> str:
    """ISO date of a week's data point."""
    return (anchor + timedelta(days=7 * week)).isoformat()


def _mean_point(
    week: int,
    scores: Sequence[ClinicalScores],
    anchor: date,
) -> TimeSeriesDataPoint:
    return TimeSeriesDataPoint(
        date=week_date(week, anchor),
        week=week,
        phq9_mean=round1(safe_mean(s.phq9 for s in scores)),
        gad7_mean=round1(safe_mean(s.gad7 for s in scores)),
        who5_mean=round1(safe_mean(s.who5 for s in scores)),
        sample_size=len(scores),
    )


def build_time_series(
    users: Sequence[User],
    k_enforcer: Optional[KAnonymityEnforcer] = None,
    weeks: int = TIME_SERIES_WEEKS,
    anchor: date = TIME_SERIES_ANCHOR,
) -> List[TimeSeriesDataPoint]:
    """Baseline point plus every reportable weekly point, in week order.

    Args:
        users: Cohort of enrolled users
        k_enforcer: Minimum-cohort rule for weekly points (default k=5)
        weeks: Number of follow-up weeks to consider
        anchor: Date of the baseline point

    Returns:
        List of TimeSeriesDataPoint, week 0 first
    """
    k_enforcer = k_enforcer or KAnonymityEnforcer()

    series = [_mean_point(0, [u.baseline_scores for u in users], anchor)]

    for week in range(1, weeks + 1):
        scores = [u.follow_up_scores[week - 1] for u in users if len(u.follow_up_scores) >= week]
        result = k_enforcer.check_and_suppress(
            data=scores,
            group_size=len(scores),
            context=f"time_series_week_{week}",
        )
        if result.suppressed:
            continue
        series.append(_mean_point(week, result.data, anchor))

    logger.debug(
        "TIME_SERIES_BUILT",
        extra={
            "weeks_requested": weeks,
            "points_reported": len(series) - 1,
        }
    )
    return series
