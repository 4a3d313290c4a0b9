"""Engagement metrics: participation context for the outcome figures.

Averages are taken over the full cohort, including employees who never
attended a session.
"""
from typing import Sequence

from wellness_outcomes.shared.models import EngagementMetrics, Modality, User
from wellness_outcomes.shared.utils import round1, safe_mean, safe_percent


def calculate_engagement_metrics(users: Sequence[User]) -> EngagementMetrics:
    """Summarize program participation for a cohort."""
    cohort_size = len(users)
    engaged = sum(1 for u in users if u.engagement.sessions >= 1)
    dropped = sum(1 for u in users if u.engagement.dropout)

    modality_split = {m.value: 0 for m in Modality}
    for user in users:
        modality_split[user.engagement.modality.value] += 1

    return EngagementMetrics(
        enrolled_count=cohort_size,
        engaged_count=engaged,
        engagement_rate=round1(safe_percent(engaged, cohort_size)),
        avg_sessions_per_user=round1(safe_mean(u.engagement.sessions for u in users)),
        dropout_rate=round1(safe_percent(dropped, cohort_size)),
        avg_time_to_first_session=round1(
            safe_mean(u.engagement.time_to_first_session for u in users)
        ),
        modality_split=modality_split,
    )
