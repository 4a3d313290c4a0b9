"""Clinical outcomes: mean change, meaningful improvement, severity bands.

PHQ-9 and GAD-7 improve when scores fall; WHO-5 improves when it rises.
Each user's "current" state is their latest follow-up, or their baseline
if they have none.
"""
from typing import List, Sequence, Tuple

from wellness_outcomes.shared.models import (
    ClinicalOutcomes,
    GAD7Outcome,
    PHQ9Outcome,
    SeverityBand,
    SeverityMovement,
    User,
    WHO5Outcome,
)
from wellness_outcomes.shared.utils import round1, safe_mean, safe_percent

from .config import CLINICAL_THRESHOLDS, PHQ9_SEVERITY_BANDS


def phq9_severity_index(score: float) -> int:
    """Index into PHQ9_SEVERITY_BANDS for a score.

    Bands are contiguous, so matching on the upper bound places every
    score in [0, 27] in exactly one band (fractional scores from imported
    data fall into the band whose upper bound they do not exceed).
    """
    for index, band in enumerate(PHQ9_SEVERITY_BANDS):
        if score <= band.max_score:
            return index
    return len(PHQ9_SEVERITY_BANDS) - 1


def phq9_severity_label(score: float) -> str:
    return PHQ9_SEVERITY_BANDS[phq9_severity_index(score)].label


def calculate_severity_distribution(scores: Sequence[float]) -> Tuple[SeverityBand, ...]:
    """Count and percentage of scores per severity band, in band order."""
    counts = [0] * len(PHQ9_SEVERITY_BANDS)
    for score in scores:
        counts[phq9_severity_index(score)] += 1

    total = len(scores)
    return tuple(
        SeverityBand(
            label=band.label,
            count=count,
            percentage=round1(safe_percent(count, total)),
        )
        for band, count in zip(PHQ9_SEVERITY_BANDS, counts)
    )


def calculate_severity_movement(users: Sequence[User]) -> SeverityMovement:
    """Compare each user's baseline band with their latest band."""
    improved = maintained = worsened = 0
    for user in users:
        baseline_index = phq9_severity_index(user.baseline_scores.phq9)
        current_index = phq9_severity_index(user.latest_scores.phq9)

        if current_index < baseline_index:
            improved += 1
        elif current_index > baseline_index:
            worsened += 1
        else:
            maintained += 1

    return SeverityMovement(improved=improved, maintained=maintained, worsened=worsened)


def _count_at_least(deltas: List[float], threshold: float) -> int:
    return sum(1 for d in deltas if d >= threshold)


def calculate_clinical_outcomes(users: Sequence[User]) -> ClinicalOutcomes:
    """Population-level clinical outcomes for a cohort.

    Args:
        users: Cohort of enrolled users

    Returns:
        ClinicalOutcomes for PHQ-9, GAD-7 and WHO-5
    """
    cohort_size = len(users)
    baselines = [u.baseline_scores for u in users]
    latest = [u.latest_scores for u in users]

    baseline_phq9 = [s.phq9 for s in baselines]
    current_phq9 = [s.phq9 for s in latest]
    baseline_gad7 = [s.gad7 for s in baselines]
    current_gad7 = [s.gad7 for s in latest]
    baseline_who5 = [s.who5 for s in baselines]
    current_who5 = [s.who5 for s in latest]

    # Lower is better: delta = baseline - current
    phq9_improved = _count_at_least(
        [b - c for b, c in zip(baseline_phq9, current_phq9)],
        CLINICAL_THRESHOLDS.PHQ9_MEANINGFUL_IMPROVEMENT,
    )
    gad7_improved = _count_at_least(
        [b - c for b, c in zip(baseline_gad7, current_gad7)],
        CLINICAL_THRESHOLDS.GAD7_MEANINGFUL_IMPROVEMENT,
    )
    # Higher is better: delta = current - baseline
    who5_improved = _count_at_least(
        [c - b for b, c in zip(baseline_who5, current_who5)],
        CLINICAL_THRESHOLDS.WHO5_MEANINGFUL_IMPROVEMENT,
    )

    phq9 = PHQ9Outcome(
        baseline_mean=round1(safe_mean(baseline_phq9)),
        current_mean=round1(safe_mean(current_phq9)),
        mean_change=round1(safe_mean(baseline_phq9) - safe_mean(current_phq9)),
        improved_count=phq9_improved,
        improved_percent=round1(safe_percent(phq9_improved, cohort_size)),
        severity_movement=calculate_severity_movement(users),
        baseline_severity_distribution=calculate_severity_distribution(baseline_phq9),
        current_severity_distribution=calculate_severity_distribution(current_phq9),
    )
    gad7 = GAD7Outcome(
        baseline_mean=round1(safe_mean(baseline_gad7)),
        current_mean=round1(safe_mean(current_gad7)),
        mean_change=round1(safe_mean(baseline_gad7) - safe_mean(current_gad7)),
        improved_count=gad7_improved,
        improved_percent=round1(safe_percent(gad7_improved, cohort_size)),
    )
    who5 = WHO5Outcome(
        baseline_mean=round1(safe_mean(baseline_who5)),
        current_mean=round1(safe_mean(current_who5)),
        mean_change=round1(safe_mean(current_who5) - safe_mean(baseline_who5)),
        improved_count=who5_improved,
        improved_percent=round1(safe_percent(who5_improved, cohort_size)),
    )

    return ClinicalOutcomes(phq9=phq9, gad7=gad7, who5=who5)
