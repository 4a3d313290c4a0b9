"""Analytics Service configuration and clinical thresholds.

Sources:
- PHQ-9 severity bands: Kroenke et al., J Gen Intern Med 2001
- Minimal clinically important differences: PHQ-9 5 points,
  GAD-7 4 points, WHO-5 10 points (percentage scale)
"""
import os
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class SeverityBandDefinition:
    """Inclusive PHQ-9 score range for one severity label."""
    min_score: int
    max_score: int
    label: str
    color: str

    def contains(self, score: float) -> bool:
        return self.min_score <= score <= self.max_score


# Ordered, contiguous, non-overlapping; together they cover 0-27
PHQ9_SEVERITY_BANDS: Tuple[SeverityBandDefinition, ...] = (
    SeverityBandDefinition(0, 4, "Minimal", "#10B981"),
    SeverityBandDefinition(5, 9, "Mild", "#84CC16"),
    SeverityBandDefinition(10, 14, "Moderate", "#F59E0B"),
    SeverityBandDefinition(15, 19, "Moderately Severe", "#F97316"),
    SeverityBandDefinition(20, 27, "Severe", "#EF4444"),
)


@dataclass(frozen=True)
class ClinicalThresholds:
    """Improvement thresholds and the privacy floor."""
    PHQ9_MEANINGFUL_IMPROVEMENT: int = 5    # Reduction >= 5 points
    GAD7_MEANINGFUL_IMPROVEMENT: int = 4    # Reduction >= 4 points
    WHO5_MEANINGFUL_IMPROVEMENT: int = 10   # Increase >= 10 points
    MINIMUM_COHORT_SIZE: int = 5            # Privacy threshold


CLINICAL_THRESHOLDS = ClinicalThresholds()

# Standard working month used to convert presenteeism % into hours
MONTHLY_WORK_HOURS = 160

# Cohort data covers one quarter
ANNUALIZATION_FACTOR = 4

# Range around the mid cost-savings estimate
CONSERVATIVE_SAVINGS_FACTOR = 0.7
OPTIMISTIC_SAVINGS_FACTOR = 1.3

TIME_SERIES_WEEKS = 12
TIME_SERIES_ANCHOR = date(2025, 7, 1)

DISCLAIMER = (
    "All data is aggregated and anonymized. This is a prototype demonstration "
    "and should not be used for clinical decisions."
)


@dataclass
class AnalyticsConfig:
    """Configuration for the analytics service."""
    minimum_cohort_size: int = CLINICAL_THRESHOLDS.MINIMUM_COHORT_SIZE
    time_series_weeks: int = TIME_SERIES_WEEKS
    cors_allow_origin: str = "*"
    cohort_data_path: Optional[str] = None
    synthetic_seed: int = 12345

    @classmethod
    def from_env(cls) -> "AnalyticsConfig":
        """Create config from environment variables.

        Environment variables:
            MINIMUM_COHORT_SIZE: Privacy threshold (default 5)
            TIME_SERIES_WEEKS: Weeks of follow-up to chart (default 12)
            CORS_ALLOW_ORIGIN: Allowed dashboard origin (default *)
            COHORT_DATA_PATH: JSON cohort snapshot (default: synthetic cohort)
            SYNTHETIC_SEED: Seed for the synthetic cohort (default 12345)
        """
        return cls(
            minimum_cohort_size=int(
                os.getenv("MINIMUM_COHORT_SIZE", str(CLINICAL_THRESHOLDS.MINIMUM_COHORT_SIZE))
            ),
            time_series_weeks=int(os.getenv("TIME_SERIES_WEEKS", str(TIME_SERIES_WEEKS))),
            cors_allow_origin=os.getenv("CORS_ALLOW_ORIGIN", "*"),
            cohort_data_path=os.getenv("COHORT_DATA_PATH") or None,
            synthetic_seed=int(os.getenv("SYNTHETIC_SEED", "12345")),
        )
