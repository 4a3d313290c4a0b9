"""Analytics Service: organization-level wellness outcome analytics.

Computes, for one employer's enrolled cohort:
- Clinical outcomes (PHQ-9, GAD-7, WHO-5 mean change, meaningful
  improvement, PHQ-9 severity bands and movement)
- Productivity outcomes (absenteeism, presenteeism, hours regained,
  cost savings range)
- Engagement metrics (participation, dropout, modality split)
- ROI (net benefit, return percentage, payback period)
- Weekly time series with small-sample weeks suppressed

Aggregates over fewer than 5 employees are suppressed or flagged so
that no individual can be identified from the dashboard.

The Flask app lives in ``handler`` and is imported from there.
"""

from .config import (
    AnalyticsConfig,
    ClinicalThresholds,
    SeverityBandDefinition,
    CLINICAL_THRESHOLDS,
    PHQ9_SEVERITY_BANDS,
    DISCLAIMER,
)
from .k_anonymity import (
    KAnonymityEnforcer,
    AggregateResult,
    K_ANONYMITY_THRESHOLD,
)
from .clinical import calculate_clinical_outcomes
from .productivity import calculate_productivity_outcomes
from .engagement import calculate_engagement_metrics
from .roi import calculate_roi
from .time_series import build_time_series
from .engine import AnalyticsEngine

__all__ = [
    "AnalyticsConfig",
    "ClinicalThresholds",
    "SeverityBandDefinition",
    "CLINICAL_THRESHOLDS",
    "PHQ9_SEVERITY_BANDS",
    "DISCLAIMER",
    "KAnonymityEnforcer",
    "AggregateResult",
    "K_ANONYMITY_THRESHOLD",
    "calculate_clinical_outcomes",
    "calculate_productivity_outcomes",
    "calculate_engagement_metrics",
    "calculate_roi",
    "build_time_series",
    "AnalyticsEngine",
]
