"""Shared domain models for the Wellness Outcomes platform."""
from .wellness import (
    Modality,
    ClinicalScores,
    FollowUpScore,
    ProductivityMetrics,
    EngagementData,
    User,
    ReportingPeriod,
    Organization,
)
from .analytics import (
    SeverityBand,
    SeverityMovement,
    PHQ9Outcome,
    GAD7Outcome,
    WHO5Outcome,
    ClinicalOutcomes,
    ProductivityChange,
    HoursRegained,
    CostSavings,
    ProductivityOutcomes,
    EngagementMetrics,
    ROIMetrics,
    TimeSeriesDataPoint,
    OrganizationAnalytics,
)

__all__ = [
    "Modality",
    "ClinicalScores",
    "FollowUpScore",
    "ProductivityMetrics",
    "EngagementData",
    "User",
    "ReportingPeriod",
    "Organization",
    "SeverityBand",
    "SeverityMovement",
    "PHQ9Outcome",
    "GAD7Outcome",
    "WHO5Outcome",
    "ClinicalOutcomes",
    "ProductivityChange",
    "HoursRegained",
    "CostSavings",
    "ProductivityOutcomes",
    "EngagementMetrics",
    "ROIMetrics",
    "TimeSeriesDataPoint",
    "OrganizationAnalytics",
]
