"""Analytics result models.

Every result is an immutable snapshot computed from one cohort. ``to_dict``
emits the camelCase JSON contract consumed by the dashboard and the
report renderer. ``None`` in a numeric field means the figure could not
be computed (empty cohort or zero denominator) and serializes to null.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .wellness import Organization


@dataclass(frozen=True)
class SeverityBand:
    """Count of users falling in one PHQ-9 severity band."""
    label: str
    count: int
    percentage: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "count": self.count, "percentage": self.percentage}


@dataclass(frozen=True)
class SeverityMovement:
    """Band transitions between baseline and latest PHQ-9."""
    improved: int       # Moved to a lower severity band
    maintained: int     # Same band
    worsened: int       # Moved to a higher severity band

    @property
    def total(self) -> int:
        return self.improved + self.maintained + self.worsened

    def to_dict(self) -> Dict[str, Any]:
        return {
            "improved": self.improved,
            "maintained": self.maintained,
            "worsened": self.worsened,
        }


@dataclass(frozen=True)
class InstrumentOutcome:
    """Baseline vs. current summary for one clinical instrument."""
    baseline_mean: float
    current_mean: float
    mean_change: float
    improved_count: int
    improved_percent: Optional[float]


@dataclass(frozen=True)
class PHQ9Outcome(InstrumentOutcome):
    severity_movement: SeverityMovement = field(
        default_factory=lambda: SeverityMovement(0, 0, 0)
    )
    baseline_severity_distribution: Tuple[SeverityBand, ...] = ()
    current_severity_distribution: Tuple[SeverityBand, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "baselineMean": self.baseline_mean,
            "currentMean": self.current_mean,
            "meanChange": self.mean_change,
            "clinicallyImprovedCount": self.improved_count,
            "clinicallyImprovedPercent": self.improved_percent,
            "severityMovement": self.severity_movement.to_dict(),
            "baselineSeverityDistribution": [
                b.to_dict() for b in self.baseline_severity_distribution
            ],
            "currentSeverityDistribution": [
                b.to_dict() for b in self.current_severity_distribution
            ],
        }


@dataclass(frozen=True)
class GAD7Outcome(InstrumentOutcome):

    def to_dict(self) -> Dict[str, Any]:
        return {
            "baselineMean": self.baseline_mean,
            "currentMean": self.current_mean,
            "meanChange": self.mean_change,
            "clinicallyImprovedCount": self.improved_count,
            "clinicallyImprovedPercent": self.improved_percent,
        }


@dataclass(frozen=True)
class WHO5Outcome(InstrumentOutcome):
    """WHO-5 improvement is "meaningful" rather than "clinical"."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "baselineMean": self.baseline_mean,
            "currentMean": self.current_mean,
            "meanChange": self.mean_change,
            "meaningfullyImprovedCount": self.improved_count,
            "meaningfullyImprovedPercent": self.improved_percent,
        }


@dataclass(frozen=True)
class ClinicalOutcomes:
    phq9: PHQ9Outcome
    gad7: GAD7Outcome
    who5: WHO5Outcome

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phq9": self.phq9.to_dict(),
            "gad7": self.gad7.to_dict(),
            "who5": self.who5.to_dict(),
        }


@dataclass(frozen=True)
class ProductivityChange:
    """Baseline vs. current for one work-loss measure."""
    baseline_mean: float
    current_mean: float
    reduction: float
    reduction_percent: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "baselineMean": self.baseline_mean,
            "currentMean": self.current_mean,
            "reduction": self.reduction,
            "reductionPercent": self.reduction_percent,
        }


@dataclass(frozen=True)
class HoursRegained:
    total: int              # Quarterly, whole cohort
    per_employee: float
    annualized: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "perEmployee": self.per_employee,
            "annualized": self.annualized,
        }


@dataclass(frozen=True)
class CostSavings:
    low: int                # Conservative estimate
    mid: int
    high: int               # Optimistic estimate
    annualized: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "low": self.low,
            "mid": self.mid,
            "high": self.high,
            "annualized": self.annualized,
        }


@dataclass(frozen=True)
class ProductivityOutcomes:
    absenteeism: ProductivityChange
    presenteeism: ProductivityChange
    hours_regained: HoursRegained
    cost_savings: CostSavings

    def to_dict(self) -> Dict[str, Any]:
        return {
            "absenteeism": self.absenteeism.to_dict(),
            "presenteeism": self.presenteeism.to_dict(),
            "hoursRegained": self.hours_regained.to_dict(),
            "costSavings": self.cost_savings.to_dict(),
        }


@dataclass(frozen=True)
class EngagementMetrics:
    """Participation summary. Context for the outcomes, not an outcome."""
    enrolled_count: int
    engaged_count: int      # At least one session
    engagement_rate: Optional[float]
    avg_sessions_per_user: float
    dropout_rate: Optional[float]
    avg_time_to_first_session: float
    modality_split: Dict[str, int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enrolledCount": self.enrolled_count,
            "engagedCount": self.engaged_count,
            "engagementRate": self.engagement_rate,
            "avgSessionsPerUser": self.avg_sessions_per_user,
            "dropoutRate": self.dropout_rate,
            "avgTimeToFirstSession": self.avg_time_to_first_session,
            "modalitySplit": dict(self.modality_split),
        }


@dataclass(frozen=True)
class ROIMetrics:
    program_cost: float
    total_savings: int
    net_benefit: float
    roi: Optional[float]                # (savings - cost) / cost * 100
    payback_period: Optional[str]       # "N months" or "X.Y years"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "programCost": self.program_cost,
            "totalSavings": self.total_savings,
            "netBenefit": self.net_benefit,
            "roi": self.roi,
            "paybackPeriod": self.payback_period,
        }


@dataclass(frozen=True)
class TimeSeriesDataPoint:
    date: str
    week: int
    phq9_mean: float
    gad7_mean: float
    who5_mean: float
    sample_size: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "week": self.week,
            "phq9Mean": self.phq9_mean,
            "gad7Mean": self.gad7_mean,
            "who5Mean": self.who5_mean,
            "sampleSize": self.sample_size,
        }


@dataclass(frozen=True)
class OrganizationAnalytics:
    """Complete analytics snapshot for one organization."""
    organization: Organization
    clinical: ClinicalOutcomes
    productivity: ProductivityOutcomes
    engagement: EngagementMetrics
    roi: ROIMetrics
    time_series: Tuple[TimeSeriesDataPoint, ...]
    generated_at: str
    disclaimer: str
    minimum_cohort_met: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "organization": self.organization.to_dict(),
            "clinical": self.clinical.to_dict(),
            "productivity": self.productivity.to_dict(),
            "engagement": self.engagement.to_dict(),
            "roi": self.roi.to_dict(),
            "timeSeries": [p.to_dict() for p in self.time_series],
            "generatedAt": self.generated_at,
            "disclaimer": self.disclaimer,
            "minimumCohortMet": self.minimum_cohort_met,
        }
