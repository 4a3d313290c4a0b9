"""Cohort domain models: employees enrolled in a wellness program.

Records are immutable snapshots. A user's longitudinal clinical history is
a baseline plus up to 12 weekly follow-ups, ordered by week number.

Instrument ranges:
- PHQ-9 (depression): 0-27, lower is better
- GAD-7 (anxiety): 0-21, lower is better
- WHO-5 (well-being, scaled): 0-100, higher is better
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

PHQ9_MAX = 27
GAD7_MAX = 21
WHO5_MAX = 100
MAX_FOLLOW_UP_WEEKS = 12


class Modality(Enum):
    """Care delivery channel used by an employee."""
    VIDEO = "video"
    CHAT = "chat"
    PHONE = "phone"
    MIXED = "mixed"


@dataclass(frozen=True)
class ClinicalScores:
    """Snapshot of the three clinical instruments."""
    phq9: float
    gad7: float
    who5: float

    def __post_init__(self):
        if not 0 <= self.phq9 <= PHQ9_MAX:
            raise ValueError(f"PHQ-9 must be 0-{PHQ9_MAX}, got {self.phq9}")
        if not 0 <= self.gad7 <= GAD7_MAX:
            raise ValueError(f"GAD-7 must be 0-{GAD7_MAX}, got {self.gad7}")
        if not 0 <= self.who5 <= WHO5_MAX:
            raise ValueError(f"WHO-5 must be 0-{WHO5_MAX}, got {self.who5}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClinicalScores":
        return cls(phq9=data["phq9"], gad7=data["gad7"], who5=data["who5"])

    def to_dict(self) -> Dict[str, Any]:
        return {"phq9": self.phq9, "gad7": self.gad7, "who5": self.who5}


@dataclass(frozen=True)
class FollowUpScore(ClinicalScores):
    """One weekly observation after enrollment."""
    date: str = ""
    week_number: int = 1

    def __post_init__(self):
        super().__post_init__()
        if not 1 <= self.week_number <= MAX_FOLLOW_UP_WEEKS:
            raise ValueError(
                f"Week number must be 1-{MAX_FOLLOW_UP_WEEKS}, got {self.week_number}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FollowUpScore":
        return cls(
            phq9=data["phq9"],
            gad7=data["gad7"],
            who5=data["who5"],
            date=data["date"],
            week_number=data["weekNumber"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "weekNumber": self.week_number,
            **super().to_dict(),
        }


@dataclass(frozen=True)
class ProductivityMetrics:
    """Monthly work-loss measures."""
    absenteeism_hours: float        # Hours missed per month
    presenteeism_percent: float     # % productivity loss while at work

    def __post_init__(self):
        if self.absenteeism_hours < 0:
            raise ValueError(
                f"Absenteeism hours must be >= 0, got {self.absenteeism_hours}"
            )
        if not 0 <= self.presenteeism_percent <= 100:
            raise ValueError(
                f"Presenteeism must be 0-100, got {self.presenteeism_percent}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductivityMetrics":
        return cls(
            absenteeism_hours=data["absenteeismHours"],
            presenteeism_percent=data["presenteeismPercent"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "absenteeismHours": self.absenteeism_hours,
            "presenteeismPercent": self.presenteeism_percent,
        }


@dataclass(frozen=True)
class EngagementData:
    """Program usage for a single employee."""
    sessions: int
    modality: Modality
    time_to_first_session: float    # Days from enrollment
    dropout: bool

    def __post_init__(self):
        if self.sessions < 0:
            raise ValueError(f"Sessions must be >= 0, got {self.sessions}")
        if self.time_to_first_session < 0:
            raise ValueError(
                f"Time to first session must be >= 0, got {self.time_to_first_session}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngagementData":
        return cls(
            sessions=data["sessions"],
            modality=Modality(data["modality"]),
            time_to_first_session=data["timeToFirstSession"],
            dropout=bool(data["dropout"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sessions": self.sessions,
            "modality": self.modality.value,
            "timeToFirstSession": self.time_to_first_session,
            "dropout": self.dropout,
        }


@dataclass(frozen=True)
class User:
    """An enrolled employee's longitudinal record."""
    user_id: str
    org_id: str
    baseline_scores: ClinicalScores
    baseline_productivity: ProductivityMetrics
    current_productivity: ProductivityMetrics
    engagement: EngagementData
    follow_up_scores: Tuple[FollowUpScore, ...] = field(default_factory=tuple)
    enrollment_date: str = ""

    def __post_init__(self):
        # Normalize to an immutable, week-ordered sequence
        ordered = tuple(sorted(self.follow_up_scores, key=lambda s: s.week_number))
        weeks = [s.week_number for s in ordered]
        if len(set(weeks)) != len(weeks):
            raise ValueError(f"Duplicate follow-up week numbers: {weeks}")
        object.__setattr__(self, "follow_up_scores", ordered)

    @property
    def latest_scores(self) -> ClinicalScores:
        """Most recent follow-up, or the baseline if there are none."""
        if not self.follow_up_scores:
            return self.baseline_scores
        return self.follow_up_scores[-1]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            user_id=data["userId"],
            org_id=data["orgId"],
            enrollment_date=data.get("enrollmentDate", ""),
            baseline_scores=ClinicalScores.from_dict(data["baselineScores"]),
            follow_up_scores=tuple(
                FollowUpScore.from_dict(s) for s in data.get("followUpScores", [])
            ),
            baseline_productivity=ProductivityMetrics.from_dict(data["baselineProductivity"]),
            current_productivity=ProductivityMetrics.from_dict(data["currentProductivity"]),
            engagement=EngagementData.from_dict(data["engagement"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "userId": self.user_id,
            "orgId": self.org_id,
            "enrollmentDate": self.enrollment_date,
            "baselineScores": self.baseline_scores.to_dict(),
            "followUpScores": [s.to_dict() for s in self.follow_up_scores],
            "baselineProductivity": self.baseline_productivity.to_dict(),
            "currentProductivity": self.current_productivity.to_dict(),
            "engagement": self.engagement.to_dict(),
        }


@dataclass(frozen=True)
class ReportingPeriod:
    """Inclusive reporting window, ISO dates."""
    start: str
    end: str

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class Organization:
    """A client organization running the program.

    enrolled_employees <= total_employees is assumed, not enforced.
    """
    org_id: str
    name: str
    industry: str
    total_employees: int
    enrolled_employees: int
    avg_hourly_cost: float
    program_cost: float
    reporting_period: ReportingPeriod

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Organization":
        period = data["reportingPeriod"]
        return cls(
            org_id=data["orgId"],
            name=data["name"],
            industry=data["industry"],
            total_employees=data["totalEmployees"],
            enrolled_employees=data["enrolledEmployees"],
            avg_hourly_cost=data["avgHourlyCost"],
            program_cost=data["programCost"],
            reporting_period=ReportingPeriod(start=period["start"], end=period["end"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "orgId": self.org_id,
            "name": self.name,
            "industry": self.industry,
            "totalEmployees": self.total_employees,
            "enrolledEmployees": self.enrolled_employees,
            "avgHourlyCost": self.avg_hourly_cost,
            "programCost": self.program_cost,
            "reportingPeriod": self.reporting_period.to_dict(),
        }
