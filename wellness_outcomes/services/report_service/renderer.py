"""HTML executive report rendering.

The analytics snapshot is the renderer's only input. Number formatting
lives here, not in the engine: currency as whole dollars with thousands
separators, and any figure the engine could not compute shown as
"Insufficient data".
"""
import logging
import math
import re
from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateError

from wellness_outcomes.services.analytics_service.config import (
    ANNUALIZATION_FACTOR,
    CLINICAL_THRESHOLDS,
    CONSERVATIVE_SAVINGS_FACTOR,
    MONTHLY_WORK_HOURS,
    OPTIMISTIC_SAVINGS_FACTOR,
    PHQ9_SEVERITY_BANDS,
)
from wellness_outcomes.shared.models import OrganizationAnalytics

from .templates import TEMPLATES

logger = logging.getLogger(__name__)

INSUFFICIENT_DATA = "Insufficient data"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9-]+")


class ReportError(Exception):
    """Base exception for report generation."""
    pass


class ReportNotExportableError(ReportError):
    """Cohort is below the minimum size for a privacy-compliant export."""
    pass


class ReportRenderError(ReportError):
    """Template rendering failed."""
    pass


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and not math.isfinite(value))


def format_currency(value: Optional[float]) -> str:
    """Whole-dollar amount, e.g. 180000 -> "$180,000"."""
    if _is_missing(value):
        return INSUFFICIENT_DATA
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_number(value: Optional[float]) -> str:
    """Thousands-separated number, e.g. 12500 -> "12,500"."""
    if _is_missing(value):
        return INSUFFICIENT_DATA
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.1f}"
    return f"{int(value):,}"


def format_percent(value: Optional[float]) -> str:
    """Percentage already rounded by the engine, e.g. 66.7 -> "66.7%"."""
    if _is_missing(value):
        return INSUFFICIENT_DATA
    return f"{value}%"


def ensure_exportable(analytics: OrganizationAnalytics) -> None:
    """Refuse to export a cohort below the minimum size.

    Raises:
        ReportNotExportableError: If minimum_cohort_met is False
    """
    if not analytics.minimum_cohort_met:
        logger.warning(
            "REPORT_EXPORT_REFUSED",
            extra={
                "org_id": analytics.organization.org_id,
                "enrolled_count": analytics.engagement.enrolled_count,
            }
        )
        raise ReportNotExportableError(
            "Minimum cohort size not met for privacy compliance"
        )


class ReportRenderer:
    """Renders OrganizationAnalytics into a self-contained HTML report."""

    def __init__(self) -> None:
        self._env = Environment(
            loader=DictLoader(TEMPLATES),
            autoescape=True,
            undefined=StrictUndefined,
        )
        self._env.filters["currency"] = format_currency
        self._env.filters["number"] = format_number
        self._env.filters["percent"] = format_percent

    def _assumptions(self) -> Dict[str, Any]:
        return {
            "phq9_threshold": CLINICAL_THRESHOLDS.PHQ9_MEANINGFUL_IMPROVEMENT,
            "gad7_threshold": CLINICAL_THRESHOLDS.GAD7_MEANINGFUL_IMPROVEMENT,
            "who5_threshold": CLINICAL_THRESHOLDS.WHO5_MEANINGFUL_IMPROVEMENT,
            "minimum_cohort": CLINICAL_THRESHOLDS.MINIMUM_COHORT_SIZE,
            "monthly_hours": MONTHLY_WORK_HOURS,
            "annualization_factor": ANNUALIZATION_FACTOR,
            "low_factor_percent": round(CONSERVATIVE_SAVINGS_FACTOR * 100),
            "high_factor_percent": round(OPTIMISTIC_SAVINGS_FACTOR * 100),
        }

    def render_html(self, analytics: OrganizationAnalytics) -> str:
        """Render the executive report.

        Args:
            analytics: Analytics snapshot for one organization

        Returns:
            HTML document as a string

        Raises:
            ReportRenderError: If template rendering fails
        """
        try:
            html = self._env.get_template("report.html").render(
                report=analytics.to_dict(),
                band_colors=[band.color for band in PHQ9_SEVERITY_BANDS],
                assumptions=self._assumptions(),
            )
        except TemplateError as e:
            logger.error(
                "REPORT_RENDER_FAILED",
                extra={"org_id": analytics.organization.org_id, "error": str(e)}
            )
            raise ReportRenderError(f"Failed to render report: {e}") from e

        logger.info(
            "REPORT_RENDERED",
            extra={
                "org_id": analytics.organization.org_id,
                "size_bytes": len(html.encode("utf-8")),
            }
        )
        return html


def report_filename(analytics: OrganizationAnalytics, extension: str = "html") -> str:
    """Download filename, e.g. TechCorp_Industries_Wellness_Report_2025-10-01.html.

    Characters outside ASCII letters, digits and hyphens collapse to a
    single underscore so the name is safe inside a quoted header value.
    """
    org_name = _UNSAFE_FILENAME_CHARS.sub("_", analytics.organization.name).strip("_")
    org_name = org_name or "Organization"
    report_date = analytics.generated_at[:10]
    return f"{org_name}_Wellness_Report_{report_date}.{extension}"
