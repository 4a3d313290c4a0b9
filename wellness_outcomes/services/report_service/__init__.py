"""Report Service: executive outcomes report for an organization.

Renders an analytics snapshot into a self-contained HTML document.
Exports are refused when the cohort is below the minimum size.
"""

from .renderer import (
    INSUFFICIENT_DATA,
    ReportRenderer,
    ReportError,
    ReportNotExportableError,
    ReportRenderError,
    ensure_exportable,
    format_currency,
    format_number,
    format_percent,
    report_filename,
)

__all__ = [
    "INSUFFICIENT_DATA",
    "ReportRenderer",
    "ReportError",
    "ReportNotExportableError",
    "ReportRenderError",
    "ensure_exportable",
    "format_currency",
    "format_number",
    "format_percent",
    "report_filename",
]
