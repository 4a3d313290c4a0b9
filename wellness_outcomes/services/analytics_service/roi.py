"""Return on investment from annualized productivity savings."""
import logging
from typing import Optional

from wellness_outcomes.shared.models import Organization, ProductivityOutcomes, ROIMetrics
from wellness_outcomes.shared.utils import round1, round_int, safe_percent, safe_ratio

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def format_payback_period(payback_months: Optional[float]) -> Optional[str]:
    """Render a payback period: whole months up to a year, else years.

    Args:
        payback_months: Months until savings cover the program cost

    Returns:
        "N months", "X.Y years", or None if the cost is never recovered
    """
    if payback_months is None:
        return None
    if payback_months <= MONTHS_PER_YEAR:
        return f"{round_int(payback_months)} months"
    return f"{round1(payback_months / MONTHS_PER_YEAR):.1f} years"


def calculate_roi(productivity: ProductivityOutcomes, organization: Organization) -> ROIMetrics:
    """ROI of the program against its annualized mid savings.

    Args:
        productivity: Productivity outcomes for the cohort
        organization: Organization supplying the program cost

    Returns:
        ROIMetrics; roi and payback_period are None when not computable
    """
    total_savings = productivity.cost_savings.annualized
    program_cost = organization.program_cost
    net_benefit = total_savings - program_cost

    # Savings that never cover the cost have no payback period
    payback_months = None
    if total_savings > 0 and program_cost > 0:
        payback_months = safe_ratio(program_cost, total_savings / MONTHS_PER_YEAR)

    roi = round1(safe_percent(net_benefit, program_cost))
    if roi is None or payback_months is None:
        logger.warning(
            "ROI_NOT_COMPUTABLE",
            extra={
                "org_id": organization.org_id,
                "program_cost": program_cost,
                "total_savings": total_savings,
            }
        )

    return ROIMetrics(
        program_cost=program_cost,
        total_savings=total_savings,
        net_benefit=net_benefit,
        roi=roi,
        payback_period=format_payback_period(payback_months),
    )
