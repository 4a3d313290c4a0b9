"""Minimum-cohort privacy rule.

Aggregates over fewer than k employees are suppressed so that an
employer cannot reverse-engineer an individual's clinical scores from
the dashboard. Suppressed figures are omitted, never zeroed.
"""
import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .config import CLINICAL_THRESHOLDS

logger = logging.getLogger(__name__)

# Minimum group size for k-anonymity
K_ANONYMITY_THRESHOLD = CLINICAL_THRESHOLDS.MINIMUM_COHORT_SIZE

T = TypeVar('T')


@dataclass(frozen=True)
class AggregateResult(Generic[T]):
    """Result of an aggregation with k-anonymity applied.

    Attributes:
        data: The aggregated data (None if suppressed)
        group_size: Number of employees in the group
        suppressed: True if data was suppressed due to k-anonymity
        suppression_reason: Explanation if suppressed
    """
    data: Optional[T]
    group_size: int
    suppressed: bool
    suppression_reason: Optional[str] = None


class KAnonymityEnforcer:
    """Enforces the minimum group size on aggregated data."""

    def __init__(self, k_threshold: int = K_ANONYMITY_THRESHOLD):
        """Initialize enforcer.

        Args:
            k_threshold: Minimum group size (default 5)
        """
        if k_threshold < 1:
            raise ValueError(f"k_threshold must be >= 1, got {k_threshold}")
        self.k_threshold = k_threshold

    def meets_threshold(self, group_size: int) -> bool:
        """True if a group of this size may be reported."""
        return group_size >= self.k_threshold

    def check_and_suppress(
        self,
        data: T,
        group_size: int,
        context: Optional[str] = None,
    ) -> AggregateResult[T]:
        """Check group size and suppress if below threshold.

        Args:
            data: The aggregated data to potentially suppress
            group_size: Number of employees in the group
            context: Description of the aggregate for logging

        Returns:
            AggregateResult with data or suppression info

        Logs:
            - K_ANONYMITY_SUPPRESSED: When data is suppressed
        """
        if not self.meets_threshold(group_size):
            logger.info(
                "K_ANONYMITY_SUPPRESSED",
                extra={
                    "group_size": group_size,
                    "k_threshold": self.k_threshold,
                    "context": context,
                    "action": "DATA_SUPPRESSED",
                }
            )
            return AggregateResult(
                data=None,
                group_size=group_size,
                suppressed=True,
                suppression_reason=(
                    f"Group size ({group_size}) below k-anonymity "
                    f"threshold ({self.k_threshold})"
                ),
            )

        return AggregateResult(
            data=data,
            group_size=group_size,
            suppressed=False,
        )
