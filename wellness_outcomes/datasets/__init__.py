"""Cohort datasets for demos, local development and tests."""
from .synthetic_cohort import (
    DEMO_ORGANIZATIONS,
    DemoOrganization,
    SyntheticCohortConfig,
    SyntheticCohortGenerator,
)

__all__ = [
    "DEMO_ORGANIZATIONS",
    "DemoOrganization",
    "SyntheticCohortConfig",
    "SyntheticCohortGenerator",
]
