"""Data access for Wellness Outcomes services.

Provides the read-only repository contract the analytics engine consumes,
plus an in-memory implementation over an immutable snapshot.
"""

from .repository import (
    CohortRepository,
    InMemoryCohortRepository,
    RepositoryError,
    SnapshotLoadError,
)

__all__ = [
    "CohortRepository",
    "InMemoryCohortRepository",
    "RepositoryError",
    "SnapshotLoadError",
]
