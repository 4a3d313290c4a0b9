"""Read-only cohort repository.

The analytics engine never owns or regenerates data. It receives a
repository and only calls its read methods, so the same engine runs over
a synthetic cohort, a JSON snapshot exported from another system, or a
test fixture.

Implementations must hand out a stable, coherent snapshot: the in-memory
repository stores tuples of frozen dataclasses, so concurrent requests
never observe partial updates.
"""
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from wellness_outcomes.shared.models import Organization, User

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Base exception for repository errors."""
    pass


class SnapshotLoadError(RepositoryError):
    """Cohort snapshot file is missing, unreadable or malformed."""
    pass


class CohortRepository(ABC):
    """Provider contract consumed by the analytics engine."""

    @abstractmethod
    def get_organization(self, org_id: str) -> Optional[Organization]:
        """Find an organization by ID.

        Args:
            org_id: Organization identifier

        Returns:
            Organization if found, None otherwise
        """
        pass

    @abstractmethod
    def list_organizations(self) -> List[Organization]:
        """All organizations, in a stable order."""
        pass

    @abstractmethod
    def list_users(self, org_id: str) -> List[User]:
        """Enrolled users of an organization.

        Args:
            org_id: Organization identifier

        Returns:
            List of users, empty if the organization has none
        """
        pass

    def count_users(self, org_id: str) -> int:
        """Number of enrolled users of an organization."""
        return len(self.list_users(org_id))


class InMemoryCohortRepository(CohortRepository):
    """Repository over an immutable in-memory snapshot."""

    def __init__(
        self,
        organizations: Iterable[Organization],
        users: Iterable[User],
    ):
        """Initialize repository.

        Args:
            organizations: Organizations in the snapshot
            users: Users in the snapshot (any order, any organization)
        """
        self._organizations: Tuple[Organization, ...] = tuple(organizations)
        self._organizations_by_id: Dict[str, Organization] = {
            org.org_id: org for org in self._organizations
        }

        grouped: Dict[str, List[User]] = {}
        for user in users:
            grouped.setdefault(user.org_id, []).append(user)
        self._users_by_org: Dict[str, Tuple[User, ...]] = {
            org_id: tuple(members) for org_id, members in grouped.items()
        }

        logger.info(
            "COHORT_REPOSITORY_INITIALIZED",
            extra={
                "organization_count": len(self._organizations),
                "user_count": sum(len(u) for u in self._users_by_org.values()),
            }
        )

    @classmethod
    def from_json_file(cls, path: str) -> "InMemoryCohortRepository":
        """Load a snapshot exported as camelCase JSON.

        Expected shape::

            {"organizations": [{...}], "users": [{...}]}

        Args:
            path: Path to the snapshot file

        Returns:
            Repository over the loaded snapshot

        Raises:
            SnapshotLoadError: If the file cannot be read or parsed
        """
        snapshot_path = Path(path)
        try:
            with snapshot_path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
            organizations = [Organization.from_dict(o) for o in raw["organizations"]]
            users = [User.from_dict(u) for u in raw.get("users", [])]
        except (OSError, json.JSONDecodeError) as e:
            logger.error(
                "COHORT_SNAPSHOT_UNREADABLE",
                extra={"path": str(snapshot_path), "error": str(e)}
            )
            raise SnapshotLoadError(f"Cannot read cohort snapshot {snapshot_path}: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            logger.error(
                "COHORT_SNAPSHOT_MALFORMED",
                extra={"path": str(snapshot_path), "error": str(e)}
            )
            raise SnapshotLoadError(f"Malformed cohort snapshot {snapshot_path}: {e}") from e

        logger.info("COHORT_SNAPSHOT_LOADED", extra={"path": str(snapshot_path)})
        return cls(organizations, users)

    @classmethod
    def from_synthetic(cls, seed: Optional[int] = None) -> "InMemoryCohortRepository":
        """Build a repository over the seeded synthetic demo cohort."""
        from wellness_outcomes.datasets import SyntheticCohortConfig, SyntheticCohortGenerator

        config = SyntheticCohortConfig() if seed is None else SyntheticCohortConfig(seed=seed)
        organizations, users = SyntheticCohortGenerator(config).generate()
        return cls(organizations, users)

    def get_organization(self, org_id: str) -> Optional[Organization]:
        return self._organizations_by_id.get(org_id)

    def list_organizations(self) -> List[Organization]:
        return list(self._organizations)

    def list_users(self, org_id: str) -> List[User]:
        return list(self._users_by_org.get(org_id, ()))

    def count_users(self, org_id: str) -> int:
        return len(self._users_by_org.get(org_id, ()))
