# advisory_audit/report/provenance.py

"""
Provenance projections recorded alongside a report.

These are read-only views over the database and lockfile collaborators.
Unknown values are represented as None, never as zero or an empty string.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional

from ..database.protocol import AdvisoryDatabase, has_history
from ..models.lockfile import Lockfile


def format_rfc3339(value: datetime) -> str:
    """Format a datetime as RFC 3339, using the 'Z' suffix for UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    if value.utcoffset() == timedelta(0):
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
    return value.isoformat()


def parse_rfc3339(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass(frozen=True)
class DatabaseInfo:
    """Information about the advisory database a report was generated from."""
    advisory_count: int
    last_commit: Optional[str] = None
    last_updated: Optional[datetime] = None

    @classmethod
    def from_database(cls, db: AdvisoryDatabase) -> Optional["DatabaseInfo"]:
        """
        Project provenance from a database.

        Returns None when the database has no source history capability, in
        which case the report carries no database section at all.
        """
        if not has_history(db):
            return None
        commit = db.latest_commit()
        return cls(
            advisory_count=db.advisory_count(),
            last_commit=commit.commit_id if commit else None,
            last_updated=commit.timestamp if commit else None,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DatabaseInfo":
        last_updated = data.get("last-updated")
        return cls(
            advisory_count=int(data["advisory-count"]),
            last_commit=data.get("last-commit"),
            last_updated=parse_rfc3339(last_updated) if last_updated else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "advisory-count": self.advisory_count,
            "last-commit": self.last_commit,
            "last-updated": format_rfc3339(self.last_updated) if self.last_updated else None,
        }


@dataclass(frozen=True)
class LockfileInfo:
    """Information about the audited lockfile."""
    dependency_count: int

    @classmethod
    def from_lockfile(cls, lockfile: Lockfile) -> "LockfileInfo":
        return cls(dependency_count=lockfile.dependency_count)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LockfileInfo":
        return cls(dependency_count=int(data["dependency-count"]))

    def to_dict(self) -> Dict[str, Any]:
        return {"dependency-count": self.dependency_count}
