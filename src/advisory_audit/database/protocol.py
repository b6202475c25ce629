# advisory_audit/database/protocol.py

"""
Interfaces the report core expects from an advisory database.

The report core only reads from the database for the duration of one call.
Source-history metadata is an optional capability: databases that can report
their latest commit implement HistoryProvider, and the report includes
database provenance only for those.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .query import Query
    from ..models.lockfile import Lockfile
    from ..models.vulnerability import Vulnerability


@dataclass(frozen=True)
class CommitInfo:
    """Most recent commit of the advisory database's source history."""
    commit_id: str
    timestamp: datetime


class AdvisoryDatabase(Protocol):
    """A searchable advisory database."""

    def query_vulnerabilities(self, lockfile: "Lockfile", query: "Query") -> List["Vulnerability"]:
        """Return matches for the lockfile, in a stable order for identical inputs."""
        ...

    def advisory_count(self) -> int:
        """Return the total number of advisories held."""
        ...


@runtime_checkable
class HistoryProvider(Protocol):
    """Capability for databases backed by a versioned source history."""

    def latest_commit(self) -> Optional[CommitInfo]:
        ...


def has_history(db: object) -> bool:
    return isinstance(db, HistoryProvider)
