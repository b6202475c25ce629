# advisory_audit/database/memory.py

"""
In-memory reference implementation of the advisory database interface.

Advisories are indexed by ID with a SortedDict so that queries always visit
them in the same order. Deciding whether a package version is affected is
delegated to a matcher callable; the default matcher only recognises exact
version strings listed as patched or unaffected, callers with real version
range semantics inject their own.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional

from sortedcontainers import SortedDict

from . import git_history
from .protocol import CommitInfo
from .query import Query
from ..exceptions import ValidationError
from ..models.advisory import Advisory, VersionRange
from ..models.lockfile import Lockfile
from ..models.package import Package
from ..models.vulnerability import Vulnerability

logger = logging.getLogger(__name__)

# Returns the matched version range when the package is affected, else None
VersionMatcher = Callable[[Advisory, Package], Optional[VersionRange]]


def exact_version_matcher(advisory: Advisory, package: Package) -> Optional[VersionRange]:
    """Treat a package as affected unless its exact version is listed as patched or unaffected."""
    versions = advisory.versions
    if package.version in versions.patched or package.version in versions.unaffected:
        return None
    return versions


class InMemoryDatabase:
    """
    Advisory database held entirely in memory.

    Example:
        db = InMemoryDatabase.from_records([{"id": "ADV-001", "package": "foo"}])
        vulns = db.query_vulnerabilities(lockfile, Query.package_scope())
    """

    def __init__(self, advisories: Iterable[Advisory], matcher: Optional[VersionMatcher] = None):
        self._advisories: SortedDict = SortedDict()
        for advisory in advisories:
            if advisory.id in self._advisories:
                raise ValidationError(
                    f"Duplicate advisory ID '{advisory.id}'",
                    details={"id": advisory.id},
                )
            self._advisories[advisory.id] = advisory

        self._by_package: Dict[str, List[Advisory]] = {}
        for advisory in self._advisories.values():
            self._by_package.setdefault(advisory.package, []).append(advisory)

        self._matcher = matcher or exact_version_matcher
        logger.debug(f"Loaded {len(self._advisories)} advisories for {len(self._by_package)} packages")

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]], **kwargs) -> "InMemoryDatabase":
        return cls((Advisory.from_dict(record) for record in records), **kwargs)

    def __iter__(self) -> Iterator[Advisory]:
        return iter(self._advisories.values())

    def __len__(self) -> int:
        return len(self._advisories)

    def get(self, advisory_id: str) -> Optional[Advisory]:
        return self._advisories.get(advisory_id)

    def advisory_count(self) -> int:
        return len(self._advisories)

    def query(self, query: Query) -> List[Advisory]:
        """Return every advisory satisfying the query, in ID order."""
        return [advisory for advisory in self._advisories.values() if query.matches(advisory)]

    def query_vulnerabilities(self, lockfile: Lockfile, query: Query) -> List[Vulnerability]:
        """
        Find advisories affecting packages in a lockfile.

        Packages are visited in lockfile order and each package's advisories in
        ID order, so repeated calls with the same inputs return the same list.

        Args:
            lockfile: The lockfile to audit
            query: Advisory filter; narrowed to each package's name in turn

        Returns:
            List[Vulnerability]: One entry per (advisory, package) match
        """
        vulnerabilities: List[Vulnerability] = []
        for package in lockfile.packages:
            package_query = query.package(package.name)
            for advisory in self._by_package.get(package.name, []):
                if not package_query.matches(advisory):
                    continue
                versions = self._matcher(advisory, package)
                if versions is None:
                    continue
                vulnerabilities.append(Vulnerability.from_advisory(advisory, package, versions))
        return vulnerabilities


class HistoryDatabase(InMemoryDatabase):
    """In-memory database loaded from a git checkout whose history is reportable."""

    def __init__(self, advisories: Iterable[Advisory], repo_path: str, matcher: Optional[VersionMatcher] = None):
        super().__init__(advisories, matcher=matcher)
        self.repo_path = repo_path

    def latest_commit(self) -> Optional[CommitInfo]:
        return git_history.latest_commit(self.repo_path)
