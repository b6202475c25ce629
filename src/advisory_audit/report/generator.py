# advisory_audit/report/generator.py

"""
Vulnerability report generation.

Report.generate() is the entry point: it queries the advisory database for a
lockfile, filters ignored advisories, classifies informational advisories into
warnings and bundles the result with provenance and the settings used. The
serialized shape of a Report is stable; field names are part of its contract.
"""

import dataclasses
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .provenance import DatabaseInfo, LockfileInfo
from .settings import Settings
from .vulnerabilities import VulnerabilityInfo
from .warnings import (
    ClassifierStats,
    FrozenWarningInfo,
    find_warnings,
    freeze_warnings,
    warnings_from_dict,
    warnings_to_dict,
)
from ..database.protocol import AdvisoryDatabase
from ..models.lockfile import Lockfile

logger = logging.getLogger("advisory-audit")


@dataclass(frozen=True)
class Report:
    """Vulnerability report for a given lockfile."""
    lockfile: LockfileInfo
    settings: Settings
    vulnerabilities: VulnerabilityInfo
    warnings: FrozenWarningInfo = field(default_factory=dict)
    # Only present when the database exposes source history
    database: Optional[DatabaseInfo] = None

    def __post_init__(self):
        object.__setattr__(self, "warnings", freeze_warnings(self.warnings))

    @classmethod
    def generate(
        cls,
        db: AdvisoryDatabase,
        lockfile: Lockfile,
        settings: Settings,
        stats: Optional[ClassifierStats] = None,
    ) -> "Report":
        """
        Generate a report for the given advisory database and lockfile.

        The output depends only on the database content, the lockfile content
        and the settings; both collaborators are only read from.

        Args:
            db: The advisory database
            lockfile: The lockfile to audit
            settings: Filters to apply
            stats: Optional counters for the informational classification pass

        Returns:
            Report: The generated report
        """
        vulnerabilities = [
            vuln for vuln in db.query_vulnerabilities(lockfile, settings.query())
            if not settings.is_ignored(vuln.advisory.id)
        ]

        warnings = find_warnings(db, lockfile, settings, stats=stats)

        report = cls(
            database=DatabaseInfo.from_database(db),
            lockfile=LockfileInfo.from_lockfile(lockfile),
            settings=dataclasses.replace(settings),
            vulnerabilities=VulnerabilityInfo.new(vulnerabilities),
            warnings=warnings,
        )
        logger.debug(
            f"Generated report: {report.vulnerabilities.count} vulnerabilities, "
            f"{len(report.warnings)} warning kinds, {report.lockfile.dependency_count} dependencies"
        )
        return report

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Report":
        database = data.get("database")
        return cls(
            database=DatabaseInfo.from_dict(database) if database is not None else None,
            lockfile=LockfileInfo.from_dict(data["lockfile"]),
            settings=Settings.from_dict(data.get("settings") or {}),
            vulnerabilities=VulnerabilityInfo.from_dict(data.get("vulnerabilities") or {}),
            warnings=warnings_from_dict(data.get("warnings") or {}),
        )

    @classmethod
    def from_json(cls, text: str) -> "Report":
        return cls.from_dict(json.loads(text))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.database is not None:
            data["database"] = self.database.to_dict()
        data["lockfile"] = self.lockfile.to_dict()
        data["settings"] = self.settings.to_dict()
        data["vulnerabilities"] = self.vulnerabilities.to_dict()
        data["warnings"] = warnings_to_dict(self.warnings)
        return data

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def generate(
    db: AdvisoryDatabase,
    lockfile: Lockfile,
    settings: Settings,
    stats: Optional[ClassifierStats] = None,
) -> Report:
    """Shorthand for Report.generate()."""
    return Report.generate(db, lockfile, settings, stats=stats)
