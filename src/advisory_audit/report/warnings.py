# advisory_audit/report/warnings.py

"""
Warning classification for informational advisories.

Informational advisories (unmaintained, unsound, ...) are not vulnerabilities.
A second, informational-mode query finds them, and each match is surfaced as a
warning only when it passes three independent conditions:

1. the advisory ID is not ignored,
2. its informational category was requested in the settings (exact match),
3. the category maps to a warning kind.

Matches failing any condition are dropped without a trace in the report. A
ClassifierStats object can be passed in to observe why matches were dropped.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .settings import Settings
from ..database.protocol import AdvisoryDatabase
from ..exceptions import InvariantViolation
from ..models.advisory import WarningKind, warning_kind_for
from ..models.lockfile import Lockfile
from ..models.warning import Warning

logger = logging.getLogger("advisory-audit")

# Warnings grouped by kind, each list in discovery order
WarningInfo = Dict[WarningKind, List[Warning]]
# Read-only form held by a finished Report
FrozenWarningInfo = Mapping[WarningKind, Tuple[Warning, ...]]


@dataclass
class ClassifierStats:
    """Counters describing what happened to each informational match."""
    emitted: int = 0
    ignored: int = 0
    not_requested: int = 0
    unmapped: int = 0

    @property
    def dropped(self) -> int:
        return self.ignored + self.not_requested + self.unmapped


def add_warning(warnings: WarningInfo, warning: Warning) -> None:
    """Append a warning to its kind's bucket, creating the bucket on first use."""
    bucket = warnings.get(warning.kind)
    if bucket is None:
        warnings[warning.kind] = [warning]
    else:
        bucket.append(warning)


def find_warnings(
    db: AdvisoryDatabase,
    lockfile: Lockfile,
    settings: Settings,
    stats: Optional[ClassifierStats] = None,
) -> WarningInfo:
    """
    Find warnings for a lockfile from informational advisories.

    Args:
        db: The advisory database
        lockfile: The lockfile to audit
        settings: Report settings; the same filters as the vulnerability pass
            apply, with informational mode enabled
        stats: Optional counters updated for every match examined

    Returns:
        WarningInfo: Warnings grouped by kind, in the order the query returned them

    Raises:
        InvariantViolation: If the database returns an informational match whose
            advisory has no informational category
    """
    query = settings.query().informational(True)
    warnings: WarningInfo = {}

    # TODO: share the match loop with the vulnerability pass in Report.generate
    for match in db.query_vulnerabilities(lockfile, query):
        advisory = match.advisory

        if settings.is_ignored(advisory.id):
            if stats is not None:
                stats.ignored += 1
            continue

        if advisory.informational is None:
            raise InvariantViolation(
                f"Informational query returned advisory '{advisory.id}' without an informational category",
                details={"advisory": advisory.id, "package": match.package.name},
            )

        if not settings.wants_warning(advisory.informational):
            if stats is not None:
                stats.not_requested += 1
            continue

        kind = warning_kind_for(advisory.informational)
        if kind is None:
            if stats is not None:
                stats.unmapped += 1
            continue

        add_warning(warnings, Warning(
            kind=kind,
            package=match.package,
            advisory=advisory,
            versions=match.versions,
        ))
        if stats is not None:
            stats.emitted += 1

    logger.debug(f"Found {sum(len(items) for items in warnings.values())} warnings across {len(warnings)} kinds")
    return warnings


def freeze_warnings(warnings: Mapping[WarningKind, Any]) -> FrozenWarningInfo:
    """Return a read-only view of the warnings with each bucket as a tuple."""
    return MappingProxyType({kind: tuple(items) for kind, items in warnings.items()})


def warnings_from_dict(data: Mapping[str, Any]) -> WarningInfo:
    warnings: WarningInfo = {}
    for kind_name, items in data.items():
        kind = WarningKind(kind_name)
        for item in items:
            add_warning(warnings, Warning.from_dict({**item, "kind": kind.value}))
    return warnings


def warnings_to_dict(warnings: Mapping[WarningKind, Any]) -> Dict[str, Any]:
    return {kind.value: [w.to_dict() for w in items] for kind, items in warnings.items()}
