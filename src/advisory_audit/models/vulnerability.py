# advisory_audit/models/vulnerability.py

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .advisory import Advisory, Affected, VersionRange
from .package import Package


@dataclass(frozen=True)
class Vulnerability:
    """A match between an advisory and a package in the lockfile."""
    advisory: Advisory
    package: Package
    versions: VersionRange
    affected: Optional[Affected] = None

    @classmethod
    def from_advisory(cls, advisory: Advisory, package: Package, versions: VersionRange) -> "Vulnerability":
        return cls(advisory=advisory, package=package, versions=versions, affected=advisory.affected)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Vulnerability":
        affected = data.get("affected")
        return cls(
            advisory=Advisory.from_dict(data["advisory"]),
            package=Package.from_dict(data["package"]),
            versions=VersionRange.from_dict(data.get("versions") or {}),
            affected=Affected.from_dict(affected) if affected is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "advisory": self.advisory.to_dict(),
            "versions": self.versions.to_dict(),
            "affected": self.affected.to_dict() if self.affected else None,
            "package": self.package.to_dict(),
        }
