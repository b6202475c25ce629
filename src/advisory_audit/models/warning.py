# advisory_audit/models/warning.py

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .advisory import Advisory, VersionRange, WarningKind
from .package import Package


@dataclass(frozen=True)
class Warning:
    """An informational match surfaced under a warning kind."""
    kind: WarningKind
    package: Package
    advisory: Optional[Advisory] = None
    versions: Optional[VersionRange] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Warning":
        advisory = data.get("advisory")
        versions = data.get("versions")
        return cls(
            kind=WarningKind(data["kind"]),
            package=Package.from_dict(data["package"]),
            advisory=Advisory.from_dict(advisory) if advisory is not None else None,
            versions=VersionRange.from_dict(versions) if versions is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "package": self.package.to_dict(),
            "advisory": self.advisory.to_dict() if self.advisory else None,
            "versions": self.versions.to_dict() if self.versions else None,
        }
