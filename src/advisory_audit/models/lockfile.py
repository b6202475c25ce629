# advisory_audit/models/lockfile.py

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Tuple

from .package import Package
from ..exceptions import ValidationError


@dataclass(frozen=True)
class Lockfile:
    """
    The exact resolved set of package versions used by a project.

    Parsing lockfile formats is left to callers; this is the already-validated
    value the report core reads from.
    """
    packages: Tuple[Package, ...] = ()

    @classmethod
    def from_packages(cls, packages: Iterable[Package]) -> "Lockfile":
        return cls(packages=tuple(packages))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Lockfile":
        raw_packages = data.get("packages") or []
        if not isinstance(raw_packages, list):
            raise ValidationError("Lockfile 'packages' must be a list")
        return cls(packages=tuple(Package.from_dict(p) for p in raw_packages))

    @property
    def dependency_count(self) -> int:
        return len(self.packages)
