# advisory_audit/report/vulnerabilities.py

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Tuple

from ..models.vulnerability import Vulnerability


@dataclass(frozen=True)
class VulnerabilityInfo:
    """Summary of the vulnerabilities detected in a lockfile."""
    found: bool = False
    count: int = 0
    list: Tuple[Vulnerability, ...] = ()

    @classmethod
    def new(cls, vulnerabilities: Iterable[Vulnerability]) -> "VulnerabilityInfo":
        """Summarize an already filtered list, preserving its order."""
        items = tuple(vulnerabilities)
        return cls(found=len(items) > 0, count=len(items), list=items)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VulnerabilityInfo":
        # found and count are derived so a restored value is always consistent
        return cls.new(Vulnerability.from_dict(v) for v in data.get("list") or [])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "found": self.found,
            "count": self.count,
            "list": [v.to_dict() for v in self.list],
        }
