# advisory_audit/report/settings.py

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ..database.query import Query
from ..exceptions import ValidationError
from ..models.advisory import InformationalCategory, Severity, informational_name, parse_informational


@dataclass(frozen=True)
class Settings:
    """Options used when generating a report."""
    target_arch: Optional[str] = None
    target_os: Optional[str] = None
    severity: Optional[Severity] = None
    ignore: Tuple[str, ...] = ()
    informational_warnings: Tuple[InformationalCategory, ...] = ()

    def __post_init__(self):
        # Fields may arrive as plain strings or lists; membership checks and
        # serialization rely on the normalized forms below.
        if isinstance(self.ignore, str) or isinstance(self.informational_warnings, str):
            raise ValidationError("'ignore' and 'informational_warnings' must be lists, not strings")
        object.__setattr__(self, "target_arch", self.target_arch.lower() if self.target_arch else None)
        object.__setattr__(self, "target_os", self.target_os.lower() if self.target_os else None)
        if self.severity is not None:
            object.__setattr__(self, "severity", Severity.parse(self.severity))
        object.__setattr__(self, "ignore", tuple(str(i) for i in (self.ignore or ())))
        object.__setattr__(
            self,
            "informational_warnings",
            tuple(parse_informational(c) for c in (self.informational_warnings or ())),
        )

    def query(self) -> Query:
        """
        Build the database query corresponding to these settings.

        Ignored advisories are not part of the query; callers filter them out
        in a separate pass. The informational flag is likewise left to the
        caller.
        """
        query = Query.package_scope()

        if self.target_arch is not None:
            query = query.target_arch(self.target_arch)

        if self.target_os is not None:
            query = query.target_os(self.target_os)

        if self.severity is not None:
            query = query.severity(self.severity)

        return query

    def is_ignored(self, advisory_id: str) -> bool:
        return advisory_id in self.ignore

    def wants_warning(self, category: Optional[InformationalCategory]) -> bool:
        """Exact match of an informational category against the requested ones."""
        return category is not None and category in self.informational_warnings

    @classmethod
    def build(
        cls,
        target_arch: Optional[str] = None,
        target_os: Optional[str] = None,
        severity: Optional[Any] = None,
        ignore: Optional[Iterable[str]] = None,
        informational_warnings: Optional[Iterable[Any]] = None,
    ) -> "Settings":
        """
        Create settings from loosely typed values, normalizing and validating them.

        Raises:
            ValidationError: If the severity or a category is invalid
        """
        return cls(
            target_arch=target_arch,
            target_os=target_os,
            severity=severity,
            ignore=ignore or (),
            informational_warnings=informational_warnings or (),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        return cls.build(
            target_arch=data.get("target_arch"),
            target_os=data.get("target_os"),
            severity=data.get("severity"),
            ignore=data.get("ignore"),
            informational_warnings=data.get("informational_warnings"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target_arch": self.target_arch,
            "target_os": self.target_os,
            "severity": self.severity.value if self.severity else None,
            "ignore": list(self.ignore),
            "informational_warnings": [informational_name(c) for c in self.informational_warnings],
        }
