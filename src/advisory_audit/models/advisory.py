"""
Advisory records and their classification enums.

An advisory describes a known issue affecting a package. Advisories with an
informational category describe a non-exploit status (unmaintained, unsound,
...) and are surfaced as warnings rather than vulnerabilities.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..exceptions import ValidationError


class Severity(Enum):
    """Advisory severity, ordered from least to most severe."""
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)

    def __lt__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "Severity") -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: Union[str, "Severity"]) -> "Severity":
        """Parse a severity name case-insensitively."""
        if isinstance(value, Severity):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValidationError(f"Invalid severity '{value}'. Expected one of: {valid}")


_SEVERITY_ORDER = [Severity.NONE, Severity.LOW, Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL]


class Informational(Enum):
    """Informational advisory categories with a defined meaning."""
    NOTICE = "notice"
    UNMAINTAINED = "unmaintained"
    UNSOUND = "unsound"


class WarningKind(Enum):
    """Buckets used to group warnings in a report."""
    NOTICE = "notice"
    UNMAINTAINED = "unmaintained"
    UNSOUND = "unsound"
    YANKED = "yanked"


# Unknown categories are kept as plain lowercase strings
InformationalCategory = Union[Informational, str]

_INFORMATIONAL_WARNING_KINDS: Dict[Informational, WarningKind] = {
    Informational.NOTICE: WarningKind.NOTICE,
    Informational.UNMAINTAINED: WarningKind.UNMAINTAINED,
    Informational.UNSOUND: WarningKind.UNSOUND,
}


def parse_informational(value: Union[str, Informational]) -> InformationalCategory:
    """
    Parse an informational category.

    Known categories become Informational members; anything else is returned as
    the raw lowercase string so it survives a round trip.

    Raises:
        ValidationError: If the value is empty
    """
    if isinstance(value, Informational):
        return value
    normalized = str(value).strip().lower()
    if not normalized:
        raise ValidationError("Informational category must not be empty")
    try:
        return Informational(normalized)
    except ValueError:
        return normalized


def informational_name(category: InformationalCategory) -> str:
    return category.value if isinstance(category, Informational) else category


def warning_kind_for(category: Optional[InformationalCategory]) -> Optional[WarningKind]:
    """
    Map an informational category to the warning kind it is reported under.

    Returns None for categories that have no reportable kind.
    """
    if not isinstance(category, Informational):
        return None
    return _INFORMATIONAL_WARNING_KINDS.get(category)


def _str_tuple(values: Any, field_name: str) -> Tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str) or not hasattr(values, "__iter__"):
        raise ValidationError(f"Field '{field_name}' must be a list of strings")
    return tuple(str(v) for v in values)


@dataclass(frozen=True)
class Affected:
    """Platforms and functions an advisory is scoped to. Empty means all."""
    arch: Tuple[str, ...] = ()
    os: Tuple[str, ...] = ()
    functions: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Affected":
        return cls(
            arch=tuple(a.lower() for a in _str_tuple(data.get("arch"), "affected.arch")),
            os=tuple(o.lower() for o in _str_tuple(data.get("os"), "affected.os")),
            functions=_str_tuple(data.get("functions"), "affected.functions"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "arch": list(self.arch),
            "os": list(self.os),
            "functions": list(self.functions),
        }


@dataclass(frozen=True)
class VersionRange:
    """Version requirements describing which releases are not affected."""
    patched: Tuple[str, ...] = ()
    unaffected: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VersionRange":
        return cls(
            patched=_str_tuple(data.get("patched"), "versions.patched"),
            unaffected=_str_tuple(data.get("unaffected"), "versions.unaffected"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"patched": list(self.patched), "unaffected": list(self.unaffected)}


@dataclass(frozen=True)
class Advisory:
    """A single advisory record from the advisory database."""
    id: str
    package: str
    title: str = ""
    description: str = ""
    date: Optional[str] = None
    severity: Optional[Severity] = None
    informational: Optional[InformationalCategory] = None
    aliases: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    url: Optional[str] = None
    withdrawn: Optional[str] = None
    affected: Optional[Affected] = None
    versions: VersionRange = field(default_factory=VersionRange)

    @property
    def is_informational(self) -> bool:
        return self.informational is not None

    @property
    def is_withdrawn(self) -> bool:
        return self.withdrawn is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Advisory":
        """
        Build an advisory from a plain mapping.

        Args:
            data: Mapping using the same keys as to_dict()

        Returns:
            Advisory: The parsed advisory

        Raises:
            ValidationError: If required fields are missing or values are invalid
        """
        advisory_id = data.get("id")
        package = data.get("package")
        if not advisory_id or not package:
            raise ValidationError(
                "Advisory requires both 'id' and 'package'",
                details={"id": advisory_id, "package": package},
            )

        severity = data.get("severity")
        informational = data.get("informational")
        affected = data.get("affected")
        versions = data.get("versions") or {}

        return cls(
            id=str(advisory_id),
            package=str(package),
            title=data.get("title") or "",
            description=data.get("description") or "",
            date=data.get("date"),
            severity=Severity.parse(severity) if severity is not None else None,
            informational=parse_informational(informational) if informational is not None else None,
            aliases=_str_tuple(data.get("aliases"), "aliases"),
            keywords=_str_tuple(data.get("keywords"), "keywords"),
            url=data.get("url"),
            withdrawn=data.get("withdrawn"),
            affected=Affected.from_dict(affected) if affected is not None else None,
            versions=VersionRange.from_dict(versions),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "package": self.package,
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "severity": self.severity.value if self.severity else None,
            "informational": informational_name(self.informational) if self.informational is not None else None,
            "aliases": list(self.aliases),
            "keywords": list(self.keywords),
            "url": self.url,
            "withdrawn": self.withdrawn,
            "affected": self.affected.to_dict() if self.affected else None,
            "versions": self.versions.to_dict(),
        }
