# advisory_audit/database/query.py

"""
Immutable advisory database queries.

A Query is a filter specification that the database evaluates against each
advisory. Every builder method returns a new Query; the receiver is never
modified, so a base query can be safely extended for different passes.
"""

import dataclasses
from dataclasses import dataclass
from typing import Optional, Union

from ..models.advisory import Advisory, Severity


@dataclass(frozen=True)
class Query:
    """Advisory filter evaluated by the database for each candidate advisory."""
    package_name: Optional[str] = None
    severity_threshold: Optional[Severity] = None
    target_arch_name: Optional[str] = None
    target_os_name: Optional[str] = None
    include_informational: Optional[bool] = None
    include_withdrawn: Optional[bool] = None

    @classmethod
    def package_scope(cls) -> "Query":
        """
        Default scope for auditing every package in a lockfile.

        Informational and withdrawn advisories are excluded.
        """
        return cls(include_informational=False, include_withdrawn=False)

    def package(self, name: str) -> "Query":
        return dataclasses.replace(self, package_name=name)

    def target_arch(self, arch: str) -> "Query":
        return dataclasses.replace(self, target_arch_name=arch.lower())

    def target_os(self, os_name: str) -> "Query":
        return dataclasses.replace(self, target_os_name=os_name.lower())

    def severity(self, severity: Union[str, Severity]) -> "Query":
        return dataclasses.replace(self, severity_threshold=Severity.parse(severity))

    def informational(self, setting: bool) -> "Query":
        return dataclasses.replace(self, include_informational=setting)

    def withdrawn(self, setting: bool) -> "Query":
        return dataclasses.replace(self, include_withdrawn=setting)

    def matches(self, advisory: Advisory) -> bool:
        """
        Check whether an advisory satisfies this query.

        Version applicability is not evaluated here; the database decides
        whether a package version falls inside the advisory's affected range.

        Args:
            advisory: Candidate advisory

        Returns:
            bool: True if the advisory passes every configured filter
        """
        if self.package_name is not None and advisory.package != self.package_name:
            return False

        # Advisories without a severity are never excluded by the threshold
        if self.severity_threshold is not None and advisory.severity is not None:
            if advisory.severity < self.severity_threshold:
                return False

        if self.include_informational is not None:
            if self.include_informational != advisory.is_informational:
                return False

        if self.include_withdrawn is False and advisory.is_withdrawn:
            return False

        affected = advisory.affected
        if affected is not None:
            if self.target_arch_name is not None and affected.arch:
                if self.target_arch_name not in affected.arch:
                    return False
            if self.target_os_name is not None and affected.os:
                if self.target_os_name not in affected.os:
                    return False

        return True
