"""
Value types shared by the database collaborators and the report core.
"""

from .advisory import (
    Advisory,
    Affected,
    Informational,
    InformationalCategory,
    Severity,
    VersionRange,
    WarningKind,
    informational_name,
    parse_informational,
    warning_kind_for,
)
from .package import Package
from .lockfile import Lockfile
from .vulnerability import Vulnerability
from .warning import Warning

__all__ = [
    'Advisory',
    'Affected',
    'Informational',
    'InformationalCategory',
    'Severity',
    'VersionRange',
    'WarningKind',
    'informational_name',
    'parse_informational',
    'warning_kind_for',
    'Package',
    'Lockfile',
    'Vulnerability',
    'Warning',
]
