"""
Report generation: settings and query building, vulnerability aggregation,
warning classification and provenance.
"""

from .settings import Settings
from .provenance import DatabaseInfo, LockfileInfo
from .vulnerabilities import VulnerabilityInfo
from .warnings import ClassifierStats, FrozenWarningInfo, WarningInfo, add_warning, find_warnings, freeze_warnings
from .generator import Report, generate

__all__ = [
    'Settings',
    'DatabaseInfo',
    'LockfileInfo',
    'VulnerabilityInfo',
    'ClassifierStats',
    'WarningInfo',
    'FrozenWarningInfo',
    'freeze_warnings',
    'add_warning',
    'find_warnings',
    'Report',
    'generate',
]
