# advisory_audit/__init__.py
"""
advisory-audit: vulnerability and warning reports for dependency lockfiles
"""

from .database import HistoryDatabase, InMemoryDatabase, Query
from .models import Advisory, Lockfile, Package, Severity, Vulnerability, Warning, WarningKind
from .report import Report, Settings, find_warnings, generate
from .config import load_settings

__all__ = [
    'Advisory',
    'HistoryDatabase',
    'InMemoryDatabase',
    'Lockfile',
    'Package',
    'Query',
    'Report',
    'Settings',
    'Severity',
    'Vulnerability',
    'Warning',
    'WarningKind',
    'find_warnings',
    'generate',
    'load_settings',
]

__version__ = "0.1.0"
