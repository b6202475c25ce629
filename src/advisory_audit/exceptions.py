# advisory_audit/exceptions.py

"""
Exception hierarchy for advisory-audit.

Every error raised by the package derives from AdvisoryAuditError, which carries
a human readable message plus an optional machine readable code and a details
mapping for additional context.
"""

from typing import Any, Dict, Optional


class AdvisoryAuditError(Exception):
    """Base exception for all advisory-audit errors."""

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class ValidationError(AdvisoryAuditError):
    """Raised when advisory, package or settings data is malformed."""
    pass


class ConfigurationError(AdvisoryAuditError):
    """Raised when settings cannot be loaded from a file or the environment."""
    pass


class DatabaseError(AdvisoryAuditError):
    """Raised when the advisory database collaborator fails."""
    pass


class InvariantViolation(AdvisoryAuditError):
    """
    Raised when an internal precondition is broken.

    This signals a defect in an upstream collaborator (for example the matching
    layer returning an informational match without an informational category),
    never a legitimate input condition.
    """
    pass
