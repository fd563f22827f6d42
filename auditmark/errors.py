"""Exceptions raised by auditmark.

The region, merge and resolver operations report problems through their
return values. Exceptions are reserved for invalid configuration.
"""

from __future__ import annotations


class AuditmarkError(Exception):
    """Base class for auditmark errors."""

    pass


class ConfigurationError(AuditmarkError):
    """Raised when an environment setting has an unsupported value."""

    pass
