"""
Persistence codecs for auditmark.

Submodules:
    - serialization: JSON text <-> audit documents and day logs
"""

from auditmark.storage.serialization import (
    audit_document_name,
    parse_audit_document,
    parse_day_log,
    serialize_audit_document,
    serialize_day_log,
    validate_serialized,
)

__all__ = [
    "audit_document_name",
    "parse_audit_document",
    "parse_day_log",
    "serialize_audit_document",
    "serialize_day_log",
    "validate_serialized",
]
