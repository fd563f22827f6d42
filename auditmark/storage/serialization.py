"""
Text codec for audit documents and day logs.

Reading and writing the files is left to the caller; these functions
only convert between JSON text and the records in :mod:`auditmark.models`.
Output formatting matches what existing documents use (4-space indent for
audit documents, 2-space for day logs, non-ASCII kept verbatim).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from auditmark.config import AuditmarkConfig
from auditmark.models import SerializedData

LOG = logging.getLogger("storage.serialization")


def audit_document_name(username: str, extension: str | None = None) -> str:
    """File name of ``username``'s audit document."""
    if extension is None:
        extension = AuditmarkConfig.from_env().file_extension
    return f"{username}{extension}"


def validate_serialized(raw: Any) -> bool:
    """Check that decoded JSON has the shape of an audit document."""
    if not isinstance(raw, dict):
        return False
    try:
        SerializedData.model_validate(raw)
    except ValidationError as exc:
        LOG.warning("Invalid audit document: %d validation error(s)", exc.error_count())
        LOG.debug("Validation errors: %s", exc)
        return False
    return True


def parse_audit_document(text: str) -> Optional[SerializedData]:
    """
    Parse an audit document.

    Returns:
        The document, or None if the text is blank, not JSON, or not
        shaped like an audit document
    """
    if not text or not text.strip():
        return None
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        LOG.warning("Skipping audit document with invalid JSON: %s", exc)
        return None
    if not validate_serialized(raw):
        return None
    return SerializedData.model_validate(raw)


def serialize_audit_document(data: SerializedData) -> str:
    payload = data.model_dump(mode="json", exclude_none=True)
    return json.dumps(payload, indent=4, ensure_ascii=False)


def parse_day_log(text: str) -> Optional[Dict[str, List[str]]]:
    """
    Parse a day log: a JSON list of ``[date, [paths...]]`` pairs.

    Returns:
        Mapping of date to audited file paths in document order, or None
        if the text is blank or malformed
    """
    if not text or not text.strip():
        return None
    try:
        raw = json.loads(text)
    except json.JSONDecodeError:
        LOG.warning("Skipping day log with invalid JSON")
        return None
    if not isinstance(raw, list):
        return None

    day_log: Dict[str, List[str]] = {}
    for item in raw:
        if not isinstance(item, list) or len(item) != 2:
            LOG.warning("Skipping day log with malformed record: %r", item)
            return None
        day, paths = item
        day_log[str(day)] = list(paths) if isinstance(paths, list) else []
    return day_log


def serialize_day_log(day_log: Dict[str, List[str]]) -> str:
    return json.dumps([[day, paths] for day, paths in day_log.items()], indent=2, ensure_ascii=False)
