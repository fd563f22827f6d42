"""
Persisted review-state records.

Field names match the keys of the on-disk audit documents exactly, so
``model_dump(mode="json")`` and ``model_validate`` round-trip them.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class EntryType(IntEnum):
    """Kind of annotation. Serialized as an integer tag."""

    FINDING = 0
    NOTE = 1


class FindingSeverity(str, Enum):
    INFORMATIONAL = "Informational"
    UNDETERMINED = "Undetermined"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    UNDEFINED = ""


class FindingDifficulty(str, Enum):
    UNDETERMINED = "Undetermined"
    NA = "N/A"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    UNDEFINED = ""


class FindingType(str, Enum):
    ACCESS_CONTROLS = "Access Controls"
    AUDITING_AND_LOGGING = "Auditing and Logging"
    AUTHENTICATION = "Authentication"
    CONFIGURATION = "Configuration"
    CRYPTOGRAPHY = "Cryptography"
    DATA_EXPOSURE = "Data Exposure"
    DATA_VALIDATION = "Data Validation"
    DENIAL_OF_SERVICE = "Denial of Service"
    ERROR_REPORTING = "Error Reporting"
    PATCHING = "Patching"
    SESSION_MANAGEMENT = "Session Management"
    TESTING = "Testing"
    TIMING = "Timing"
    UNDEFINED_BEHAVIOR = "Undefined Behavior"
    UNDEFINED = ""


class EntryDetails(BaseModel):
    severity: FindingSeverity
    difficulty: FindingDifficulty
    type: FindingType
    description: str
    exploit: str
    recommendation: str
    provenance: Optional[str] = None
    commitHash: Optional[str] = None


def default_entry_details(commit_hash: str = "") -> EntryDetails:
    """Details attached to a freshly created entry."""
    return EntryDetails(
        severity=FindingSeverity.UNDEFINED,
        difficulty=FindingDifficulty.UNDEFINED,
        type=FindingType.UNDEFINED,
        description="",
        exploit="",
        recommendation="Short term, \nLong term, \n",
        provenance="human",
        commitHash=commit_hash,
    )


class Location(BaseModel):
    """A span of lines in a file, path relative to the workspace root."""

    path: str
    startLine: int
    endLine: int
    label: str
    description: Optional[str] = None


class FullLocation(Location):
    """A location that also records the absolute path of its workspace root."""

    rootPath: str


class Entry(BaseModel):
    """A finding or a note."""

    label: str
    entryType: EntryType
    author: str
    details: EntryDetails
    locations: List[Location]


class FullEntry(Entry):
    locations: List[FullLocation]


class AuditedFile(BaseModel):
    """Whole-file reviewed marker."""

    path: str
    author: str


class PartiallyAuditedFile(BaseModel):
    """One contiguous reviewed sub-range of a file."""

    path: str
    author: str
    startLine: int
    endLine: int


class SerializedData(BaseModel):
    """Contents of one reviewer's audit document."""

    clientRemote: Optional[str] = None
    gitRemote: Optional[str] = None
    gitSha: Optional[str] = None
    treeEntries: List[Entry]
    auditedFiles: List[AuditedFile]
    # older documents do not have partiallyAuditedFiles
    partiallyAuditedFiles: Optional[List[PartiallyAuditedFile]] = None
    resolvedEntries: List[Entry]


def empty_serialized_data() -> SerializedData:
    return SerializedData(
        treeEntries=[],
        auditedFiles=[],
        partiallyAuditedFiles=[],
        resolvedEntries=[],
    )


class WorkspaceRoot(BaseModel):
    """A workspace root path paired with its display label."""

    model_config = ConfigDict(frozen=True)

    rootPath: str
    rootLabel: str


def is_old_entry(entry: Entry) -> bool:
    """True for entries written before locations carried a root path."""
    if not entry.locations:
        return True
    return getattr(entry.locations[0], "rootPath", None) is None
