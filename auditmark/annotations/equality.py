"""
Structural equality for review annotations.

These comparisons decide what counts as a duplicate when two snapshots
of review state are merged. They deliberately ignore free-form fields:
entry details and location labels/descriptions may differ between copies
of the same annotation.
"""

from __future__ import annotations

from auditmark.models import AuditedFile, Entry, FullLocation, PartiallyAuditedFile


def entry_equals(a: Entry, b: Entry) -> bool:
    """
    Compare entry type, author, label and the ordered locations.

    Locations are compared by ``(path, startLine, endLine)`` only.
    Entries with a different number of locations are never equal.
    """
    if len(a.locations) != len(b.locations):
        return False
    for loc_a, loc_b in zip(a.locations, b.locations):
        if (
            loc_a.path != loc_b.path
            or loc_a.startLine != loc_b.startLine
            or loc_a.endLine != loc_b.endLine
        ):
            return False
    return a.entryType == b.entryType and a.author == b.author and a.label == b.label


def audited_file_equals(a: AuditedFile, b: AuditedFile) -> bool:
    return a.path == b.path and a.author == b.author


def partially_audited_equals(a: PartiallyAuditedFile, b: PartiallyAuditedFile) -> bool:
    """Exact match on path, author and both bounds. Overlap is not equality."""
    return (
        a.path == b.path
        and a.author == b.author
        and a.startLine == b.startLine
        and a.endLine == b.endLine
    )


def location_matches(a: FullLocation, b: FullLocation) -> bool:
    """Match on path, both bounds and the workspace root."""
    return (
        a.path == b.path
        and a.startLine == b.startLine
        and a.endLine == b.endLine
        and a.rootPath == b.rootPath
    )
