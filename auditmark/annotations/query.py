"""
Lookups over collections of entries and their locations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from auditmark.annotations.equality import entry_equals, location_matches
from auditmark.models import Entry, EntryType, FullEntry, FullLocation

E = TypeVar("E", bound=Entry)


def find_intersecting_entry(
    entries: Sequence[FullEntry],
    target: FullLocation,
    entry_type: EntryType,
) -> int:
    """
    Index of the first entry of ``entry_type`` with a location overlapping ``target``.

    A location overlaps when it has the same path and workspace root and
    its closed line range shares at least one line with the target's.
    Adjacent ranges do not overlap.

    Returns:
        The index into ``entries``, or -1 if nothing overlaps
    """
    for idx, entry in enumerate(entries):
        if entry.entryType != entry_type:
            continue
        for loc in entry.locations:
            if loc.path != target.path or loc.rootPath != target.rootPath:
                continue
            if loc.startLine <= target.endLine and target.startLine <= loc.endLine:
                return idx
    return -1


def entry_index(entry: Entry, entries: Sequence[Entry]) -> int:
    """Index of the first entry structurally equal to ``entry``, or -1."""
    for idx, candidate in enumerate(entries):
        if entry_equals(entry, candidate):
            return idx
    return -1


def find_location_index(locations: Sequence[FullLocation], target: FullLocation) -> int:
    for idx, loc in enumerate(locations):
        if location_matches(loc, target):
            return idx
    return -1


def unique_authors(entries: Sequence[Entry]) -> list[str]:
    """Authors of ``entries`` in order of first appearance."""
    return list(dict.fromkeys(entry.author for entry in entries))


def filter_by_author(entries: Sequence[E], author: str) -> list[E]:
    return [entry for entry in entries if entry.author == author]


def filter_by_root_path(entries: Sequence[FullEntry], root_path: str) -> list[FullEntry]:
    """Entries with at least one location under ``root_path``."""
    return [
        entry
        for entry in entries
        if any(loc.rootPath == root_path for loc in entry.locations)
    ]


def filter_by_author_and_root_path(
    entries: Sequence[FullEntry],
    author: str,
    root_path: str,
) -> list[FullEntry]:
    return filter_by_root_path(filter_by_author(entries, author), root_path)
