"""
Owned collections of active and resolved entries.

An entry lives in exactly one of the two lists. Resolving and restoring
move it between them, so no entry is ever reachable from both.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from auditmark.annotations.query import (
    entry_index,
    find_intersecting_entry,
    find_location_index,
    unique_authors,
)
from auditmark.models import EntryType, FullEntry, FullLocation

LOG = logging.getLogger("annotations.store")


@dataclass
class RemovalResult:
    """Result of removing, resolving or restoring an entry."""

    success: bool
    removed_entry: FullEntry | None = None
    error: str | None = None


@dataclass
class LocationRemoval:
    removed: bool
    should_delete_entry: bool


def remove_location(locations: list[FullLocation], target: FullLocation) -> LocationRemoval:
    """
    Remove ``target`` from ``locations`` in place.

    ``should_delete_entry`` is set when the last location was removed.
    """
    idx = find_location_index(locations, target)
    if idx == -1:
        return LocationRemoval(removed=False, should_delete_entry=False)
    del locations[idx]
    return LocationRemoval(removed=True, should_delete_entry=not locations)


class EntryStore:
    """
    Active ("tree") and resolved entries of a review session.

    Accessors return copies of the lists; mutate through the methods.
    """

    def __init__(
        self,
        tree: Iterable[FullEntry] = (),
        resolved: Iterable[FullEntry] = (),
    ) -> None:
        self._tree: list[FullEntry] = list(tree)
        self._resolved: list[FullEntry] = list(resolved)

    @property
    def tree(self) -> list[FullEntry]:
        return list(self._tree)

    @property
    def resolved(self) -> list[FullEntry]:
        return list(self._resolved)

    def add(self, entry: FullEntry) -> None:
        self._tree.append(entry)

    def find_intersecting(self, location: FullLocation, entry_type: EntryType) -> int:
        """Index of the first active entry overlapping ``location``, or -1."""
        return find_intersecting_entry(self._tree, location, entry_type)

    def remove(self, entry: FullEntry) -> RemovalResult:
        """Delete an active entry."""
        return self._take(entry, self._tree, "Entry not found in array")

    def resolve(self, entry: FullEntry) -> RemovalResult:
        """Move an active entry to the resolved list."""
        result = self._take(entry, self._tree, "Entry not found in array")
        if result.success and result.removed_entry is not None:
            self._resolved.append(result.removed_entry)
        return result

    def restore(self, entry: FullEntry) -> RemovalResult:
        """Move a resolved entry back to the active list."""
        result = self._take(entry, self._resolved, "Entry not found in resolved entries")
        if result.success and result.removed_entry is not None:
            self._tree.append(result.removed_entry)
        return result

    def restore_all(self) -> list[str]:
        """Move every resolved entry back. Returns the affected authors."""
        if not self._resolved:
            return []
        authors = unique_authors(self._resolved)
        self._tree.extend(self._resolved)
        self._resolved = []
        return authors

    def delete_all_resolved(self) -> list[str]:
        """Drop every resolved entry. Returns the affected authors."""
        if not self._resolved:
            return []
        authors = unique_authors(self._resolved)
        self._resolved = []
        return authors

    def remove_location(self, entry: FullEntry, location: FullLocation) -> LocationRemoval:
        """
        Remove one location of an active entry.

        The entry itself is deleted once its last location is gone.
        """
        idx = entry_index(entry, self._tree)
        if idx == -1:
            return LocationRemoval(removed=False, should_delete_entry=False)
        owned = self._tree[idx]
        outcome = remove_location(owned.locations, location)
        if outcome.should_delete_entry:
            del self._tree[idx]
            LOG.debug("Deleted entry %r after removing its last location", owned.label)
        return outcome

    @staticmethod
    def _take(entry: FullEntry, source: list[FullEntry], error: str) -> RemovalResult:
        idx = entry_index(entry, source)
        if idx == -1:
            LOG.debug("%s: %r", error, entry.label)
            return RemovalResult(success=False, error=error)
        return RemovalResult(success=True, removed_entry=source.pop(idx))
