"""
Review annotations: structural equality, merging and lookups.

Submodules:
    - equality: what counts as the same entry, audited file or partial audit
    - merge: first-wins unions of two snapshots of review state
    - query: intersection and filter lookups over entries
    - store: owned active/resolved entry collections
"""

from auditmark.annotations.equality import (
    audited_file_equals,
    entry_equals,
    location_matches,
    partially_audited_equals,
)
from auditmark.annotations.merge import (
    merge_audited_files,
    merge_entries,
    merge_partially_audited_files,
    reconcile,
)
from auditmark.annotations.query import (
    entry_index,
    filter_by_author,
    filter_by_author_and_root_path,
    filter_by_root_path,
    find_intersecting_entry,
    find_location_index,
    unique_authors,
)
from auditmark.annotations.store import EntryStore, LocationRemoval, RemovalResult, remove_location

__all__ = [
    "EntryStore",
    "LocationRemoval",
    "RemovalResult",
    "audited_file_equals",
    "entry_equals",
    "entry_index",
    "filter_by_author",
    "filter_by_author_and_root_path",
    "filter_by_root_path",
    "find_intersecting_entry",
    "find_location_index",
    "location_matches",
    "merge_audited_files",
    "merge_entries",
    "merge_partially_audited_files",
    "partially_audited_equals",
    "reconcile",
    "remove_location",
    "unique_authors",
]
