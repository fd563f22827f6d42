"""
Line region algebra for auditmark.

Partial audits record which line ranges of a file a reviewer has looked at.
A reviewer's footprint in one file may consist of several disjoint regions:

- [0, 9] and [20, 35] of src/main.py by alice

Regions support overlap/adjacency tests, merging, consolidation into a
disjoint footprint, and splitting when part of a region is de-marked.
"""

from auditmark.regions.algebra import (
    adjust_for_empty_last_line,
    adjust_selection_end_line,
    consolidate_regions,
    mark_region,
    merge_regions,
    overlaps_or_adjacent,
    selection_in_region,
    split_on_deselect,
    toggle_partial_audit,
    try_merge_regions,
    unmark_region,
)
from auditmark.regions.models import HasLines, LineRegion, RegionGrouping, SplitResult

__all__ = [
    "HasLines",
    "LineRegion",
    "RegionGrouping",
    "SplitResult",
    "adjust_for_empty_last_line",
    "adjust_selection_end_line",
    "consolidate_regions",
    "mark_region",
    "merge_regions",
    "overlaps_or_adjacent",
    "selection_in_region",
    "split_on_deselect",
    "toggle_partial_audit",
    "try_merge_regions",
    "unmark_region",
]
