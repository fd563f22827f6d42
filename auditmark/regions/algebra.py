"""
Line region algebra for partial audits.

Operations over closed line intervals belonging to a single file and
author: overlap/adjacency testing, merging, consolidation of a footprint
into disjoint regions, and splitting a region when part of it is
de-marked. Also holds the two helpers that turn an editor selection into
the line range the user meant.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Sequence
from typing import Callable

from auditmark.models import AuditedFile, PartiallyAuditedFile
from auditmark.regions.models import HasLines, LineRegion, RegionGrouping, SplitResult

LOG = logging.getLogger("regions.algebra")


def overlaps_or_adjacent(a: HasLines, b: HasLines) -> bool:
    """
    Check whether two regions overlap or touch end-to-end.

    ``[1, 5]`` and ``[6, 9]`` are adjacent and therefore mergeable;
    ``[1, 5]`` and ``[7, 9]`` are not.
    """
    return a.startLine <= b.endLine + 1 and b.startLine <= a.endLine + 1


def merge_regions(a: HasLines, b: HasLines) -> LineRegion:
    """
    Smallest region covering both ``a`` and ``b``.

    Only meaningful when ``overlaps_or_adjacent(a, b)`` holds. For
    disjoint regions the result also covers the gap between them; use
    :func:`try_merge_regions` when that has not been checked.
    """
    return LineRegion(
        startLine=min(a.startLine, b.startLine),
        endLine=max(a.endLine, b.endLine),
    )


def try_merge_regions(a: HasLines, b: HasLines) -> LineRegion | None:
    """Merge ``a`` and ``b``, or return None if they are disjoint and not adjacent."""
    if not overlaps_or_adjacent(a, b):
        return None
    return merge_regions(a, b)


def _grouping_key(grouping: RegionGrouping) -> Callable[[PartiallyAuditedFile], Hashable]:
    if grouping is RegionGrouping.PATH:
        return lambda region: region.path
    return lambda region: (region.path, region.author)


def consolidate_regions(
    regions: Iterable[PartiallyAuditedFile],
    grouping: RegionGrouping = RegionGrouping.PATH_AND_AUTHOR,
) -> list[PartiallyAuditedFile]:
    """
    Collapse overlapping and adjacent partial audits.

    Regions are grouped by ``grouping`` (path and author by default), sorted
    by start line and merged greedily in one left-to-right pass. The input
    is not mutated; the result is ordered by path then start line. Paths
    compare by code point, not by locale, so ``"B.py"`` sorts before
    ``"a.py"``. With
    ``RegionGrouping.PATH`` a merged region keeps the author of the
    earliest region it absorbed.

    Consolidating an already consolidated list returns an equal list.
    """
    key_of = _grouping_key(grouping)
    ordered = sorted(regions, key=lambda r: (r.path, r.startLine))

    result: list[PartiallyAuditedFile] = []
    # key -> index in result of the group's region with the furthest start
    last_by_key: dict[Hashable, int] = {}

    for region in ordered:
        key = key_of(region)
        idx = last_by_key.get(key)
        if idx is not None and overlaps_or_adjacent(result[idx], region):
            merged = merge_regions(result[idx], region)
            result[idx] = result[idx].model_copy(
                update={"startLine": merged.startLine, "endLine": merged.endLine}
            )
            continue
        last_by_key[key] = len(result)
        result.append(region.model_copy())

    if len(result) != len(ordered):
        LOG.debug("Consolidated %d partial audits into %d", len(ordered), len(result))
    return result


def selection_in_region(selection: HasLines, region: HasLines) -> bool:
    """True if ``selection`` lies entirely inside ``region`` (equality included)."""
    return region.startLine <= selection.startLine and selection.endLine <= region.endLine


def split_on_deselect(existing: HasLines, selection: HasLines) -> SplitResult:
    """
    Remove ``selection`` from ``existing``, mutating ``existing`` in place.

    ``selection`` must be contained in ``existing`` (see
    :func:`selection_in_region`); the caller checks this. Outcomes, in the
    order they are tested:

    1. exact match: ``deleted`` is set and the caller drops the region;
    2. shared end line: the tail is cut, ``existing`` ends before the selection;
    3. shared start line: the head is cut, ``existing`` starts after the selection;
    4. interior selection: ``existing`` keeps the part before the selection
       and ``new_region`` holds the part after it.
    """
    if existing.startLine == selection.startLine and existing.endLine == selection.endLine:
        return SplitResult(modified=True, deleted=True)

    if existing.endLine == selection.endLine:
        existing.endLine = selection.startLine - 1
        return SplitResult(modified=True)

    if existing.startLine == selection.startLine:
        existing.startLine = selection.endLine + 1
        return SplitResult(modified=True)

    new_region = LineRegion(startLine=selection.endLine + 1, endLine=existing.endLine)
    existing.endLine = selection.startLine - 1
    return SplitResult(modified=True, split=True, new_region=new_region)


def mark_region(
    regions: list[PartiallyAuditedFile],
    path: str,
    author: str,
    start_line: int,
    end_line: int,
    grouping: RegionGrouping = RegionGrouping.PATH_AND_AUTHOR,
) -> list[PartiallyAuditedFile]:
    """Record ``[start_line, end_line]`` of ``path`` as reviewed and consolidate."""
    marked = PartiallyAuditedFile(path=path, author=author, startLine=start_line, endLine=end_line)
    return consolidate_regions([*regions, marked], grouping)


def unmark_region(
    regions: list[PartiallyAuditedFile],
    path: str,
    author: str,
    start_line: int,
    end_line: int,
) -> bool:
    """
    De-mark ``[start_line, end_line]`` of ``path`` for ``author``, editing ``regions`` in place.

    The selection must fall inside a single partial audit of that file and
    author. The region is removed, shrunk or split in two accordingly.

    Returns:
        False if no partial audit contains the selection, True otherwise.
    """
    selection = LineRegion(startLine=start_line, endLine=end_line)
    for idx, region in enumerate(regions):
        if region.path != path or region.author != author:
            continue
        if not selection_in_region(selection, region):
            continue

        outcome = split_on_deselect(region, selection)
        if outcome.deleted:
            del regions[idx]
        elif outcome.split and outcome.new_region is not None:
            regions.insert(
                idx + 1,
                PartiallyAuditedFile(
                    path=path,
                    author=author,
                    startLine=outcome.new_region.startLine,
                    endLine=outcome.new_region.endLine,
                ),
            )
        LOG.debug("Unmarked %s lines %s for %s", path, selection, author)
        return True

    LOG.debug("No partial audit of %s by %s contains lines %s", path, author, selection)
    return False


def toggle_partial_audit(
    regions: Sequence[PartiallyAuditedFile],
    audited_files: Iterable[AuditedFile],
    path: str,
    author: str,
    selections: Iterable[HasLines],
    grouping: RegionGrouping = RegionGrouping.PATH_AND_AUTHOR,
) -> list[PartiallyAuditedFile]:
    """
    Flip the reviewed state of each selection in ``path`` for ``author``.

    A selection lying inside one of the author's partial audits of the file
    is de-marked (see :func:`unmark_region`); any other selection is marked.
    Selections are applied in order, then the result is consolidated.
    Nothing changes when ``author`` already marked the whole file as audited.

    Returns:
        A new consolidated list; ``regions`` is not modified
    """
    if any(f.path == path and f.author == author for f in audited_files):
        LOG.debug("%s is fully audited by %s; partial audits left alone", path, author)
        return list(regions)

    working = [region.model_copy() for region in regions]
    for selection in selections:
        if unmark_region(working, path, author, selection.startLine, selection.endLine):
            continue
        working.append(
            PartiallyAuditedFile(
                path=path,
                author=author,
                startLine=selection.startLine,
                endLine=selection.endLine,
            )
        )
    return consolidate_regions(working, grouping)


def adjust_selection_end_line(start_line: int, end_line: int, end_character: int) -> int:
    """
    Recover the last selected line of a multi-line selection.

    Editors report a selection running to the end of line N as ending at
    character 0 of line N + 1.
    """
    if end_line > start_line and end_character == 0:
        return end_line - 1
    return end_line


def adjust_for_empty_last_line(
    end_line: int,
    start_line: int,
    document_line_count: int,
    last_line_is_empty: bool,
) -> int:
    """
    Drop a trailing empty document line from a selection.

    Applies only when the selection ends on the document's final line and
    that line is empty. Never moves the end before ``start_line``.
    """
    if end_line == document_line_count - 1 and last_line_is_empty:
        return max(end_line - 1, start_line)
    return end_line
