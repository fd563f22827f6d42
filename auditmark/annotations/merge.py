"""
Union operators for two independently obtained snapshots of review state.

Every merge keeps all of the first collection in order, then appends the
elements of the second that have no structural equal in the result so
far. When a duplicate exists on both sides the first collection's copy
survives, including its free-form fields. Existing documents produced by
synchronization rely on that asymmetry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from auditmark.annotations.equality import (
    audited_file_equals,
    entry_equals,
    partially_audited_equals,
)
from auditmark.config import AuditmarkConfig
from auditmark.errors import ConfigurationError
from auditmark.models import AuditedFile, Entry, PartiallyAuditedFile, SerializedData
from auditmark.regions import RegionGrouping, consolidate_regions

LOG = logging.getLogger("annotations.merge")

T = TypeVar("T")


def _union_first_wins(a: Sequence[T], b: Iterable[T], equals: Callable[[T, T], bool]) -> list[T]:
    result = list(a)
    skipped = 0
    for candidate in b:
        if any(equals(kept, candidate) for kept in result):
            skipped += 1
            continue
        result.append(candidate)
    if skipped:
        LOG.debug("Dropped %d duplicate(s) while merging", skipped)
    return result


def _first_non_empty(first: str | None, second: str | None) -> str | None:
    if first:
        return first
    if second:
        return second
    # an empty value on either side beats a missing one
    return first if first is not None else second


def merge_entries(a: Sequence[Entry], b: Iterable[Entry]) -> list[Entry]:
    return _union_first_wins(a, b, entry_equals)


def merge_audited_files(a: Sequence[AuditedFile], b: Iterable[AuditedFile]) -> list[AuditedFile]:
    return _union_first_wins(a, b, audited_file_equals)


def merge_partially_audited_files(
    a: Sequence[PartiallyAuditedFile],
    b: Iterable[PartiallyAuditedFile],
) -> list[PartiallyAuditedFile]:
    """Exact-match union. Overlapping regions are left for :func:`consolidate_regions`."""
    return _union_first_wins(a, b, partially_audited_equals)


def reconcile(
    a: SerializedData,
    b: SerializedData,
    grouping: RegionGrouping | None = None,
) -> SerializedData:
    """
    Combine two audit documents into one.

    Entries, resolved entries and audited files are merged with
    first-wins deduplication. Partial audits are merged and then
    consolidated so overlapping or adjacent regions collapse. Remote and
    SHA fields take the first non-empty value. An unusable
    ``AUDITMARK_REGION_GROUPING`` falls back to path-and-author grouping
    with a warning; merging never fails on configuration.

    Args:
        a: Snapshot whose copies win on duplicates (usually local state)
        b: Snapshot merged into ``a``
        grouping: Consolidation key; defaults to the configured grouping

    Returns:
        A new SerializedData; neither input is modified
    """
    if grouping is None:
        try:
            grouping = AuditmarkConfig.from_env().region_grouping
        except ConfigurationError as exc:
            grouping = RegionGrouping.PATH_AND_AUTHOR
            LOG.warning("%s; consolidating by %s", exc, grouping.value)

    partials = merge_partially_audited_files(
        a.partiallyAuditedFiles or [],
        b.partiallyAuditedFiles or [],
    )
    return SerializedData(
        clientRemote=_first_non_empty(a.clientRemote, b.clientRemote),
        gitRemote=_first_non_empty(a.gitRemote, b.gitRemote),
        gitSha=_first_non_empty(a.gitSha, b.gitSha),
        treeEntries=merge_entries(a.treeEntries, b.treeEntries),
        auditedFiles=merge_audited_files(a.auditedFiles, b.auditedFiles),
        partiallyAuditedFiles=consolidate_regions(partials, grouping),
        resolvedEntries=merge_entries(a.resolvedEntries, b.resolvedEntries),
    )
