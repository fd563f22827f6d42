"""
Line region value types.

A region is a closed, 0-indexed line interval ``[startLine, endLine]``.
The attribute names match the persisted partial-audit records so the
algebra in :mod:`auditmark.regions.algebra` accepts ``LineRegion``,
``PartiallyAuditedFile`` and ``Location`` objects alike.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from pydantic import BaseModel


class HasLines(Protocol):
    startLine: int
    endLine: int


class LineRegion(BaseModel):
    """Closed line interval. Mutable; never persisted on its own."""

    startLine: int
    endLine: int

    def __str__(self) -> str:
        return f"{self.startLine}-{self.endLine}"


class RegionGrouping(str, Enum):
    """Key under which partial audits are consolidated."""

    PATH = "path"
    PATH_AND_AUTHOR = "path_and_author"


@dataclass
class SplitResult:
    """Outcome of removing a selection from an existing region."""

    modified: bool = False
    deleted: bool = False
    split: bool = False
    new_region: Optional[LineRegion] = None
