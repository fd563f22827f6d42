"""
Workspace root containment and display labels.

A review session may span several root directories. Each root is shown
under a label that starts as the directory's own name; roots whose names
collide get parent directories prepended until the labels differ:

    /home/a/code/src  ->  a/code/src
    /home/b/code/src  ->  b/code/src
    /opt/tools        ->  tools
"""

from __future__ import annotations

import logging
import os
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from auditmark.models import WorkspaceRoot

LOG = logging.getLogger("workspace.roots")


def is_in_root(root_path: str, file_path: str) -> tuple[bool, str]:
    """
    Check whether ``file_path`` lies under ``root_path``.

    Args:
        root_path: Absolute path of the workspace root
        file_path: Absolute path of the file

    Returns:
        ``(True, relative_path)`` when contained (the root itself yields
        an empty relative path), ``(False, "")`` otherwise
    """
    try:
        relative = os.path.relpath(file_path, root_path)
    except ValueError:
        # different drives on Windows
        return False, ""
    if relative == os.curdir:
        return True, ""
    if relative == os.pardir or relative.startswith(os.pardir + os.sep) or os.path.isabs(relative):
        return False, ""
    return True, relative


@dataclass
class _Candidate:
    root_path: str
    label: str
    # directory whose name is prepended next
    parent: str
    exhausted: bool = False

    def advance(self) -> None:
        """Prepend the next ancestor directory name to the label."""
        if self.exhausted:
            return
        head = os.path.basename(self.parent)
        if head:
            self.label = os.path.join(head, self.label)
            self.parent = os.path.dirname(self.parent)
        else:
            # reached the filesystem root
            self.label = os.path.join(self.parent, self.label)
            self.exhausted = True


def _colliding(candidates: Iterable[_Candidate]) -> list[list[_Candidate]]:
    buckets: dict[str, list[_Candidate]] = {}
    for candidate in candidates:
        buckets.setdefault(candidate.label, []).append(candidate)
    return [bucket for bucket in buckets.values() if len(bucket) > 1]


def unique_labels(root_paths: Sequence[str]) -> list[WorkspaceRoot]:
    """
    Assign a distinct, human-readable label to every root path.

    Labels start as the final path segment. Each group of colliding labels
    is put on a work queue; only that group moves up one directory level
    per step, and its members are re-checked against each other. Labels
    are deterministic for a given input, so repeated calls agree.

    Identical root paths cannot be told apart; they keep labels reaching
    up to the filesystem root and a warning is logged.
    """
    candidates = []
    for root_path in root_paths:
        normalized = os.path.normpath(root_path)
        candidates.append(
            _Candidate(
                root_path=root_path,
                label=os.path.basename(normalized) or normalized,
                parent=os.path.dirname(normalized),
            )
        )

    queue = deque(_colliding(candidates))
    if queue:
        LOG.info("There are workspace root folders with the same name.")

    while queue:
        group = queue.popleft()
        for candidate in group:
            candidate.advance()
        for bucket in _colliding(group):
            if all(candidate.exhausted for candidate in bucket):
                LOG.warning(
                    "Cannot disambiguate workspace roots: %s",
                    ", ".join(candidate.root_path for candidate in bucket),
                )
                continue
            queue.append(bucket)

    return [WorkspaceRoot(rootPath=c.root_path, rootLabel=c.label) for c in candidates]
