"""
Attribute absolute file paths to the workspace roots that own them.

Roots may contain one another. ``resolve`` picks the narrowest containing
root and flags the path as ambiguous; ``resolve_all`` returns every
containing root, for annotations that belong to all enclosing projects.

Both lookups are memoized per absolute path. The memo has no
invalidation: it is only valid for the root set it was built with.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple, Optional

from auditmark.models import WorkspaceRoot
from auditmark.workspace.roots import is_in_root, unique_labels

LOG = logging.getLogger("workspace.resolver")


class Resolution(NamedTuple):
    root: Optional[WorkspaceRoot]
    relative_path: str
    ambiguous: bool


NO_MATCH = Resolution(None, "", False)

ResolutionCache = dict[str, Resolution]
MultiResolutionCache = dict[str, list[tuple[WorkspaceRoot, str]]]


def resolve(
    roots: Sequence[WorkspaceRoot],
    file_path: str,
    cache: ResolutionCache,
) -> Resolution:
    """
    Find the narrowest root containing ``file_path``.

    When several roots contain the path, the one giving the shortest
    relative path wins (the first such root on ties) and ``ambiguous``
    is set. A path outside every root resolves to ``NO_MATCH``.
    """
    cached = cache.get(file_path)
    if cached is not None:
        return cached

    best = NO_MATCH
    matches = 0
    for root in roots:
        contained, relative_path = is_in_root(root.rootPath, file_path)
        if not contained:
            continue
        matches += 1
        if best.root is None or len(relative_path) < len(best.relative_path):
            best = Resolution(root, relative_path, False)

    if matches > 1:
        LOG.debug("Path %s is present in %d workspace roots", file_path, matches)
        best = best._replace(ambiguous=True)

    cache[file_path] = best
    return best


def resolve_all(
    roots: Sequence[WorkspaceRoot],
    file_path: str,
    cache: MultiResolutionCache,
) -> list[tuple[WorkspaceRoot, str]]:
    """Every root containing ``file_path`` with the matching relative path, in root order."""
    cached = cache.get(file_path)
    if cached is not None:
        return list(cached)

    found = []
    for root in roots:
        contained, relative_path = is_in_root(root.rootPath, file_path)
        if contained:
            found.append((root, relative_path))

    cache[file_path] = found
    return list(found)


class RootResolver:
    """
    The labelled root set of a review session plus its lookup memos.

    Changing the root set relabels every root and discards both memos.
    """

    def __init__(self, root_paths: Sequence[str] = ()) -> None:
        self._roots: list[WorkspaceRoot] = []
        self._cache: ResolutionCache = {}
        self._multi_cache: MultiResolutionCache = {}
        self.set_roots(root_paths)

    @property
    def roots(self) -> list[WorkspaceRoot]:
        return list(self._roots)

    def set_roots(self, root_paths: Sequence[str]) -> None:
        self._roots = unique_labels(root_paths)
        self._cache.clear()
        self._multi_cache.clear()
        LOG.debug("Workspace roots: %s", [root.rootLabel for root in self._roots])

    def add_roots(self, root_paths: Sequence[str]) -> None:
        """Append roots after the existing ones; existing labels may change."""
        self.set_roots([root.rootPath for root in self._roots] + list(root_paths))

    def remove_root(self, root_path: str) -> None:
        self.set_roots([root.rootPath for root in self._roots if root.rootPath != root_path])

    def more_than_one_root(self) -> bool:
        return len(self._roots) > 1

    def resolve(self, file_path: str) -> Resolution:
        return resolve(self._roots, file_path, self._cache)

    def resolve_all(self, file_path: str) -> list[tuple[WorkspaceRoot, str]]:
        return resolve_all(self._roots, file_path, self._multi_cache)

    def label_for(self, path: str) -> str | None:
        """Label of the root owning ``path``, or None."""
        root = self.resolve(path).root
        return root.rootLabel if root is not None else None
