"""
Multi-root workspace support for auditmark.

Maps absolute file paths onto the workspace root that owns them and gives
every root a unique display label.
"""

from auditmark.workspace.paths import normalize_path_for_os
from auditmark.workspace.resolver import NO_MATCH, Resolution, RootResolver, resolve, resolve_all
from auditmark.workspace.roots import is_in_root, unique_labels

__all__ = [
    "NO_MATCH",
    "Resolution",
    "RootResolver",
    "is_in_root",
    "normalize_path_for_os",
    "resolve",
    "resolve_all",
    "unique_labels",
]
