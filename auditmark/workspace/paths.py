"""Path separator normalization for paths stored by another OS."""

from __future__ import annotations

import ntpath
import os
import sys


def normalize_path_for_os(ws_root: str, file_path: str, platform: str = sys.platform) -> str:
    """
    Convert the separators of a stored relative path to the current OS.

    On POSIX a backslash is a legal file name character, so a backslashed
    path is kept as-is when such a file exists under ``ws_root``.
    """
    if platform == "win32" and "/" in file_path:
        return ntpath.normpath(file_path)
    if platform != "win32" and "\\" in file_path:
        if os.path.exists(os.path.join(ws_root, file_path)):
            return file_path
        return file_path.replace("\\", "/")
    return file_path
