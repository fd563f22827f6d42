"""
Shared test fixtures and pytest configuration.

Markers:
    @pytest.mark.posix  : uses POSIX absolute paths; skipped on Windows

Run only the platform-independent tests:
    pytest -m "not posix"
"""

import os

import pytest

from auditmark.models import (
    AuditedFile,
    EntryType,
    FullEntry,
    FullLocation,
    PartiallyAuditedFile,
    default_entry_details,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "posix: uses POSIX absolute paths")


def pytest_collection_modifyitems(config, items):
    """Auto-skip POSIX path tests on platforms with a different separator."""
    if os.sep == "/":
        return
    skip_posix = pytest.mark.skip(reason="POSIX paths not meaningful on this platform")
    for item in items:
        if "posix" in item.keywords:
            item.add_marker(skip_posix)


ROOT = "/ws/project"


def make_location(path="src/a.py", start=0, end=0, root=ROOT, label="", description=""):
    return FullLocation(
        path=path,
        startLine=start,
        endLine=end,
        label=label,
        description=description,
        rootPath=root,
    )


def make_entry(label="issue", author="alice", entry_type=EntryType.FINDING, locations=None, description=""):
    details = default_entry_details()
    details.description = description
    return FullEntry(
        label=label,
        entryType=entry_type,
        author=author,
        details=details,
        locations=locations if locations is not None else [make_location()],
    )


def partial(path="src/a.py", start=0, end=0, author="alice"):
    return PartiallyAuditedFile(path=path, author=author, startLine=start, endLine=end)


def audited(path="src/a.py", author="alice"):
    return AuditedFile(path=path, author=author)


@pytest.fixture
def finding():
    return make_entry(label="reentrancy", locations=[make_location(start=10, end=20)])


@pytest.fixture
def note():
    return make_entry(
        label="todo",
        entry_type=EntryType.NOTE,
        locations=[make_location(start=10, end=20)],
    )
