"""Tests for annotations.store: owned active/resolved entry collections."""

from __future__ import annotations

from auditmark.annotations import EntryStore, remove_location
from auditmark.models import EntryType
from conftest import make_entry, make_location


class TestEntryStore:
    def test_resolve_moves_entry(self, finding):
        """Resolving moves the entry to the resolved list."""
        store = EntryStore([finding])

        result = store.resolve(finding)

        assert result.success
        assert result.removed_entry is finding
        assert store.tree == []
        assert store.resolved == [finding]

    def test_resolve_missing_entry(self, finding):
        """Resolving an unknown entry reports an error."""
        store = EntryStore()
        result = store.resolve(finding)
        assert not result.success
        assert result.error == "Entry not found in array"
        assert store.resolved == []

    def test_restore_moves_entry_back(self, finding):
        """Restoring moves the entry back to the tree."""
        store = EntryStore(resolved=[finding])

        result = store.restore(finding)

        assert result.success
        assert store.tree == [finding]
        assert store.resolved == []

    def test_restore_missing_entry_leaves_tree_untouched(self, finding):
        """Restoring an unknown entry reports an error."""
        store = EntryStore()
        result = store.restore(finding)
        assert not result.success
        assert result.error == "Entry not found in resolved entries"
        assert store.tree == []

    def test_matches_structurally_equal_copy(self, finding):
        """A structurally equal copy finds the stored entry."""
        store = EntryStore([finding])
        copy = finding.model_copy(deep=True)
        copy.details.description = "edited elsewhere"

        assert store.remove(copy).removed_entry is finding
        assert store.tree == []

    def test_accessors_return_copies(self, finding):
        """Clearing an accessor's list leaves the store intact."""
        store = EntryStore([finding])
        store.tree.clear()
        assert store.tree == [finding]

    def test_restore_all(self):
        """Restoring all returns the authors in order."""
        store = EntryStore(
            tree=[make_entry(label="open")],
            resolved=[make_entry(label="r1", author="bob"), make_entry(label="r2", author="alice")],
        )

        authors = store.restore_all()

        assert authors == ["bob", "alice"]
        assert [e.label for e in store.tree] == ["open", "r1", "r2"]
        assert store.resolved == []
        assert store.restore_all() == []

    def test_delete_all_resolved(self):
        """Deleting resolved entries returns their authors."""
        store = EntryStore(resolved=[make_entry(author="carol")])
        assert store.delete_all_resolved() == ["carol"]
        assert store.resolved == []
        assert store.delete_all_resolved() == []

    def test_find_intersecting(self, finding, note):
        """Lookups run against the active tree."""
        store = EntryStore([finding, note])
        assert store.find_intersecting(make_location(start=15, end=30), EntryType.NOTE) == 1
        assert store.find_intersecting(make_location(start=21, end=30), EntryType.NOTE) == -1

    def test_remove_last_location_deletes_entry(self):
        """Removing the last location deletes the entry."""
        loc_a = make_location(start=1, end=2)
        loc_b = make_location(start=8, end=9)
        entry = make_entry(locations=[loc_a, loc_b])
        store = EntryStore([entry])

        first = store.remove_location(entry, make_location(start=1, end=2))
        assert first.removed and not first.should_delete_entry
        assert store.tree[0].locations == [loc_b]

        second = store.remove_location(store.tree[0], loc_b)
        assert second.removed and second.should_delete_entry
        assert store.tree == []


class TestRemoveLocation:
    def test_requires_matching_root(self):
        """A location under another root is not removed."""
        locations = [make_location(start=1, end=2, root="/ws/one")]
        outcome = remove_location(locations, make_location(start=1, end=2, root="/ws/two"))
        assert not outcome.removed
        assert len(locations) == 1

    def test_removes_first_match(self):
        """Only the matching location is removed."""
        locations = [make_location(start=1, end=2), make_location(start=3, end=4)]
        outcome = remove_location(locations, make_location(start=3, end=4))
        assert outcome.removed and not outcome.should_delete_entry
        assert [(l.startLine, l.endLine) for l in locations] == [(1, 2)]
