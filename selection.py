"""Client-side set of selected entry ids for bulk actions."""

from __future__ import annotations

from collections.abc import Iterable


class Selection:
    def __init__(self):
        self._ids: set[str] = set()

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._ids

    @property
    def ids(self) -> frozenset[str]:
        return frozenset(self._ids)

    def toggle(self, entry_id: str) -> bool:
        """Flip one id. Returns True if it is now selected."""
        if entry_id in self._ids:
            self._ids.discard(entry_id)
            return False
        self._ids.add(entry_id)
        return True

    def select_all(self, visible_ids: Iterable[str]) -> None:
        self._ids = set(visible_ids)

    def deselect_all(self) -> None:
        self._ids = set()

    def toggle_all(self, visible_ids: Iterable[str]) -> None:
        """Deselect everything if all visible ids are selected, else select them all."""
        visible = set(visible_ids)
        if len(self._ids) == len(visible):
            self.deselect_all()
        else:
            self.select_all(visible)

    def all_selected(self, visible_count: int) -> bool:
        return visible_count > 0 and len(self._ids) == visible_count

    def clear(self) -> None:
        """Forget the selection after a successful delete."""
        self._ids.clear()

    def prune(self, snapshot_ids: Iterable[str]) -> set[str]:
        """Drop ids that are no longer in the snapshot. Returns the dropped ids."""
        stale = self._ids - set(snapshot_ids)
        self._ids -= stale
        return stale
