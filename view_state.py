"""Display mode and modal state for the main screen."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from errors import ModalStateError

T = TypeVar("T")

VIEW_MODES = ("list", "grid", "table", "calendar")

MODAL_NONE = "none"
MODAL_VIEWING = "viewing"
MODAL_EDITING = "editing"
MODAL_ADDING = "adding"
MODAL_CONFIRMING_DELETE = "confirming_delete"


@dataclass(frozen=True)
class ModalState:
    kind: str = MODAL_NONE
    entry_id: str | None = None

    @property
    def is_open(self) -> bool:
        return self.kind != MODAL_NONE


CLOSED = ModalState()


def is_delete_confirmed(typed: str, keyword: str) -> bool:
    """The delete button unlocks only on an exact match of the keyword."""
    return typed == keyword


class ViewCoordinator:
    """Owns which view mode is shown and which single modal, if any, is open.

    View mode and modal state are independent: switching modes never touches
    the modal, and modals never change the mode.
    """

    def __init__(self, mode: str = "list"):
        if mode not in VIEW_MODES:
            raise ValueError(f"Unknown view mode: {mode}")
        self.mode = mode
        self.modal = CLOSED

    def set_mode(self, mode: str) -> None:
        if mode not in VIEW_MODES:
            raise ValueError(f"Unknown view mode: {mode}")
        self.mode = mode

    def _require_closed(self, wanted: str) -> None:
        if self.modal.is_open:
            raise ModalStateError(f"Cannot open {wanted} while {self.modal.kind} is open")

    def open_viewing(self, entry_id: str) -> None:
        self._require_closed(MODAL_VIEWING)
        self.modal = ModalState(MODAL_VIEWING, entry_id)

    def open_editing(self, entry_id: str) -> None:
        """Open the edit form directly, or from the details view of the same entry."""
        if self.modal.kind == MODAL_VIEWING:
            if self.modal.entry_id != entry_id:
                raise ModalStateError("Can only edit the entry being viewed")
            self.close()
        self._require_closed(MODAL_EDITING)
        self.modal = ModalState(MODAL_EDITING, entry_id)

    def open_adding(self) -> None:
        self._require_closed(MODAL_ADDING)
        self.modal = ModalState(MODAL_ADDING)

    def open_confirm_delete(self, selected_count: int) -> None:
        if selected_count <= 0:
            raise ModalStateError("Nothing selected to delete")
        self._require_closed(MODAL_CONFIRMING_DELETE)
        self.modal = ModalState(MODAL_CONFIRMING_DELETE)

    def close(self) -> None:
        self.modal = CLOSED

    def run_save(self, write: Callable[[], T]) -> T:
        """Run a store write for the add or edit modal.

        A WriteError propagates and leaves the modal open so the input is
        kept; on success the modal closes.
        """
        if self.modal.kind not in (MODAL_ADDING, MODAL_EDITING):
            raise ModalStateError(f"Nothing to save in {self.modal.kind}")
        result = write()
        self.close()
        return result
