"""Branch list state and the transitions the event loop applies to it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from branchview.modes import KeyAction


@dataclass(frozen=True)
class Branch:
    name: str

    @property
    def display_name(self) -> str:
        """Return the text shown for the branch."""
        return self.name


@dataclass
class AppState:
    """Everything the browser knows about the branch list.

    ``cursor_index`` is the highlighted row and always points at a branch when
    the list is non-empty.  When the list is empty it stays at ``0`` and the
    renderer never draws it.  ``selected_index`` only changes through
    :meth:`confirm_selection` and is independent of cursor movement.
    """

    branches: List[Branch] = field(default_factory=list)
    cursor_index: int = 0
    selected_index: Optional[int] = None
    exit_requested: bool = False

    @classmethod
    def load(cls, branch_names: Iterable[str]) -> "AppState":
        """Build the initial state from branch names in enumeration order."""
        return cls(branches=[Branch(name) for name in branch_names])

    @property
    def is_empty(self) -> bool:
        return not self.branches

    def move_cursor_next(self) -> None:
        """Advance the cursor, wrapping past the last branch to the first."""
        if not self.branches:
            return
        self.cursor_index = (self.cursor_index + 1) % len(self.branches)

    def move_cursor_previous(self) -> None:
        """Move the cursor back, wrapping before the first branch to the last."""
        if not self.branches:
            return
        self.cursor_index = (self.cursor_index - 1) % len(self.branches)

    def confirm_selection(self) -> None:
        """Mark the branch under the cursor as selected."""
        if not self.branches:
            return
        self.selected_index = self.cursor_index

    def request_exit(self) -> None:
        self.exit_requested = True

    def apply(self, action: KeyAction) -> None:
        """Run the transition bound to a decoded key action."""
        if action is KeyAction.QUIT:
            self.request_exit()
        elif action is KeyAction.CURSOR_NEXT:
            self.move_cursor_next()
        elif action is KeyAction.CURSOR_PREVIOUS:
            self.move_cursor_previous()
        elif action is KeyAction.CONFIRM:
            self.confirm_selection()

    def selected_branch(self) -> Branch | None:
        """Return the confirmed branch, if any."""
        if self.selected_index is None:
            return None
        return self.branches[self.selected_index]

    def is_cursor_row(self, index: int) -> bool:
        return bool(self.branches) and index == self.cursor_index

    def is_selected_row(self, index: int) -> bool:
        return self.selected_index is not None and index == self.selected_index


__all__ = ["AppState", "Branch"]
