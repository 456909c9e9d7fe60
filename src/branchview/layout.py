"""Fixed three-column layout for the branch, commit and commit-info panes.

The pane widths never depend on the terminal size.  When the terminal is
narrower than the three panes plus their gaps, the renderer clips whatever
falls outside the window instead of the layout shrinking the columns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

PANE_WIDTH = 50
PANE_GAP = 1
MAX_PANE_HEIGHT = 100


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        """First column to the right of the rectangle."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """First row below the rectangle."""
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


def compute_panes(
    area: Rect,
    *,
    pane_width: int = PANE_WIDTH,
    gap: int = PANE_GAP,
) -> Tuple[Rect, Rect, Rect]:
    """Split ``area`` into the branch, commit and commit-info rectangles."""
    height = max(min(area.height, MAX_PANE_HEIGHT), 0)
    branch_rect = Rect(area.x, area.y, pane_width, height)
    commit_rect = Rect(branch_rect.right + gap, area.y, pane_width, height)
    info_rect = Rect(commit_rect.right + gap, area.y, pane_width, height)
    return branch_rect, commit_rect, info_rect


__all__ = ["MAX_PANE_HEIGHT", "PANE_GAP", "PANE_WIDTH", "Rect", "compute_panes"]
