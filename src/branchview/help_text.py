"""Build the key hint strip shown below the panes."""

from __future__ import annotations

from typing import Optional

from branchview.state import AppState


def build_help_line(state: Optional[AppState] = None) -> str:
    """Return the key hints, followed by the confirmed branch when there is one."""
    line = "j/k move | Enter select | q quit"
    if state is not None:
        branch = state.selected_branch()
        if branch is not None:
            line = f"{line} | selected: {branch.display_name}"
    return line


__all__ = ["build_help_line"]
