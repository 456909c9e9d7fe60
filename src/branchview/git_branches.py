"""Minimal wrappers around the ``git`` command line client.

The browser only needs two things from git: the repository that contains the
working directory and the names of its branches.  Both are read once at
startup.  Failures are raised, never turned into an empty branch list, so the
caller can report them before the interface starts.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List

LOCAL_PREFIX = b"refs/heads/"
REMOTE_PREFIX = b"refs/remotes/"


class BackendError(Exception):
    """Raised when branch information cannot be read from git."""


class DiscoveryError(BackendError):
    """Raised when no repository can be found for a directory."""


class EncodingError(BackendError):
    """Raised when a branch name is not valid UTF-8 text."""


def discover_repository(directory: Path) -> Path:
    """Return the git directory of the repository containing ``directory``.

    Bare repositories are accepted.  ``GIT_DIR`` from the environment is
    honoured because the lookup is delegated to ``git rev-parse``.
    """
    try:
        result = subprocess.run(
            ["git", "-C", str(directory), "rev-parse", "--absolute-git-dir"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as err:
        raise DiscoveryError(f"Unable to run git: {err}") from err
    if result.returncode != 0:
        message = result.stderr.strip() or "not a git repository"
        raise DiscoveryError(f"No git repository found at {directory}: {message}")
    return Path(result.stdout.strip())


def list_branch_names(directory: Path) -> List[str]:
    """Return local then remote-tracking branch names for the repository.

    Names keep ``git for-each-ref`` order with the ``refs/heads/`` and
    ``refs/remotes/`` prefixes removed, e.g. ``main`` or ``origin/main``.  A
    freshly initialised repository has no branches and yields ``[]``.
    """
    git_dir = discover_repository(directory)
    try:
        result = subprocess.run(
            [
                "git",
                f"--git-dir={git_dir}",
                "for-each-ref",
                "--format=%(refname)",
                "refs/heads",
                "refs/remotes",
            ],
            capture_output=True,
            text=False,
            check=False,
        )
    except OSError as err:
        raise DiscoveryError(f"Unable to run git: {err}") from err
    if result.returncode != 0:
        message = result.stderr.decode("utf-8", errors="replace").strip()
        raise DiscoveryError(f"Could not list branches in {git_dir}: {message}")

    names: List[str] = []
    for raw_ref in result.stdout.split(b"\n"):
        if not raw_ref:
            continue
        names.append(_decode_branch_name(_strip_ref_prefix(raw_ref)))
    return names


def _strip_ref_prefix(raw_ref: bytes) -> bytes:
    for prefix in (LOCAL_PREFIX, REMOTE_PREFIX):
        if raw_ref.startswith(prefix):
            return raw_ref[len(prefix):]
    return raw_ref


def _decode_branch_name(raw_name: bytes) -> str:
    try:
        return raw_name.decode("utf-8")
    except UnicodeDecodeError as err:
        shown = raw_name.decode("utf-8", errors="replace")
        raise EncodingError(f"Branch name is not valid UTF-8: {shown!r}") from err


__all__ = [
    "BackendError",
    "DiscoveryError",
    "EncodingError",
    "discover_repository",
    "list_branch_names",
]
