"""Public interface for the branch browser."""

from .browser import BranchBrowser, TerminalError
from .git_branches import BackendError, DiscoveryError, EncodingError
from .state import AppState, Branch

__version__ = "0.1.0"
__all__ = [
    "AppState",
    "BackendError",
    "Branch",
    "BranchBrowser",
    "DiscoveryError",
    "EncodingError",
    "TerminalError",
    "__version__",
]
