"""Command-line entry point for branchview.

The start-up sequence is deliberately linear:

1. Read command line arguments and the configuration file.
2. Ask git for the branch names.  Any failure is reported here, before the
   terminal is taken over, and ends the program with exit code 1.
3. Run the interactive browser until the user quits.
4. Log crash information if something unexpected went wrong.
"""

from __future__ import annotations

import argparse
import sys
import traceback
from datetime import datetime
from pathlib import Path

from branchview import __version__, config
from branchview.browser import BranchBrowser, TerminalError
from branchview.git_branches import BackendError, list_branch_names
from branchview.state import AppState

# Crash dump file location
CRASH_LOG_FILE = Path.home() / "branchview.crash.txt"


def write_crash_log(exception: BaseException) -> None:
    """Append a detailed crash report to :data:`CRASH_LOG_FILE`."""
    try:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        crash_info = f"""
================================================================================
branchview Crash Report
================================================================================
Timestamp: {timestamp}
Version: {__version__}
Python: {sys.version}
Platform: {sys.platform}

Exception Type: {type(exception).__name__}
Exception Message: {str(exception)}

Traceback:
{"".join(traceback.format_exception(type(exception), exception, exception.__traceback__))}
================================================================================
"""
        with open(CRASH_LOG_FILE, "a") as f:
            f.write(crash_info)

        print("\nbranchview crashed unexpectedly!", file=sys.stderr)
        print(f"   Crash details saved to: {CRASH_LOG_FILE}", file=sys.stderr)
        print("   Please report this issue with the crash log.", file=sys.stderr)
    except OSError:
        # If we can't even write the crash log, just print to stderr
        print("\nbranchview crashed and could not write crash log!", file=sys.stderr)
        traceback.print_exception(type(exception), exception, exception.__traceback__)


def stdout_is_interactive() -> bool:
    """curses needs a real terminal on stdout."""
    return sys.stdout.isatty()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Turn the command-line text into structured information."""
    parser = argparse.ArgumentParser(
        description="Browse the branches of a git repository in the terminal."
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show version number and exit.",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help=f"Write the default configuration to {config.CONFIG_FILE} and exit.",
    )
    parser.add_argument(
        "repository",
        nargs="?",
        default=".",
        help="Directory inside the repository to browse (default: current directory).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Load the branches, run the browser and map failures to exit codes."""
    try:
        args = parse_args(argv)

        if args.init_config:
            if config.create_default_config():
                print(f"Wrote default configuration to {config.CONFIG_FILE}")
            else:
                print(f"Configuration already exists at {config.CONFIG_FILE}")
            return 0

        if not stdout_is_interactive():
            print("The branch browser requires an interactive terminal.", file=sys.stderr)
            return 1

        settings = config.load_config()
        pane_width, pane_gap = config.get_layout_settings(settings)
        color_settings = config.get_color_settings(settings)

        # The branch list must be readable before the terminal is taken over.
        try:
            branch_names = list_branch_names(Path(args.repository).expanduser())
        except BackendError as err:
            print(f"Could not read branches: {err}", file=sys.stderr)
            return 1

        browser = BranchBrowser(
            AppState.load(branch_names),
            color_settings=color_settings,
            pane_width=pane_width,
            gap=pane_gap,
        )
        final_state = browser.browse()

        selected = final_state.selected_branch()
        if selected is not None:
            print(f"Selected branch: {selected.display_name}")
        return 0

    except TerminalError as err:
        print(f"Could not run browser: {err}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        # User pressed Ctrl+C - this is a normal exit, don't log as crash
        print("\nInterrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        # Unexpected exception - log it and exit
        write_crash_log(e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
