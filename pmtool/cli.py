"""Command-line entry point running the interactive page loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .db import JiraDatabase
from .io_utils import get_user_input, wait_for_key_press
from .navigator import Navigator

DEFAULT_DB_PATH = "data/mock.json"
_CLEAR = "\x1b[2J\x1b[H"
_RECOVERABLE = (LookupError, OSError, ValueError)


def clear_screen() -> None:
    """Wipe the terminal and move the cursor to the top left."""
    sys.stdout.write(_CLEAR)
    sys.stdout.flush()


def _report(error: Exception) -> None:
    print(f"Error: {error}")
    wait_for_key_press()


def run(navigator: Navigator) -> None:
    """Draw pages and handle input until no page is left or input ends."""
    while True:
        clear_screen()
        page = navigator.current_page()
        if page is None:
            return
        try:
            page.draw_page()
        except _RECOVERABLE as error:
            _report(error)

        line = get_user_input()
        if not line:
            return
        action = page.handle_input(line.strip())
        if action is None:
            continue
        try:
            navigator.handle_action(action)
        except _RECOVERABLE as error:
            _report(error)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tracker on the JSON database file given, or the default one."""
    parser = argparse.ArgumentParser(description="Terminal epic and story tracker.")
    parser.add_argument(
        "database",
        nargs="?",
        default=DEFAULT_DB_PATH,
        help=f"path of the JSON database file (default: {DEFAULT_DB_PATH})",
    )
    args = parser.parse_args(argv)
    run(Navigator(JiraDatabase.from_file(args.database)))
    return 0