"""Reading user input from standard input."""

import sys


def get_user_input() -> str:
    """Read one line from stdin, newline included; empty at end of input."""
    return sys.stdin.readline()


def wait_for_key_press() -> None:
    """Block until the user presses Enter."""
    sys.stdin.readline()