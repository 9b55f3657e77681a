import os
import sys


def get_terminal_width(default: int = 80) -> int:
    """Return the terminal's column count, or ``default`` if stdout is not a tty."""
    if not sys.stdout.isatty():
        return default
    try:
        return os.get_terminal_size().columns
    except OSError:
        return default
