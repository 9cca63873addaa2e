"""Key codes shared by every screen.

The terminal runs in raw mode, so control characters arrive as their
ASCII codes instead of signals.
"""

import curses

CTRL_C = 3
CTRL_F = 6
CTRL_N = 14
CTRL_R = 18
TAB = 9
ESC = 27

ENTER_KEYS = frozenset({curses.KEY_ENTER, 10, 13})
BACKSPACE_KEYS = frozenset({curses.KEY_BACKSPACE, 127, 8})


def is_enter(key: int) -> bool:
    return key in ENTER_KEYS


def is_backspace(key: int) -> bool:
    return key in BACKSPACE_KEYS


def as_char(key: int) -> str | None:
    """Printable ASCII character for ``key``, or ``None``."""
    if 32 <= key < 127:
        return chr(key)
    return None
