"""Thin wrapper over the curses standard screen."""

import curses

COMBINING_STROKE = "\u0336"


def strike(text: str) -> str:
    """Render ``text`` struck through with combining characters."""
    return "".join(ch + COMBINING_STROKE for ch in text)


class Terminal:
    """Drawing and input surface used by every screen.

    Writes that fall outside the window are dropped instead of raising,
    so screens can draw without checking every coordinate.
    """

    standout = curses.A_STANDOUT
    underline = curses.A_UNDERLINE

    def __init__(self, stdscr, error_attr: int = 0) -> None:
        self.stdscr = stdscr
        self.error_attr = error_attr

    @classmethod
    def initialise(cls, stdscr, esc_delay_ms: int = 25) -> "Terminal":
        """Put the terminal in raw, no-echo, keypad mode.

        Must run after ``curses.initscr`` (``curses.wrapper`` does that).
        Raw mode delivers Ctrl-C as key code 3 instead of SIGINT.
        """
        curses.raw()
        curses.noecho()
        stdscr.keypad(True)
        curses.set_escdelay(esc_delay_ms)
        error_attr = 0
        if curses.has_colors():
            curses.start_color()
            curses.init_pair(1, curses.COLOR_BLACK, curses.COLOR_RED)
            error_attr = curses.color_pair(1)
        return cls(stdscr, error_attr)

    def size(self) -> tuple[int, int]:
        """Current (height, width)."""
        return self.stdscr.getmaxyx()

    def clear(self) -> None:
        self.stdscr.erase()

    def write(self, y: int, x: int, text: str, attr: int = 0) -> None:
        if y < 0 or x < 0:
            return
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            # Text running past the last column
            pass

    def show_cursor(self, y: int, x: int) -> None:
        try:
            curses.curs_set(1)
            self.stdscr.move(y, x)
        except curses.error:
            pass

    def hide_cursor(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass

    def getch(self) -> int:
        self.stdscr.refresh()
        return self.stdscr.getch()
