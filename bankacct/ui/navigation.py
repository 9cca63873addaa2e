"""Scrollable list selection for the main menu."""

from dataclasses import dataclass

# Rows taken by headings and the footer
UI_ROWS = 6
MAX_ROWS = 40


def visible_rows(height: int, max_rows: int = MAX_ROWS) -> int:
    """Number of list rows that fit a terminal ``height`` rows tall."""
    return max(1, min(height - UI_ROWS, max_rows))


@dataclass
class ListWindow:
    """Cursor within a window sliding over a list.

    ``cursor`` is the highlighted row on screen and ``offset`` the list
    index shown in the first row; the selected item is their sum. Every
    method takes the current item ``count`` and window height ``rows``
    because both change between frames.
    """

    cursor: int = 0
    offset: int = 0

    @property
    def selected(self) -> int:
        return self.offset + self.cursor

    def fit(self, count: int, rows: int) -> None:
        """Re-anchor after the list or the terminal changed size."""
        if count == 0:
            self.cursor = self.offset = 0
            return
        # Items removed at or below the selection
        if self.selected > count - 1:
            self.cursor = max(0, count - 1 - self.offset)
            self.offset = count - 1 - self.cursor

        if count < rows:
            self.cursor += self.offset
            self.offset = 0
        elif self.offset > count - rows:
            self.cursor += self.offset - (count - rows)
            self.offset = count - rows

        if self.cursor >= rows:
            self.offset += self.cursor - rows + 1
            self.cursor = rows - 1

    def up(self, count: int, rows: int) -> None:
        if count == 0:
            return
        if self.cursor:
            self.cursor -= 1
        elif count <= rows:
            self.cursor = count - 1
        elif self.offset:
            self.offset -= 1
        else:
            # Wrap to the last page
            self.cursor = rows - 1
            self.offset = count - rows

    def down(self, count: int, rows: int) -> None:
        if count == 0:
            return
        if self.selected >= count - 1:
            self.cursor = self.offset = 0
        elif self.cursor >= rows - 1:
            self.offset += 1
        else:
            self.cursor += 1

    def select(self, index: int, count: int, rows: int) -> None:
        """Highlight ``index``, scrolling as little as needed."""
        if not 0 <= index < count:
            raise IndexError(f"Index {index} out of range for {count} items")
        if self.offset <= index < self.offset + rows:
            self.cursor = index - self.offset
            return
        if index < self.offset:
            self.offset = index
            self.cursor = 0
        else:
            self.offset = index - rows + 1
            self.cursor = rows - 1
        self.fit(count, rows)
