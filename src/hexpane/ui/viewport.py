"""
Viewport module tracking which rows of the buffer are on screen.
"""

from typing import Tuple


class Viewport:
    """Row layout and scroll position of the hex and ASCII panes."""

    # Two hex digits plus a separator in the hex pane, one cell in the ASCII pane
    CELLS_PER_BYTE = 4

    def __init__(self, content_width: int = 80, visible_lines: int = 1) -> None:
        self.bytes_per_line = 1
        self.visible_lines = 1
        self.start_address = 0
        self.resize(content_width, visible_lines)

    def resize(self, content_width: int, visible_lines: int) -> None:
        """Recalculate bytes per line for the room left to the two panes."""

        self.bytes_per_line = max(1, content_width // self.CELLS_PER_BYTE)
        self.visible_lines = max(1, visible_lines)
        self.start_address -= self.start_address % self.bytes_per_line

    def recompute_and_scroll(self, offset: int, line_width: int) -> None:
        """Scroll just enough to bring the cursor's row on screen."""

        row_start = offset // line_width * line_width
        page_size = line_width * self.visible_lines

        if offset < self.start_address:
            self.start_address = row_start
        elif offset >= self.start_address + page_size:
            self.start_address = row_start - line_width * (self.visible_lines - 1)

        self.start_address = max(0, self.start_address)

    def visible_range(self, length: int) -> Tuple[int, int]:
        """Start and end of the slice currently on screen."""

        end = min(self.start_address + self.bytes_per_line * self.visible_lines, length)
        return self.start_address, end

    def first_visible_line(self) -> int:
        return self.start_address // self.bytes_per_line
