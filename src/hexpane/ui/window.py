"""
Window management module for the hex editor UI.
"""

import curses
import os
import time
from typing import Optional, TYPE_CHECKING

from ..core.buffer import Buffer, Nibble
from ..core.editor import Pane
from ..core.labels import LabelHandler
from ..utils.hex_utils import format_offset
from .viewport import Viewport

if TYPE_CHECKING:
    from .input_handler import InputHandler


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, truncating if necessary."""

    height, width = window.getmaxyx()
    if y >= height or x >= width:
        return

    available = width - x
    if available <= 0:
        return

    if len(string) > available:
        string = string[:available]

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        pass


class WindowManager:
    """Manages the curses windows and UI layout."""

    OFFSET_WIDTH = 10
    LABEL_WIDTH = 32
    STATUS_MESSAGE_DURATION = 3
    MIN_HEIGHT = 10
    MIN_WIDTH = 60

    def __init__(self, stdscr: 'curses.window', buf: Buffer, labels: LabelHandler) -> None:
        self.stdscr = stdscr
        self.height, self.width = stdscr.getmaxyx()

        if self.height < self.MIN_HEIGHT or self.width < self.MIN_WIDTH:
            raise ValueError(
                f"Terminal too small. Minimum size: {self.MIN_WIDTH}x{self.MIN_HEIGHT}, "
                f"Current size: {self.width}x{self.height}"
            )

        self.buffer = buf
        self.labels = labels
        self.viewport = Viewport()
        self.title_window: Optional['curses.window'] = None
        self.offset_window: Optional['curses.window'] = None
        self.hex_window: Optional['curses.window'] = None
        self.ascii_window: Optional['curses.window'] = None
        self.label_window: Optional['curses.window'] = None
        self.status_window: Optional['curses.window'] = None
        self.input_handler: Optional['InputHandler'] = None
        self.status_message: Optional[str] = None
        self.status_message_time = 0.0

        curses.start_color()
        curses.init_pair(1, curses.COLOR_WHITE, -1)  # Status bar
        curses.init_pair(2, curses.COLOR_YELLOW, -1)  # Offsets
        curses.init_pair(3, curses.COLOR_GREEN, -1)  # ASCII
        curses.init_pair(4, curses.COLOR_CYAN, -1)  # Label names
        curses.init_pair(7, curses.COLOR_RED, -1)  # Error messages

        self.setup_windows()
        self.labels.refresh(self.buffer.tail())

    @property
    def bytes_per_line(self) -> int:
        return self.viewport.bytes_per_line

    def setup_windows(self) -> None:
        """Create and position all windows."""

        if self.height < self.MIN_HEIGHT or self.width < self.MIN_WIDTH:
            return

        body_height = self.height - 3
        content_width = self.width - self.OFFSET_WIDTH - self.LABEL_WIDTH
        self.viewport.resize(content_width, body_height)

        hex_width = self.bytes_per_line * 3
        ascii_width = content_width - hex_width

        self.title_window = curses.newwin(2, self.width, 0, 0)
        self.offset_window = curses.newwin(body_height, self.OFFSET_WIDTH, 2, 0)
        self.hex_window = curses.newwin(body_height, hex_width, 2, self.OFFSET_WIDTH)
        self.ascii_window = curses.newwin(
            body_height,
            ascii_width,
            2,
            self.OFFSET_WIDTH + hex_width
        )
        self.label_window = curses.newwin(
            body_height,
            self.LABEL_WIDTH,
            2,
            self.width - self.LABEL_WIDTH
        )
        self.status_window = curses.newwin(1, self.width, self.height - 1, 0)

        self.viewport.recompute_and_scroll(self.buffer.offset, self.bytes_per_line)

    def focused_pane(self) -> Pane:
        if self.input_handler:
            return self.input_handler.editor.pane

        return Pane.HEX

    def refresh_all(self) -> None:
        """Refresh all windows."""

        self.draw_title()
        self.draw_offsets()
        self.draw_hex_view()
        self.draw_ascii_view()
        self.draw_labels()
        self.draw_status()
        curses.doupdate()

    def draw_title(self) -> None:
        if not self.title_window:
            return

        self.title_window.clear()
        name = os.path.basename(self.buffer.filename) if self.buffer.filename else '[No Name]'
        safe_addstr(self.title_window, 0, 0, f" {name}")
        self.title_window.hline(1, 0, curses.ACS_HLINE, self.width)
        self.title_window.noutrefresh()

    def draw_offsets(self) -> None:
        """Draw the address of the first byte of every visible row."""

        if not self.offset_window:
            return

        self.offset_window.clear()
        start, end = self.viewport.visible_range(len(self.buffer))

        for i, address in enumerate(range(start, end, self.bytes_per_line)):
            safe_addstr(self.offset_window, i, 0, format_offset(address), curses.color_pair(2))

        self.offset_window.noutrefresh()

    def draw_hex_view(self) -> None:
        """Draw the hex editor view."""

        if not self.hex_window:
            return

        buf = self.buffer
        self.hex_window.clear()
        hex_focused = self.focused_pane() is Pane.HEX
        first_line = self.viewport.first_visible_line()
        line_count = buf.get_line_count(self.bytes_per_line)

        for i in range(self.viewport.visible_lines):
            line_num = first_line + i
            if line_num >= line_count:
                break

            row, _ = buf.get_line(line_num, self.bytes_per_line)

            for j, byte in enumerate(row):
                pos = j * 3
                abs_pos = line_num * self.bytes_per_line + j
                digits = f"{byte:02X}"

                if abs_pos != buf.offset:
                    safe_addstr(self.hex_window, i, pos, digits)
                    continue

                if not hex_focused:
                    safe_addstr(self.hex_window, i, pos, digits, curses.A_UNDERLINE)
                    continue

                active = 0 if buf.nibble is Nibble.BEGINNING else 1
                for k, digit in enumerate(digits):
                    attr = curses.A_REVERSE | curses.A_BOLD if k == active else curses.A_UNDERLINE
                    safe_addstr(self.hex_window, i, pos + k, digit, attr)

        self.hex_window.noutrefresh()

    def draw_ascii_view(self) -> None:
        """Draw the ASCII representation view."""

        if not self.ascii_window:
            return

        buf = self.buffer
        self.ascii_window.clear()
        ascii_focused = self.focused_pane() is Pane.ASCII
        first_line = self.viewport.first_visible_line()
        line_count = buf.get_line_count(self.bytes_per_line)

        for i in range(self.viewport.visible_lines):
            line_num = first_line + i
            if line_num >= line_count:
                break

            _, ascii_str = buf.get_line(line_num, self.bytes_per_line)

            for j, char in enumerate(ascii_str):
                abs_pos = line_num * self.bytes_per_line + j

                attr = curses.color_pair(3)
                if abs_pos == buf.offset:
                    if ascii_focused:
                        attr |= curses.A_REVERSE | curses.A_BOLD
                    else:
                        attr |= curses.A_UNDERLINE

                try:
                    self.ascii_window.addch(i, j, ord(char), attr)
                except curses.error:
                    pass

        self.ascii_window.noutrefresh()

    def draw_labels(self) -> None:
        """Draw the interpretations of the bytes under the cursor."""

        if not self.label_window:
            return

        self.label_window.clear()
        row = 0
        for name, value in self.labels.items():
            safe_addstr(self.label_window, row, 1, name, curses.color_pair(4))
            safe_addstr(self.label_window, row + 1, 2, value)
            row += 2

        if self.labels.notification:
            safe_addstr(
                self.label_window,
                row,
                1,
                self.labels.notification,
                curses.color_pair(7) | curses.A_BOLD
            )

        self.label_window.noutrefresh()

    def draw_status(self) -> None:
        """Draw the status bar."""

        if not self.status_window:
            return

        self.status_window.clear()
        self.status_window.attron(curses.color_pair(1) | curses.A_BOLD | curses.A_REVERSE)

        if self.status_message:
            if self.status_message_time == 0:
                self.status_message_time = time.time()
            elif time.time() - self.status_message_time > self.STATUS_MESSAGE_DURATION:
                self.status_message = None
                self.status_message_time = 0
            else:
                if self.status_message.startswith("Error:"):
                    self.status_window.attron(curses.color_pair(7) | curses.A_BOLD)
                safe_addstr(self.status_window, 0, 0, " " + self.status_message)
                if self.status_message.startswith("Error:"):
                    self.status_window.attroff(curses.color_pair(7) | curses.A_BOLD)
                self.status_window.attroff(curses.color_pair(1) | curses.A_BOLD | curses.A_REVERSE)
                self.status_window.noutrefresh()
                return

        buf = self.buffer
        status = f" [{len(buf)} bytes] "

        if buf.modified:
            status += "[Modified] "

        status += f"[{self.focused_pane().name}] "
        status += f"[{self.labels.endianness}] "

        pos_info = f"Offset: 0x{format_offset(buf.offset)} "
        pos_info += f"Line: {buf.offset // self.bytes_per_line + 1} "
        pos_info += f"Col: {buf.offset % self.bytes_per_line + 1}"

        available_width = self.width - len(pos_info) - 1
        if len(status) > available_width:
            status = status[:available_width-3] + "... "
        else:
            status += " " * (available_width - len(status))

        safe_addstr(self.status_window, 0, 0, status + pos_info)
        self.status_window.attroff(curses.color_pair(1) | curses.A_BOLD | curses.A_REVERSE)
        self.status_window.noutrefresh()

    def set_status(self, message: str) -> None:
        """Show a transient message in the status bar."""

        self.status_message = message
        self.status_message_time = 0.0

    def resize(self) -> None:
        """Handle terminal resize events."""

        self.height, self.width = self.stdscr.getmaxyx()

        if self.height < self.MIN_HEIGHT or self.width < self.MIN_WIDTH:
            self.set_status("Error: Terminal too small")
            return

        self.setup_windows()
