"""
Editor module implementing cursor movement and byte editing for both panes.

The hex and ASCII panes share one cursor. Each pane gets its own ``Editor``
subclass; the commands that behave the same in both panes live on the base
class. Every command that moves the cursor or changes the contents refreshes
the status reporter from the new offset and then asks the viewport to keep
the cursor visible.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Final, Protocol

from .buffer import Buffer, Nibble, clamp_offset
from ..utils.hex_utils import compose_high_nibble, compose_low_nibble, is_hex_digit

logger = logging.getLogger(__name__)

INVALID_HEX_MESSAGE: Final[str] = "Invalid Hex: {char}"


class Pane(Enum):
    """The two views that can own keyboard focus."""

    ASCII = 'ascii'
    HEX = 'hex'


class ViewportSync(Protocol):
    def recompute_and_scroll(self, offset: int, line_width: int) -> None:
        ...


class StatusReporter(Protocol):
    def refresh(self, data: bytes) -> None:
        ...

    def set_warning(self, message: str) -> None:
        ...


class Editor(ABC):
    """Commands shared by both panes."""

    pane: Pane

    def __init__(self, viewport: ViewportSync, reporter: StatusReporter) -> None:
        self.viewport = viewport
        self.reporter = reporter

    def is_focusing(self, pane: Pane) -> bool:
        return self.pane is pane

    def _sync(self, buf: Buffer, line_width: int) -> None:
        """Refresh derived labels and keep the cursor row on screen."""

        self.reporter.refresh(buf.tail())
        self.viewport.recompute_and_scroll(buf.offset, line_width)

    def _step_left(self, buf: Buffer, line_width: int) -> None:
        buf.offset = max(buf.offset - 1, 0)
        self._sync(buf, line_width)

    def _step_right(self, buf: Buffer, line_width: int) -> None:
        buf.offset = min(buf.offset + 1, len(buf.contents) - 1)
        self._sync(buf, line_width)

    @abstractmethod
    def left(self, buf: Buffer, line_width: int) -> None:
        ...

    @abstractmethod
    def right(self, buf: Buffer, line_width: int) -> None:
        ...

    @abstractmethod
    def char(self, buf: Buffer, line_width: int, char: str) -> None:
        ...

    def up(self, buf: Buffer, line_width: int) -> None:
        """Move one row up unless the cursor is already on the first row."""

        new_offset = buf.offset - line_width
        if new_offset < 0:
            return

        buf.offset = new_offset
        self._sync(buf, line_width)

    def down(self, buf: Buffer, line_width: int) -> None:
        """Move one row down unless that would leave the buffer."""

        new_offset = buf.offset + line_width
        if new_offset >= len(buf.contents):
            return

        buf.offset = new_offset
        self._sync(buf, line_width)

    def home(self, buf: Buffer, line_width: int) -> None:
        buf.offset = buf.offset // line_width * line_width
        self._sync(buf, line_width)

        if self.is_focusing(Pane.HEX):
            buf.nibble = Nibble.BEGINNING

    def end(self, buf: Buffer, line_width: int) -> None:
        buf.offset = min(
            buf.offset + (line_width - 1 - buf.offset % line_width),
            len(buf.contents) - 1,
        )
        self._sync(buf, line_width)

        if self.is_focusing(Pane.HEX):
            buf.nibble = Nibble.END

    def backspace(self, buf: Buffer, line_width: int) -> None:
        """Remove the byte before the cursor."""

        if buf.offset == 0:
            return

        position = buf.offset - 1
        buf.offset = position
        buf.delete_byte(position)
        self._sync(buf, line_width)

    def delete(self, buf: Buffer, line_width: int) -> None:
        """Remove the byte under the cursor, keeping at least one byte."""

        if not buf.delete_byte(buf.offset):
            logger.debug("Refused to delete the last byte")
            return

        buf.offset = clamp_offset(buf.offset, len(buf.contents))
        self._sync(buf, line_width)

    def enter(self, buf: Buffer, line_width: int) -> None:
        pass


class AsciiEditor(Editor):
    """Editing through the ASCII pane: one keystroke writes one byte."""

    pane = Pane.ASCII

    def left(self, buf: Buffer, line_width: int) -> None:
        self._step_left(buf, line_width)

    def right(self, buf: Buffer, line_width: int) -> None:
        self._step_right(buf, line_width)

    def char(self, buf: Buffer, line_width: int, char: str) -> None:
        buf.replace_byte(buf.offset, ord(char) & 0xFF)
        self._step_right(buf, line_width)


class HexEditor(Editor):
    """
    Editing through the hex pane.

    Horizontal travel visits both nibbles of a byte, so the offset only moves
    when leaving the high nibble going left or the low nibble going right.
    """

    pane = Pane.HEX

    def left(self, buf: Buffer, line_width: int) -> None:
        if buf.nibble is Nibble.BEGINNING:
            self._step_left(buf, line_width)

        buf.toggle_nibble()

    def right(self, buf: Buffer, line_width: int) -> None:
        if buf.nibble is Nibble.END:
            self._step_right(buf, line_width)

        buf.toggle_nibble()

    def char(self, buf: Buffer, line_width: int, char: str) -> None:
        """Write one hex digit into the nibble under the cursor."""

        if not is_hex_digit(char):
            logger.warning("Rejected non-hex input %r at offset %d", char, buf.offset)
            self.reporter.set_warning(INVALID_HEX_MESSAGE.format(char=char))
            return

        digit = int(char, 16)
        existing = buf.contents[buf.offset]

        if buf.nibble is Nibble.BEGINNING:
            buf.replace_byte(buf.offset, compose_high_nibble(existing, digit))
            self._sync(buf, line_width)
        else:
            buf.replace_byte(buf.offset, compose_low_nibble(existing, digit))
            self._step_right(buf, line_width)

        buf.toggle_nibble()


def make_editor(pane: Pane, viewport: ViewportSync, reporter: StatusReporter) -> Editor:
    """Build the editor for a pane."""

    if pane is Pane.HEX:
        return HexEditor(viewport, reporter)

    return AsciiEditor(viewport, reporter)
