"""
Buffer module holding the edited bytes and the cursor state.
"""

import logging
import os
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class Nibble(Enum):
    """Half of the byte under the cursor that the hex pane is composing."""

    BEGINNING = 'beginning'
    END = 'end'

    def toggled(self) -> 'Nibble':
        """Return the other half."""

        if self is Nibble.BEGINNING:
            return Nibble.END

        return Nibble.BEGINNING


def clamp_offset(offset: int, length: int) -> int:
    """Clamp an offset into ``[0, length - 1]``."""

    return max(0, min(offset, length - 1))


class Buffer:
    """Byte contents of an editing session together with the cursor."""

    def __init__(self, initial_data: bytes = b'\x00') -> None:
        if not initial_data:
            initial_data = b'\x00'

        self.contents = bytearray(initial_data)
        self.offset = 0
        self.nibble = Nibble.BEGINNING
        self.filename: Optional[str] = None
        self.modified = False

    def __len__(self) -> int:
        return len(self.contents)

    def toggle_nibble(self) -> None:
        self.nibble = self.nibble.toggled()

    def tail(self) -> bytes:
        """Bytes from the cursor to the end of the buffer."""

        return bytes(self.contents[self.offset:])

    def get_line(self, line_number: int, bytes_per_line: int) -> Tuple[bytes, str]:
        """Get a row of bytes and its ASCII representation."""

        start = line_number * bytes_per_line
        end = min(start + bytes_per_line, len(self.contents))
        row = bytes(self.contents[start:end])

        ascii_str = ''.join(chr(b) if 32 <= b <= 126 else '.' for b in row)

        return row, ascii_str

    def get_line_count(self, bytes_per_line: int) -> int:
        """Get the total number of rows for a given row width."""

        return (len(self.contents) + bytes_per_line - 1) // bytes_per_line

    def replace_byte(self, position: int, value: int) -> None:
        """Replace a byte at the specified position."""

        if not 0 <= value <= 255:
            raise ValueError("Byte value must be between 0 and 255")

        if not 0 <= position < len(self.contents):
            return

        if self.contents[position] == value:
            return

        self.contents[position] = value
        self.modified = True

    def delete_byte(self, position: int) -> bool:
        """
        Delete a byte at the specified position.

        The last remaining byte is never removed. The cursor is clamped to the
        shortened buffer.

        Returns:
            bool: True if a byte was removed
        """

        if len(self.contents) <= 1:
            return False

        if not 0 <= position < len(self.contents):
            return False

        del self.contents[position]
        self.modified = True

        if self.offset >= len(self.contents):
            self.offset = len(self.contents) - 1

        return True

    def load_file(self, filename: str) -> None:
        """Load data from a file."""

        with open(filename, 'rb') as f:
            data = f.read()

        self.contents = bytearray(data or b'\x00')
        self.filename = filename
        self.offset = 0
        self.nibble = Nibble.BEGINNING
        self.modified = False

        logger.info("Loaded %d bytes from %s", os.path.getsize(filename), filename)

    def save_file(self, filename: Optional[str] = None) -> bool:
        """
        Save data to a file.

        Args:
            filename: Optional filename to save to. If None, uses current filename.

        Returns:
            bool: True if save was successful, False if no filename is known
        """

        save_filename = filename or self.filename
        if not save_filename:
            return False

        try:
            with open(save_filename, 'wb') as f:
                f.write(bytes(self.contents))
        except OSError as e:
            raise IOError(f"Failed to save file: {str(e)}") from e

        self.filename = save_filename
        self.modified = False

        logger.info("Saved %d bytes to %s", len(self.contents), save_filename)
        return True
