"""
Utility functions for hex digit handling and hex dumps.
"""

from typing import Final, Iterator, Optional

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer

HEX_DIGITS: Final[str] = '0123456789abcdefABCDEF'
DUMP_BYTES_PER_LINE: Final[int] = 16


def is_hex_digit(char: str) -> bool:
    """Check if a single character is a valid hex digit."""

    return len(char) == 1 and char in HEX_DIGITS


def compose_high_nibble(existing: int, digit: int) -> int:
    """Replace the high nibble of ``existing`` with ``digit``."""

    return (existing & 0x0F) | (digit << 4)


def compose_low_nibble(existing: int, digit: int) -> int:
    """Replace the low nibble of ``existing`` with ``digit``."""

    return (existing & 0xF0) | digit


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"


def iter_dump_lines(data: bytes, bytes_per_line: int = DUMP_BYTES_PER_LINE) -> Iterator[str]:
    """
    Yield ``hexdump -C`` style lines for the data.

    Args:
        data (bytes): Bytes to dump
        bytes_per_line (int): Number of bytes on each line

    Yields:
        str: One line per row plus a trailing line with the total length
    """

    half = bytes_per_line // 2

    for start in range(0, len(data), bytes_per_line):
        row = data[start:start + bytes_per_line]

        cells = [f"{b:02x}" for b in row]
        left = ' '.join(cells[:half])
        right = ' '.join(cells[half:])
        hex_width = bytes_per_line * 3 + 1

        hex_part = f"{left}  {right}" if right else left
        ascii_part = ''.join(chr(b) if 32 <= b <= 126 else '.' for b in row)

        yield f"{start:08x}  {hex_part:<{hex_width}} |{ascii_part}|"

    yield f"{len(data):08x}"


def format_dump(data: bytes, bytes_per_line: int = DUMP_BYTES_PER_LINE) -> str:
    """Render the data as a plain hex dump."""

    return '\n'.join(iter_dump_lines(data, bytes_per_line)) + '\n'


def highlight_dump(data: bytes, bytes_per_line: int = DUMP_BYTES_PER_LINE,
                   bg: Optional[str] = None) -> str:
    """Render the data as a hex dump colored for the terminal."""

    formatter = TerminalFormatter(bg=bg) if bg else TerminalFormatter()
    return highlight(format_dump(data, bytes_per_line), HexdumpLexer(), formatter)
