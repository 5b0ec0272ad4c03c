"""
Label module deriving the numeric interpretations shown beside the panes.
"""

import struct
from typing import Dict, Final, List, Optional, Tuple

LITTLE_ENDIAN: Final[str] = 'little'
BIG_ENDIAN: Final[str] = 'big'

MISSING_VALUE: Final[str] = '-'

# Label name, struct format code, byte count
NUMERIC_LABELS: Final[List[Tuple[str, str, int]]] = [
    ("Signed 8 bit", 'b', 1),
    ("Unsigned 8 bit", 'B', 1),
    ("Signed 16 bit", 'h', 2),
    ("Unsigned 16 bit", 'H', 2),
    ("Signed 32 bit", 'i', 4),
    ("Unsigned 32 bit", 'I', 4),
    ("Signed 64 bit", 'q', 8),
    ("Unsigned 64 bit", 'Q', 8),
    ("Float 32 bit", 'f', 4),
    ("Float 64 bit", 'd', 8),
]

LABEL_ORDER: Final[List[str]] = [name for name, _, _ in NUMERIC_LABELS] + [
    "Hexadecimal",
    "Octal",
    "Binary",
    "Stream Length",
]


def stream_length(data: bytes) -> int:
    """Count the printable ASCII bytes at the start of the data."""

    count = 0
    for b in data:
        if not 32 <= b <= 126:
            break
        count += 1

    return count


class LabelHandler:
    """Keeps the derived label texts and the transient notification."""

    def __init__(self, endianness: str = LITTLE_ENDIAN) -> None:
        if endianness not in (LITTLE_ENDIAN, BIG_ENDIAN):
            raise ValueError(f"Unknown endianness: {endianness}")

        self.endianness = endianness
        self.labels: Dict[str, str] = {name: MISSING_VALUE for name in LABEL_ORDER}
        self.notification: Optional[str] = None
        self._last_data = b''

    def refresh(self, data: bytes) -> None:
        """Recompute every label from the bytes starting at the cursor."""

        self._last_data = bytes(data)
        self.notification = None

        prefix = '<' if self.endianness == LITTLE_ENDIAN else '>'
        for name, code, size in NUMERIC_LABELS:
            if len(data) < size:
                self.labels[name] = MISSING_VALUE
                continue

            value = struct.unpack(prefix + code, bytes(data[:size]))[0]
            self.labels[name] = f"{value:.6g}" if code in 'fd' else str(value)

        if data:
            first = data[0]
            self.labels["Hexadecimal"] = f"0x{first:02X}"
            self.labels["Octal"] = f"0o{first:03o}"
            self.labels["Binary"] = f"0b{first:08b}"
        else:
            for name in ("Hexadecimal", "Octal", "Binary"):
                self.labels[name] = MISSING_VALUE

        self.labels["Stream Length"] = str(stream_length(data))

    def set_warning(self, message: str) -> None:
        self.notification = message

    def toggle_endianness(self) -> str:
        """Switch byte order and recompute from the last seen data."""

        if self.endianness == LITTLE_ENDIAN:
            self.endianness = BIG_ENDIAN
        else:
            self.endianness = LITTLE_ENDIAN

        self.refresh(self._last_data)
        return self.endianness

    def items(self) -> List[Tuple[str, str]]:
        """Labels in display order."""

        return [(name, self.labels[name]) for name in LABEL_ORDER]
