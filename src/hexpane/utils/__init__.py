"""
Utility package for hex support functions.
"""

from .hex_utils import (
    is_hex_digit,
    compose_high_nibble,
    compose_low_nibble,
    format_offset,
    format_dump,
    highlight_dump
)

__all__ = [
    'is_hex_digit',
    'compose_high_nibble',
    'compose_low_nibble',
    'format_offset',
    'format_dump',
    'highlight_dump'
]
