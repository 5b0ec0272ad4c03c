"""
Core package for cursor navigation and byte editing.

This package implements the editing engine: the Buffer holding the bytes and
the cursor, the Editor classes applying navigation and edit commands for the
hex and ASCII panes, and the LabelHandler deriving the numeric readouts shown
next to them.
"""

from .buffer import Buffer, Nibble
from .editor import AsciiEditor, Editor, HexEditor, Pane, make_editor
from .labels import LabelHandler

__all__ = ['Buffer', 'Nibble', 'Editor', 'AsciiEditor', 'HexEditor', 'Pane', 'make_editor', 'LabelHandler']
