"""
UI package for the hex editor interface components.

This package implements the curses user interface: the Viewport tracking the
visible rows, the WindowManager drawing the panes, and the InputHandler
dispatching keys to the editor of the focused pane.
"""

from .viewport import Viewport
from .window import WindowManager
from .input_handler import InputHandler

__all__ = ['Viewport', 'WindowManager', 'InputHandler']
