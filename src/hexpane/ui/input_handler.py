"""
Input handler module for processing keyboard events.
"""

import curses
from typing import Callable, Dict, Final

from ..core.editor import Editor, Pane, make_editor
from .window import WindowManager

UNSAVED_CHANGES_STATUS_MESSAGE: Final[str] = "Buffer has unsaved changes. Press Ctrl+W to save or Ctrl+X again to discard changes."
BACKSPACE_KEYS: Final[tuple] = (curses.KEY_BACKSPACE, 127, 8)
ENTER_KEYS: Final[tuple] = (curses.KEY_ENTER, ord('\n'), ord('\r'))


class InputHandler:
    """Handles keyboard input and forwards it to the editor of the focused pane."""

    def __init__(self, window_manager: WindowManager, pane: Pane = Pane.HEX) -> None:
        self.window_manager = window_manager
        self.window_manager.input_handler = self
        self.editors: Dict[Pane, Editor] = {
            p: make_editor(p, window_manager.viewport, window_manager.labels) for p in Pane
        }
        self.editor = self.editors[pane]
        self._quit_warning_shown = False
        self.command_handlers: Dict[int, Callable[[], None]] = self._setup_handlers()

    def _setup_handlers(self) -> Dict[int, Callable[[], None]]:
        """Set up the keyboard command handlers."""

        handlers = {
            curses.KEY_LEFT: self._command('left'),
            curses.KEY_RIGHT: self._command('right'),
            curses.KEY_UP: self._command('up'),
            curses.KEY_DOWN: self._command('down'),
            curses.KEY_HOME: self._command('home'),
            curses.KEY_END: self._command('end'),
            curses.KEY_DC: self._command('delete'),
            ord('\t'): self._switch_pane,

            ord('x') & 0x1f: self._quit,  # Ctrl + X (quit key)
            ord('w') & 0x1f: self._save,  # Ctrl + W (save key)
            ord('e') & 0x1f: self._toggle_endianness,  # Ctrl + E (endianness key)
        }

        for key in BACKSPACE_KEYS:
            handlers[key] = self._command('backspace')
        for key in ENTER_KEYS:
            handlers[key] = self._command('enter')

        return handlers

    def _command(self, name: str) -> Callable[[], None]:
        """Bind an editor command to the focused editor and current row width."""

        def run() -> None:
            getattr(self.editor, name)(
                self.window_manager.buffer,
                self.window_manager.bytes_per_line
            )

        return run

    def handle_input(self, ch: int) -> bool:
        """Handle a single keyboard input. Returns False if should quit."""

        if ch in self.command_handlers:
            try:
                self.command_handlers[ch]()
            except KeyboardInterrupt:
                return False
            return True

        if 32 <= ch <= 126 or (0 <= ch <= 255 and self.is_focusing(Pane.ASCII)):
            self.editor.char(
                self.window_manager.buffer,
                self.window_manager.bytes_per_line,
                chr(ch)
            )

        return True

    def is_focusing(self, pane: Pane) -> bool:
        return self.editor.is_focusing(pane)

    def _switch_pane(self) -> None:
        """Toggle between hex and ASCII views."""

        pane = Pane.ASCII if self.is_focusing(Pane.HEX) else Pane.HEX
        self.editor = self.editors[pane]
        self.window_manager.set_status(f"Editing {pane.name}")

    def _toggle_endianness(self) -> None:
        endianness = self.window_manager.labels.toggle_endianness()
        self.window_manager.set_status(f"Endianness: {endianness}")

    def _quit(self) -> None:
        """Quit the application, warning once about unsaved changes."""

        if self.window_manager.buffer.modified and not self._quit_warning_shown:
            self.window_manager.set_status(UNSAVED_CHANGES_STATUS_MESSAGE)
            self._quit_warning_shown = True
            return

        raise KeyboardInterrupt()

    def _save(self) -> None:
        """Save the current buffer."""

        buf = self.window_manager.buffer

        try:
            if buf.save_file():
                self._quit_warning_shown = False
                self.window_manager.set_status(f"Saved: {buf.filename}")
                return

            self.window_manager.set_status("Error: No filename specified")
        except IOError as e:
            self.window_manager.set_status(f"Error: {str(e)}")
