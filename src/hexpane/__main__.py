"""
Entry point for hexpane.
"""

import argparse
import curses
import logging
import sys
from typing import Final, Optional, Sequence

from .core.buffer import Buffer
from .core.editor import Pane
from .core.labels import LabelHandler
from .ui.input_handler import InputHandler
from .ui.window import WindowManager
from .utils.hex_utils import highlight_dump

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("hexpane")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog="hexpane",
        description="hexpane - Terminal Hex and ASCII Byte Editor"
    )
    parser.add_argument(
        "file",
        type=str,
        help="File to edit"
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Start with the ASCII pane focused"
    )
    parser.add_argument(
        "--big-endian",
        action="store_true",
        help="Interpret multi-byte labels as big endian"
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print a highlighted hex dump and exit"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write debug logs to this file"
    )
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str]) -> None:
    """Send log records to a file; the terminal belongs to curses."""

    if not log_file:
        return

    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def run_editor(stdscr: 'curses.window', buf: Buffer, args: argparse.Namespace) -> None:
    """Main loop inside curses."""

    curses.use_default_colors()
    curses.curs_set(0)
    stdscr.timeout(100)

    labels = LabelHandler('big' if args.big_endian else 'little')
    window_manager = WindowManager(stdscr, buf, labels)
    input_handler = InputHandler(window_manager, Pane.ASCII if args.ascii else Pane.HEX)

    while True:
        current_height, current_width = stdscr.getmaxyx()
        if (current_height, current_width) != (window_manager.height, window_manager.width):
            window_manager.resize()

        window_manager.refresh_all()

        try:
            ch = stdscr.getch()
            if ch != -1:
                if not input_handler.handle_input(ch):
                    break
        except KeyboardInterrupt:
            break
        except curses.error:
            continue


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    setup_logging(args.log_file)

    buf = Buffer()
    try:
        buf.load_file(args.file)
    except OSError as e:
        print(f"Error loading {args.file}: {e}", file=sys.stderr)
        return 1

    if args.dump:
        sys.stdout.write(highlight_dump(bytes(buf.contents)))
        return 0

    try:
        curses.wrapper(run_editor, buf, args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Session ended for %s", args.file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
