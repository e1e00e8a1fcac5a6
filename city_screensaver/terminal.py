"""
Terminal Control - Enter and leave curses screensaver mode.

Setup failures are fatal and raise TerminalSetupError after undoing
whatever part of the setup already happened. Restore failures are logged
and swallowed so they never mask the result of the screensaver run.

Usage:
    with Terminal() as screen:
        Screensaver(config).run(screen)
"""

import logging
from typing import Callable, List, Tuple

# Handle curses import for Windows compatibility
try:
    import curses
    CURSES_AVAILABLE = True
except ImportError:
    curses = None
    CURSES_AVAILABLE = False

from .colors import Colors
from .errors import (
    ErrorCategory,
    TerminalRestoreError,
    TerminalSetupError,
    report_errors,
)

logger = logging.getLogger(__name__)


class Terminal:
    """Owns the curses screen for the lifetime of a run."""

    def __init__(self):
        self.screen = None

    def setup(self):
        """Initialise curses: alternate screen, raw input, hidden cursor, colors."""
        if not CURSES_AVAILABLE:
            raise TerminalSetupError("load curses", ImportError(
                "curses library not available (on Windows: pip install windows-curses)"))

        try:
            screen = curses.initscr()
        except curses.error as e:
            raise TerminalSetupError("enter alternate screen", e) from e
        self.screen = screen

        try:
            try:
                curses.noecho()
                curses.cbreak()
                screen.keypad(True)
            except curses.error as e:
                raise TerminalSetupError("enable raw mode", e) from e

            try:
                curses.curs_set(0)
            except curses.error as e:
                raise TerminalSetupError("hide cursor", e) from e

            if curses.has_colors():
                try:
                    Colors.init_colors()
                except curses.error as e:
                    raise TerminalSetupError("initialize colors", e) from e
        except TerminalSetupError:
            self.restore()
            raise

        logger.debug("Terminal entered screensaver mode")
        return screen

    def restore(self):
        """Undo setup. Every step is attempted even if an earlier one fails."""
        if self.screen is None:
            return
        screen = self.screen
        self.screen = None

        def _disable_raw_mode():
            screen.keypad(False)
            curses.nocbreak()
            curses.echo()

        steps: List[Tuple[str, Callable[[], None]]] = [
            ("disable raw mode", _disable_raw_mode),
            ("show cursor", lambda: curses.curs_set(1)),
            ("leave alternate screen", curses.endwin),
        ]
        for step, action in steps:
            with report_errors("restore terminal", ErrorCategory.TERMINAL):
                try:
                    action()
                except curses.error as e:
                    raise TerminalRestoreError(step, e) from e

        logger.debug("Terminal restored")

    def __enter__(self):
        return self.setup()

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False
