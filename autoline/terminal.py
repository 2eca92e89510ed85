"""Curses terminal session — raw mode on the alternate screen."""
import curses
import logging
from typing import Optional, Union

logger = logging.getLogger(__name__)


class Terminal:
    """Owns the terminal for the duration of an editing session.

    Use as a context manager: the terminal is restored on every exit path,
    including exceptions raised inside the session.
    """

    def __init__(self, poll_timeout_ms: int = 500):
        self.poll_timeout_ms = poll_timeout_ms
        self._screen = None

    def __enter__(self):
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.clean_up()
        return False

    def setup(self):
        # initscr switches to the alternate screen where the terminal has one
        self._screen = curses.initscr()
        try:
            curses.noecho()
            curses.raw()
            self._screen.keypad(True)
            self._screen.timeout(self.poll_timeout_ms)
            self._screen.clear()
            self._screen.refresh()
        except curses.error:
            self.clean_up()
            raise
        if curses.tigetstr("kbs") == b"\x08":
            # keypad mode reports ^H as KEY_BACKSPACE on these terminals
            logger.warning("Terminal sends ^H for Backspace; Ctrl+H will delete a character")
        logger.debug("Terminal session started")

    def clean_up(self):
        if self._screen is None:
            return
        try:
            self._screen.keypad(False)
            curses.noraw()
            curses.echo()
        finally:
            curses.endwin()
            self._screen = None
        logger.debug("Terminal session ended")

    def read_key(self) -> Optional[Union[str, int]]:
        """Wait up to poll_timeout_ms for one key. None if nothing arrived."""
        try:
            return self._screen.get_wch()
        except curses.error:
            return None

    def draw(self, text: str, status: str = ""):
        """Repaint: text from the top-left, status on the bottom row."""
        height, width = self._screen.getmaxyx()
        self._screen.erase()

        # Leave the last cell of the text area free; writing there raises.
        capacity = max((height - 1) * width - 1, 0)
        visible = text[-capacity:] if capacity else ""
        try:
            self._screen.addstr(0, 0, visible)
            if status and height > 1:
                self._screen.addnstr(height - 1, 0, status, max(width - 1, 0), curses.A_REVERSE)
            y, x = divmod(len(visible), width) if width else (0, 0)
            self._screen.move(min(y, height - 1), x)
        except curses.error as e:
            logger.debug("Draw clipped: %s", e)
        self._screen.refresh()
