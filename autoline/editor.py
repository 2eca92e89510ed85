"""Editor — single-threaded loop tying terminal input, buffer and display together."""
import logging

from autoline.buffer import AutocorrectBuffer
from autoline.dictionary import Dictionary
from autoline.input import InputDispatcher, key_event_from_curses

logger = logging.getLogger(__name__)

HELP_TEXT = "Ctrl+Q quit  Ctrl+H delete word"


class Editor:
    """Reads one key at a time, applies it to the buffer and redraws.

    The screen only needs read_key() (a key, or None on poll timeout) and
    draw(text, status), so tests can drive the loop with a scripted fake.
    """

    def __init__(self, dictionary: Dictionary, show_status: bool = True):
        self.buffer = AutocorrectBuffer(dictionary)
        self.dispatcher = InputDispatcher(self.buffer)
        self.show_status = show_status
        self._running = False

    @property
    def running(self):
        return self._running

    def status_line(self) -> str:
        if not self.show_status:
            return ""
        entry = self.buffer.last_correction
        if entry is None:
            return HELP_TEXT
        return f"{HELP_TEXT}  |  {entry.original} → {entry.corrected}"

    def run(self, screen):
        self._running = True
        logger.info("Editor started (%d dictionary words)", len(self.buffer.dictionary))
        screen.draw(self.buffer.render(), self.status_line())

        try:
            while self._running:
                key = screen.read_key()
                if key is None:
                    continue
                event = key_event_from_curses(key)
                if not self.dispatcher.dispatch(event):
                    self._running = False
                    break
                screen.draw(self.buffer.render(), self.status_line())
        finally:
            self._running = False
            logger.info("Editor stopped")

        return self.buffer.render()
