"""Key events — translate terminal keys into buffer operations."""
import curses
import enum
import logging
from dataclasses import dataclass
from typing import Optional, Union

from autoline.buffer import AutocorrectBuffer

logger = logging.getLogger(__name__)

_CTRL_H = '\x08'
_CTRL_Q = '\x11'
_DEL = '\x7f'


class KeyKind(enum.Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    DELETE_WORD = "delete_word"  # Ctrl+H
    QUIT = "quit"                # Ctrl+Q
    UNSUPPORTED = "unsupported"


@dataclass
class KeyEvent:
    kind: KeyKind
    char: Optional[str] = None


def key_event_from_curses(key: Union[str, int]) -> KeyEvent:
    """Classify a value returned by curses get_wch().

    Characters arrive as str, function keys as int key codes. In raw mode
    Ctrl+H is a literal 0x08, while Backspace is DEL or KEY_BACKSPACE.
    """
    if isinstance(key, int):
        if key == curses.KEY_BACKSPACE:
            return KeyEvent(KeyKind.BACKSPACE)
        return KeyEvent(KeyKind.UNSUPPORTED)

    if key == _CTRL_Q:
        return KeyEvent(KeyKind.QUIT)
    if key == _CTRL_H:
        return KeyEvent(KeyKind.DELETE_WORD)
    if key == _DEL:
        return KeyEvent(KeyKind.BACKSPACE)
    if len(key) == 1 and key.isprintable():
        return KeyEvent(KeyKind.CHAR, key)
    return KeyEvent(KeyKind.UNSUPPORTED)


class InputDispatcher:
    """Routes key events to the buffer.

    dispatch() returns False once the user asked to quit; the host loop
    stops calling it after that.
    """

    def __init__(self, buffer: AutocorrectBuffer):
        self.buffer = buffer

    def dispatch(self, event: KeyEvent) -> bool:
        if event.kind == KeyKind.QUIT:
            return False

        if event.kind == KeyKind.CHAR:
            self.buffer.insert_char(event.char)
        elif event.kind == KeyKind.BACKSPACE:
            self.buffer.delete_char()
        elif event.kind == KeyKind.DELETE_WORD:
            self.buffer.delete_word()
        else:
            logger.debug("Unsupported key event ignored: %r", event)
        return True
