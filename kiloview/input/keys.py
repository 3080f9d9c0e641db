"""Logical key events produced by the input decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ESC = "\x1b"


def ctrl_key(ch: str) -> str:
    """Return the control character produced by Ctrl+``ch``."""
    return chr(ord(ch) & 0x1F)


QUIT_CHAR = ctrl_key("q")


class Key(Enum):
    ARROW_LEFT = "LEFT"
    ARROW_RIGHT = "RIGHT"
    ARROW_UP = "UP"
    ARROW_DOWN = "DOWN"
    PAGE_UP = "PAGE_UP"
    PAGE_DOWN = "PAGE_DOWN"
    HOME = "HOME"
    END = "END"
    DELETE = "DELETE"
    OTHER = "OTHER"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key press; ``char`` is only set for ``Key.OTHER``."""

    key: Key
    char: str = ""

    @classmethod
    def other(cls, char: str) -> KeyEvent:
        return cls(Key.OTHER, char)

    def is_char(self, char: str) -> bool:
        return self.key is Key.OTHER and self.char == char


ARROW_LEFT = KeyEvent(Key.ARROW_LEFT)
ARROW_RIGHT = KeyEvent(Key.ARROW_RIGHT)
ARROW_UP = KeyEvent(Key.ARROW_UP)
ARROW_DOWN = KeyEvent(Key.ARROW_DOWN)
PAGE_UP = KeyEvent(Key.PAGE_UP)
PAGE_DOWN = KeyEvent(Key.PAGE_DOWN)
HOME = KeyEvent(Key.HOME)
END = KeyEvent(Key.END)
DELETE = KeyEvent(Key.DELETE)
ESCAPE = KeyEvent.other(ESC)
