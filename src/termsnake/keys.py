from __future__ import annotations

from enum import Enum, auto

from . import config
from .grid import Heading


class Key(Enum):
    QUIT = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    OTHER = auto()


KEY_NAMES = {
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
}

HEADINGS = {
    Key.UP: Heading.UP,
    Key.DOWN: Heading.DOWN,
    Key.LEFT: Heading.LEFT,
    Key.RIGHT: Heading.RIGHT,
}


def from_keystroke(keystroke) -> Key:
    """Map a ``blessed`` keystroke to a Key. Arrow keys arrive as sequences."""
    if keystroke.is_sequence:
        return KEY_NAMES.get(keystroke.name, Key.OTHER)
    if str(keystroke) == config.QUIT_KEY:
        return Key.QUIT
    return Key.OTHER
