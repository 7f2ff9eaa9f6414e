from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import blessed

from .keys import Key, from_keystroke

logger = logging.getLogger(__name__)


class TerminalScreen:
    """Screen and keyboard backed by a ``blessed.Terminal``.

    Output goes through ``move_xy`` for every glyph, so it stays correct in raw
    mode where a newline does not return the carriage.
    """

    def __init__(self, term: blessed.Terminal) -> None:
        self.term = term

    def clear(self) -> None:
        print(self.term.home + self.term.clear, end="", file=self.term.stream)

    def put(self, x: int, y: int, text: str) -> None:
        print(self.term.move_xy(x, y) + text, end="", file=self.term.stream)

    def flush(self) -> None:
        self.term.stream.flush()

    def poll(self, timeout_ms: int) -> Key | None:
        keystroke = self.term.inkey(timeout=timeout_ms / 1000)
        if not keystroke:
            return None
        return from_keystroke(keystroke)


@contextmanager
def session(term: blessed.Terminal) -> Iterator[None]:
    """Alternate screen, raw input and hidden cursor for the duration."""
    with term.fullscreen(), term.raw(), term.hidden_cursor():
        logger.debug("terminal session started (%dx%d)", term.width, term.height)
        try:
            yield
        finally:
            logger.debug("terminal session finished")
