from __future__ import annotations

import logging
import random
from enum import Enum, auto
from typing import Protocol

import blessed

from . import config
from .keys import HEADINGS, Key
from .render import Screen, draw_game_over, draw_state
from .state import GameState, RandomSource
from .terminal import TerminalScreen, session

logger = logging.getLogger(__name__)


class Keyboard(Protocol):
    def poll(self, timeout_ms: int) -> Key | None: ...


class Mode(Enum):
    RUNNING = auto()
    OVER = auto()


class GameLoop:
    """Input-driven loop: one accepted heading key is one tick.

    Idle polls leave the snake where it is. Once the state is over, only the
    quit key does anything, and every iteration repaints the game-over line.
    """

    def __init__(
        self,
        state: GameState,
        screen: Screen,
        keyboard: Keyboard,
        poll_interval_ms: int = config.POLL_INTERVAL_MS,
    ) -> None:
        self.state = state
        self.screen = screen
        self.keyboard = keyboard
        self.poll_interval_ms = poll_interval_ms

    @property
    def mode(self) -> Mode:
        return Mode.OVER if self.state.game_over else Mode.RUNNING

    def step(self) -> bool:
        """Run one poll iteration. Returns False when the player quit."""
        key = self.keyboard.poll(self.poll_interval_ms)
        if key is Key.QUIT:
            return False

        heading = HEADINGS.get(key)
        if heading is not None and self.mode is Mode.RUNNING:
            self.state.set_heading(heading)
            self.state.advance()
            draw_state(self.screen, self.state)

        if self.mode is Mode.OVER:
            draw_game_over(self.screen, self.state)
        return True

    def run(self) -> None:
        draw_state(self.screen, self.state)
        while self.step():
            pass
        logger.info("quit with score=%d", self.state.score)


def new_game(rng: RandomSource | None = None) -> GameState:
    return GameState(config.WIDTH, config.HEIGHT, rng if rng is not None else random.Random())


def main() -> None:
    term = blessed.Terminal()
    screen = TerminalScreen(term)
    with session(term):
        GameLoop(new_game(), screen, screen).run()
