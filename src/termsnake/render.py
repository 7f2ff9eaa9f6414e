from __future__ import annotations

from typing import Protocol

from . import config
from .state import GameState


class Screen(Protocol):
    def clear(self) -> None: ...

    def put(self, x: int, y: int, text: str) -> None: ...

    def flush(self) -> None: ...


def draw_border(screen: Screen, width: int, height: int) -> None:
    edge = config.BORDER_GLYPH * (width + 1)
    screen.put(0, 0, edge)
    screen.put(0, height, edge)
    for y in range(1, height):
        screen.put(0, y, config.BORDER_GLYPH)
        screen.put(width, y, config.BORDER_GLYPH)


def draw_game_over(screen: Screen, state: GameState) -> None:
    screen.put(0, state.height + 2, config.GAME_OVER_TEXT)
    screen.flush()


def draw_state(screen: Screen, state: GameState) -> None:
    screen.clear()
    draw_border(screen, state.width, state.height)

    screen.put(state.food.x, state.food.y, config.FOOD_GLYPH)
    # Snake after food so an overlap shows the body.
    for x, y in state.snake:
        screen.put(x, y, config.SNAKE_GLYPH)

    screen.put(0, state.height + 1, config.SCORE_FORMAT.format(score=state.score))
    if state.game_over:
        screen.put(0, state.height + 2, config.GAME_OVER_TEXT)
    screen.flush()
