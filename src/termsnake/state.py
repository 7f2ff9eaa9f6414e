from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from typing import Protocol

from . import config
from .grid import Heading, Point, hits_border, is_reversal, step

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def random_cell(rng: RandomSource, width: int, height: int) -> Point:
    """Uniform pick over the playable area, x in [1, width-1], y in [1, height-1]."""
    return Point(rng.randint(1, width - 1), rng.randint(1, height - 1))


class GameState:
    """Snake, heading, food, score and the game-over flag.

    Mutated only through ``set_heading`` and ``advance``. Illegal moves never
    raise; they set ``game_over`` and freeze the state from then on.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: RandomSource,
        snake: Iterable[tuple[int, int]] | None = None,
        heading: Heading = Heading.RIGHT,
        food: tuple[int, int] | None = None,
    ) -> None:
        if width < 3 or height < 3:
            raise ValueError(f"grid must be at least 3x3, got {width}x{height}")
        self.width = width
        self.height = height
        self.rng = rng

        if snake is None:
            snake = [(width // 2, height // 2)]
        self.snake: deque[Point] = deque(Point(*p) for p in snake)
        if not self.snake:
            raise ValueError("snake needs at least one segment")

        if food is None:
            self.food = self._place_start_food()
        else:
            self.food = Point(*food)
            if self.food in self.snake:
                raise ValueError(f"food {self.food} is on the snake")

        self.heading = heading
        self.score = 0
        self.game_over = False

    def _place_start_food(self) -> Point:
        if len(set(self.snake)) >= (self.width - 1) * (self.height - 1):
            raise ValueError("no free cell left for food")
        food = Point(*config.START_FOOD)
        while hits_border(food, self.width, self.height) or food in self.snake:
            food = random_cell(self.rng, self.width, self.height)
        return food

    @property
    def head(self) -> Point:
        return self.snake[0]

    def set_heading(self, requested: Heading) -> None:
        if self.game_over:
            return
        if is_reversal(self.heading, requested):
            logger.debug("rejected reversal %s -> %s", self.heading.name, requested.name)
            return
        self.heading = requested

    def advance(self) -> None:
        if self.game_over:
            return

        new_head = step(self.head, self.heading)
        if hits_border(new_head, self.width, self.height):
            self._end("wall", new_head)
            return
        if new_head in self.snake:
            self._end("self", new_head)
            return

        self.snake.appendleft(new_head)
        if new_head == self.food:
            self.score += 1
            # May land under the body; the snake is not consulted here.
            self.food = random_cell(self.rng, self.width, self.height)
            logger.debug("ate food at %s, score=%d, next food at %s", new_head, self.score, self.food)
        else:
            self.snake.pop()
        logger.debug("moved %s to %s, length=%d", self.heading.name, new_head, len(self.snake))

    def _end(self, reason: str, at: Point) -> None:
        self.game_over = True
        logger.info("game over (%s) at %s, score=%d", reason, at, self.score)
