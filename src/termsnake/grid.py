from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Point(NamedTuple):
    x: int
    y: int


class Heading(Enum):
    # value: (dx, dy), y grows downward
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


def is_reversal(current: Heading, requested: Heading) -> bool:
    """Opposite headings cancel out: current + requested == (0, 0)."""
    return add_vectors(current.value, requested.value) == (0, 0)


def step(point: Point, heading: Heading) -> Point:
    return Point(*add_vectors(point, heading.value))


def hits_border(point: Point, width: int, height: int) -> bool:
    # Coordinates are signed: at or past the low border is a wall hit.
    return point.x <= 0 or point.x >= width or point.y <= 0 or point.y >= height
