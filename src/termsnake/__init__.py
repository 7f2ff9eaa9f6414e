import logging

from .game import GameLoop, Mode, new_game
from .grid import Heading, Point
from .keys import Key
from .state import GameState

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["GameLoop", "GameState", "Heading", "Key", "Mode", "Point", "new_game"]
