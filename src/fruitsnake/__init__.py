from .direction import Direction, resolve_turn
from .game import play
from .logic import Game
from .snake import Snake
from .state import Fruit, GameOver, Outcome, Segment

__all__ = ["Direction", "Fruit", "Game", "GameOver", "Outcome", "Segment", "Snake", "play", "resolve_turn"]
