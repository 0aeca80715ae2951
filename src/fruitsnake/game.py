from __future__ import annotations

from typing import Iterable, Protocol

from . import config
from .logic import Game, RandomSource
from .state import Position


class Frontend(Protocol):
    def bounds(self) -> Position: ...

    def poll(self) -> Iterable: ...

    def wait(self, seconds: float) -> None: ...

    def draw(self, commands: list, score: int) -> None: ...

    def close(self) -> None: ...


def play(frontend: Frontend, rng: RandomSource, delay: float = config.FRAME_DELAY) -> Game:
    """Run one session to its end; the returned game carries the outcome."""
    game = Game(frontend.bounds(), rng, delay)
    frontend.draw(game.start(), game.score)
    while game.running:
        frontend.wait(game.delay)
        frame = game.tick(frontend.poll())
        frontend.draw(frame, game.score)
    return game
