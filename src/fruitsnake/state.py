from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass
from enum import Enum

from . import config

Position = tuple[int, int]

Segment = namedtuple("Segment", ["facing", "pos"])
# facing: Direction the segment was moving when it was laid down
# pos: (x, y), 0-indexed grid cell

# Render commands handed to a frontend.
Draw = namedtuple("Draw", ["pos", "glyph", "color"])
# color: key into config.COLORS

# Input commands produced by a frontend.
Turn = namedtuple("Turn", ["direction"])


# Field-less commands are dataclasses so Clear() and Quit() never compare equal.
@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Quit:
    pass


class Fruit(Enum):
    GROWTH = "growth"
    DEATH = "death"
    SPEED = "speed"
    SLOW = "slow"

    @property
    def glyph(self) -> str:
        return _FRUIT_LOOK[self][0]

    @property
    def color(self) -> str:
        return _FRUIT_LOOK[self][1]

    @property
    def weight(self) -> int:
        return config.FRUIT_WEIGHTS[self.value]


_FRUIT_LOOK = {
    Fruit.GROWTH: ("\N{GREEN APPLE}", "green"),
    Fruit.DEATH: ("\N{SKULL}", "red"),
    Fruit.SPEED: ("\N{CHERRIES}", "light_red"),
    Fruit.SLOW: ("\N{PINEAPPLE}", "blue"),
}


class Outcome(Enum):
    OUT_OF_BOUNDS = "OutOfBounds"
    SELF_COLLISION = "SelfCollision"
    FATAL_ITEM = "FatalItem"
    QUIT = "Quit"

    def __str__(self) -> str:
        return self.value


class GameOver(Exception):
    """Raised when a step ends the session; carries the Outcome."""

    def __init__(self, outcome: Outcome):
        super().__init__(outcome.value)
        self.outcome = outcome
