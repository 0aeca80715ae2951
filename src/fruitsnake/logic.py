from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Protocol

from . import config
from .direction import Direction
from .glyphs import head_glyph, joint_glyph
from .snake import Snake
from .state import Clear, Draw, Fruit, GameOver, Outcome, Position, Quit, Turn

logger = logging.getLogger(__name__)

# Roll order for the weighted pick; rarer fruits take the low numbers.
_SPAWN_ORDER = (Fruit.DEATH, Fruit.SPEED, Fruit.SLOW, Fruit.GROWTH)


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def latest_command(commands: Iterable) -> Turn | Quit | None:
    """Drain `commands` and keep only the most recent one."""
    last = deque(commands, maxlen=1)
    return last[0] if last else None


def spawn_trial(rng: RandomSource, fruit_count: int) -> bool:
    return rng.randrange(config.SPAWN_BASE * (fruit_count + 1)) == 0


def pick_fruit(rng: RandomSource) -> Fruit:
    roll = rng.randrange(sum(f.weight for f in _SPAWN_ORDER))
    for fruit in _SPAWN_ORDER:
        if roll < fruit.weight:
            return fruit
        roll -= fruit.weight
    raise AssertionError("fruit weights exhausted")


def pick_cell(rng: RandomSource, bounds: Position, snake: Snake) -> Position | None:
    """Uniform free cell, or None when the snake covers the whole board."""
    max_x, max_y = bounds
    if len(snake) >= (max_x + 1) * (max_y + 1):
        return None
    while True:
        pos = (rng.randrange(max_x + 1), rng.randrange(max_y + 1))
        if pos not in snake:
            return pos


class Game:
    def __init__(self, bounds: Position, rng: RandomSource, delay: float = config.FRAME_DELAY):
        self.bounds = bounds
        self.rng = rng
        self.snake = Snake.centered(bounds)
        self.direction = Direction.NORTH
        self.fruits: dict[Position, Fruit] = {}
        self.delay = delay
        self.score = 0
        self.outcome: Outcome | None = None

    @property
    def running(self) -> bool:
        return self.outcome is None

    def start(self) -> list:
        head = self.snake.head()
        return [Clear(), Draw(head.pos, head_glyph(head.facing), "white")]

    def tick(self, commands: Iterable = ()) -> list:
        """Advance one step and return the render commands it produced."""
        if not self.running:
            raise AssertionError(f"tick after game ended ({self.outcome})")

        frame: list = []
        command = latest_command(commands)
        if isinstance(command, Quit):
            self.end(Outcome.QUIT)
            return frame
        if isinstance(command, Turn):
            self.direction = command.direction

        frame.extend(self.spawn())

        try:
            fruit = self.snake.step(self.fruits, self.bounds, self.direction)
        except GameOver as exc:
            self.end(exc.outcome)
            return frame

        frame.extend(self.snake_delta())
        if fruit is not None:
            self.eat(fruit)
        return frame

    def spawn(self) -> list:
        if not spawn_trial(self.rng, len(self.fruits)):
            return []
        fruit = pick_fruit(self.rng)
        pos = pick_cell(self.rng, self.bounds, self.snake)
        if pos is None:
            return []
        self.fruits[pos] = fruit
        logger.debug("spawned %s at %s", fruit.value, pos)
        return [Draw(pos, fruit.glyph, fruit.color)]

    def snake_delta(self) -> list:
        body = self.snake.body
        frame = []
        if self.snake.vacated is not None:
            frame.append(Draw(self.snake.vacated, " ", "white"))
        head = body[0]
        if len(body) > 1:
            neck = body[1]
            frame.append(Draw(neck.pos, joint_glyph(head.facing, neck.facing), "white"))
        frame.append(Draw(head.pos, head_glyph(head.facing), "white"))
        return frame

    def eat(self, fruit: Fruit) -> None:
        logger.debug("ate %s at %s", fruit.value, self.snake.head().pos)
        if fruit is Fruit.GROWTH:
            self.score += config.GROWTH_POINTS
        elif fruit is Fruit.DEATH:
            self.end(Outcome.FATAL_ITEM)
        elif fruit is Fruit.SPEED:
            self.delay = max(config.MIN_DELAY, self.delay - config.DELAY_STEP)
        elif fruit is Fruit.SLOW:
            self.delay += config.DELAY_STEP

    def end(self, outcome: Outcome) -> None:
        self.outcome = outcome
        logger.info("game over: %s (score %d)", outcome, self.score)
