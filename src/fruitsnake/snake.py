from __future__ import annotations

from collections import deque

from .direction import Direction, advance, resolve_turn
from .state import Fruit, GameOver, Outcome, Position, Segment


class Snake:
    def __init__(self, segments: list[Segment]):
        if not segments:
            raise AssertionError("snake needs at least one segment")
        self.body: deque[Segment] = deque(segments)
        # Cell freed by the most recent step, if the tail moved.
        self.vacated: Position | None = None

    @classmethod
    def centered(cls, bounds: Position) -> Snake:
        max_x, max_y = bounds
        return cls([Segment(Direction.NORTH, (max_x // 2, max_y // 2))])

    def head(self) -> Segment:
        if not self.body:
            raise AssertionError("snake has no segments")
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, pos: Position) -> bool:
        return any(seg.pos == pos for seg in self.body)

    def positions(self) -> list[Position]:
        return [seg.pos for seg in self.body]

    def step(
        self,
        fruits: dict[Position, Fruit],
        bounds: Position,
        requested: Direction,
    ) -> Fruit | None:
        """Move one cell and return the fruit eaten, if any.

        Raises GameOver(OUT_OF_BOUNDS) before touching any state, or
        GameOver(SELF_COLLISION) after the tail has already been dropped.
        """
        head = self.head()
        facing = resolve_turn(head.facing, requested)
        x, y = advance(head.pos, facing)

        max_x, max_y = bounds
        if x < 0 or y < 0 or x > max_x or y > max_y:
            raise GameOver(Outcome.OUT_OF_BOUNDS)

        self.vacated = None
        # The tail leaves before the collision check, so chasing it is legal.
        if fruits.get((x, y)) is not Fruit.GROWTH:
            self.vacated = self.body.pop().pos

        if (x, y) in self:
            raise GameOver(Outcome.SELF_COLLISION)

        self.body.appendleft(Segment(facing, (x, y)))
        return fruits.pop((x, y), None)
