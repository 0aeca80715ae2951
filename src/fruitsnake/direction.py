from __future__ import annotations

from enum import Enum


class Direction(Enum):
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def vector(self) -> tuple[int, int]:
        return _VECTORS[self]

    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_VECTORS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


def resolve_turn(facing: Direction, requested: Direction) -> Direction:
    """Direction actually taken this tick; a 180 degree reversal keeps `facing`."""
    if requested is facing.opposite():
        return facing
    return requested


def advance(pos: tuple[int, int], direction: Direction) -> tuple[int, int]:
    dx, dy = direction.vector
    return (pos[0] + dx, pos[1] + dy)
