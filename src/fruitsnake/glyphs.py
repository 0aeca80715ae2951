from __future__ import annotations

from .direction import Direction

N, S, E, W = Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST

# (direction of the new head, facing of the segment behind it) -> joint glyph
_JOINTS = {
    (N, E): "╯", (W, S): "╯",
    (N, W): "╰", (E, S): "╰",
    (S, E): "╮", (W, N): "╮",
    (S, W): "╭", (E, N): "╭",
    (E, E): "─", (W, W): "─",
    (N, N): "│", (S, S): "│",
}


def head_glyph(facing: Direction) -> str:
    return "│" if facing in (N, S) else "─"


def joint_glyph(leaving: Direction, arrived: Direction) -> str:
    """Connector for the cell the head just left.

    `arrived` is the facing the old head had when it entered the cell and
    `leaving` the facing of the new head. Opposite pairs cannot happen once
    turns are resolved, so they fail loudly.
    """
    try:
        return _JOINTS[(leaving, arrived)]
    except KeyError:
        raise AssertionError(f"illegal joint: {leaving.name} after {arrived.name}") from None
