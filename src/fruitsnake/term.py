from __future__ import annotations

import curses
import os
import time

from .direction import Direction
from .state import Clear, Position, Quit, Turn

KEY_MAP = {
    curses.KEY_UP: Direction.NORTH,
    ord("w"): Direction.NORTH,
    curses.KEY_DOWN: Direction.SOUTH,
    ord("s"): Direction.SOUTH,
    curses.KEY_LEFT: Direction.WEST,
    ord("a"): Direction.WEST,
    curses.KEY_RIGHT: Direction.EAST,
    ord("d"): Direction.EAST,
}
QUIT_KEYS = (ord("q"), 27)  # 27 = Esc

_CURSES_COLORS = {
    "white": curses.COLOR_WHITE,
    "green": curses.COLOR_GREEN,
    "red": curses.COLOR_RED,
    "light_red": curses.COLOR_MAGENTA,
    "blue": curses.COLOR_BLUE,
}


def translate_keys(keys) -> list:
    # Unmapped keys are dropped here, so they never displace a queued turn.
    commands = []
    for key in keys:
        if key in QUIT_KEYS:
            commands.append(Quit())
        elif key in KEY_MAP:
            commands.append(Turn(KEY_MAP[key]))
    return commands


class TerminalFrontend:
    """curses screen in non-blocking mode; one grid cell per character."""

    def __init__(self):
        # Otherwise curses waits a full second to tell Esc from an escape sequence.
        os.environ.setdefault("ESCDELAY", "25")
        self.screen = curses.initscr()
        self.attrs: dict[str, int] = {}
        try:
            self.setup()
        except BaseException:
            self.close()
            raise

    def setup(self) -> None:
        curses.noecho()
        curses.cbreak()
        self.screen.keypad(True)
        self.screen.nodelay(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            for pair, (name, fg) in enumerate(_CURSES_COLORS.items(), start=1):
                curses.init_pair(pair, fg, -1)
                self.attrs[name] = curses.color_pair(pair)

    def bounds(self) -> Position:
        rows, cols = self.screen.getmaxyx()
        return (cols - 2, rows - 1)

    def poll(self) -> list:
        keys = []
        while (key := self.screen.getch()) != -1:
            keys.append(key)
        return translate_keys(keys)

    def wait(self, seconds: float) -> None:
        time.sleep(seconds)

    def draw(self, commands: list, score: int) -> None:
        for command in commands:
            if isinstance(command, Clear):
                self.screen.erase()
                continue
            x, y = command.pos
            try:
                self.screen.addstr(y, x, command.glyph, self.attrs.get(command.color, 0))
            except curses.error:
                # Writing the bottom-right cell moves the cursor off screen.
                pass
        self.screen.refresh()

    def close(self) -> None:
        self.screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        curses.endwin()
