import curses

import pygame
import pytest

from fruitsnake import config
from fruitsnake.direction import Direction
from fruitsnake.render import WindowFrontend, translate_events
from fruitsnake.state import Clear, Draw, Fruit, Quit, Turn
from fruitsnake.term import TerminalFrontend, translate_keys

WHITE = (255, 255, 255)


def cell_center(x, y):
    size = config.CELL_SIZE
    return (x * size + size // 2, y * size + size // 2)


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    frontend = WindowFrontend(4, 4)
    yield frontend
    frontend.close()


class TestWindowKeys:
    def test_translate_events(self):
        events = [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x),
            pygame.event.Event(pygame.KEYUP, key=pygame.K_UP),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s),
            pygame.event.Event(pygame.QUIT),
        ]
        assert translate_events(events) == [Turn(Direction.WEST), Turn(Direction.SOUTH), Quit()]

    def test_quit_keys(self):
        for key in (pygame.K_q, pygame.K_ESCAPE):
            assert translate_events([pygame.event.Event(pygame.KEYDOWN, key=key)]) == [Quit()]


class TestWindowFrontend:
    def test_bounds_are_last_cell(self, window):
        assert window.bounds() == (3, 3)

    def test_clear_fills_black(self, window):
        window.screen.fill(WHITE)
        window.draw([Clear()], 0)
        assert tuple(window.screen.get_at((0, 0)))[:3] == config.BLACK
        assert tuple(window.screen.get_at(cell_center(3, 3)))[:3] == config.BLACK

    def test_fruit_is_a_coloured_disc(self, window):
        window.draw([Clear(), Draw((1, 2), Fruit.SLOW.glyph, Fruit.SLOW.color)], 0)
        assert tuple(window.screen.get_at(cell_center(1, 2)))[:3] == config.COLORS["blue"]

    def test_blank_glyph_erases_cell(self, window):
        window.screen.fill(WHITE)
        window.draw([Draw((2, 1), " ", "white")], 0)
        assert tuple(window.screen.get_at(cell_center(2, 1)))[:3] == config.BLACK
        assert tuple(window.screen.get_at(cell_center(0, 0)))[:3] == WHITE

    def test_score_in_caption(self, window):
        window.draw([Clear(), Draw((0, 0), "│", "white"), Draw((2, 2), Fruit.GROWTH.glyph, "green")], 10)
        assert pygame.display.get_caption()[0].endswith("score 10")

    def test_poll_translates_queue(self, window):
        pygame.event.clear()
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d))
        assert window.poll() == [Turn(Direction.EAST)]


class TestTerminalKeys:
    def test_translate_keys(self):
        keys = [ord("d"), ord("x"), curses.KEY_UP, 27]
        assert translate_keys(keys) == [Turn(Direction.EAST), Turn(Direction.NORTH), Quit()]

    def test_clear_and_quit_differ(self):
        assert Clear() != Quit()
        assert Quit() == Quit()


class FakeScreen:
    def __init__(self, keys=(), size=(24, 80)):
        self.keys = list(keys)
        self.size = size
        self.calls: list = []

    def keypad(self, flag):
        self.calls.append(("keypad", flag))

    def nodelay(self, flag):
        self.calls.append(("nodelay", flag))

    def getmaxyx(self):
        return self.size

    def getch(self):
        self.calls.append("getch")
        return self.keys.pop(0) if self.keys else -1

    def erase(self):
        self.calls.append("erase")

    def addstr(self, y, x, text, attr):
        if (x, y) == (79, 23):
            raise curses.error("addwstr() returned ERR")
        self.calls.append(("addstr", y, x, text, attr))

    def refresh(self):
        self.calls.append("refresh")


@pytest.fixture
def fake_curses(monkeypatch):
    """Route curses setup/teardown into a call log."""
    log: list = []
    screen = FakeScreen()
    monkeypatch.setenv("ESCDELAY", "25")
    monkeypatch.setattr(curses, "initscr", lambda: screen)
    for name in ("noecho", "cbreak", "nocbreak", "echo", "start_color", "use_default_colors", "endwin"):
        monkeypatch.setattr(curses, name, lambda name=name: log.append(name))
    monkeypatch.setattr(curses, "curs_set", lambda v: log.append(("curs_set", v)))
    monkeypatch.setattr(curses, "has_colors", lambda: True)
    monkeypatch.setattr(curses, "init_pair", lambda pair, fg, bg: log.append(("init_pair", pair)))
    monkeypatch.setattr(curses, "color_pair", lambda pair: pair * 256)
    return screen, log


class TestTerminalFrontend:
    def test_setup(self, fake_curses):
        screen, log = fake_curses
        frontend = TerminalFrontend()
        assert ["noecho", "cbreak"] == log[:2]
        assert ("nodelay", True) in screen.calls
        assert frontend.attrs["white"] == 256
        assert "endwin" not in log

    def test_failed_setup_restores_terminal(self, fake_curses, monkeypatch):
        screen, log = fake_curses

        def no_default_colors():
            raise curses.error("use_default_colors() returned ERR")

        monkeypatch.setattr(curses, "use_default_colors", no_default_colors)
        with pytest.raises(curses.error):
            TerminalFrontend()
        assert log[-1] == "endwin"
        assert "nocbreak" in log and "echo" in log
        assert ("keypad", False) in screen.calls

    def test_bounds_leave_last_column(self, fake_curses):
        assert TerminalFrontend().bounds() == (78, 23)

    def test_poll_drains_all_keys(self, fake_curses):
        screen, _ = fake_curses
        frontend = TerminalFrontend()
        screen.keys = [ord("a"), ord("x"), ord("w")]
        screen.calls.clear()
        assert frontend.poll() == [Turn(Direction.WEST), Turn(Direction.NORTH)]
        assert screen.calls == ["getch"] * 4
        assert frontend.poll() == []

    def test_draw(self, fake_curses):
        screen, _ = fake_curses
        frontend = TerminalFrontend()
        screen.calls.clear()
        frontend.draw([Clear(), Draw((3, 4), "─", "white"), Draw((79, 23), "│", "white")], 0)
        assert screen.calls == ["erase", ("addstr", 4, 3, "─", frontend.attrs["white"]), "refresh"]

    def test_close_restores_terminal(self, fake_curses):
        screen, log = fake_curses
        frontend = TerminalFrontend()
        log.clear()
        frontend.close()
        assert log == ["nocbreak", "echo", ("curs_set", 1), "endwin"]
        assert ("keypad", False) in screen.calls
