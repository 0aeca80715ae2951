from __future__ import annotations

import pytest


class ScriptedRandom:
    """Replays fixed values and records every `stop` it was asked for."""

    def __init__(self, values):
        self.values = list(values)
        self.stops: list[int] = []

    def randrange(self, stop: int) -> int:
        self.stops.append(stop)
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


class NoSpawn:
    """Random source whose spawn trial always fails."""

    def randrange(self, stop: int) -> int:
        return stop - 1


class FakeFrontend:
    def __init__(self, bounds, script=()):
        self._bounds = bounds
        self.script = list(script)
        self.frames: list[list] = []
        self.scores: list[int] = []
        self.waits: list[float] = []
        self.closed = False

    def bounds(self):
        return self._bounds

    def poll(self):
        return self.script.pop(0) if self.script else []

    def wait(self, seconds):
        self.waits.append(seconds)

    def draw(self, commands, score):
        self.frames.append(list(commands))
        self.scores.append(score)

    def close(self):
        self.closed = True


@pytest.fixture
def no_spawn():
    return NoSpawn()


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def fake_frontend():
    return FakeFrontend
