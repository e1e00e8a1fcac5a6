"""
Shared fakes for the city screensaver tests.

Nothing here needs a real terminal: FakeScreen records what the renderer
and driver loop ask of a curses window.
"""

import os
import random
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from city_screensaver.models import glyph_width


class FakeScreen:
    """Stand-in for a curses window."""

    def __init__(self, rows=24, cols=80, keys=()):
        self.rows = rows
        self.cols = cols
        self.keys = list(keys)
        self.calls = []
        self.writes = []  # (y, x, text, attr) since the last erase()
        self.timeout_ms = None
        self._attr = 0

    def getmaxyx(self):
        return (self.rows, self.cols)

    def timeout(self, ms):
        self.timeout_ms = ms

    def getch(self):
        self.calls.append('getch')
        if not self.keys:
            return -1
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key

    def keypad(self, flag):
        self.calls.append(('keypad', flag))

    def erase(self):
        self.calls.append('erase')
        self.writes = []

    def refresh(self):
        self.calls.append('refresh')

    def attron(self, attr):
        self._attr = attr

    def attroff(self, attr):
        self._attr = 0

    def addstr(self, y, x, text):
        # Same conditions under which curses itself would raise
        assert 0 <= y < self.rows, f"row {y} off screen"
        assert 0 <= x and x + glyph_width(text) <= self.cols, f"{text!r} at col {x} overflows"
        self.calls.append('addstr')
        self.writes.append((y, x, text, self._attr))

    def texts_at(self, y):
        return [(x, text) for (wy, x, text, _) in self.writes if wy == y]


class FixedRandom(random.Random):
    """Random whose random() always returns the same value; choices stay seeded."""

    def __init__(self, value, seed=0):
        self._value = value
        super().__init__(seed)

    def random(self):
        return self._value

    # Keeps randrange/choice on the seeded bit generator
    def getrandbits(self, k):
        return super().getrandbits(k)


class FakeClock:
    """Monotonic clock advancing a fixed step on every read."""

    def __init__(self, step=0.0, start=100.0):
        self.now = start
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


class FakeMemoryInfo:
    def __init__(self, rss):
        self.rss = rss


class FakeProcess:
    """Subset of psutil.Process used by FrameStats."""

    def __init__(self, cpu=12.5, rss=32 * 1024 * 1024):
        self.cpu = cpu
        self.rss = rss
        self.cpu_calls = 0

    def cpu_percent(self, interval=None):
        self.cpu_calls += 1
        return self.cpu

    def memory_info(self):
        return FakeMemoryInfo(self.rss)


@pytest.fixture
def make_screen():
    return FakeScreen


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fake_clock():
    return FakeClock


@pytest.fixture
def fake_process():
    return FakeProcess()
