"""
Screensaver Driver - The poll / update / render loop.

One tick:
    1. Wait up to one interval for a key press (any key stops the run)
    2. Maybe spawn a vehicle
    3. Advance every entity collection
    4. Draw the frame
    5. Sleep off whatever is left of the interval
"""

import logging
import random
import time
from typing import Callable, Optional

# Handle curses import for Windows compatibility
try:
    import curses
    CURSES_AVAILABLE = True
except ImportError:
    curses = None
    CURSES_AVAILABLE = False

from .config import ScreensaverConfig
from .generator import generate_scene, spawn_vehicle
from .models import SceneState
from .renderer import Renderer
from .stats import FrameStats
from .updater import advance_scene
from . import palettes

logger = logging.getLogger(__name__)

# getch() result when the timeout expires without input
NO_KEY = -1


class Screensaver:
    """
    Animated city scene driven by a curses window.

    The rng, clock, sleep function, renderer and frame stats can all be
    injected, which is how the tests run ticks without a terminal.
    """

    def __init__(self, config: Optional[ScreensaverConfig] = None,
                 rng: Optional[random.Random] = None,
                 renderer: Optional[Renderer] = None,
                 stats: Optional[FrameStats] = None,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        self.config = (config or ScreensaverConfig()).validate()
        self.rng = rng or random.Random()
        self.renderer = renderer or Renderer()
        self.stats = stats or FrameStats(clock=clock)
        self._clock = clock
        self._sleep = sleep
        self.state: Optional[SceneState] = None
        self.running = False

    def start(self, screen) -> SceneState:
        """Generate the scene for the window's current size."""
        height, width = screen.getmaxyx()
        self.state = generate_scene(self.config, width, height, self.rng)
        screen.timeout(self.config.interval_ms)
        self.running = True
        logger.info(f"Screensaver started ({width}x{height}, "
                    f"{self.config.weather.display_name}, {self.config.interval_ms}ms tick)")
        return self.state

    def _key_pressed(self, screen) -> bool:
        """Block for up to one interval waiting on input."""
        key = screen.getch()
        if key == NO_KEY:
            return False
        # Resizes arrive as a pseudo-key; they are not a stop request
        if CURSES_AVAILABLE and key == curses.KEY_RESIZE:
            return False
        return True

    def tick(self, screen) -> bool:
        """Run one frame. Returns False once the screensaver should stop."""
        frame_start = self._clock()

        if self._key_pressed(screen):
            self.running = False
            return False

        state = self.state
        if self.rng.random() < palettes.VEHICLE_SPAWN_CHANCE:
            state.vehicles.append(spawn_vehicle(state.width, state.height, self.rng))

        advance_scene(state, self.rng)
        self.renderer.draw(screen, state)
        self.stats.record_frame()

        frame_time = self._clock() - frame_start
        remaining = self.config.interval - frame_time
        if remaining > 0:
            self._sleep(remaining)
        return True

    def run(self, screen):
        """Loop until a key press (or Ctrl-C)."""
        if self.state is None:
            self.start(screen)
        self.running = True
        try:
            while self.running:
                self.tick(screen)
        except KeyboardInterrupt:
            self.running = False
        logger.info(f"Screensaver stopped after {self.stats.total_frames} frames")
