"""
Scene Renderer - Paints a SceneState onto a curses window.

Layers are drawn back to front: clouds, stars, moon, buildings, road,
weather, vehicles. Every write is clipped to the window so off-screen
entities (clouds re-entering from the left, vehicles leaving) never reach
curses; any curses.error that still happens is a real failure and
propagates to the driver loop.
"""

from typing import Callable, Optional

# Handle curses import for Windows compatibility
try:
    import curses
    CURSES_AVAILABLE = True
except ImportError:
    curses = None
    CURSES_AVAILABLE = False

from .colors import Colors
from .models import SceneState, WeatherMode, glyph_width
from . import palettes


def clip_cells(text: str, skip: int, max_cells: int):
    """
    Cut a string to a window of terminal cells.

    Drops `skip` leading cells, then keeps at most `max_cells` cells.
    Returns (text, offset) where offset is how far right of the requested
    start the kept text begins (1 when a wide char straddled the cut).
    """
    skipped = 0
    start = 0
    while start < len(text) and skipped < skip:
        skipped += glyph_width(text[start])
        start += 1
    offset = skipped - skip if skip > 0 else 0

    kept = []
    used = offset
    for char in text[start:]:
        w = glyph_width(char)
        if used + w > max_cells:
            break
        kept.append(char)
        used += w
    return ''.join(kept), offset


class Renderer:
    """Draws the city scene. Stateless apart from the current clip bounds."""

    def __init__(self, color_attr: Optional[Callable[[int], int]] = None):
        # curses.color_pair needs an initialised screen; tests pass their own
        if color_attr is None and CURSES_AVAILABLE:
            color_attr = curses.color_pair
        self._color_attr = color_attr or (lambda pair: 0)
        self._rows = 0
        self._cols = 0

    def draw(self, screen, state: SceneState):
        """Clear the window and paint the whole scene."""
        self._rows, self._cols = screen.getmaxyx()
        screen.erase()

        self._draw_clouds(screen, state)
        self._draw_stars(screen, state)
        self._draw_moon(screen, state)
        self._draw_buildings(screen, state)
        self._draw_road(screen, state)
        self._draw_weather(screen, state)
        self._draw_vehicles(screen, state)

        screen.refresh()

    def _put(self, screen, y: int, x: int, text: str, color: int):
        """Write text at an absolute position, clipped to the window."""
        if y < 0 or y >= self._rows or not text:
            return
        skip = -x if x < 0 else 0
        x = max(x, 0)
        # The last column is never written: curses raises after filling it
        max_cells = self._cols - x - 1
        if max_cells <= 0:
            return
        text, offset = clip_cells(text, skip, max_cells)
        if not text:
            return

        attr = self._color_attr(color)
        screen.attron(attr)
        screen.addstr(y, x + offset, text)
        screen.attroff(attr)

    def _draw_clouds(self, screen, state: SceneState):
        for cloud in state.clouds:
            self._put(screen, cloud.y, int(cloud.x), cloud.shape, Colors.CLOUD)

    def _draw_stars(self, screen, state: SceneState):
        for star in state.stars:
            self._put(screen, star.y, star.x, star.char, Colors.STAR)

    def _draw_moon(self, screen, state: SceneState):
        moon_x = state.width - palettes.MOON_OFFSET
        for row_idx, row in enumerate(palettes.MOON_ART):
            self._put(screen, palettes.MOON_TOP + row_idx, moon_x, row, Colors.MOON)

    def _draw_buildings(self, screen, state: SceneState):
        for building in state.buildings:
            # Bottom row of every building sits directly on the road
            top = state.road_y - building.height

            body = palettes.BUILDING_CHAR * building.width
            for row in range(building.height):
                self._put(screen, top + row, building.x, body, building.color)

            if building.has_antenna:
                self._put(screen, top - 1, building.x + building.width // 2,
                          building.antenna_char, building.color)

            for wy, window_row in enumerate(building.windows):
                for wx, window in enumerate(window_row):
                    color = Colors.WINDOW_ON if window.on else Colors.WINDOW_OFF
                    self._put(screen, top + wy * 2 + 1, building.x + wx * 2 + 1,
                              palettes.WINDOW_CHAR, color)

    def _draw_road(self, screen, state: SceneState):
        band = palettes.ROAD_CHAR * state.width
        self._put(screen, state.road_y, 0, band, Colors.ROAD)
        self._put(screen, state.road_y + 1, 0, band, Colors.ROAD)

    def _draw_weather(self, screen, state: SceneState):
        """Only one weather layer is ever visible."""
        if state.weather == WeatherMode.SNOW:
            for flake in state.snowflakes:
                self._put(screen, flake.y, flake.x, flake.char, Colors.SNOW)
        elif state.weather == WeatherMode.RAIN:
            for drop in state.raindrops:
                self._put(screen, drop.y, drop.x, palettes.RAIN_CHAR, Colors.RAIN)

    def _draw_vehicles(self, screen, state: SceneState):
        for vehicle in state.vehicles:
            self._put(screen, vehicle.y, int(vehicle.x), vehicle.style, vehicle.color)
