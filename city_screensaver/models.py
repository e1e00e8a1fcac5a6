"""
Scene Data Models - Data classes for every animated entity.

Buildings are static apart from their windows; everything else is advanced
once per tick by the updater.
"""

import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import List

# Road band starts this many rows above the bottom edge
ROAD_OFFSET = 3


class WeatherMode(Enum):
    """Which particle layer is drawn over the city."""
    CLEAR = "clear"
    RAIN = "rain"
    SNOW = "snow"

    @property
    def display_name(self) -> str:
        """Get display name for the weather mode."""
        return {
            WeatherMode.CLEAR: "Clear",
            WeatherMode.RAIN: "Rain",
            WeatherMode.SNOW: "Snow",
        }.get(self, self.value.title())


def glyph_width(text: str) -> int:
    """Number of terminal cells a string occupies (wide chars count 2)."""
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


@dataclass(frozen=True)
class VehicleStyle:
    """One entry of the vehicle palette."""
    style: str
    color: int
    speed: float


@dataclass
class Window:
    on: bool = False


@dataclass
class Building:
    """
    A building standing on the road.

    windows[r][c] sits at relative offset (2r+1, 2c+1) from the top-left
    corner, so the border rows and columns never hold a window.
    """
    x: int
    width: int
    height: int
    color: int
    windows: List[List[Window]] = field(default_factory=list)
    has_antenna: bool = False
    antenna_char: str = ' '

    @property
    def window_count(self) -> int:
        return sum(len(row) for row in self.windows)


@dataclass
class Vehicle:
    x: float
    y: int
    style: str
    color: int
    speed: float

    @property
    def width(self) -> int:
        return glyph_width(self.style)


@dataclass
class Star:
    x: int
    y: int
    char: str


@dataclass
class RainDrop:
    x: int
    y: int
    speed: int


@dataclass
class Snowflake:
    x: int
    y: int
    speed_y: int
    speed_x: int  # Horizontal drift, -1/0/1
    char: str


@dataclass
class Cloud:
    x: float
    y: int
    shape: str
    speed: float


@dataclass
class SceneState:
    """All entity collections for one terminal-sized scene."""
    width: int
    height: int
    weather: WeatherMode = WeatherMode.RAIN
    buildings: List[Building] = field(default_factory=list)
    vehicles: List[Vehicle] = field(default_factory=list)
    stars: List[Star] = field(default_factory=list)
    raindrops: List[RainDrop] = field(default_factory=list)
    snowflakes: List[Snowflake] = field(default_factory=list)
    clouds: List[Cloud] = field(default_factory=list)

    @property
    def road_y(self) -> int:
        """Top row of the road band (also the lower vehicle lane)."""
        return self.height - ROAD_OFFSET

    def summary(self) -> str:
        """Short entity count summary for logging."""
        return (f"{len(self.buildings)} buildings, {len(self.vehicles)} vehicles, "
                f"{len(self.stars)} stars, {len(self.raindrops)} raindrops, "
                f"{len(self.snowflakes)} snowflakes, {len(self.clouds)} clouds")
