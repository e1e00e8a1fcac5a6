"""
Scene Generator - Procedural creation of the initial entity collections.

Every function takes an explicit random.Random so a seeded generator
reproduces the same city.
"""

import logging
import random
from typing import List

from .config import (
    DEFAULT_CLOUDS,
    DEFAULT_RAINDROPS,
    DEFAULT_SNOWFLAKES,
    DEFAULT_STARS,
    ScreensaverConfig,
)
from .models import (
    ROAD_OFFSET,
    Building,
    Cloud,
    RainDrop,
    SceneState,
    Snowflake,
    Star,
    Vehicle,
    Window,
)
from . import palettes

logger = logging.getLogger(__name__)


def _randrange(rng: random.Random, start: int, stop: int) -> int:
    """rng.randrange that collapses an empty range to its start."""
    if stop <= start:
        return start
    return rng.randrange(start, stop)


def _create_windows(width: int, height: int, rng: random.Random) -> List[List[Window]]:
    """Window grid at odd offsets inside the building border."""
    windows = []
    for wy in range(1, height - 1):
        if wy % 2 == 0:
            continue
        row = [Window(on=rng.random() < palettes.WINDOW_LIT_CHANCE)
               for wx in range(1, width - 1) if wx % 2 != 0]
        windows.append(row)
    return windows


def create_buildings(term_width: int, term_height: int, rng: random.Random) -> List[Building]:
    """Tile buildings left to right until the skyline reaches the right edge."""
    buildings = []
    x = 0
    # Short terminals still get the minimum building height
    max_height = max(palettes.BUILDING_MIN_HEIGHT + 1,
                     term_height - palettes.BUILDING_HEIGHT_MARGIN)

    while x < term_width:
        width = rng.randrange(*palettes.BUILDING_WIDTH_RANGE)
        height = rng.randrange(palettes.BUILDING_MIN_HEIGHT, max_height)
        color = rng.choice(palettes.BUILDING_COLORS)
        windows = _create_windows(width, height, rng)

        has_antenna = rng.random() < palettes.ANTENNA_CHANCE
        antenna_char = rng.choice(palettes.ANTENNA_CHARS) if has_antenna else ' '

        buildings.append(Building(
            x=x,
            width=width,
            height=height,
            color=color,
            windows=windows,
            has_antenna=has_antenna,
            antenna_char=antenna_char,
        ))
        x += width + rng.randrange(*palettes.BUILDING_GAP_RANGE)
    return buildings


def create_vehicles() -> List[Vehicle]:
    """Vehicles only ever enter the scene through spawn_vehicle()."""
    return []


def spawn_vehicle(term_width: int, term_height: int, rng: random.Random) -> Vehicle:
    """New vehicle on one of the two lanes, entering from its own side."""
    road_y = term_height - ROAD_OFFSET
    style = rng.choice(palettes.VEHICLE_STYLES)
    y = road_y if rng.random() < 0.5 else road_y - 1
    x = 0.0 if style.speed > 0 else float(term_width)
    return Vehicle(x=x, y=y, style=style.style, color=style.color, speed=style.speed)


def create_stars(term_width: int, term_height: int, rng: random.Random,
                 count: int = DEFAULT_STARS) -> List[Star]:
    """Stars scattered over the upper half of the screen."""
    return [
        Star(
            x=_randrange(rng, 0, term_width),
            y=_randrange(rng, 0, term_height // 2),
            char=rng.choice(palettes.STAR_CHARS),
        )
        for _ in range(count)
    ]


def create_raindrops(term_width: int, term_height: int, rng: random.Random,
                     count: int = DEFAULT_RAINDROPS) -> List[RainDrop]:
    return [
        RainDrop(
            x=_randrange(rng, 0, term_width),
            y=_randrange(rng, 0, term_height),
            speed=rng.randrange(*palettes.RAINDROP_SPEED_RANGE),
        )
        for _ in range(count)
    ]


def create_snowflakes(term_width: int, term_height: int, rng: random.Random,
                      count: int = DEFAULT_SNOWFLAKES) -> List[Snowflake]:
    return [
        Snowflake(
            x=_randrange(rng, 0, term_width),
            y=_randrange(rng, 0, term_height),
            speed_y=rng.randrange(*palettes.SNOWFLAKE_SPEED_RANGE),
            speed_x=rng.randrange(*palettes.SNOWFLAKE_DRIFT_RANGE),
            char=rng.choice(palettes.SNOWFLAKE_CHARS),
        )
        for _ in range(count)
    ]


def create_clouds(term_width: int, term_height: int, rng: random.Random,
                  count: int = DEFAULT_CLOUDS) -> List[Cloud]:
    """Clouds in the upper quarter of the screen."""
    return [
        Cloud(
            x=float(_randrange(rng, 0, term_width)),
            y=_randrange(rng, 0, term_height // 4),
            shape=rng.choice(palettes.CLOUD_SHAPES),
            speed=rng.uniform(*palettes.CLOUD_SPEED_RANGE),
        )
        for _ in range(count)
    ]


def generate_scene(config: ScreensaverConfig, term_width: int, term_height: int,
                   rng: random.Random) -> SceneState:
    """Build the full starting scene for a terminal of the given size."""
    state = SceneState(
        width=term_width,
        height=term_height,
        weather=config.weather,
        buildings=create_buildings(term_width, term_height, rng),
        vehicles=create_vehicles(),
        stars=create_stars(term_width, term_height, rng, config.stars),
        raindrops=(create_raindrops(term_width, term_height, rng, config.raindrops)
                   if config.rain else []),
        snowflakes=(create_snowflakes(term_width, term_height, rng, config.snowflakes)
                    if config.snow else []),
        clouds=create_clouds(term_width, term_height, rng, config.clouds),
    )
    logger.debug(f"Generated {term_width}x{term_height} scene: {state.summary()}")
    return state
