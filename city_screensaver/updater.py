"""
Scene Updater - Advances every entity collection by one tick.

Windows, stars, weather particles and clouds are updated in place.
Vehicles are the exception: update_vehicles() returns the next tick's list
so expired vehicles are filtered out rather than spliced.
"""

import logging
import random
from typing import List

from .models import Building, Cloud, RainDrop, SceneState, Snowflake, Star, Vehicle, glyph_width
from . import palettes

logger = logging.getLogger(__name__)


def update_windows(buildings: List[Building], rng: random.Random):
    """Randomly flip windows on/off."""
    for building in buildings:
        for row in building.windows:
            for window in row:
                if rng.random() < palettes.WINDOW_TOGGLE_CHANCE:
                    window.on = not window.on


def update_vehicles(vehicles: List[Vehicle], term_width: int) -> List[Vehicle]:
    """Move vehicles and drop those that have fully left the screen."""
    new_vehicles = []
    for vehicle in vehicles:
        vehicle.x += vehicle.speed * palettes.MOTION_SCALE

        if vehicle.speed > 0 and vehicle.x > term_width:
            continue
        if vehicle.speed < 0 and vehicle.x < -vehicle.width:
            continue
        new_vehicles.append(vehicle)

    if len(new_vehicles) != len(vehicles):
        logger.debug(f"{len(vehicles) - len(new_vehicles)} vehicle(s) left the scene")
    return new_vehicles


def update_stars(stars: List[Star], rng: random.Random):
    """Twinkle: occasionally swap a star's glyph."""
    for star in stars:
        if rng.random() < palettes.STAR_TWINKLE_CHANCE:
            star.char = rng.choice(palettes.STAR_CHARS)


def update_raindrops(raindrops: List[RainDrop], term_width: int, term_height: int,
                     rng: random.Random):
    for drop in raindrops:
        drop.y += drop.speed
        if drop.y >= term_height:
            drop.y = 0
            drop.x = rng.randrange(term_width)


def update_snowflakes(snowflakes: List[Snowflake], term_width: int, term_height: int,
                      rng: random.Random):
    """Fall like rain, then drift sideways wrapping at both edges."""
    for flake in snowflakes:
        flake.y += flake.speed_y
        if flake.y >= term_height:
            flake.y = 0
            flake.x = rng.randrange(term_width)

        flake.x = (flake.x + flake.speed_x) % term_width


def update_clouds(clouds: List[Cloud], term_width: int):
    """Drift clouds right; a cloud past the edge re-enters fully off-screen left."""
    for cloud in clouds:
        cloud.x += cloud.speed * palettes.MOTION_SCALE
        if cloud.x > term_width:
            cloud.x = -float(glyph_width(cloud.shape))


def advance_scene(state: SceneState, rng: random.Random):
    """Run one tick of every per-kind update."""
    update_windows(state.buildings, rng)
    state.vehicles = update_vehicles(state.vehicles, state.width)
    update_stars(state.stars, rng)
    update_raindrops(state.raindrops, state.width, state.height, rng)
    update_snowflakes(state.snowflakes, state.width, state.height, rng)
    update_clouds(state.clouds, state.width)
