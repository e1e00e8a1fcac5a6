"""
City Screensaver - Animated terminal skyline

A curses screensaver featuring a procedurally generated city: buildings
with flickering windows, traffic, a starfield and moon, drifting clouds,
and rain or snow. Any key exits.

Basic Usage:
    from city_screensaver import run
    run()

Custom Scene:
    from city_screensaver import Screensaver, ScreensaverConfig, Terminal

    config = ScreensaverConfig(stars=120, snow=True, rain=False)
    with Terminal() as screen:
        Screensaver(config).run(screen)
"""

__version__ = "1.0.0"

# Data models
from .models import (
    WeatherMode,
    Window,
    Building,
    Vehicle,
    Star,
    RainDrop,
    Snowflake,
    Cloud,
    SceneState,
)

# Core classes
from .config import ScreensaverConfig
from .colors import Colors
from .renderer import Renderer
from .app import Screensaver
from .terminal import Terminal
from .errors import (
    ScreensaverError,
    ConfigError,
    TerminalSetupError,
    TerminalRestoreError,
)


def run(config=None):
    """Run the screensaver in the current terminal until a key is pressed."""
    screensaver = Screensaver(config)
    with Terminal() as screen:
        screensaver.run(screen)


__all__ = [
    # Version
    "__version__",
    # Core
    "run",
    "Screensaver",
    "ScreensaverConfig",
    "Terminal",
    "Renderer",
    # Models
    "WeatherMode",
    "Window",
    "Building",
    "Vehicle",
    "Star",
    "RainDrop",
    "Snowflake",
    "Cloud",
    "SceneState",
    # Visual
    "Colors",
    # Errors
    "ScreensaverError",
    "ConfigError",
    "TerminalSetupError",
    "TerminalRestoreError",
]
