"""
Run Configuration - Entity counts, tick interval and weather toggles.

There is no config file; values come from the command line or from code.
"""

from dataclasses import dataclass

from .errors import ConfigError
from .models import WeatherMode

DEFAULT_STARS = 50
DEFAULT_RAINDROPS = 100
DEFAULT_SNOWFLAKES = 50
DEFAULT_CLOUDS = 5
DEFAULT_INTERVAL_MS = 50


@dataclass
class ScreensaverConfig:
    """Settings for one screensaver run."""
    stars: int = DEFAULT_STARS
    raindrops: int = DEFAULT_RAINDROPS
    snowflakes: int = DEFAULT_SNOWFLAKES
    clouds: int = DEFAULT_CLOUDS
    interval_ms: int = DEFAULT_INTERVAL_MS
    rain: bool = True
    snow: bool = False

    @property
    def interval(self) -> float:
        """Tick interval in seconds."""
        return self.interval_ms / 1000.0

    @property
    def weather(self) -> WeatherMode:
        """Active weather layer. Snow wins when both effects are enabled."""
        if self.snow:
            return WeatherMode.SNOW
        if self.rain:
            return WeatherMode.RAIN
        return WeatherMode.CLEAR

    def validate(self) -> 'ScreensaverConfig':
        """Check value ranges, raising ConfigError on the first bad one."""
        for name in ('stars', 'raindrops', 'snowflakes', 'clouds'):
            value = getattr(self, name)
            if value < 0:
                raise ConfigError(f"{name} must be >= 0 (got {value})")
        if self.interval_ms <= 0:
            raise ConfigError(f"interval must be > 0 ms (got {self.interval_ms})")
        return self

    @classmethod
    def from_args(cls, args) -> 'ScreensaverConfig':
        """Build a validated config from an argparse namespace."""
        return cls(
            stars=args.stars,
            raindrops=args.raindrops,
            snowflakes=args.snowflakes,
            clouds=args.clouds,
            interval_ms=args.interval,
            rain=args.rain,
            snow=args.snow,
        ).validate()
