"""
Command Line Entry Point - city-screensaver

Usage:
    city-screensaver
    city-screensaver --snow --no-rain
    city-screensaver --stars 120 --interval 33
    city-screensaver --debug --log-file /tmp/city.log
"""

import argparse
import locale
import logging
import sys
from typing import List, Optional

from . import __version__
from .app import Screensaver
from .config import (
    DEFAULT_CLOUDS,
    DEFAULT_INTERVAL_MS,
    DEFAULT_RAINDROPS,
    DEFAULT_SNOWFLAKES,
    DEFAULT_STARS,
    ScreensaverConfig,
)
from .errors import ConfigError, TerminalSetupError
from .terminal import Terminal

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0 (got {number})")
    return number


def _positive_int(value: str) -> int:
    number = _non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError("must be > 0")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="city-screensaver",
        description="City Screensaver - animated night skyline for the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    city-screensaver                      # Rain, 50 stars, 50ms tick
    city-screensaver --snow --no-rain     # Snowy night
    city-screensaver --interval 100       # Slower animation
    city-screensaver --debug --log-file city.log

Press any key to exit.
        """
    )
    parser.add_argument("--stars", type=_non_negative_int, default=DEFAULT_STARS,
                        help=f"Number of stars to display (default: {DEFAULT_STARS})")
    parser.add_argument("--raindrops", type=_non_negative_int, default=DEFAULT_RAINDROPS,
                        help=f"Number of raindrops to display (default: {DEFAULT_RAINDROPS})")
    parser.add_argument("--snowflakes", type=_non_negative_int, default=DEFAULT_SNOWFLAKES,
                        help=f"Number of snowflakes to display (default: {DEFAULT_SNOWFLAKES})")
    parser.add_argument("--clouds", type=_non_negative_int, default=DEFAULT_CLOUDS,
                        help=f"Number of clouds to display (default: {DEFAULT_CLOUDS})")
    parser.add_argument("--interval", type=_positive_int, default=DEFAULT_INTERVAL_MS,
                        help=f"Update interval in milliseconds (default: {DEFAULT_INTERVAL_MS})")
    parser.add_argument("--rain", action=argparse.BooleanOptionalAction, default=True,
                        help="Enable rain effect (default: on)")
    parser.add_argument("--snow", action=argparse.BooleanOptionalAction, default=False,
                        help="Enable snow effect; drawn instead of rain (default: off)")
    parser.add_argument("--log-file", type=str,
                        help="Write log records to this file instead of stderr")
    parser.add_argument("--debug", action="store_true",
                        help="Log debug output (frame rate, scene statistics)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(log_file: Optional[str] = None, debug: bool = False):
    """Configure root logging; stderr only gets warnings while curses owns the screen."""
    if log_file:
        level = logging.DEBUG if debug else logging.INFO
        logging.basicConfig(level=level, format=LOG_FORMAT, filename=log_file)
    else:
        level = logging.DEBUG if debug else logging.WARNING
        logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for the city-screensaver command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ScreensaverConfig.from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    setup_logging(args.log_file, args.debug)

    # Needed for curses to draw the box/emoji glyphs
    locale.setlocale(locale.LC_ALL, "")

    screensaver = Screensaver(config)
    try:
        with Terminal() as screen:
            screensaver.run(screen)
    except TerminalSetupError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
