"""
Tests for configuration parsing and the command line entry point.
"""

import argparse
import curses
import locale

import pytest

from city_screensaver import __version__, cli
from city_screensaver.config import ScreensaverConfig
from city_screensaver.errors import ConfigError, TerminalSetupError
from city_screensaver.models import WeatherMode


class TestParser:
    def test_defaults(self):
        args = cli.build_parser().parse_args([])

        assert args.stars == 50
        assert args.raindrops == 100
        assert args.snowflakes == 50
        assert args.clouds == 5
        assert args.interval == 50
        assert args.rain is True
        assert args.snow is False
        assert args.log_file is None
        assert args.debug is False

    def test_weather_toggles(self):
        args = cli.build_parser().parse_args(["--no-rain", "--snow"])
        assert (args.rain, args.snow) == (False, True)

    def test_counts(self):
        args = cli.build_parser().parse_args(
            ["--stars", "0", "--clouds", "12", "--interval", "33"])
        assert (args.stars, args.clouds, args.interval) == (0, 12, 33)

    @pytest.mark.parametrize("argv", [
        ["--stars", "-1"],
        ["--raindrops", "many"],
        ["--interval", "0"],
        ["--bogus"],
    ])
    def test_rejects_bad_values(self, argv, capsys):
        with pytest.raises(SystemExit) as excinfo:
            cli.build_parser().parse_args(argv)
        assert excinfo.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            cli.build_parser().parse_args(["--version"])
        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestConfig:
    def test_defaults_valid(self):
        config = ScreensaverConfig().validate()
        assert config.interval == pytest.approx(0.05)
        assert config.weather == WeatherMode.RAIN

    @pytest.mark.parametrize("rain,snow,expected", [
        (True, False, WeatherMode.RAIN),
        (False, True, WeatherMode.SNOW),
        (True, True, WeatherMode.SNOW),
        (False, False, WeatherMode.CLEAR),
    ])
    def test_weather(self, rain, snow, expected):
        assert ScreensaverConfig(rain=rain, snow=snow).weather == expected

    @pytest.mark.parametrize("field,value", [
        ("stars", -1),
        ("raindrops", -5),
        ("snowflakes", -1),
        ("clouds", -2),
        ("interval_ms", 0),
        ("interval_ms", -10),
    ])
    def test_validate_rejects(self, field, value):
        with pytest.raises(ConfigError, match=field.split('_')[0]):
            ScreensaverConfig(**{field: value}).validate()

    def test_from_args(self):
        args = argparse.Namespace(stars=1, raindrops=2, snowflakes=3, clouds=4,
                                  interval=75, rain=False, snow=True)
        config = ScreensaverConfig.from_args(args)
        assert config == ScreensaverConfig(1, 2, 3, 4, 75, rain=False, snow=True)


@pytest.fixture
def quiet_main(monkeypatch):
    """Keep main() away from the real locale and logging setup."""
    monkeypatch.setattr(locale, "setlocale", lambda *args: "C")
    monkeypatch.setattr(cli, "setup_logging", lambda *args: None)


class TestMain:
    def test_setup_failure_exits_1(self, monkeypatch, capsys, quiet_main):
        class FailingTerminal:
            def __enter__(self):
                raise TerminalSetupError("enable raw mode", OSError("not a tty"))

            def __exit__(self, *exc):
                return False

        monkeypatch.setattr(cli, "Terminal", FailingTerminal)

        assert cli.main([]) == 1
        assert capsys.readouterr().err.strip() == "Error: Failed to enable raw mode: not a tty"

    def test_runs_until_key(self, monkeypatch, make_screen, quiet_main):
        monkeypatch.setattr(curses, "color_pair", lambda pair: pair)
        screen = make_screen(keys=[-1, ord('x')])
        exits = []

        class FakeTerminal:
            def __enter__(self):
                return screen

            def __exit__(self, *exc):
                exits.append(exc)
                return False

        monkeypatch.setattr(cli, "Terminal", FakeTerminal)

        assert cli.main(["--interval", "1", "--snow"]) == 0
        assert screen.timeout_ms == 1
        assert screen.calls.count('getch') == 2
        assert exits == [(None, None, None)]

    def test_bad_value_exits_2(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--clouds", "-3"])
        assert excinfo.value.code == 2
        assert "--clouds" in capsys.readouterr().err
