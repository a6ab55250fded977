"""Command-line option resolution.

Flags keep the single-dash spelling the tool has always used (``-conditions``,
``-history=20130101``, ``-s KLNK``); the double-dash spelling is accepted too.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import re
import sys
from typing import Sequence

from wu import __version__
from wu.config import COPYRIGHT, Config, DEFAULT_STATION
from wu.errors import EarlyExit, UsageError
from wu.request.features import Feature, select_features

STATION_FORMS = (
    '"city, state-abbreviation", (US or Canadian) zipcode, '
    "3- or 4-letter airport code, or LAT,LONG"
)

LOOKUP_USAGE = f"Usage: wu -lookup [station] where station is a {STATION_FORMS}"

# "San Francisco, CA" -> groups ("San Francisco", "CA")
CITY_STATE = re.compile(r"([A-Za-z ]+), ([A-Za-z ]+)")

# Coordinates may start with "-", which argparse would read as an option
LAT_LONG = re.compile(r"-?\d+(\.\d+)?,\s*-?\d+(\.\d+)?")

STATION_FLAGS = ("-s", "--station")
LOOKUP_FLAGS = ("-lookup", "--lookup")


@dataclass(frozen=True)
class Request:
    station: str
    features: tuple[Feature, ...]
    debug: bool = False


def normalize_station(station: str) -> str:
    """Rewrite "City, State" as the API's "State/City" path form.

    Spaces inside that form become underscores. Codes, zipcodes and
    coordinates pass through unchanged.
    """
    # Anchored: a pair embedded in a longer string (street address, zip
    # suffix) is not a city/state query and passes through as typed.
    match = CITY_STATE.fullmatch(station)
    if match is None:
        return station
    city, state = match.groups()
    return f"{state}/{city}".replace(" ", "_")


def build_parser(default_station: str = DEFAULT_STATION) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wu",
        description="Weather Underground conditions, forecasts and history",
        add_help=False,
        allow_abbrev=False,
    )

    def flag(name: str, help: str) -> None:
        parser.add_argument(f"-{name}", f"--{name}", action="store_true", help=help)

    flag("conditions", "Reports the current weather conditions")
    flag("alerts", "Reports any active weather alerts")
    flag("lookup", "Lookup the codes for the weather stations in a particular area")
    flag("astro", "Reports sunrise, sunset, and lunar phase")
    flag("forecast", "Reports the current (3-day) forecast")
    flag("forecast10", "Reports the current (10-day) forecast")
    flag("almanac", "Reports average high, low and record temperatures")
    flag("yesterday", "Reports yesterday's weather data")
    parser.add_argument(
        "-history", "--history",
        default="",
        metavar="YYYYMMDD",
        help='Reports historical data for a particular day --history="YYYYMMDD"',
    )
    parser.add_argument(
        "-planner", "--planner",
        default="",
        metavar="MMDDMMDD",
        help='Reports historical data for a particular date range (30-day max) --planner="MMDDMMDD"',
    )
    flag("tides", "Reports tidal data (if available)")
    flag("help", "Print this message")
    flag("version", "Print the version number")
    flag("all", "Show all weather data")
    flag("debug", "Log the request to standard error")
    parser.add_argument(
        "-s", "--station",
        dest="station",
        default=default_station,
        help=f"Weather station: {STATION_FORMS} (default: {default_station})".replace("%", "%%"),
    )
    parser.add_argument("query", nargs="*", help=argparse.SUPPRESS)
    return parser


def version_text() -> str:
    return f"wu {__version__}\n{COPYRIGHT}"


def resolve_options(argv: Sequence[str] | None, config: Config) -> Request:
    """Parse the command line into a Request.

    Raises UsageError for a malformed -lookup (exit 0) or a history/planner
    conflict (exit 1), and EarlyExit for -help and -version.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser(config.station or DEFAULT_STATION)
    args = parser.parse_args(_protect_station_values(argv))

    station = args.station
    if args.lookup:
        # Only "wu -lookup STATION" is valid
        if len(argv) != 2 or len(args.query) != 1:
            raise UsageError(LOOKUP_USAGE, exit_code=0)
        station = args.query[0]
    elif args.query:
        parser.error(f"unrecognized arguments: {' '.join(args.query)}")

    if args.help:
        raise EarlyExit(parser.format_help().rstrip())
    if args.version:
        raise EarlyExit(version_text())

    features = select_features(
        alerts=args.alerts,
        almanac=args.almanac,
        astro=args.astro,
        conditions=args.conditions,
        forecast=args.forecast,
        forecast10=args.forecast10,
        history=args.history,
        yesterday=args.yesterday,
        planner=args.planner,
        tides=args.tides,
        lookup=args.lookup,
        show_all=args.all,
    )
    return Request(station=normalize_station(station), features=features, debug=args.debug)


def _protect_station_values(argv: list[str]) -> list[str]:
    """Keep station values that start with "-" from being read as options.

    ``-s -33.87,151.21`` becomes ``-s=-33.87,151.21``; a coordinate given to
    ``-lookup`` is placed after ``--``.
    """
    out: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg in STATION_FLAGS:
            value = next(args, None)
            if value is None:
                out.append(arg)
            elif value.startswith("-"):
                out.append(f"{arg}={value}")
            else:
                out.extend([arg, value])
        else:
            out.append(arg)

    if len(argv) == 2 and argv[0] in LOOKUP_FLAGS and LAT_LONG.fullmatch(argv[1]):
        return [argv[0], "--", argv[1]]
    return out
