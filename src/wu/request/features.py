"""Feature selection.

A feature is one kind of data the API can return. History and planner carry a
date payload that becomes part of the URL path segment (``history_20130101``,
``planner_07010731``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wu.errors import UsageError


class FeatureKind(str, Enum):
    ALMANAC = "almanac"
    ASTRONOMY = "astronomy"
    ALERTS = "alerts"
    CONDITIONS = "conditions"
    FORECAST = "forecast"
    FORECAST10DAY = "forecast10day"
    YESTERDAY = "yesterday"
    HISTORY = "history"
    PLANNER = "planner"
    TIDE = "tide"
    GEOLOOKUP = "geolookup"


DATED_KINDS = frozenset({FeatureKind.HISTORY, FeatureKind.PLANNER})

# Order used by -all
ALL_KINDS = (
    FeatureKind.CONDITIONS,
    FeatureKind.FORECAST,
    FeatureKind.FORECAST10DAY,
    FeatureKind.ALERTS,
    FeatureKind.ALMANAC,
    FeatureKind.HISTORY,
    FeatureKind.PLANNER,
    FeatureKind.YESTERDAY,
    FeatureKind.ASTRONOMY,
    FeatureKind.TIDE,
    FeatureKind.GEOLOOKUP,
)

CONFLICT_MESSAGE = (
    "Weather Underground does not support making a history\n"
    "request and a planner request at the same time."
)


@dataclass(frozen=True)
class Feature:
    kind: FeatureKind
    date: str | None = None

    @property
    def token(self) -> str:
        """API path segment for this feature."""
        if self.kind in DATED_KINDS:
            return f"{self.kind.value}_{self.date or ''}"
        return self.kind.value

    @staticmethod
    def from_token(token: str) -> "Feature | None":
        """Parse a path segment; unknown base names give None."""
        base, sep, date = token.partition("_")
        try:
            kind = FeatureKind(base)
        except ValueError:
            return None
        if kind in DATED_KINDS:
            return Feature(kind, date if sep else None)
        return Feature(kind)

    def __str__(self) -> str:
        return self.token


def select_features(
    *,
    alerts: bool = False,
    almanac: bool = False,
    astro: bool = False,
    conditions: bool = False,
    forecast: bool = False,
    forecast10: bool = False,
    history: str = "",
    yesterday: bool = False,
    planner: str = "",
    tides: bool = False,
    lookup: bool = False,
    show_all: bool = False,
) -> tuple[Feature, ...]:
    """Turn the feature flags into the ordered request list.

    Raises UsageError when both a history date and a planner date are given,
    since the API cannot answer both in one request.
    """
    if history and planner:
        raise UsageError(CONFLICT_MESSAGE, exit_code=1)

    if show_all:
        return tuple(_feature(kind, history, planner) for kind in ALL_KINDS)

    selected = [
        (alerts, FeatureKind.ALERTS),
        (almanac, FeatureKind.ALMANAC),
        (astro, FeatureKind.ASTRONOMY),
        (conditions, FeatureKind.CONDITIONS),
        (forecast, FeatureKind.FORECAST),
        (forecast10, FeatureKind.FORECAST10DAY),
        (bool(history), FeatureKind.HISTORY),
        (yesterday, FeatureKind.YESTERDAY),
        (bool(planner), FeatureKind.PLANNER),
        (tides, FeatureKind.TIDE),
        (lookup, FeatureKind.GEOLOOKUP),
    ]
    features = tuple(_feature(kind, history, planner) for wanted, kind in selected if wanted)
    return features or (Feature(FeatureKind.CONDITIONS),)


def _feature(kind: FeatureKind, history: str, planner: str) -> Feature:
    if kind is FeatureKind.HISTORY:
        return Feature(kind, history)
    if kind is FeatureKind.PLANNER:
        return Feature(kind, planner)
    return Feature(kind)
