"""Route each requested feature to its formatter."""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, TextIO

from wu.api.schemas import CompositeObservation
from wu.report.alerts import format_alerts
from wu.report.almanac import format_almanac
from wu.report.astronomy import format_astronomy
from wu.report.conditions import format_conditions
from wu.report.forecast import format_forecast, format_forecast10
from wu.report.history import format_history
from wu.report.lookup import format_lookup
from wu.report.planner import format_planner
from wu.report.tides import format_tides
from wu.request.features import Feature, FeatureKind

logger = logging.getLogger(__name__)

Renderer = Callable[[CompositeObservation, str], str]

# Each formatter only sees its own part of the document.
RENDERERS: dict[FeatureKind, Renderer] = {
    FeatureKind.ALMANAC: lambda obs, station: format_almanac(obs.almanac, station),
    FeatureKind.ASTRONOMY: lambda obs, station: format_astronomy(obs.moon_phase, obs.sun_phase, station),
    FeatureKind.ALERTS: lambda obs, station: format_alerts(obs.alerts, station),
    FeatureKind.CONDITIONS: lambda obs, station: format_conditions(obs.current_observation),
    FeatureKind.FORECAST: lambda obs, station: format_forecast(obs.forecast, station),
    FeatureKind.FORECAST10DAY: lambda obs, station: format_forecast10(obs.forecast, station),
    FeatureKind.YESTERDAY: lambda obs, station: format_history(obs.history, station),
    FeatureKind.HISTORY: lambda obs, station: format_history(obs.history, station),
    FeatureKind.PLANNER: lambda obs, station: format_planner(obs.trip, station),
    FeatureKind.TIDE: lambda obs, station: format_tides(obs.tide, station),
    FeatureKind.GEOLOOKUP: lambda obs, station: format_lookup(obs.location),
}


def render(
    features: Iterable[Feature | str],
    obs: CompositeObservation,
    station: str,
) -> list[str]:
    """Format one text block per feature, in request order.

    Tokens may be Feature objects or raw path segments such as
    ``"history_20130101"``; unknown tokens are skipped.
    """
    blocks = []
    for item in features:
        feature = Feature.from_token(item) if isinstance(item, str) else item
        if feature is None:
            logger.debug("Skipping unknown feature %r", item)
            continue
        blocks.append(RENDERERS[feature.kind](obs, station))
    return blocks


def dispatch(
    features: Iterable[Feature | str],
    obs: CompositeObservation,
    station: str,
    out: TextIO | None = None,
) -> None:
    """Write the report for ``features`` to ``out`` (stdout by default)."""
    out = out or sys.stdout
    blocks = render(features, obs, station)
    if blocks:
        out.write("\n\n".join(blocks) + "\n")
