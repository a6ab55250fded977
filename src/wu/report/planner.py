"""Trip planner: historical averages over a date range."""

from __future__ import annotations

from wu.api.schemas import PrecipRange, TempRange, Trip


def format_planner(trip: Trip, station: str) -> str:
    if trip.error:
        return f"Travel planner for {station}: {trip.error}"

    period = trip.period_of_record
    lines = [
        f"Travel planner for {station}",
        trip.title,
        f"Period of record: {period.date_start.date.pretty} to {period.date_end.date.pretty}",
        f"   High temperature: {_temps(trip.temp_high)}",
        f"   Low temperature: {_temps(trip.temp_low)}",
        f"   Precipitation: {_precip(trip.precip)}",
    ]
    if trip.cloud_cover.cond:
        lines.append(f"   Cloud cover: {trip.cloud_cover.cond}")
    for chance in trip.chance_of.values():
        if chance.name:
            lines.append(f"   Chance of {chance.name.lower()}: {chance.percentage}%")
    return "\n".join(lines)


def _temps(r: TempRange) -> str:
    return (
        f"min {r.min.fahrenheit} F ({r.min.celsius} C), "
        f"avg {r.avg.fahrenheit} F ({r.avg.celsius} C), "
        f"max {r.max.fahrenheit} F ({r.max.celsius} C)"
    )


def _precip(r: PrecipRange) -> str:
    return (
        f"min {r.min.inches} in ({r.min.cm} cm), "
        f"avg {r.avg.inches} in ({r.avg.cm} cm), "
        f"max {r.max.inches} in ({r.max.cm} cm)"
    )
