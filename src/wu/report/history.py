"""Observed weather for a past day (-history and -yesterday)."""

from __future__ import annotations

from wu.api.schemas import DailySummary, History

EVENTS = ("rain", "snow", "hail", "thunder", "fog", "tornado")


def format_history(history: History, station: str) -> str:
    when = history.date.pretty
    lines = [f"Weather history for {station}" + (f" on {when}" if when else "")]

    if not history.dailysummary:
        lines.append("No daily summary available")
        if history.observations:
            lines.append(f"{len(history.observations)} observations recorded")
        return "\n".join(lines)

    s = history.dailysummary[0]
    lines.extend([
        f"   Mean temperature: {_temp(s.meantempi, s.meantempm)}",
        f"   Maximum temperature: {_temp(s.maxtempi, s.maxtempm)}",
        f"   Minimum temperature: {_temp(s.mintempi, s.mintempm)}",
        f"   Precipitation: {s.precipi} in ({s.precipm} mm)",
        f"   Humidity: {s.humidity}%",
        f"   Mean wind: {s.meanwindspdi} MPH from the {s.meanwdire}",
        f"   Maximum wind: {s.maxwspdi} MPH",
        f"   Events: {_events(s)}",
    ])
    return "\n".join(lines)


def _temp(fahrenheit: str, celsius: str) -> str:
    return f"{fahrenheit} F ({celsius} C)"


def _events(summary: DailySummary) -> str:
    seen = [name for name in EVENTS if getattr(summary, name) == "1"]
    return ", ".join(seen) if seen else "none"
