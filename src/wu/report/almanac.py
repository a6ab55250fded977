"""Normal and record temperatures for today."""

from __future__ import annotations

from wu.api.schemas import Almanac, AlmanacTemp


def format_almanac(almanac: Almanac, station: str) -> str:
    source = almanac.airport_code or station
    return "\n".join([
        f"Normal high: {_normal(almanac.temp_high)}",
        f"Record high: {_record(almanac.temp_high)}",
        f"Normal low: {_normal(almanac.temp_low)}",
        f"Record low: {_record(almanac.temp_low)}",
        f"Source: {source}",
    ])


def _normal(temp: AlmanacTemp) -> str:
    return f"{temp.normal.fahrenheit} F ({temp.normal.celsius} C)"


def _record(temp: AlmanacTemp) -> str:
    text = f"{temp.record.fahrenheit} F ({temp.record.celsius} C)"
    if temp.recordyear:
        text += f" ({temp.recordyear})"
    return text
