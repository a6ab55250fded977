"""Current conditions."""

from __future__ import annotations

from wu.api.schemas import CurrentObservation

PRESSURE_TRENDS = {"+": "rising", "-": "falling", "0": "holding"}


def format_conditions(cur: CurrentObservation) -> str:
    where = cur.display_location.full or cur.observation_location.full
    header = f"Current conditions at {where}"
    if cur.station_id:
        header += f" ({cur.station_id})"

    pressure = f"{cur.pressure_in} in ({cur.pressure_mb} mb)"
    trend = PRESSURE_TRENDS.get(cur.pressure_trend.strip())
    if trend:
        pressure += f" and {trend}"

    lines = [
        header,
        cur.observation_time,
        f"   Conditions: {cur.weather}",
        f"   Temperature: {cur.temperature_string}",
        f"   Relative Humidity: {cur.relative_humidity}",
        f"   Wind: {cur.wind_string}",
        f"   Pressure: {pressure}",
        f"   Dewpoint: {cur.dewpoint_string}",
        f"   Heat Index: {cur.heat_index_string}",
        f"   Windchill: {cur.windchill_string}",
        f"   Visibility: {cur.visibility_mi} miles",
        f"   UV Index: {cur.uv}",
        f"   Precipitation today: {cur.precip_today_string}",
    ]
    return "\n".join(lines)
