"""Text (3-day) and simple (10-day) forecasts."""

from __future__ import annotations

from wu.api.schemas import Forecast


def format_forecast(forecast: Forecast, station: str) -> str:
    txt = forecast.txt_forecast
    lines = [f"Forecast for {station}", f"Issued at {txt.date}"]
    for day in txt.forecastday:
        lines.append(f"{day.title}: {day.fcttext}")
    return "\n".join(lines)


def format_forecast10(forecast: Forecast, station: str) -> str:
    lines = [f"10-day forecast for {station}"]
    for day in forecast.simpleforecast.forecastday:
        d = day.date
        line = (
            f"{d.weekday}, {d.monthname} {d.day}: {day.conditions}. "
            f"High {day.high.fahrenheit} F ({day.high.celsius} C), "
            f"Low {day.low.fahrenheit} F ({day.low.celsius} C)"
        )
        if day.pop:
            line += f", {day.pop}% chance of precipitation"
        lines.append(line)
    return "\n".join(lines)
