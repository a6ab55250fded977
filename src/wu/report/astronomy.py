"""Moon phase, sunrise and sunset."""

from __future__ import annotations

from wu.api.schemas import Clock, MoonPhase, SunPhase


def format_astronomy(moon: MoonPhase, sun: SunPhase, station: str) -> str:
    # The API reports sunrise/sunset under moon_phase; sun_phase is the fallback
    sunrise = moon.sunrise if moon.sunrise.hour else sun.sunrise
    sunset = moon.sunset if moon.sunset.hour else sun.sunset

    lines = [
        f"Astronomy for {station}",
        f"Moon phase: {moon.phase_of_moon}, {moon.percent_illuminated}% illuminated, "
        f"{moon.age_of_moon} days old",
        f"Sunrise: {_clock(sunrise)}",
        f"Sunset: {_clock(sunset)}",
    ]
    length = day_length(sunrise, sunset)
    if length is not None:
        hours, minutes = divmod(length, 60)
        lines.append(f"Length of day: {hours} hours {minutes} minutes")
    return "\n".join(lines)


def day_length(sunrise: Clock, sunset: Clock) -> int | None:
    """Minutes between sunrise and sunset, or None if either is missing."""
    try:
        rise = int(sunrise.hour) * 60 + int(sunrise.minute)
        set_ = int(sunset.hour) * 60 + int(sunset.minute)
    except ValueError:
        return None
    return (set_ - rise) % (24 * 60)


def _clock(clock: Clock) -> str:
    if not clock.hour:
        return "unavailable"
    return f"{clock.hour}:{clock.minute.zfill(2)}"
