"""Station lookup (-lookup)."""

from __future__ import annotations

from wu.api.schemas import Location


def format_lookup(loc: Location) -> str:
    place = ", ".join(p for p in (loc.city, loc.state, loc.country_name or loc.country) if p)
    lines = [
        f"Location: {place}",
        f"Lat/Long: {loc.lat}, {loc.lon}",
    ]
    if loc.zip:
        lines.append(f"Zip: {loc.zip}")
    if loc.tz_long:
        lines.append(f"Time zone: {loc.tz_long}")

    airports = loc.nearby_weather_stations.airport.station
    if airports:
        lines.append("")
        lines.append("Nearby airport stations:")
        for s in airports:
            if s.icao:
                lines.append(f"   {s.icao:<6} {s.city}, {s.state or s.country}")

    pws = loc.nearby_weather_stations.pws.station
    if pws:
        lines.append("")
        lines.append("Nearby personal weather stations:")
        for s in pws:
            area = s.neighborhood or s.city
            lines.append(f"   pws:{s.id:<12} {area} ({s.distance_mi} mi)")
    return "\n".join(lines)
