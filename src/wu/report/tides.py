"""Tide predictions."""

from __future__ import annotations

from wu.api.schemas import Tide


def format_tides(tide: Tide, station: str) -> str:
    site = tide.tide_info[0].tide_site if tide.tide_info else ""
    if not site and not tide.tide_summary:
        return f"No tidal data available for {station}"

    lines = [f"Tide information for {site or station}"]
    for entry in tide.tide_summary:
        line = f"{entry.date.pretty}: {entry.data.type}"
        if entry.data.height:
            line += f" ({entry.data.height})"
        lines.append(line)
    return "\n".join(lines)
