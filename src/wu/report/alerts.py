"""Active weather alerts."""

from __future__ import annotations

from typing import Sequence

from wu.api.schemas import Alert


def format_alerts(alerts: Sequence[Alert], station: str) -> str:
    if not alerts:
        return f"No active alerts for {station}"

    blocks = []
    for alert in alerts:
        blocks.append("\n".join([
            f"### {alert.description} ###",
            f"Issued at {alert.date}",
            f"Expires at {alert.expires}",
            alert.message.strip(),
        ]))
    return "\n\n".join(blocks)
