"""Configuration constants and the per-user settings file."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path

from wu.errors import ConfigError, MissingConfigError

logger = logging.getLogger(__name__)

# Weather Underground API
API_ROOT = "http://api.wunderground.com/api"
DEFAULT_TIMEOUT = 30  # seconds, single attempt

# Settings file: {"key": "<api key>", "station": "<default station>"}
CONF_PATH = Path.home() / ".condrc"

# Station used when neither -s nor the settings file names one
DEFAULT_STATION = "KLNK"  # Lincoln, NE

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

COPYRIGHT = (
    "Data courtesy of Weather Underground, Inc. is subject to\n"
    "Weather Underground Data Feed Terms of Service. The program\n"
    "itself is free software, and you are welcome to redistribute\n"
    "it under certain conditions. See LICENSE for details."
)


@dataclass(frozen=True)
class Config:
    key: str
    station: str = ""

    @staticmethod
    def load(path: Path | str | None = None) -> "Config":
        """Read the settings file.

        Keys are matched case-insensitively, so ``"Key"`` and ``"key"`` both
        work. A missing file raises MissingConfigError; anything unreadable as
        a JSON object with a non-empty key raises ConfigError.
        """
        path = Path(path) if path is not None else CONF_PATH
        try:
            raw = path.read_bytes()
        except OSError as err:
            logger.debug("Cannot read %s: %s", path, err)
            raise MissingConfigError() from err

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as err:
            raise ConfigError(f"{path}: {err}") from err

        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a JSON object")

        fields = {str(k).lower(): v for k, v in data.items()}
        key = fields.get("key") or ""
        station = fields.get("station") or ""
        if not isinstance(key, str) or not isinstance(station, str):
            raise ConfigError(f"{path}: 'key' and 'station' must be strings")
        if not key:
            raise ConfigError(f"{path}: missing API 'key'")

        logger.debug("Loaded settings from %s (station=%r)", path, station)
        return Config(key=key, station=station)
