"""wu - Weather Underground conditions, forecasts and history from the command line."""

__version__ = "0.1.0"

from wu.config import Config, DEFAULT_STATION
from wu.request.features import Feature, FeatureKind

__all__ = ["Config", "DEFAULT_STATION", "Feature", "FeatureKind"]
