"""Composite request URL for the Weather Underground API."""

from __future__ import annotations

from typing import Sequence

from wu.config import API_ROOT
from wu.request.features import Feature

QUERY = "q"
FORMAT = ".json"


def build_url(
    features: Sequence[Feature],
    station: str,
    api_key: str,
    root: str = API_ROOT,
) -> str:
    """Build ``<root>/<key>/<feature>/.../q/<station>.json``.

    Path segments follow the order of ``features``; history and planner
    segments carry their date suffix. Dates are not validated here, the API
    answers malformed ones with an error.
    """
    segments = [root.rstrip("/"), api_key, *(f.token for f in features), QUERY]
    return "/".join(segments) + f"/{station}{FORMAT}"


def redact_url(url: str, api_key: str) -> str:
    """Hide the API key before a URL is logged or shown."""
    if not api_key:
        return url
    return url.replace(f"/{api_key}/", "/<key>/", 1)
