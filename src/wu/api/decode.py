"""Decode the composite API document."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from wu.api.schemas import CompositeObservation, LocationMatch
from wu.errors import AmbiguousLocationError, ApiError, DecodeError

logger = logging.getLogger(__name__)


def decode_observation(body: bytes) -> CompositeObservation:
    """Parse a response body into a CompositeObservation.

    Raises DecodeError for anything that is not a JSON object of the expected
    shape, ApiError when the API reports an error in its envelope, and
    AmbiguousLocationError when the query matched several locations.
    """
    try:
        obs = CompositeObservation.model_validate_json(body)
    except ValidationError as err:
        raise DecodeError(_summarize(err)) from err

    envelope = obs.response
    if envelope.error is not None:
        raise ApiError(envelope.error.type, envelope.error.description)
    if envelope.results:
        raise AmbiguousLocationError([_query_for(m) for m in envelope.results])

    logger.debug("Decoded response (features: %s)", ", ".join(envelope.features) or "none")
    return obs


def _query_for(match: LocationMatch) -> str:
    """Station string that selects ``match`` on a second run."""
    region = match.state or match.country_name or match.country
    city = match.city or match.name
    if region and city:
        return f"{region}/{city}".replace(" ", "_")
    if match.zmw:
        return f"zmw:{match.zmw}"
    return city


def _summarize(err: ValidationError) -> str:
    first = err.errors()[0]
    where = ".".join(str(p) for p in first.get("loc", ())) or "document"
    return f"invalid response ({where}): {first.get('msg', '')}"
