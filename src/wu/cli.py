"""CLI entry point for wu."""

from __future__ import annotations

import logging
import sys
from typing import Sequence, TextIO

from wu.api.decode import decode_observation
from wu.api.fetcher import fetch
from wu.config import Config, LOG_FORMAT
from wu.errors import WuError
from wu.report.dispatch import dispatch
from wu.request.options import Request, resolve_options
from wu.request.url import build_url, redact_url

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> None:
    """Run one report and exit.

    Every failure surfaces here as a WuError, which decides the message
    stream and exit code.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    # Settings load before argv is parsed, so look for -debug up front
    _configure_logging("-debug" in argv or "--debug" in argv)
    try:
        config = Config.load()
        request = resolve_options(argv, config)
        run(request, config)
    except WuError as err:
        stream = sys.stdout if err.to_stdout else sys.stderr
        print(err.render(), file=stream)
        sys.exit(err.exit_code)


def run(request: Request, config: Config, out: TextIO | None = None) -> None:
    """Build the URL, fetch and decode it once, then print each feature."""
    url = build_url(request.features, request.station, config.key)
    logger.info("Requesting %s", redact_url(url, config.key))

    body = fetch(url)
    obs = decode_observation(body)
    dispatch(request.features, obs, request.station, out=out)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


if __name__ == "__main__":
    main()
