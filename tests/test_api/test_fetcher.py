"""Tests for the HTTP fetcher."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from wu.api.fetcher import fetch
from wu.errors import HttpStatusError, TransportError

URL = "http://api.wunderground.com/api/abc123/conditions/q/KLNK.json"


def _response(status_code: int, content: bytes = b"") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content
    return resp


@patch("wu.api.fetcher.requests.get")
def test_fetch_returns_body(mock_get):
    mock_get.return_value = _response(200, b'{"response": {}}')

    assert fetch(URL) == b'{"response": {}}'


@patch("wu.api.fetcher.requests.get")
def test_fetch_single_request_with_timeout(mock_get):
    mock_get.return_value = _response(200, b"{}")

    fetch(URL, timeout=5)

    mock_get.assert_called_once_with(URL, timeout=5)


@patch("wu.api.fetcher.requests.get")
def test_fetch_bad_status(mock_get):
    mock_get.return_value = _response(404, b"not found")

    with pytest.raises(HttpStatusError) as exc:
        fetch(URL)

    assert exc.value.status_code == 404
    assert exc.value.render() == "Bad HTTP Status: 404"
    assert mock_get.call_count == 1


@patch("wu.api.fetcher.requests.get")
def test_fetch_connection_error(mock_get):
    mock_get.side_effect = requests.ConnectionError("Network unreachable")

    with pytest.raises(TransportError) as exc:
        fetch(URL)

    assert "Network unreachable" in str(exc.value)
    assert mock_get.call_count == 1


@patch("wu.api.fetcher.requests.get")
def test_fetch_timeout_is_not_retried(mock_get):
    mock_get.side_effect = requests.Timeout("read timed out")

    with pytest.raises(TransportError):
        fetch(URL)

    assert mock_get.call_count == 1


def test_fetch_malformed_url():
    with pytest.raises(TransportError):
        fetch("not a url")
