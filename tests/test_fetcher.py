"""Tests for the outbound JSON fetch."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from etl.exceptions import UpstreamError
from etl.fetcher import fetch_json


def _response(status=200, payload=None, json_error=None):
    resp = MagicMock()
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Server Error")
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


class TestFetchJson:
    def test_returns_decoded_body(self):
        with patch("etl.fetcher.requests.get", return_value=_response(payload=[{"a": 1}])) as get:
            assert fetch_json("https://example.com/data", timeout=5) == [{"a": 1}]
        get.assert_called_once()
        assert get.call_args.kwargs["timeout"] == 5

    def test_default_timeout(self):
        with patch("etl.fetcher.requests.get", return_value=_response(payload=[])) as get:
            fetch_json("https://example.com/data")
        assert get.call_args.kwargs["timeout"] == 30.0

    def test_connection_error_becomes_upstream_error(self):
        err = requests.ConnectionError("connection refused")
        with patch("etl.fetcher.requests.get", side_effect=err):
            with pytest.raises(UpstreamError, match="connection refused"):
                fetch_json("https://unreachable.invalid/")

    def test_http_error_status(self):
        with patch("etl.fetcher.requests.get", return_value=_response(status=503)):
            with pytest.raises(UpstreamError, match="503"):
                fetch_json("https://example.com/down")

    def test_non_json_body(self):
        with patch("etl.fetcher.requests.get", return_value=_response(json_error=ValueError("Expecting value"))):
            with pytest.raises(UpstreamError, match="not valid JSON"):
                fetch_json("https://example.com/html")

    def test_no_retry(self):
        err = requests.Timeout("timed out")
        with patch("etl.fetcher.requests.get", side_effect=err) as get:
            with pytest.raises(UpstreamError):
                fetch_json("https://example.com/slow")
        assert get.call_count == 1
