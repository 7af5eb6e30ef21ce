"""
Tests for bing_handler.py

Validate url building for the HPImageArchive endpoint and parsing of its responses.

*** MOCKING REQUEST CALLS ***

requests.get is patched in the bing_handler module so no test makes a network call. The mocked
responses come from the make_response fixture (conftest.py).
"""

import unittest.mock
from datetime import date

import pytest
import requests

# following entities are tested in this module:
from bingwall.bing_handler import fetch
from bingwall.bing_handler import image_url
from bingwall.bing_handler import metadata_url
from bingwall.errors import NetworkError
from bingwall.errors import SchemaError
from bingwall.state import WallpaperMetadata


def test_metadata_url_defaults(config):
    assert metadata_url(config) == "https://www.bing.com/HPImageArchive.aspx?format=js&n=8"


def test_metadata_url_overrides(config):
    config = config.with_overrides(number=1, index=1, market="en-CA")

    assert (
        metadata_url(config)
        == "https://www.bing.com/HPImageArchive.aspx?format=js&n=1&idx=1&mkt=en-CA"
    )


def test_image_url_from_url(config, bing_payload):
    record = WallpaperMetadata.from_bing(bing_payload["images"][0])

    assert image_url(record, config) == (
        "https://www.bing.com/th?id=OHR.Lighthouse_EN-US1234_1920x1080.jpg&rf=LaDigue_1920x1080.jpg&pid=hp"
    )


def test_image_url_with_resolution(config, bing_payload):
    record = WallpaperMetadata.from_bing(bing_payload["images"][0])
    config = config.with_overrides(resolution="UHD")

    assert image_url(record, config) == "https://www.bing.com/th?id=OHR.Lighthouse_EN-US1234_UHD.jpg"


def test_image_url_resolution_without_urlbase(config):
    record = WallpaperMetadata.from_bing(
        {"startdate": "20240101", "url": "/th?id=ABC.jpg", "copyright": "X"}
    )
    config = config.with_overrides(resolution="UHD")

    assert image_url(record, config) == "https://www.bing.com/th?id=ABC.jpg"


@unittest.mock.patch("bingwall.bing_handler.requests.get", autospec=True)
def test_fetch_success(mock_get, config, bing_payload, make_response):
    mock_get.return_value = make_response(json=bing_payload)

    records = fetch(config)

    mock_get.assert_called_once_with(metadata_url(config), timeout=config.timeout)
    assert [record.start_date for record in records] == [date(2024, 1, 2), date(2024, 1, 1)]
    assert records[1].title == "Happy New Year"


@pytest.mark.parametrize(
    "error",
    [
        requests.exceptions.Timeout("timed out"),
        requests.exceptions.ConnectionError("connection refused"),
    ],
)
@unittest.mock.patch("bingwall.bing_handler.requests.get", autospec=True)
def test_fetch_request_failure(mock_get, config, error):
    mock_get.side_effect = error

    with pytest.raises(NetworkError):
        fetch(config)


@unittest.mock.patch("bingwall.bing_handler.requests.get", autospec=True)
def test_fetch_bad_status(mock_get, config, make_response):
    mock_get.return_value = make_response(status_code=503)

    with pytest.raises(NetworkError, match="503"):
        fetch(config)


@pytest.mark.parametrize(
    "payload",
    [
        None,  # body is not JSON
        [],
        {},
        {"images": []},
        {"images": [{"startdate": "20240101"}]},
    ],
)
@unittest.mock.patch("bingwall.bing_handler.requests.get", autospec=True)
def test_fetch_schema_failure(mock_get, config, make_response, payload):
    mock_get.return_value = make_response(json=payload)

    with pytest.raises(SchemaError):
        fetch(config)
