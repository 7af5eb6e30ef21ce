"""
conftest.py

Test configuration for bingwall tests.

Defines Pytest fixtures for supplying test data to tests across the entire
test suite. Fixtures used within only a single module are defined
directly in that module.
"""

import io
import unittest.mock

import pytest
import requests
from PIL import Image

from bingwall.config import BingwallConfig


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """
    Point bingwall at an empty config directory inside the pytest tmp_path so tests never
    touch the real ~/.config/bingwall.
    """

    directory = tmp_path / "bingwall"
    monkeypatch.setenv("BINGWALL_CONFIG_DIR", str(directory))
    return directory


@pytest.fixture
def config(config_dir) -> BingwallConfig:
    return BingwallConfig(config_dir=config_dir)


@pytest.fixture(scope="session")
def jpeg_bytes() -> bytes:
    """A small but valid JPEG, generated with Pillow."""

    buffer = io.BytesIO()
    Image.new("RGB", (16, 9), color=(30, 90, 160)).save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def bing_payload() -> dict:
    """Trimmed down HPImageArchive response with two days of images, newest first."""

    return {
        "images": [
            {
                "startdate": "20240102",
                "fullstartdate": "202401020800",
                "enddate": "20240103",
                "url": "/th?id=OHR.Lighthouse_EN-US1234_1920x1080.jpg&rf=LaDigue_1920x1080.jpg&pid=hp",
                "urlbase": "/th?id=OHR.Lighthouse_EN-US1234",
                "copyright": "Lighthouse at dusk (© Someone)",
                "title": "Lighthouse",
                "hsh": "abc123",
            },
            {
                "startdate": "20240101",
                "fullstartdate": "202401010800",
                "enddate": "20240102",
                "url": "/th?id=OHR.Fireworks_EN-US5678_1920x1080.jpg&rf=LaDigue_1920x1080.jpg&pid=hp",
                "urlbase": "/th?id=OHR.Fireworks_EN-US5678",
                "copyright": "Fireworks over the harbour (© Someone Else)",
                "title": "Happy New Year",
                "hsh": "def456",
            },
        ],
        "tooltips": {"loading": "Loading..."},
    }


@pytest.fixture
def make_response():
    """
    Return a factory for mocked requests.Response objects. status_code >= 400 makes
    raise_for_status raise an HTTPError like the real thing.
    """

    def inner(json=None, content: bytes = b"", status_code: int = 200):
        response = unittest.mock.MagicMock(spec=requests.Response)
        response.status_code = status_code
        response.content = content

        if json is None:
            response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        else:
            response.json.return_value = json

        if status_code >= 400:
            response.raise_for_status.side_effect = requests.exceptions.HTTPError(
                f"{status_code} Error"
            )

        return response

    return inner
