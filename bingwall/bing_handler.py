"""
Bing Image of the Day API

This module is a wrapper around Bing's public unauthenticated HPImageArchive endpoint. With
format=js it answers a GET with a JSON document whose 'images' list holds the image of the day
for today and (depending on 'n') a few previous days, newest first.

    https://www.bing.com/HPImageArchive.aspx?format=js&n=8&mkt=en-CA

These functions build well-formed urls for the endpoint and for the images it describes, and
fetch() turns the response into WallpaperMetadata records. Downloading the images themselves is
left to the image handler.
"""

from functools import wraps
from urllib.parse import urlencode
from urllib.parse import urljoin

import requests

from bingwall.config import BingwallConfig
from bingwall.errors import NetworkError
from bingwall.errors import SchemaError
from bingwall.state import WallpaperMetadata


def base_url(func):
    """
    Use this decorator to inject the base url into each url builder. That way should the url
    change in the future it can be done in one place.
    """

    base_url = "https://www.bing.com"

    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(base_url=base_url, *args, **kwargs)

    return wrapper


@base_url
def metadata_url(config: BingwallConfig, *args, **kwargs) -> str:
    """
    Url to retrieve image metadata from. 'idx' and 'mkt' are only sent when configured, Bing
    picks today and the caller's market otherwise.
    """

    base_url: str = kwargs.get("base_url")

    params = [("format", "js"), ("n", config.number)]
    if config.index is not None:
        params.append(("idx", config.index))
    if config.market:
        params.append(("mkt", config.market))

    return f"{base_url}/HPImageArchive.aspx?{urlencode(params)}"


@base_url
def image_url(record: WallpaperMetadata, config: BingwallConfig, *args, **kwargs) -> str:
    """
    Absolute url of the image described by record. With a configured resolution (e.g. 'UHD' or
    '1920x1080') the image is requested from the record's urlbase in that size.
    """

    base_url: str = kwargs.get("base_url")

    if config.resolution and record.url_base:
        return urljoin(base_url, f"{record.url_base}_{config.resolution}.jpg")

    return urljoin(base_url, record.url)


def get(url: str, timeout: float) -> requests.Response:
    """
    GET url and return the response. Raise NetworkError for anything requests considers a
    failure, including timeouts and 4XX/5XX status codes.
    """

    try:
        r = requests.get(url, timeout=timeout)

    except requests.exceptions.RequestException as error:
        raise NetworkError(f"Request to {url} failed: {error}") from error

    # successful request but received a bad response from the server.
    try:
        r.raise_for_status()

    except requests.exceptions.HTTPError as error:
        raise NetworkError(
            f"Something went wrong trying to access {url} (status code {r.status_code})"
        ) from error

    return r


def parse(payload) -> list[WallpaperMetadata]:
    """Convert a decoded HPImageArchive response into WallpaperMetadata records."""

    if not isinstance(payload, dict):
        raise SchemaError("Bing response is not a JSON object.")

    images = payload.get("images")
    if not isinstance(images, list) or not images:
        raise SchemaError("Bing response does not contain any images.")

    return [WallpaperMetadata.from_bing(image) for image in images]


def fetch(config: BingwallConfig) -> list[WallpaperMetadata]:
    """
    Request the image of the day metadata. Has no side effects beyond the network call.
    Raise NetworkError if the request fails and SchemaError if the response isn't what we expect.
    """

    url = metadata_url(config)
    r = get(url, timeout=config.timeout)

    try:
        payload = r.json()

    except ValueError as error:
        raise SchemaError(f"Bing response from {url} is not valid JSON: {error}") from error

    return parse(payload)
