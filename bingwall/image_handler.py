"""
Image Handler

Utilities for naming and downloading the image of the day.

Every image lives in the configured image directory under a name derived from its url alone,
so the path of an image is known before (and regardless of whether) it was downloaded. This is
what lets the query path print a path without touching the network. Downloads happen at most
once per file: if the file is already there it is trusted as is.
"""

import io
from pathlib import Path
from urllib.parse import parse_qs
from urllib.parse import urlparse

from PIL import Image, UnidentifiedImageError

from bingwall import bing_handler
from bingwall.config import BingwallConfig
from bingwall.errors import SchemaError
from bingwall.errors import StorageError
from bingwall.state import WallpaperMetadata


def file_name_for(url: str) -> str:
    """
    Derive the local file name for an image url. Bing serves images as /th?id=<file name>, so the
    'id' query parameter is used when present and the last path segment otherwise.

    e.g. /th?id=OHR.Example_1920x1080.jpg&rf=LaDigue_1920x1080.jpg -> OHR.Example_1920x1080.jpg
         https://example.com/images/photo.jpg -> photo.jpg
    """

    parsed = urlparse(url)
    ids = parse_qs(parsed.query, keep_blank_values=True).get("id")

    # never let a crafted id escape the image directory
    file_name = Path(ids[0] if ids else parsed.path).name

    if file_name in ("", ".", ".."):
        raise SchemaError(f"Cannot derive an image file name from url {url!r}.")

    return file_name


def image_path(record: WallpaperMetadata, config: BingwallConfig) -> Path:
    """Absolute path that record's image has (or will have, once downloaded) on disk."""

    url = bing_handler.image_url(record, config)
    return (config.image_dir / file_name_for(url)).expanduser().absolute()


def validate_image(content: bytes) -> str:
    """
    Determine whether content is a valid image and return its format. Pillow reads the header
    to determine the file type without decoding the whole image.
    """

    try:
        with Image.open(io.BytesIO(content)) as image:
            return image.format

    except UnidentifiedImageError as error:
        raise SchemaError("Downloaded content does not appear to be an image.") from error


def materialize(record: WallpaperMetadata, config: BingwallConfig) -> Path:
    """
    Make sure record's image exists in the image directory, downloading it if it is missing.
    An existing file is left alone (no network call, no checksum). Returns the image path.

    Raise NetworkError if the download fails, SchemaError if Bing sent something that isn't an
    image and StorageError if the file can't be written.
    """

    destination_path = image_path(record, config)

    if destination_path.is_file():
        return destination_path

    # edge case where destination path is a folder
    if destination_path.exists():
        raise StorageError(f"Destination {destination_path} exists but is not a file.")

    url = bing_handler.image_url(record, config)
    r = bing_handler.get(url, timeout=config.timeout)
    validate_image(r.content)

    # the image is stored verbatim as served
    try:
        destination_path.parent.mkdir(parents=True, exist_ok=True)
        with open(destination_path, "wb") as file:
            file.write(r.content)

    except OSError as error:
        raise StorageError(
            f"There was an error saving {destination_path.name} to {destination_path.parent}: {error}"
        ) from error

    return destination_path
