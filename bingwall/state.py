"""
State Store

The state file holds the image of the day records from the most recent 'update'. It is a small
JSON document of the form {"images": [<record>, ...]} and is rewritten as a whole on every update,
so it only ever describes the last fetch. If the file does not exist no update has run yet.

Nothing here guards against concurrent writers or a crash halfway through a write. bingwall is run
by a timer at well spaced intervals and a truncated state file is fixed by the next update.
"""

import json
import random
from dataclasses import dataclass
from dataclasses import asdict
from datetime import date
from datetime import datetime
from pathlib import Path
from typing import Optional

from bingwall.errors import NotFoundError
from bingwall.errors import SchemaError
from bingwall.errors import StorageError

BING_DATE_FORMAT = "%Y%m%d"


def parse_bing_date(value: str) -> date:
    """Parse a YYYYMMDD date string as used in Bing's 'startdate' and 'enddate' fields."""

    try:
        return datetime.strptime(value, BING_DATE_FORMAT).date()

    except (TypeError, ValueError) as error:
        raise SchemaError(f"Invalid date {value!r}, expected YYYYMMDD.") from error


@dataclass(frozen=True)
class WallpaperMetadata:
    """
    One image of the day record. url is the path and query Bing serves the image under, e.g.
    '/th?id=OHR.Example_EN-US123_1920x1080.jpg', and is what the local file name is derived from.
    """

    start_date: date
    url: str
    copyright: str
    title: Optional[str] = None
    url_base: Optional[str] = None
    end_date: Optional[date] = None

    @classmethod
    def from_bing(cls, record: dict) -> "WallpaperMetadata":
        """Build a record from one entry of the 'images' list in a Bing response."""

        if not isinstance(record, dict):
            raise SchemaError(f"Expected an image record, got {type(record).__name__}.")

        for key in ("startdate", "url", "copyright"):
            if not isinstance(record.get(key), str) or not record[key]:
                raise SchemaError(f"Image record is missing the '{key}' field.")

        end_date = record.get("enddate")

        return cls(
            start_date=parse_bing_date(record["startdate"]),
            url=record["url"],
            copyright=record["copyright"],
            title=record.get("title") or None,
            url_base=record.get("urlbase") or None,
            end_date=parse_bing_date(end_date) if end_date else None,
        )

    @classmethod
    def from_json(cls, record: dict) -> "WallpaperMetadata":
        """Build a record from its state file representation (see to_json)."""

        if not isinstance(record, dict):
            raise SchemaError(f"Invalid record in state file: {record!r}")

        for key in ("start_date", "url", "copyright"):
            if not isinstance(record.get(key), str) or not record[key]:
                raise SchemaError(f"Record in state file has no valid '{key}' field.")

        for key in ("title", "url_base", "end_date"):
            if not isinstance(record.get(key), (str, type(None))):
                raise SchemaError(f"Record in state file has an invalid '{key}' field.")

        try:
            end_date = record.get("end_date")
            return cls(
                start_date=date.fromisoformat(record["start_date"]),
                url=record["url"],
                copyright=record["copyright"],
                title=record.get("title"),
                url_base=record.get("url_base"),
                end_date=date.fromisoformat(end_date) if end_date else None,
            )

        except (AttributeError, KeyError, TypeError, ValueError) as error:
            raise SchemaError(f"Invalid record in state file: {error!r}") from error

    def to_json(self) -> dict:
        record = asdict(self)
        record["start_date"] = self.start_date.isoformat()
        record["end_date"] = self.end_date.isoformat() if self.end_date else None
        return record


def newest(records: list[WallpaperMetadata]) -> WallpaperMetadata:
    """Return the most recent record by start date."""

    if not records:
        raise NotFoundError(
            "The state file holds no images. Run 'bingwall update' to fetch the image of the day."
        )

    return max(records, key=lambda record: record.start_date)


def random_record(records: list[WallpaperMetadata]) -> WallpaperMetadata:
    """
    Pick a record at random. Records are weighted by recency: the oldest counts once, the next
    twice and so on, so newer images come up more often.
    """

    # raises NotFoundError for an empty state
    newest(records)

    ordered = sorted(records, key=lambda record: record.start_date)
    weights = range(1, len(ordered) + 1)

    return random.choices(ordered, weights=weights)[0]


def persist(records: list[WallpaperMetadata], state_file: Path) -> Path:
    """
    Overwrite state_file with records. The parent directory must already exist.
    Raise StorageError if the file cannot be written.
    """

    to_json = json.dumps(
        {"images": [record.to_json() for record in records]}, indent=4
    )

    try:
        with open(state_file, "w") as file:
            file.write(to_json)

    except OSError as error:
        raise StorageError(
            f"There was an error writing the state file {state_file}: {error}"
        ) from error

    return state_file


def load_state(state_file: Path) -> list[WallpaperMetadata]:
    """
    Read the records written by the last update. Raise NotFoundError if no update has run yet,
    StorageError if the file can't be read and SchemaError if it doesn't hold valid state.
    """

    try:
        with open(state_file, "r") as file:
            from_json = json.loads(file.read())

    except FileNotFoundError as error:
        raise NotFoundError(
            f"No state found at {state_file}. Run 'bingwall update' to fetch the image of the day first."
        ) from error

    except OSError as error:
        raise StorageError(
            f"There was an error reading the state file {state_file}: {error}"
        ) from error

    except json.JSONDecodeError as error:
        raise SchemaError(f"The state file {state_file} is not valid JSON: {error}") from error

    if not isinstance(from_json, dict) or not isinstance(from_json.get("images"), list):
        raise SchemaError(f"The state file {state_file} has no 'images' list.")

    return [WallpaperMetadata.from_json(record) for record in from_json["images"]]
