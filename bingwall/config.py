"""
bingwall Configuration Management

This file handles utilities related to generating and loading variables from a configuration file.
The config is loaded once by the 'cli' group callback and handed to subcommands through the click
context object. Raise a BingwallConfigError for any issues that arise in processing or retrieving
these configuration variables.

The configuration file is "config.json" and lives in the platform's user config directory as
reported by click.get_app_dir (for Linux this is ~/.config/bingwall/config.json, honouring
XDG_CONFIG_HOME). Set BINGWALL_CONFIG_DIR to point bingwall somewhere else entirely.
"""

import json
import os
from dataclasses import dataclass
from dataclasses import asdict
from dataclasses import fields
from dataclasses import replace
from pathlib import Path, PurePath
from typing import Optional

import click

from bingwall.errors import BingwallConfigError

APP_NAME = "bingwall"
CONFIG_FILE_NAME = "config.json"


class PathEncoder(json.JSONEncoder):
    """
    custom encoder adds support for serializing pathlib objects as strings
    """

    def default(self, o):
        if isinstance(o, PurePath):
            return str(o)

        else:
            return json.JSONEncoder.default(self, o)


def default_config_dir() -> Path:
    """Return $BINGWALL_CONFIG_DIR if set, otherwise the platform config dir for bingwall."""

    try:
        return Path(os.environ["BINGWALL_CONFIG_DIR"]).expanduser()

    except KeyError:
        return Path(click.get_app_dir(APP_NAME))


def is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class BingwallConfig:
    """
    Dataclass to represent configuration variables for bingwall. Provides a namespace and identifiers
    for the two filesystem locations bingwall touches (the state file and the image directory) and
    the parameters of the Bing metadata request.

    A BingwallConfig can be created from a deserialized json object by supplying its keys as keyword
    arguments. image_dir and state_file default to locations inside config_dir when not given.
    """

    config_dir: Path = None
    image_dir: Path = None
    state_file: Path = None
    market: Optional[str] = None
    number: int = 8
    index: Optional[int] = None
    resolution: Optional[str] = None
    timeout: float = 30.0

    def __post_init__(self):
        """
        Handle the case where a new BingwallConfig is created from JSON, which cannot
        deserialize a str into a Path, and fill in the directory defaults.
        """

        self.config_dir = Path(self.config_dir or default_config_dir()).expanduser()
        self.image_dir = Path(self.image_dir or self.config_dir / "images").expanduser()
        self.state_file = Path(
            self.state_file or self.config_dir / "state.json"
        ).expanduser()

        for name in ("market", "resolution"):
            if not isinstance(getattr(self, name), (str, type(None))):
                raise BingwallConfigError(
                    f"{name} must be a string, got {getattr(self, name)!r}"
                )

        # empty market in config.json means "let Bing pick"
        self.market = self.market or None
        self.resolution = self.resolution or None

        # "number": true is not a number here
        if not is_integer(self.number) or self.number < 1:
            raise BingwallConfigError(
                f"number must be a positive integer, got {self.number!r}"
            )

        if self.index is not None and (not is_integer(self.index) or self.index < 0):
            raise BingwallConfigError(
                f"index must be a non-negative integer, got {self.index!r}"
            )

        if (
            isinstance(self.timeout, bool)
            or not isinstance(self.timeout, (int, float))
            or self.timeout <= 0
        ):
            raise BingwallConfigError(
                f"timeout must be a positive number of seconds, got {self.timeout!r}"
            )

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def with_overrides(self, **overrides) -> "BingwallConfig":
        """
        Return a copy of this config with every override that is not None applied. Used to merge
        options passed on the command line over values read from config.json.
        """

        values = {key: value for key, value in overrides.items() if value is not None}
        try:
            return replace(self, **values)

        except TypeError as error:
            raise BingwallConfigError(f"Unknown configuration option: {error}") from error

    def generate_config_json(self) -> Path:
        """
        Write the BingwallConfig to file, serializing to JSON. Returns filepath of written
        config.json file which is located in config_dir.

        Will overwrite any existing config file for bingwall.
        """

        try:
            to_json = json.dumps(
                asdict(self), sort_keys=True, indent=4, cls=PathEncoder
            )

        except TypeError as error:
            raise BingwallConfigError(
                f"There was an error trying to serialize config data to JSON: {error}"
            ) from error

        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as file:
                file.write(to_json)

        except OSError as error:
            raise BingwallConfigError(
                f"There was an error saving the configuration file: {error}."
            ) from error

        return self.config_file


def load_config(config_path: Path = None) -> BingwallConfig:
    """
    Load config.json and instantiate variables as a BingwallConfig dataclass.

    If config_path is given the file must exist. Otherwise config.json is looked up in the
    default config directory, and plain defaults are used when there is none.
    Raise BingwallConfigError if the file can't be read or holds unexpected values.
    """

    if config_path is None:
        config_src = default_config_dir() / CONFIG_FILE_NAME
        if not config_src.exists():
            return BingwallConfig()

    else:
        config_src = Path(config_path).expanduser()

    try:
        with config_src.open("r") as file:
            from_json = json.loads(file.read())

    except json.JSONDecodeError as error:
        raise BingwallConfigError(
            f"There was an issue reading the config at {config_src}: {error}"
        ) from error

    except OSError as error:
        raise BingwallConfigError(
            f"There was an issue opening the config: {error}"
        ) from error

    if not isinstance(from_json, dict):
        raise BingwallConfigError(f"The config at {config_src} must be a JSON object.")

    known = {field.name for field in fields(BingwallConfig)}
    unknown = sorted(set(from_json) - known)
    if unknown:
        raise BingwallConfigError(
            f"Unknown keys in {config_src}: {', '.join(unknown)}"
        )

    # a config.json living in a custom location still keeps its state next to itself
    from_json.setdefault("config_dir", str(config_src.parent))

    try:
        return BingwallConfig(**from_json)

    except TypeError as error:
        raise BingwallConfigError(
            f"There was an issue with a value in {config_src}: {error}"
        ) from error
