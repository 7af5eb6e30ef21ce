"""
bingwall update

This module defines the 'update' subcommand: fetch the image of the day metadata from Bing,
overwrite the state file with it and make sure the newest image is downloaded.

The state is only written once Bing answered with something usable, so a failed request
leaves the previous state in place. A failed image download does not undo the state write,
the query path copes with an image that is not on disk yet and the next update retries it.
"""

import click

from bingwall import bing_handler
from bingwall import image_handler
from bingwall import state
from bingwall.config import BingwallConfig
from bingwall.errors import StorageError
from bingwall.cli_utils.console import describe
from bingwall.cli_utils.console import confirm_success
from bingwall.cli_utils.decorators import catch_errors


def ensure_dirs_exist(config: BingwallConfig):
    """Create the state file's directory and the image directory if they are missing."""

    try:
        config.state_file.parent.mkdir(parents=True, exist_ok=True)
        config.image_dir.mkdir(parents=True, exist_ok=True)

    except OSError as error:
        raise StorageError(f"There was an error creating bingwall directories: {error}") from error


def update(config: BingwallConfig):

    describe(f"getting image metadata from {bing_handler.metadata_url(config)} ...")
    records = bing_handler.fetch(config)
    describe(f"Bing returned {len(records)} image(s)")

    ensure_dirs_exist(config)
    state.persist(records, config.state_file)
    confirm_success(f"saved image metadata to {config.state_file}")

    latest = state.newest(records)
    image = image_handler.materialize(latest, config)
    confirm_success(f"'{latest.title or latest.copyright}' is available at {image}")

    return image


@click.command(name="update")
@click.pass_obj
@catch_errors
def cli(config: BingwallConfig):
    """Fetch the latest image of the day and download it if needed."""

    update(config)
