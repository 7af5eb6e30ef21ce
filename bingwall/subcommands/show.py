"""
bingwall show

This module defines the 'show' subcommand which prints the path of one image from the last
update: the newest (same as plain 'bingwall') or a random one, with recent images more likely.
Like the query it only reads the state file and never downloads, so a random pick may point at
an image that is not cached yet; 'bingwall list' shows which ones are.
"""

import click

from bingwall import image_handler
from bingwall import state
from bingwall.config import BingwallConfig
from bingwall.cli_utils.decorators import catch_errors


@click.command(name="show")
@click.argument(
    "kind", type=click.Choice(["latest", "random"]), default="latest", required=False
)
@click.pass_obj
@catch_errors
def cli(config: BingwallConfig, kind: str):
    """Print the path of the latest or a random image."""

    records = state.load_state(config.state_file)

    if kind == "random":
        record = state.random_record(records)
    else:
        record = state.newest(records)

    click.echo(str(image_handler.image_path(record, config)))
