"""
bingwall state

This module defines the 'state' subcommand which prints the image metadata bingwall knows
about, either as persisted by the last update or (with --remote) as Bing reports it right now.
"""

import json

import click

from bingwall import bing_handler
from bingwall import state
from bingwall.config import BingwallConfig
from bingwall.cli_utils.decorators import catch_errors


@click.command(name="state")
@click.option(
    "--url",
    "show_url",
    is_flag=True,
    help="Print the url image metadata is requested from and exit.",
)
@click.option(
    "--remote",
    is_flag=True,
    help="Fetch the metadata from Bing instead of reading the state file. Nothing is saved.",
)
@click.pass_obj
@catch_errors
def cli(config: BingwallConfig, show_url: bool, remote: bool):
    """Print image metadata as JSON."""

    if show_url:
        click.echo(bing_handler.metadata_url(config))
        return

    if remote:
        records = bing_handler.fetch(config)
    else:
        records = state.load_state(config.state_file)

    click.echo(json.dumps({"images": [record.to_json() for record in records]}, indent=4))
