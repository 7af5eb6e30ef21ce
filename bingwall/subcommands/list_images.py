"""
bingwall list

This module defines the 'list' subcommand which prints one line per image in the state file,
newest first. Columns are tab separated so the output is easy to cut or awk:

    <image path>  <start date>  <title>  <cached: true/false>
"""

import click

from bingwall import image_handler
from bingwall import state
from bingwall.config import BingwallConfig
from bingwall.cli_utils.decorators import catch_errors


@click.command(name="list")
@click.option(
    "--date",
    "date_format",
    default="%Y-%m-%d",
    show_default=True,
    help="strftime format for the start date column, e.g. '%a %d %b'.",
)
@click.pass_obj
@catch_errors
def cli(config: BingwallConfig, date_format: str):
    """List the images from the last update."""

    records = state.load_state(config.state_file)
    # raises NotFoundError for an empty state
    state.newest(records)

    for record in sorted(records, key=lambda record: record.start_date, reverse=True):
        path = image_handler.image_path(record, config)
        line = [
            str(path),
            record.start_date.strftime(date_format),
            record.title or record.copyright,
            str(path.is_file()).lower(),
        ]
        click.echo("\t".join(line))
