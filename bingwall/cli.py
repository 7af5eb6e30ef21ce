"""
bingwall

Keep the Bing image of the day around for your desktop wallpaper.

This module defines the entry point to the bingwall CLI. The 'cli' command group loads the
configuration (config.json merged with any global options), stores it on the click context
for subcommands to pick up with @click.pass_obj, and, when invoked without a subcommand,
performs the query: print the path of the newest image of the day.

A timer runs 'bingwall update' to refresh the state and cache the image, and a wallpaper
script only ever needs the output of plain 'bingwall':

    $ gsettings set org.gnome.desktop.background picture-uri "file://$(bingwall)"
"""

from pathlib import Path

import click

from bingwall import image_handler
from bingwall import state
from bingwall.config import BingwallConfig
from bingwall.config import load_config
from bingwall.cli_utils.console import set_verbose
from bingwall.cli_utils.decorators import catch_errors


def query(config: BingwallConfig) -> Path:
    """Return the local path of the newest persisted image. Never downloads."""

    records = state.load_state(config.state_file)
    return image_handler.image_path(state.newest(records), config)


@click.group(invoke_without_command=True)
@click.option(
    "--config-path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Read configuration from this file instead of config.json in the bingwall config directory.",
)
@click.option(
    "--market",
    "-m",
    help="Bing market to request images for, e.g. en-US or de-DE.",
)
@click.option(
    "--number",
    "-n",
    type=click.IntRange(min=1),
    help="Number of days of images to request (Bing returns at most 8).",
)
@click.option(
    "--index",
    "-i",
    type=click.IntRange(min=0),
    help="Days back from today to start at (0 is today).",
)
@click.option(
    "--resolution",
    "-r",
    help=(
        "Download images in this size from their urlbase, e.g. UHD or 1920x1080. The size is "
        "part of the image file name, so use the same value for 'update' and for printing paths."
    ),
)
@click.option(
    "--verbose/--quiet",
    default=False,
    help="Describe what bingwall is doing on standard error.",
)
@click.version_option(package_name="bingwall")
@click.pass_context
@catch_errors
def cli(
    ctx: click.Context, config_path, market, number, index, resolution, verbose
):  # named cli by convention in the click docs
    """
    Print the path of the current Bing image of the day.

    Run 'bingwall update' (e.g. from a timer) to fetch the latest metadata and download
    the image, then use 'bingwall' with no subcommand wherever the image path is needed:

        $ bingwall update

        $ bingwall
        /home/me/.config/bingwall/images/OHR.Example_EN-US123_1920x1080.jpg
    """

    set_verbose(verbose)

    ctx.obj = load_config(config_path).with_overrides(
        market=market, number=number, index=index, resolution=resolution
    )

    if ctx.invoked_subcommand is None:
        click.echo(str(query(ctx.obj)))
