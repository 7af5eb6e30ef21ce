"""
bingwall reset

This module defines the 'reset' subcommand which removes the downloaded images and/or the
state file, e.g. as part of an uninstall or to start over with a different market.
"""

import shutil

import click

from bingwall.config import BingwallConfig
from bingwall.errors import StorageError
from bingwall.cli_utils.console import warn
from bingwall.cli_utils.decorators import catch_errors


def reset_images(config: BingwallConfig, dry_run: bool = False):

    image_dir = config.image_dir
    if not image_dir.exists():
        warn(f"{image_dir} does not exist, nothing to remove")
        return

    if dry_run:
        count = sum(1 for _ in image_dir.iterdir())
        click.echo(
            f"[DRY RUN]: Removing {image_dir} ({count} image{'' if count == 1 else 's'})..."
        )
        return

    try:
        shutil.rmtree(image_dir)
    except OSError as error:
        raise StorageError(f"There was an error removing {image_dir}: {error}") from error


def reset_state(config: BingwallConfig, dry_run: bool = False):

    state_file = config.state_file
    if not state_file.exists():
        warn(f"{state_file} does not exist, nothing to remove")
        return

    if dry_run:
        click.echo(f"[DRY RUN]: Removing {state_file}...")
        return

    try:
        state_file.unlink()
    except OSError as error:
        raise StorageError(f"There was an error removing {state_file}: {error}") from error


@click.command(name="reset")
@click.argument("items", nargs=-1, type=click.Choice(["images", "state"]))
@click.option("--all", "reset_all", is_flag=True, help="Remove both images and state.")
@click.option(
    "--dry-run", is_flag=True, help="Only print what would be removed."
)
@click.pass_obj
@catch_errors
def cli(config: BingwallConfig, items, reset_all: bool, dry_run: bool):
    """Remove downloaded images and/or the state file."""

    if not items and not reset_all:
        raise click.UsageError("Specify what to reset ('images', 'state') or use --all.")

    if reset_all or "images" in items:
        reset_images(config, dry_run=dry_run)

    if reset_all or "state" in items:
        reset_state(config, dry_run=dry_run)
