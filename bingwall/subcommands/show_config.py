"""
bingwall config

This module defines the 'config' subcommand which prints the effective configuration, i.e.
config.json merged with any global options given on the command line.
"""

import json
from dataclasses import asdict

import click

from bingwall.config import BingwallConfig
from bingwall.config import PathEncoder
from bingwall.cli_utils.console import confirm_success
from bingwall.cli_utils.decorators import catch_errors


@click.command(name="config")
@click.option(
    "--write",
    is_flag=True,
    help="Save the effective configuration to config.json in the bingwall config directory.",
)
@click.pass_obj
@catch_errors
def cli(config: BingwallConfig, write: bool):
    """Show (and optionally save) the bingwall configuration."""

    if write:
        config_file = config.generate_config_json()
        confirm_success(f"saved configuration to {config_file}")

    click.echo(json.dumps(asdict(config), sort_keys=True, indent=4, cls=PathEncoder))
