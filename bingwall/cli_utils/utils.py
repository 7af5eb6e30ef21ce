"""
bingwall CLI Utilities

This module contains utilities for working across click subcommands: discovering the
subcommands that ship with bingwall and attaching them to the 'cli' group.
"""

import importlib
import pkgutil
from collections.abc import Iterable

import click

import bingwall.subcommands
from bingwall.cli_utils.console import warn


def import_commands(
    package=bingwall.subcommands,
) -> list[click.Command]:
    """
    Retrieve a set of click Commands from the modules of package. Default package is the built in
    subcommands package for commands that come pre-installed with bingwall.

    A valid bingwall command module should define a "cli" function that is wrapped as
    a click Command object. This function will be exposed as a command to the end user.
    Set the 'name' keyword argument in the @click.command decorator to set the
    name of the command intended for the end user.
    """

    commands = []

    for module_info in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        module = importlib.import_module(f"{package.__name__}.{module_info.name}")

        try:
            commands.append(getattr(module, "cli"))

        except AttributeError:
            warn(f"Cannot add command {module_info.name}: no 'cli' function found.")

    return commands


def attach_commands(group: click.Group, commands: Iterable[click.Command]):
    """
    Attach each command in a list of click Command objects to a provided group. Useful when
    retrieving a dynamic list of subcommands with import_commands().
    """

    for command in commands:
        group.add_command(command)
