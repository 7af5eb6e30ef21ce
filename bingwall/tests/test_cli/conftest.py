"""
conftest.py

Test configuration for CLI and entrypoint tests.

Defines pytest fixtures specifically related to CLI and click operations.
"""


import pytest
import click

from bingwall.cli import cli
from bingwall.cli_utils.utils import import_commands
from bingwall.cli_utils.utils import attach_commands


@pytest.fixture(scope="session")
def subcommands():
    """
    Import all of the commands found in the bingwall.subcommands package *without*
    invoking the entrypoint (cli).
    """

    return import_commands()


@pytest.fixture(autouse=True)
def setup(subcommands, reset_commands, entry_point: click.Group = cli):
    attach_commands(entry_point, subcommands)
    yield
    reset_commands(entry_point=entry_point)


@pytest.fixture
def reset_commands():
    def inner(entry_point: click.Group = cli):
        # teardown the commands that may have been added to clean the test environment.
        entry_point.commands = {}

    return inner
