"""
__main__.py

This file adds support for running bingwall as a python module instead of invoking the "bingwall"
command line entrypoint, and provides main() for the console script.
"""


import bingwall.cli_utils.utils as utils
from bingwall.cli import cli


def main():

    commands = utils.import_commands()
    utils.attach_commands(cli, commands)
    cli()


if __name__ == "__main__":
    main()
