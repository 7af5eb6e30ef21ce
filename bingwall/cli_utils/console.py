"""
bingwall console utilities

This module provides application-wide access to Rich Console objects for writing human-facing
messages. bingwall is mostly run unattended from a timer, so everything it says goes to stderr
and descriptive messages are only shown with --verbose. Machine readable output (paths, JSON)
does not go through here, subcommands write it to stdout with click.echo.
"""

from rich.console import Console
from rich.theme import Theme

bingwall_theme = Theme(
    {"warning": "orange_red1", "fail": "bold red", "confirm": "green", "describe": ""}
)

error_console = Console(theme=bingwall_theme, stderr=True, soft_wrap=True)
log_console = Console(theme=bingwall_theme, stderr=True, soft_wrap=True, quiet=True)


def set_verbose(verbose: bool):
    """Show (or silence) describe and confirm_success messages."""

    log_console.quiet = not verbose


"""
Formatting helpers
"""


def warn(msg: str):
    """
    Format msg and print to stderr.
    """

    error_console.print(f"[bold]warning: [/]{msg}", style="warning")


def describe(msg: str, **kwargs):
    """
    Format descriptive msg and print to stderr when verbose.
    """

    log_console.print(f"{msg}", style="describe", **kwargs)


def confirm_success(msg: str, **kwargs):
    """
    Format confirmation msg and print to stderr when verbose. Accept any additional kwargs that
    console.print from rich module exposes.
    """

    log_console.print(f"{msg}", style="confirm", **kwargs)


def fail(msg: str):
    """
    Format failure msg and print to stderr. Always shown.
    """

    error_console.print(f"failed. {msg}", style="fail", markup=False, emoji=False)
