"""
bingwall Decorators

Decorators shared by the bingwall subcommands.
"""

import sys
from functools import wraps

from bingwall.errors import BingwallError
from bingwall.cli_utils.console import fail


def catch_errors(func):
    """
    Catch and format bingwall errors with the "fail" console template and exit the application
    with an error code. Anything that is not a BingwallError is a bug and propagates as is.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BingwallError as error:
            fail(str(error))
            sys.exit(1)

    return wrapper
