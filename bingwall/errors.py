"""
bingwall errors

Every failure bingwall reports to the user is one of the error kinds below. Library
code raises them (chaining the underlying exception) and the CLI turns them into a
single message on standard error and a non-zero exit code, see
bingwall.cli_utils.decorators.catch_errors.
"""


class BingwallError(Exception):
    """Base class for errors that are reported to the user."""

    pass


class NetworkError(BingwallError):
    """Raise when a request to Bing fails, times out or returns an error status."""

    pass


class SchemaError(BingwallError):
    """Raise when data (from Bing or from the state file) does not have the expected shape."""

    pass


class StorageError(BingwallError):
    """Raise when the state file or an image file cannot be read or written."""

    pass


class NotFoundError(BingwallError):
    """Raise when the state is queried before any update has been run."""

    pass


class BingwallConfigError(BingwallError):
    """Raise when an issue occurs with handling bingwall configuration."""

    pass
