"""
trello-cli exception hierarchy.

All custom exceptions live here to avoid circular imports.
Every error that can reach the top level is a CliError; ``kind`` tags the
variant so callers and tests can branch on it without string matching.
"""


class CliError(Exception):
    """Exit code 1: generic CLI failure."""

    exit_code = 1
    kind = "error"


class SetupError(CliError):
    """Exit code 2: no credentials, unreadable config."""

    exit_code = 2
    kind = "setup"


class ValidationError(CliError):
    """Raised by the command layer before any network call."""

    kind = "validation"


class TransportError(CliError):
    """Network or timeout failure before a response was obtained."""

    kind = "transport"


class ApiError(CliError):
    """The API answered with status >= 400."""

    kind = "api"

    def __init__(self, status, body):
        self.status = status
        self.body = body
        super().__init__(f"HTTP {status}: {body}")


class DecodeError(CliError):
    """A success payload did not match the expected shape."""

    kind = "decode"
