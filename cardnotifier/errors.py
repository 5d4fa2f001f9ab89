"""Exception hierarchy for the notifier.

Every failure the command-line entry point knows how to report derives
from :class:`NotifierError`.
"""

from typing import Optional


class NotifierError(Exception):
    """Base class for all notifier failures."""


class ConfigError(NotifierError):
    """Configuration is missing or malformed."""


class CommandExecutionError(NotifierError):
    """An external command failed to launch or exited non-zero.

    Attributes:
        command: The command line as given.
        returncode: Process exit status, or ``None`` if it never started.
        output: Combined stdout/stderr captured before the failure.
    """

    def __init__(
        self,
        command: str,
        reason: str,
        returncode: Optional[int] = None,
        output: str = "",
    ) -> None:
        super().__init__(f"command {command!r} failed: {reason}")
        self.command = command
        self.returncode = returncode
        self.output = output


class SubshellParseError(NotifierError):
    """A subshell expression is nested or otherwise cannot be tokenized."""


class SerializationError(NotifierError):
    """The status card could not be encoded to JSON."""


class TransportError(NotifierError):
    """The webhook request could not be completed."""


class ServerError(NotifierError):
    """The webhook answered with a non-success status.

    Attributes:
        status_code: HTTP status returned by the server.
        body: Full response body text.
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"server error: {status_code}, response: {body}")
        self.status_code = status_code
        self.body = body
