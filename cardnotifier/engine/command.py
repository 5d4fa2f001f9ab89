"""Execute an external command and capture its combined output.

The command line is split on whitespace only.  There is no quoting or
escaping, so an argument containing spaces cannot be expressed.  No
shell is involved and no timeout is applied.  Output is decoded as UTF-8
with undecodable bytes replaced.
"""

import logging
import subprocess

from cardnotifier.errors import CommandExecutionError

logger = logging.getLogger(__name__)


def run_command(command_line: str) -> str:
    """Run *command_line* in the current working directory.

    Args:
        command_line: Program name followed by whitespace-separated
            arguments.

    Returns:
        Combined standard output and standard error as text.

    Raises:
        CommandExecutionError: If the command is empty, cannot be
            launched, or exits with a non-zero status.
    """
    args = command_line.split()
    if not args:
        raise CommandExecutionError(command_line, "empty command")

    try:
        result = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        logger.error("Error: %s", exc)
        raise CommandExecutionError(command_line, str(exc)) from exc

    if result.returncode != 0:
        logger.error(
            "Error: %r exited %d with output: %s",
            command_line,
            result.returncode,
            result.stdout,
        )
        raise CommandExecutionError(
            command_line,
            f"exit status {result.returncode}",
            returncode=result.returncode,
            output=result.stdout,
        )

    logger.info("%s", result.stdout)
    return result.stdout
