"""Command substitution inside configuration strings.

A configuration value may embed ``$(command)`` expressions.  The value is
first split into a sequence of tokens::

    [Literal("Commit by "), Command("git log -1 --format=%an", "$(git log -1 --format=%an)")]

and every command token is then executed once, left to right, with its
trimmed output spliced back in place.  Because substitution works on the
token list built from the original text, output that itself looks like
``$(...)`` is never executed.

Two entry points with different failure contracts are provided:

* :func:`resolve` is strict: the first failing command aborts resolution
  and the exception propagates to the caller.
* :func:`resolve_whole` is best-effort and applies only when the entire
  value is one expression (secrets such as the webhook URL).  A failing
  command yields an empty string.
"""

import logging
from typing import NamedTuple, Union

from cardnotifier.engine.command import run_command
from cardnotifier.errors import CommandExecutionError, SubshellParseError

logger = logging.getLogger(__name__)

OPEN_MARKER = "$("
CLOSE_MARKER = ")"


class Literal(NamedTuple):
    """Plain text copied through unchanged."""

    text: str


class Command(NamedTuple):
    """A ``$(...)`` expression; *source* keeps the markers for diagnostics."""

    body: str
    source: str


Token = Union[Literal, Command]


def tokenize(text: str) -> list[Token]:
    """Split *text* into literal and command tokens.

    The command body runs from the open marker to the first close marker.
    An open marker with no close marker after it is left as literal text.

    Args:
        text: Raw configuration value.

    Returns:
        Tokens in source order.  Adjacent literals are not merged and
        empty literals are omitted.

    Raises:
        SubshellParseError: If a command body contains another open
            marker, i.e. the expression is nested.
    """
    tokens: list[Token] = []
    pos = 0
    while True:
        start = text.find(OPEN_MARKER, pos)
        if start == -1:
            break
        body_start = start + len(OPEN_MARKER)
        end = text.find(CLOSE_MARKER, body_start)
        if end == -1:
            break
        body = text[body_start:end]
        if OPEN_MARKER in body:
            raise SubshellParseError(
                f"nested subshell expressions are not supported: {text[start:]!r}"
            )
        if start > pos:
            tokens.append(Literal(text[pos:start]))
        tokens.append(Command(body, text[start : end + len(CLOSE_MARKER)]))
        pos = end + len(CLOSE_MARKER)

    if pos < len(text):
        tokens.append(Literal(text[pos:]))
    return tokens


def resolve(text: str) -> str:
    """Replace every ``$(command)`` in *text* with the command's output.

    Commands run one at a time in order of appearance.  Identical
    expressions are executed once per occurrence.  Output is stripped of
    leading and trailing whitespace before it is spliced in.

    Args:
        text: Raw configuration value.

    Returns:
        *text* with all expressions substituted, or *text* itself when it
        contains none (no command is run in that case).

    Raises:
        SubshellParseError: If *text* contains a nested expression.
        CommandExecutionError: If any command fails.  Nothing is returned
            for the partially substituted string.
    """
    tokens = tokenize(text)
    if not any(isinstance(tok, Command) for tok in tokens):
        return text

    parts = []
    for tok in tokens:
        if isinstance(tok, Literal):
            parts.append(tok.text)
            continue
        logger.debug("Resolving subshell %s", tok.source)
        parts.append(run_command(tok.body).strip())
    return "".join(parts)


def resolve_whole(value: str) -> str:
    """Resolve *value* when it is exactly one ``$(command)`` expression.

    Args:
        value: Raw configuration value, typically a secret.

    Returns:
        The trimmed output of the command, ``""`` if the command fails,
        or *value* unchanged when it is not shaped like a single
        expression.
    """
    stripped = value.strip()
    if not (stripped.startswith(OPEN_MARKER) and stripped.endswith(CLOSE_MARKER)):
        return value

    command_line = stripped[len(OPEN_MARKER) : -len(CLOSE_MARKER)]
    try:
        return run_command(command_line).strip()
    except CommandExecutionError as exc:
        logger.warning("Falling back to an empty value: %s", exc)
        return ""
