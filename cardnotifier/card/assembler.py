"""Assemble the status card from step settings and the run outcome.

Every text input is passed through :func:`~cardnotifier.engine.subshell.resolve`
before the success/failure selection, so an on-error value whose command
prints nothing counts as unset.  A field whose resolution fails is logged
and blanked; with ``strict=True`` the failure propagates instead.
"""

import logging

from cardnotifier.card.models import Section, StatusCard
from cardnotifier.card.parsers import (
    ensure_newlines,
    parse_actions,
    parse_facts,
    parse_images,
)
from cardnotifier.config import RunOutcome, Settings
from cardnotifier.engine.selector import select_value
from cardnotifier.engine.subshell import resolve
from cardnotifier.errors import CommandExecutionError, SubshellParseError

logger = logging.getLogger(__name__)

#: Settings attributes that may carry ``$(command)`` expressions.
RESOLVED_FIELDS = (
    "author_name",
    "subject",
    "title",
    "title_on_error",
    "theme_color",
    "theme_color_on_error",
    "facts",
    "images",
    "images_on_error",
    "buttons",
    "buttons_on_error",
)


def _resolve_field(name: str, raw: str, strict: bool) -> str:
    """Resolve one settings value, blanking it on failure unless *strict*."""
    try:
        value = resolve(raw)
    except (CommandExecutionError, SubshellParseError) as exc:
        if strict:
            raise
        logger.warning("Could not resolve %s, using an empty value: %s", name, exc)
        return ""
    if value != raw:
        logger.info("Resolved %s: %s", name, value)
    return value


def assemble_card(settings: Settings, outcome: RunOutcome, strict: bool = False) -> StatusCard:
    """Build the card for *outcome* from *settings*.

    Args:
        settings: Step configuration with raw, unresolved values.
        outcome: Result of the build being reported.
        strict: Propagate the first resolution failure instead of
            substituting an empty value for that field.

    Returns:
        A fully resolved :class:`StatusCard` with one section.

    Raises:
        CommandExecutionError: Only when *strict* and a command fails.
        SubshellParseError: Only when *strict* and a value is nested.
    """
    values = {
        name: _resolve_field(name, getattr(settings, name), strict)
        for name in RESOLVED_FIELDS
    }

    def pick(name: str) -> str:
        return select_value(values[name], values[f"{name}_on_error"], outcome.success)

    section = Section(
        activity_title=values["author_name"],
        activity_text=ensure_newlines(values["subject"]),
        facts=parse_facts(values["facts"]),
        images=parse_images(pick("images")),
        potential_action=parse_actions(pick("buttons")),
    )
    return StatusCard(
        theme_color=pick("theme_color"),
        title=pick("title"),
        sections=[section],
    )
