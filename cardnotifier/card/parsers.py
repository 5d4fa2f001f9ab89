"""Parse delimited configuration strings into card records.

Items are separated by line breaks.  Configuration values usually arrive
on a single line, so the literal two-character ``\\n`` escape separates
items as well.  Blank items are skipped and input order is preserved.

Pair-valued items (facts and buttons) use ``|`` between the two halves::

    Branch|main\\nWorkflow|primary
"""

import logging

from cardnotifier.card.models import ActionTarget, Fact, Image, OpenUriAction

logger = logging.getLogger(__name__)

ESCAPED_NEWLINE = "\\n"
PAIR_SEPARATOR = "|"


def ensure_newlines(text: str) -> str:
    """Replace every literal ``\\n`` escape in *text* with a line break."""
    return text.replace(ESCAPED_NEWLINE, "\n")


def _items(text: str) -> list[str]:
    return [line.strip() for line in ensure_newlines(text).splitlines() if line.strip()]


def _pairs(text: str) -> list[tuple[str, str]]:
    pairs = []
    for item in _items(text):
        first, sep, second = item.partition(PAIR_SEPARATOR)
        first, second = first.strip(), second.strip()
        if not sep or not first or not second:
            logger.debug("Skipping malformed item %r", item)
            continue
        pairs.append((first, second))
    return pairs


def parse_facts(text: str) -> list[Fact]:
    """Parse ``name|value`` items into :class:`Fact` records."""
    return [Fact(name=name, value=value) for name, value in _pairs(text)]


def parse_images(text: str) -> list[Image]:
    """Parse one image URL per item."""
    return [Image(image=url) for url in _items(text)]


def parse_actions(text: str) -> list[OpenUriAction]:
    """Parse ``label|url`` items into open-URL buttons."""
    return [
        OpenUriAction(name=label, targets=[ActionTarget(uri=url)])
        for label, url in _pairs(text)
    ]
