"""Command-line entry point.

Loads the step settings, assembles the status card for the current build
outcome, and posts it.  Any :class:`~cardnotifier.errors.NotifierError`
is reported on stderr and ends the process with status 1.
"""

import logging
import sys

from cardnotifier import __version__
from cardnotifier.card import assemble_card
from cardnotifier.config import RunOutcome, Settings, load_settings
from cardnotifier.errors import NotifierError
from cardnotifier.poster import post_card

logger = logging.getLogger(__name__)


def run(settings: Settings, outcome: RunOutcome) -> None:
    """Assemble and post one card.

    Raises:
        NotifierError: On any fatal failure.
    """
    logger.info("Build outcome: %s", "success" if outcome.success else "failure")
    card = assemble_card(settings, outcome, strict=settings.fail_on_command_error)
    post_card(
        card,
        settings.webhook_url.get_secret_value(),
        timeout=settings.request_timeout,
    )


def main() -> None:
    """Run the notifier when invoked as ``cardnotifier`` or ``python -m cardnotifier.main``."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings()
        if settings.debug:
            logging.getLogger().setLevel(logging.DEBUG)
        logger.info("cardnotifier v%s", __version__)
        logger.info("Config: %s", settings)
        run(settings, RunOutcome.from_environ())
    except NotifierError as exc:
        logger.error("Error: %s", exc)
        sys.exit(1)

    logger.info("Message successfully sent! 🚀")


if __name__ == "__main__":
    main()
