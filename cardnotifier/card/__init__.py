"""Status card package — wire models, list parsers, and assembly."""

from cardnotifier.card.assembler import assemble_card
from cardnotifier.card.models import StatusCard

__all__ = ["StatusCard", "assemble_card"]
