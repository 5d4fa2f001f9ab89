"""Build-pipeline notifier that posts a status card to a chat webhook."""

__version__ = "1.0.0"
