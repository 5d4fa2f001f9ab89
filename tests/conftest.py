"""Shared pytest fixtures for the cardnotifier test suite.

Every test runs in an empty temporary directory with the step's
environment variables removed, so a developer's shell or ``.env`` file
cannot leak into the settings under test.
"""

import pytest

from cardnotifier.config import BUILD_STATUS_ENV, Settings, load_settings

_STEP_ENV = [
    "is_debug_mode",
    "webhook_url",
    "theme_color",
    "theme_color_on_error",
    "title",
    "title_on_error",
    "author_name",
    "subject",
    "fields",
    "images",
    "images_on_error",
    "buttons",
    "buttons_on_error",
    "fail_on_command_error",
    "request_timeout",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Strip step inputs from the environment and chdir to *tmp_path*."""
    for name in _STEP_ENV:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.upper(), raising=False)
    monkeypatch.delenv(BUILD_STATUS_ENV, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def make_settings():
    """Return a factory building :class:`Settings` with a test webhook URL.

    Yields:
        ``make_settings(**overrides) -> Settings``.
    """

    def _make(**overrides) -> Settings:
        overrides.setdefault("webhook_url", "https://chat.example.com/hook")
        return load_settings(**overrides)

    return _make
