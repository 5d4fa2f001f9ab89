"""Tests for :mod:`cardnotifier.config`."""

import pytest

from cardnotifier.config import BUILD_STATUS_ENV, RunOutcome, Settings, load_settings
from cardnotifier.errors import ConfigError


class TestSettings:
    """Verify environment binding and defaults."""

    def test_reads_step_inputs(self, monkeypatch):
        """Inputs are read from their step variable names."""
        monkeypatch.setenv("webhook_url", "https://chat.example.com/hook")
        monkeypatch.setenv("title", "Build OK")
        monkeypatch.setenv("fields", "Branch|main")
        s = load_settings()
        assert s.webhook_url.get_secret_value() == "https://chat.example.com/hook"
        assert s.title == "Build OK"
        assert s.facts == "Branch|main"

    @pytest.mark.parametrize("raw,expected", [("yes", True), ("no", False)])
    def test_debug_yes_no(self, monkeypatch, raw, expected):
        """is_debug_mode accepts the step's yes/no options."""
        monkeypatch.setenv("webhook_url", "https://chat.example.com/hook")
        monkeypatch.setenv("is_debug_mode", raw)
        assert load_settings().debug is expected

    def test_defaults(self, make_settings):
        """Optional inputs have sensible defaults."""
        s = make_settings()
        assert s.debug is False
        assert s.theme_color == "3f9fd3"
        assert s.theme_color_on_error == ""
        assert s.fail_on_command_error is False
        assert s.request_timeout is None

    def test_webhook_url_is_masked(self, make_settings):
        """The secret does not appear in the settings repr."""
        assert "chat.example.com" not in repr(make_settings())

    def test_missing_webhook_url(self):
        """A missing webhook URL is a configuration error."""
        with pytest.raises(ConfigError):
            load_settings()

    def test_blank_webhook_url(self):
        """A blank webhook URL is a configuration error."""
        with pytest.raises(ConfigError):
            load_settings(webhook_url="   ")

    def test_malformed_bool(self, monkeypatch):
        """Unparseable values are reported as configuration errors."""
        monkeypatch.setenv("webhook_url", "https://chat.example.com/hook")
        monkeypatch.setenv("is_debug_mode", "maybe")
        with pytest.raises(ConfigError):
            load_settings()

    def test_settings_class(self, make_settings):
        """load_settings() returns a Settings object."""
        assert isinstance(make_settings(), Settings)


class TestRunOutcome:
    """Verify the build outcome signal."""

    def test_zero_is_success(self):
        """Status "0" means the build passed."""
        assert RunOutcome.from_environ({BUILD_STATUS_ENV: "0"}).success is True

    def test_non_zero_is_failure(self):
        """Any other status means the build failed."""
        assert RunOutcome.from_environ({BUILD_STATUS_ENV: "1"}).success is False

    def test_unset_is_failure(self):
        """A missing status is treated as failure."""
        assert RunOutcome.from_environ({}).success is False

    def test_reads_process_environment(self, monkeypatch):
        """Without an explicit mapping the process environment is used."""
        monkeypatch.setenv(BUILD_STATUS_ENV, "0")
        assert RunOutcome.from_environ().success is True

    def test_immutable(self):
        """The outcome cannot change once built."""
        outcome = RunOutcome(success=True)
        with pytest.raises(AttributeError):
            outcome.success = False
