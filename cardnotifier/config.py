"""Step configuration via environment variables and defaults."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cardnotifier.errors import ConfigError

logger = logging.getLogger(__name__)

#: Environment variable the CI sets to ``"0"`` when the build passed.
BUILD_STATUS_ENV = "BITRISE_BUILD_STATUS"


class Settings(BaseSettings):
    """Step inputs loaded from the environment / ``.env`` file.

    Any text input except ``webhook_url`` may contain ``$(command)``
    expressions.  ``webhook_url`` may instead be entirely one expression
    that prints the secret URL.

    Attributes:
        debug: Enables DEBUG logging (``is_debug_mode``, ``yes``/``no``).
        webhook_url: Incoming-webhook endpoint of the chat channel.
        theme_color: Card accent color for passing builds.
        theme_color_on_error: Card accent color for failed builds.
        title: Card title for passing builds.
        title_on_error: Card title for failed builds.
        author_name: Shown as the section's activity title.
        subject: Shown as the section's activity text; literal ``\\n``
            sequences become line breaks.
        facts: ``name|value`` facts, one per line (``fields``).
        images: Image URLs, one per line.
        images_on_error: Image URLs for failed builds.
        buttons: ``label|url`` buttons, one per line.
        buttons_on_error: Buttons for failed builds.
        fail_on_command_error: Abort instead of blanking a field whose
            command substitution fails.
        request_timeout: Webhook request deadline in seconds; unset means
            wait indefinitely.
    """

    debug: bool = Field(default=False, alias="is_debug_mode")
    webhook_url: SecretStr
    theme_color: str = "3f9fd3"
    theme_color_on_error: str = ""
    title: str = ""
    title_on_error: str = ""
    author_name: str = ""
    subject: str = ""
    facts: str = Field(default="", alias="fields")
    images: str = ""
    images_on_error: str = ""
    buttons: str = ""
    buttons_on_error: str = ""
    fail_on_command_error: bool = False
    request_timeout: Optional[float] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("webhook_url")
    @classmethod
    def _require_webhook_url(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("webhook_url must not be empty")
        return value


def load_settings(**overrides) -> Settings:
    """Build :class:`Settings` from the environment.

    Args:
        **overrides: Field values taking precedence over the environment.

    Raises:
        ConfigError: If a required input is missing or a value is
            malformed.
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc


@dataclass(frozen=True)
class RunOutcome:
    """Result of the build being reported, fixed for the whole run."""

    success: bool

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "RunOutcome":
        """Read the outcome from :data:`BUILD_STATUS_ENV`.

        Only ``"0"`` counts as success; an unset variable is a failure.
        """
        env = os.environ if environ is None else environ
        return cls(success=env.get(BUILD_STATUS_ENV) == "0")
