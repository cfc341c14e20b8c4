"""
Host-supplied defaults for command blocks.

A block that omits its ``profile:`` or ``region:`` line falls back to these
values. They are read from the environment (``SQS_CLIENT_DEFAULT_PROFILE``,
``SQS_CLIENT_DEFAULT_REGION``) or passed in explicitly.
"""

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqsdsl.exceptions import ConfigurationError

DEFAULT_PROFILE = "default"
DEFAULT_REGION = "us-east-1"


class ClientSettings(BaseSettings):
    """Default credential profile and region for parsed commands."""

    model_config = SettingsConfigDict(
        env_prefix="SQS_CLIENT_",
        frozen=True,
        extra="ignore",
    )

    default_profile: str = DEFAULT_PROFILE
    default_region: str = DEFAULT_REGION

    @field_validator("default_profile", "default_region")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must be a non-empty string")
        return value


def load_settings(**overrides: str) -> ClientSettings:
    """
    Build settings from the environment, applying explicit overrides.

    Params:
        **overrides: Field values that take precedence over the environment

    Returns:
        Validated ``ClientSettings``

    Raises:
        ConfigurationError: If a value is blank or otherwise invalid
    """
    try:
        return ClientSettings(**overrides)
    except ValidationError as e:
        error = e.errors()[0]
        setting = ".".join(str(part) for part in error["loc"]) or "settings"
        raise ConfigurationError(setting, error["msg"]) from e
