"""Runner settings, read from ESB_FIREPLACE_* environment variables."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "ESB_FIREPLACE_"

class RunnerSettings(BaseSettings):
    """Settings that don't belong on the command line the harness drives."""
    timed: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        # accept "debug", " Info " etc.
        if isinstance(value, str): return value.strip().upper()
        return value

def load_settings(**overrides) -> RunnerSettings:
    """Loads settings from the environment; keyword overrides win."""
    return RunnerSettings(**overrides)
