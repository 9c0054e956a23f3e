"""Application configuration using Pydantic Settings."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

# Resolve config: prefer system config (installed), fall back to repo .env (dev)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_SYSTEM_CONF = Path("/etc/gatewire/gatewire.conf")
_ENV_FILE = _SYSTEM_CONF if _SYSTEM_CONF.exists() else _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Settings loaded from environment variables and .env file."""

    # Logging
    log_level: str = "INFO"

    # Identify: embed the intents bitmask in the identify body
    identify_include_intents: bool = False

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        return value.upper()

    model_config = {"env_prefix": "GATEWIRE_", "env_file": str(_ENV_FILE)}


settings = Settings()
