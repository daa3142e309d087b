"""Settings for zip2meta, loaded from ``ZIP2META_*`` environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Zip2MetaSettings(BaseSettings):
    """Pydantic model for validating zip2meta settings."""

    model_config = SettingsConfigDict(env_prefix="ZIP2META_", extra="forbid")

    archive_path: Path = Path("./sample.zip")
    """The archive described when none is given on the command line."""

    log_level: str = "WARNING"


def get_settings() -> Zip2MetaSettings:
    """Load the settings from the current environment."""
    return Zip2MetaSettings()
