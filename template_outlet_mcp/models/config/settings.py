"""Settings for the documentation server."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_PATH = Path.home() / ".template-outlet-mcp" / "config.yaml"


class DocsSettings(BaseSettings):
    """Server settings, read from ``TEMPLATE_OUTLET_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATE_OUTLET_",
        env_file=".env",
        extra="ignore",
    )

    docs_path: Path | None = None
    server_name: str = "template-outlet-docs"
    log_level: str = "INFO"
    log_file: Path | None = None
    environment: str = Field(default="production")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the level is a standard logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @classmethod
    def load_from_file(cls, config_path: Path | None = None) -> "DocsSettings":
        """Load settings from a YAML file, falling back to defaults."""
        import yaml

        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}
            return cls(**config_data)
        except Exception:
            # Invalid config file, use defaults
            return cls()
