"""Client configuration using pydantic-settings."""
from pathlib import Path

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ACCEPT = (
    "application/xhtml+xml,text/html;q=0.9,application/xml;q=0.8,*/*;q=0.5"
)


class HttpConfig(BaseModel):
    """HTTP transport configuration."""

    timeout: float = 30.0
    user_agent: str = "hyperclient/0.1"
    follow_redirects: bool = True
    max_redirects: int = 10
    accept: str = DEFAULT_ACCEPT


class Settings(BaseSettings):
    """Client settings loaded from YAML or environment."""

    model_config = SettingsConfigDict(
        env_prefix="HYPERCLIENT_",
        env_nested_delimiter="__",
    )

    http: HttpConfig = HttpConfig()

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            Settings instance with loaded configuration.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)
