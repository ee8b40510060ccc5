"""
Configuration settings for the Webdesk file server.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Process settings."""

    # Server settings
    root: Path = Field(default=Path("."), description="Server root directory")
    host: str = Field(default="127.0.0.1", description="Host to bind to")
    port: int = Field(default=8000, description="Port to bind to when Config.txt sets none")

    # Server root files
    config_name: str = Field(default="Config", description="Base name of the key/value config file")
    mime_name: str = Field(default="Mime", description="Base name of the MIME table file")
    home_document: str = Field(default="Home.html", description="Default document")

    # Logging settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: str = Field(default="", description="Log file path")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "WEBDESK_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def root_dir(self) -> str:
        """Absolute server root."""
        return str(self.root.resolve())


def get_settings(**overrides) -> Settings:
    """Get application settings, with explicit overrides taking precedence."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
