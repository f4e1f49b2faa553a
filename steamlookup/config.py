"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic_settings import BaseSettings


class StoreBackend(str, Enum):
    """Identifier store backend type."""
    SQLITE = "sqlite"
    MEMORY = "memory"


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class AppConfig(BaseSettings):
    """Configuration for steamlookup."""

    # HTTP settings
    base_url: str = "https://steamcommunity.com"
    request_timeout_seconds: float = 30.0
    follow_redirects: bool = True

    # Identifier store
    store_backend: StoreBackend = StoreBackend.SQLITE
    sqlite_path: str = ".steamlookup.db"

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "STEAMLOOKUP_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def profile_url(self, identifier: str) -> str:
        """Canonical profile URL for an identifier."""
        return f"{self.base_url.rstrip('/')}/profiles/{identifier}"
