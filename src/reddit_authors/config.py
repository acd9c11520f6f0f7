# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to input/output paths, HTTP options and logging config

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from reddit_authors import __version__


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="REDDIT_AUTHORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Input / Output Configuration
    input_dir: Path = Field(default=Path("input"), description="Directory holding the URL list")
    input_filename: str = Field(default="urls.txt", description="Newline-delimited URL list inside input_dir")
    output_dir: Path = Field(default=Path("output"), description="Directory receiving timestamped CSV reports")

    # HTTP Configuration
    about_suffix: str = Field(default="about.json", description="Path segment appended to every post URL")
    request_timeout: float = Field(default=5.0, description="Per-request timeout in seconds")
    user_agent: str = Field(default=f"reddit-authors/{__version__}", description="User-Agent header value")
    follow_redirects: bool = Field(default=False, description="Follow HTTP redirects when fetching")
    fail_on_http_error: bool = Field(
        default=False, description="Treat 4xx/5xx responses as failed requests instead of readable bodies"
    )

    # Logging Configuration
    log_mode: Literal["interactive", "production"] | None = Field(
        default=None, description="Logging output mode, detected from the terminal when unset"
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")

    @property
    def input_path(self) -> Path:
        """Full path of the URL list."""
        return self.input_dir / self.input_filename


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
