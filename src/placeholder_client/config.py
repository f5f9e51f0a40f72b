"""
Configuration constants for the Placeholder API client.

This module centralizes all configurable parameters. The client itself
receives an APIConfig explicitly; the module-level ``config`` instance is
only used by the demo entry point.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class APIConfig:
    """API configuration settings."""
    # None or "" means the base URL is unset; requests fail as invalid
    base_url: Optional[str] = "https://jsonplaceholder.typicode.com/"
    timeout_seconds: float = 10.0
    user_agent: str = "placeholder-client/0.1.0"


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "placeholder_client.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Default configuration instance for the demo entry point
config = Config()
