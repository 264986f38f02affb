"""
Configuration service for server settings.

Values come from environment variables so containers can override them
without touching code. Read once, on first use. With nothing set the
server listens on port 8080 and the slow endpoint waits 3 seconds.
"""

import os
import platform
from dataclasses import dataclass

VERSION = "1.0.0"
BUILD_DATE = "2025-11-07"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_SLOW_DELAY = 3.0


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass
class Settings:
    """Server settings."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    slow_delay: float = DEFAULT_SLOW_DELAY
    version: str = VERSION
    build_date: str = BUILD_DATE

    @property
    def runtime_version(self) -> str:
        """Interpreter version as major.minor."""
        major, minor, _ = platform.python_version_tuple()
        return f"{major}.{minor}"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from TESTBED_* environment variables.

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        return cls(
            host=os.environ.get("TESTBED_HOST", DEFAULT_HOST),
            port=_env_int("TESTBED_PORT", DEFAULT_PORT),
            log_level=os.environ.get("TESTBED_LOG_LEVEL", "INFO"),
            slow_delay=_env_float("TESTBED_SLOW_DELAY", DEFAULT_SLOW_DELAY),
        )


# Global instance for easy import
_settings = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
