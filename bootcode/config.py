"""
Runtime configuration, read from the environment with module-level defaults.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")

LOG_LEVEL_ENV = "BOOTCODE_LOG_LEVEL"
LOG_FORMAT_ENV = "BOOTCODE_LOG_FORMAT"


@dataclass(frozen=True)
class LoggingSettings:
    level: str = DEFAULT_LOG_LEVEL
    format: str = DEFAULT_LOG_FORMAT  # "console" for development, "json" for log shipping

    def __post_init__(self):
        if self.level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.level}', expected one of {LOG_LEVELS}")
        if self.format not in LOG_FORMATS:
            raise ValueError(f"Unknown log format '{self.format}', expected one of {LOG_FORMATS}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggingSettings":
        """
        Build settings from BOOTCODE_LOG_LEVEL and BOOTCODE_LOG_FORMAT.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ValueError: If either variable holds an unsupported value
        """
        environ = os.environ if environ is None else environ
        return cls(
            level=environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
            format=environ.get(LOG_FORMAT_ENV, DEFAULT_LOG_FORMAT).lower(),
        )
