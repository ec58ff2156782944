"""Logging configuration model for mcpshell."""

import logging
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator

from mcpshell.models.base import MCPShellBaseModel


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVEL_ALIASES = {"WARN": "WARNING"}


class LoggingConfig(MCPShellBaseModel):
    """Log file location and verbosity."""

    file: Path | None = Field(default=None, description="Path to the log file")
    level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Validate log level is recognized."""
        if v is None:
            return "INFO"
        upper_v = str(v).strip().upper()
        if not upper_v:
            return "INFO"
        upper_v = LOG_LEVEL_ALIASES.get(upper_v, upper_v)
        if upper_v not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return upper_v

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: Any) -> Path | None:
        """Expand ``~`` and resolve the log file path."""
        if v is None or v == "":
            return None
        if isinstance(v, str | Path):
            return Path(v).expanduser().resolve()
        return v  # type: ignore[no-any-return]

    def get_log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        level_map = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL,
        }
        return level_map.get(self.level, logging.INFO)
