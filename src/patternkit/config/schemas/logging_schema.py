"""Logging configuration schema."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/patternkit.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum size of one log file in MB")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate rotation limits."""
        if v < 0:
            raise ValueError("Log rotation limits must not be negative")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where logs go")
    file: LogFileConfig = Field(default_factory=lambda: LogFileConfig())
    logger_name: Optional[str] = Field(None, description="Name of the application logger")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.upper()
        return v
