"""Configuration schemas package."""

from .app_schema import OUTPUT_FORMATS, AppConfig, validate_config
from .logging_schema import LogDestination, LogFileConfig, LoggingConfig, LogLevel

__all__ = [
    "OUTPUT_FORMATS",
    "AppConfig",
    "LogDestination",
    "LogFileConfig",
    "LogLevel",
    "LoggingConfig",
    "validate_config",
]
