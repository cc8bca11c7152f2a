"""Configuration package."""

from .loader import ConfigurationLoader
from .manager import ConfigurationManager
from .schemas import AppConfig, LogDestination, LogFileConfig, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "ConfigurationLoader",
    "ConfigurationManager",
    "LogDestination",
    "LogFileConfig",
    "LogLevel",
    "LoggingConfig",
]
