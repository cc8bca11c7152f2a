"""Configuration management for the application."""
import logging
import threading
from typing import Any, Dict, Optional

from patternkit.config.loader import ConfigurationLoader
from patternkit.config.schemas import AppConfig, LoggingConfig

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Lazily loads and caches the application configuration.

    The configuration is read once on first access from the optional file,
    the PATTERNKIT_* environment variables and any explicit overrides.
    """

    def __init__(self, config_file: Optional[str] = None,
                 overrides: Optional[Dict[str, Any]] = None):
        self._config_file = config_file
        self._overrides = overrides or {}
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = ConfigurationLoader()

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._loader.load(self._config_file, self._overrides)
                    logger.debug("Application configuration loaded")
        return self._app_config

    def get_logging_config(self) -> LoggingConfig:
        return self.app_config.logging

    def get(self, key: str, default: Any = None) -> Any:
        """Get a top-level configuration value by name."""
        return getattr(self.app_config, key, default)

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config
