"""
Configuration management for todolist.

Loads settings from config.ini with environment variable overrides.
"""

import configparser
import os
from pathlib import Path
from typing import Optional, Dict, Any

from todolist.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PLACEHOLDER = "Enter a task"
DEFAULT_TITLE = "To-Do"
DEFAULT_EMPTY_MESSAGE = "No tasks yet. Press a to add one."


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_bool(name: str) -> Optional[bool]:
    """Read a boolean environment variable, None when unset, empty or invalid."""
    value = os.getenv(name, "").strip().lower()
    if not value:
        return None
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Ignoring {name}={value!r}: not a boolean")
    return None


class Config:
    """Application configuration manager."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config file, defaults to ~/.todolist/config.ini
        """
        self.config_path = Path(config_path) if config_path else self._default_config_path()
        self._config = configparser.ConfigParser()
        self._load()

    def _default_config_path(self) -> Path:
        """Get default config path."""
        return Path.home() / ".todolist" / "config.ini"

    def _load(self):
        """Load configuration from file."""
        if self.config_path.exists():
            try:
                self._config.read(self.config_path)
                logger.info(f"Loaded configuration from {self.config_path}")
            except configparser.Error as e:
                logger.warning(f"Failed to read config file: {e}. Using defaults.")
        else:
            logger.debug(f"Config file not found at {self.config_path}. Using defaults.")

    def get_input_config(self) -> Dict[str, Any]:
        """
        Get add-task prompt configuration with environment overrides.

        Environment variables take precedence over config file:
        - TODOLIST_INPUT_PLACEHOLDER
        - TODOLIST_INPUT_CLOSE_ON_SUBMIT

        Returns:
            Dictionary with input configuration
        """
        close_on_submit = _env_bool('TODOLIST_INPUT_CLOSE_ON_SUBMIT')
        if close_on_submit is None:
            close_on_submit = self.get_bool('input', 'close_on_submit', fallback=True)

        config = {
            'placeholder': os.getenv('TODOLIST_INPUT_PLACEHOLDER') or
                          self._config.get('input', 'placeholder', fallback=DEFAULT_PLACEHOLDER),
            'close_on_submit': close_on_submit,
        }

        logger.debug(f"Input config: placeholder={config['placeholder']!r}, "
                     f"close_on_submit={config['close_on_submit']}")

        return config

    def get_display_config(self) -> Dict[str, Any]:
        """
        Get display configuration with environment overrides.

        Environment variables take precedence over config file:
        - TODOLIST_DISPLAY_TITLE
        - TODOLIST_DISPLAY_EMPTY_MESSAGE

        Returns:
            Dictionary with display configuration
        """
        config = {
            'title': os.getenv('TODOLIST_DISPLAY_TITLE') or
                    self._config.get('display', 'title', fallback=DEFAULT_TITLE),
            'empty_message': os.getenv('TODOLIST_DISPLAY_EMPTY_MESSAGE') or
                            self._config.get('display', 'empty_message', fallback=DEFAULT_EMPTY_MESSAGE),
        }

        logger.debug(f"Display config: title={config['title']!r}")

        return config

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """
        Get configuration value with fallback.

        Args:
            section: Config section name
            key: Config key name
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        return self._config.get(section, key, fallback=fallback)

    def get_bool(self, section: str, key: str, fallback: bool = False) -> bool:
        """Get boolean configuration value, falling back on unparseable text."""
        try:
            return self._config.getboolean(section, key, fallback=fallback)
        except ValueError as e:
            logger.warning(f"Invalid [{section}] {key}: {e}. Using {fallback}.")
            return fallback

    def get_int(self, section: str, key: str, fallback: int = 0) -> int:
        """Get integer configuration value, falling back on unparseable text."""
        try:
            return self._config.getint(section, key, fallback=fallback)
        except ValueError as e:
            logger.warning(f"Invalid [{section}] {key}: {e}. Using {fallback}.")
            return fallback

    def has_section(self, section: str) -> bool:
        return self._config.has_section(section)

    def sections(self) -> list:
        return self._config.sections()
