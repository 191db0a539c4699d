"""
Configuration utility for the engine.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "layout": {
        "text_nodes": True,
        "font_size": 14.0
    },
    "fonts": {
        "system_fonts": False,
        "cache_fonts": True,
        "families": {
            "serif": "DejaVuSerif.ttf",
            "sans-serif": "DejaVuSans.ttf",
            "monospace": "DejaVuSansMono.ttf",
            "cursive": "DejaVuSerif-Italic.ttf",
            "fantasy": "DejaVuSans-Bold.ttf"
        }
    },
    "network": {
        "allow_local_fs": True,
        "timeout": 30,
        "user_agent": "Dragonfly/0.1"
    },
    "logging": {
        "console_level": "INFO",
        "file_level": "DEBUG"
    }
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Configuration manager for the engine."""

    def __init__(self, config_path: Optional[str] = None, load: bool = True):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the config file (~/.dragonfly/config.json by default)
            load: Whether to read the config file right away
        """
        if not config_path:
            home_dir = os.path.expanduser("~")
            config_path = os.path.join(home_dir, ".dragonfly", "config.json")

        self.config_path = config_path
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

        if load:
            self.load()

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    @classmethod
    def defaults(cls) -> 'Config':
        """Create a configuration holding only the defaults, without touching disk."""
        return cls(config_path=os.devnull, load=False)

    def load(self) -> None:
        """Load configuration from file, merged over the defaults."""
        try:
            if os.path.exists(self.config_path) and os.path.isfile(self.config_path):
                with open(self.config_path, 'r') as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top-level value must be an object")
                self.config = _merge(DEFAULT_CONFIG, loaded)
                logger.debug(f"Configuration loaded from {self.config_path}")
            else:
                logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
                self._set_defaults()
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            self._set_defaults()

    def save(self) -> None:
        """Save configuration to file."""
        try:
            config_dir = os.path.dirname(self.config_path)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)

            with open(self.config_path, 'w') as f:
                json.dump(self.config, f, indent=4)

            logger.debug(f"Configuration saved to {self.config_path}")
        except OSError as e:
            logger.error(f"Error saving configuration: {e}")

    def _section(self, key: str, create: bool = False) -> Tuple[Optional[Dict[str, Any]], str]:
        """
        Find the dictionary holding the last part of a dotted key.

        Args:
            key: Dotted key
            create: Create missing (or non-dict) sections on the way

        Returns:
            The holding section (None if missing) and the last key part
        """
        *path, last = key.split('.')
        section = self.config

        for part in path:
            child = section.get(part)
            if not isinstance(child, dict):
                if not create:
                    return None, last
                child = section[part] = {}
            section = child

        return section, last

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key, nested with dots (e.g. 'layout.font_size')
            default: Value returned when the key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        section, last = self._section(key)
        if section is None:
            return default
        return section.get(last, default)

    def set(self, key: str, value: Any) -> None:
        section, last = self._section(key, create=True)
        section[last] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Returns:
            bool: True if the key existed
        """
        section, last = self._section(key)
        if section is None or last not in section:
            return False
        del section[last]
        return True

    def get_all(self) -> Dict[str, Any]:
        """Get a copy of all configuration values."""
        return copy.deepcopy(self.config)

    def _set_defaults(self) -> None:
        self.config = copy.deepcopy(DEFAULT_CONFIG)
