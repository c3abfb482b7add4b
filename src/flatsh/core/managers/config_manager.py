# src/flatsh/core/managers/config_manager.py
import json
import logging
from typing import Any, Dict, Optional

from flatsh.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    A singleton holding the shell configuration.
    Values are read from the packaged settings.json.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Retrieves a value by dotted path, e.g. 'prompt.text'.
        Missing keys and explicit nulls both yield `default`.
        """
        value = self._config
        for key in key_path.split('.'):
            if not isinstance(value, dict):
                return default
            value = value.get(key)
        return value if value is not None else default

    def reset(self):
        """(Re)loads the configuration from settings.json."""
        config_path = PathUtils.get_settings_file()
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                self._config = json.load(f)
            logger.debug("Configuration loaded from %s.", config_path)
        except FileNotFoundError:
            logger.warning("settings.json not found at %s. Using empty config.", config_path)
            self._config = {}
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load settings.json: %s", e, exc_info=True)
            self._config = {}


# The global instance shared by the whole shell.
config_manager = ConfigManager()
