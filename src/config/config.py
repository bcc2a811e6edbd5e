"""
Minimal Configuration Reader for Webmin Config Tools

A lightweight configuration system for the tools that provides:
- Profile-based configuration management
- JSON-based configuration storage with read-only access
- Local overrides for a profile
- Hierarchical configuration with dot-notation access
- Built-in defaults when no profile file exists

Usage:
    # Use the default singleton instance
    from config import config
    value = config.get('webmin.config_dir')

    # Create a custom instance with specific profile
    from config import Config
    custom_config = Config(profile='my_server')

The configuration system loads settings in this order (later overrides earlier):
1. Built-in defaults (Config.DEFAULTS)
2. Default or specified profile (profiles/<profile>.json)
3. Profile-specific local overrides (profiles/<profile>_local.json)
"""

import copy
import json
import logging
from typing import Dict, Any, List, Optional
from pathlib import Path

from webmin_config_tools.base import JSONTool
from webmin_config_tools.errors import ConfigNotFound

logger = logging.getLogger(__name__)


class Config(JSONTool):
    """
    A minimal JSON-based configuration reader for Webmin config tools.

    Attributes:
        config_dir (str): Directory containing profile JSON files
        profile (str): Currently active profile name
        data (dict): Loaded configuration data
    """

    DEFAULT_CONFIG_DIR = str(Path(__file__).parent / 'profiles')
    DEFAULT_PROFILE = "default"
    LOCAL_SUFFIX = "_local"

    DEFAULTS = {
        'general': {
            'log_level': 'WARNING',
        },
        'webmin': {
            'config_dir': '/etc/webmin',
            'core_config': 'miniserv.conf',
            'module_config': 'config',
            'module_info': 'config.info',
        },
    }

    def __init__(self, config_dir: str = None, profile: str = None,
                 config: Optional[Dict[str, Any]] = None):
        """
        Initialize the Config instance.

        Args:
            config_dir (str, optional): Directory for config profiles.
                Defaults to 'profiles' subdirectory relative to this file.
            profile (str, optional): Profile name to use. Defaults to 'default'.
            config (dict, optional): Base configuration dictionary for JSONTool compatibility.
        """
        super().__init__(config)

        self.config_dir = config_dir or self.DEFAULT_CONFIG_DIR
        self.profile = profile or self.DEFAULT_PROFILE
        self.data = {}

        self._load()

    def run(self) -> Dict[str, Any]:
        """
        Run the config tool (implementation of abstract method from WebminTool).

        Returns:
            The full configuration dictionary.
        """
        return self.get_full_config()

    def _load(self):
        """
        Load built-in defaults, then merge the profile and its local overrides.

        A missing profile is not an error: the defaults are used on their own.
        A profile that cannot be parsed is logged and skipped.
        """
        self.data = copy.deepcopy(self.DEFAULTS)

        profile_path = Path(self.config_dir) / f"{self.profile}.json"
        if not profile_path.exists():
            if self.profile != self.DEFAULT_PROFILE:
                logger.warning(f"Profile '{self.profile}' not found. Using built-in defaults.")
            return

        self._merge_file(profile_path)
        logger.debug(f"Loaded configuration from '{self.profile}'")

        local_path = Path(self.config_dir) / f"{self.profile}{self.LOCAL_SUFFIX}.json"
        if local_path.exists():
            self._merge_file(local_path)
            logger.debug(f"Merged local overrides from '{local_path}'")

    def _merge_file(self, path: Path):
        try:
            overrides = self.read_json(str(path))
        except (ConfigNotFound, json.JSONDecodeError) as e:
            logger.error(f"Error loading configuration from {path}: {e}")
            return

        if isinstance(overrides, dict):
            self._deep_merge(self.data, overrides)
        else:
            logger.error(f"Configuration in {path} is not a JSON object")

    def _deep_merge(self, target: Dict[str, Any], source: Dict[str, Any]):
        """
        Deep merge two dictionaries.

        Args:
            target (dict): The target dictionary to merge into
            source (dict): The source dictionary to merge from

        Note:
            Recursively merges nested dictionaries. Non-dict values in source
            will completely replace values in target.
        """
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._deep_merge(target[key], value)
            else:
                target[key] = value

    def get(self, path: str = None, default: Any = None) -> Any:
        """
        Get a configuration value by path using dot notation.

        Args:
            path (str, optional): Dot notation path to the value
                (e.g., "webmin.config_dir", "general.log_level").
                If None, returns the entire configuration dictionary.
            default (Any, optional): Value to return if path not found.

        Returns:
            Any: The configuration value at the specified path, or default if not found.

        Examples:
            >>> config.get('webmin.config_dir')
            '/etc/webmin'
            >>> config.get()  # Returns entire config
            {'general': {...}, 'webmin': {...}}
        """
        if path is None:
            return self.data

        current = self.data
        if path:
            for key in path.split('.'):
                if isinstance(current, dict) and key in current:
                    current = current[key]
                else:
                    return default

        return current

    def list_profiles(self) -> List[str]:
        """
        List all available profile names.

        Returns:
            List[str]: Profile names (without .json extension) found in the
                config directory, excluding local override files.
        """
        config_path = Path(self.config_dir)
        return sorted(f.stem for f in config_path.glob("*.json")
                      if not f.stem.endswith(self.LOCAL_SUFFIX))

    def switch_profile(self, profile: str) -> bool:
        """
        Switch to a different profile.

        Args:
            profile (str): Name of profile to switch to (without .json extension).

        Returns:
            bool: True if successful, False if profile not found.
        """
        profile_path = Path(self.config_dir) / f"{profile}.json"
        if profile_path.exists():
            self.profile = profile
            self._load()
            return True
        else:
            logger.warning(f"Profile '{profile}' not found.")
            return False

    def get_full_config(self) -> Dict[str, Any]:
        """Return the full configuration dictionary."""
        return self.data


# Global singleton instance for convenient access throughout the application
# Usage: from config import config; value = config.get('some.key')
config = Config()
