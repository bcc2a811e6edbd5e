"""
Base classes for Webmin Config Tools.

This module provides base classes used throughout the package.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
import logging
import os

from .errors import ConfigNotFound

logger = logging.getLogger(__name__)


class WebminTool(ABC):
    """Base class for all Webmin config tools."""

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the tool.

        Args:
            config: Optional configuration dictionary.
        """
        self.config = config or {}

    @staticmethod
    def add_standard_arguments(parser):
        """
        Add standard arguments that should be consistent across all command-line tools.

        Args:
            parser: The ArgumentParser instance to add arguments to
        """
        parser.add_argument("--profile", default=None,
                          help="Configuration profile to use (default: use default profile)")
        parser.add_argument("--verbose", action="store_true",
                          help="Enable debug logging on stderr")

    @staticmethod
    def load_config(profile: Optional[str] = None, verbose: bool = False) -> Dict[str, Any]:
        """
        Load configuration from a specified profile.

        Args:
            profile: Name of the profile to load. If None, uses the default profile.
            verbose: Force DEBUG logging regardless of the profile's log level.

        Returns:
            The configuration dictionary.
        """
        from config.config import Config

        config_obj = Config(profile=profile)
        config_data = config_obj.get()

        log_level = config_data.get('general', {}).get('log_level', 'WARNING').upper()
        if verbose:
            log_level = 'DEBUG'

        # Reset any existing handlers to avoid duplicated logs
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)

        # Fatal errors are reported through logging, so ERROR is never filtered
        level = min(getattr(logging, log_level, logging.WARNING), logging.ERROR)

        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        logging.getLogger().setLevel(level)

        logging.debug(f"Logging initialized with level: {log_level}")

        return config_data

    def get_config(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: The configuration key, in dot notation (e.g. 'webmin.config_dir').
            default: Default value if the key is not found.

        Returns:
            The configuration value, or the default if not found.
        """
        parts = key.split('.')
        value = self.config

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    @abstractmethod
    def run(self, *args, **kwargs) -> Any:
        """
        Run the tool. Must be implemented by subclasses.

        Returns:
            The result of running the tool.
        """
        pass


class FileBasedTool(WebminTool):
    """Base class for tools that work with files."""

    def resolve_path(self, path: str) -> str:
        """
        Resolve a path, expanding "~" to the user's home directory.

        Args:
            path: The path to resolve.

        Returns:
            The resolved absolute path.
        """
        expanded_path = os.path.expanduser(path)
        return os.path.abspath(expanded_path)


class JSONTool(FileBasedTool):
    """Base class for tools that work with JSON files."""

    def read_json(self, file_path: str) -> Any:
        """
        Read a JSON file.

        Args:
            file_path: Path to the JSON file.

        Returns:
            The parsed JSON content.

        Raises:
            json.JSONDecodeError: If the file contains invalid JSON.
            ConfigNotFound: If the file doesn't exist.
        """
        import json

        resolved_path = self.resolve_path(file_path)
        logger.debug(f"Reading JSON file: {resolved_path}")

        try:
            with open(resolved_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except OSError as e:
            raise ConfigNotFound(resolved_path, e.strerror) from e
