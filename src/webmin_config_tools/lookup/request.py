"""
Lookup request.

Describes what the caller asked for and which files that touches.
"""

import os
from dataclasses import dataclass
from typing import Optional

from ..errors import UsageError
from .root_resolver import CORE_CONFIG

__all__ = ['DEFAULT_CONFIG_DIR', 'MODULE_CONFIG', 'MODULE_INFO', 'LookupRequest']

DEFAULT_CONFIG_DIR = '/etc/webmin'
MODULE_CONFIG = 'config'
MODULE_INFO = 'config.info'


@dataclass
class LookupRequest:
    """A single config lookup."""
    config_dir: str = DEFAULT_CONFIG_DIR
    module: Optional[str] = None
    option: Optional[str] = None
    describe: bool = False
    core_config: str = CORE_CONFIG
    module_config: str = MODULE_CONFIG
    module_info: str = MODULE_INFO

    def validate(self) -> None:
        """Raise UsageError if the request cannot be served."""
        if self.describe and not self.module:
            raise UsageError("--describe can only be used together with --module")

    @property
    def config_path(self) -> str:
        """Config file path relative to config_dir."""
        if self.module:
            return os.path.join(self.module, self.module_config)
        return self.core_config

    def info_path(self, root: str) -> str:
        """Full path of the module's metadata file below the installation root."""
        return os.path.join(root, self.module, self.module_info)
