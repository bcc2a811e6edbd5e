"""
Root Resolver

Works out the Webmin installation root from the core configuration file.
"""

import logging
import os

from ..errors import RootIndeterminate, RootInvalid
from .config_loader import load_lines
from .value_resolver import resolve_value

__all__ = ['CORE_CONFIG', 'ROOT_KEY', 'resolve_root']

logger = logging.getLogger(__name__)

CORE_CONFIG = 'miniserv.conf'
ROOT_KEY = 'root'


def resolve_root(config_dir: str, core_config: str = CORE_CONFIG) -> str:
    """
    Read the installation root from the core configuration.

    Args:
        config_dir: Webmin configuration directory
        core_config: Core config file name within config_dir

    Returns:
        The root directory, taken from the last root= line

    Raises:
        ConfigNotFound: If the core config cannot be read
        RootIndeterminate: If no root= line is present or its value is empty
        RootInvalid: If the configured root is not a directory
    """
    core = load_lines(config_dir, core_config)
    root = resolve_value(ROOT_KEY, core)

    if not root:
        raise RootIndeterminate(config_dir)
    if not os.path.isdir(root):
        raise RootInvalid(root, config_dir)

    logger.debug(f"Installation root: {root}")
    return root
