"""
Config Loader

Reads a configuration file into an ordered list of raw lines. Nothing is
parsed here; lines that are not key=value directives are kept as they are so
they can be printed back verbatim.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterator, List

from ..errors import ConfigNotFound

__all__ = ['ConfigFile', 'read_config_lines', 'load_lines']

logger = logging.getLogger(__name__)


@dataclass
class ConfigFile:
    """The lines of one configuration file, terminators stripped."""
    path: str
    lines: List[str] = field(default_factory=list)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def read_config_lines(path: str) -> List[str]:
    """
    Read every line of a text file.

    Args:
        path: Full path of the file

    Returns:
        The lines in file order, with trailing CR/LF removed

    Raises:
        ConfigNotFound: If the file does not exist or cannot be opened
    """
    try:
        with open(path, 'r', encoding='utf-8', errors='replace', newline='\n') as f:
            lines = [line.rstrip('\r\n') for line in f]
    except OSError as e:
        raise ConfigNotFound(path, e.strerror) from e

    logger.debug(f"Read {len(lines)} lines from {path}")
    return lines


def load_lines(directory: str, relative_path: str) -> ConfigFile:
    """
    Load a configuration file located relative to a directory.

    Args:
        directory: Base directory (e.g. the Webmin config directory)
        relative_path: File path below the directory (e.g. 'miniserv.conf'
            or 'acl/config')

    Returns:
        ConfigFile holding the file's lines
    """
    path = os.path.join(directory, relative_path)
    return ConfigFile(path=path, lines=read_config_lines(path))
