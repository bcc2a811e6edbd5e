"""
Description Resolver

Reads human-readable option descriptions from a module's config.info file.
Each entry looks like:

    key=Description shown to the user,type,extra,fields

Only the text before the first comma is the description. Lookups by key
return the first entry for that key, unlike value lookups in config files
where the last binding wins.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..errors import NoOptionsForModule, OptionUnrecognized
from .config_loader import read_config_lines

__all__ = ['DescriptionEntry', 'parse_description', 'resolve_description']

logger = logging.getLogger(__name__)


@dataclass
class DescriptionEntry:
    """A key and its description from a metadata file."""
    key: str
    description: str

    def format(self) -> str:
        return f"{self.key} - {self.description}"


def parse_description(line: str) -> Optional[DescriptionEntry]:
    """
    Parse a config.info line.

    Returns None unless the line has a non-empty key, an '=', a non-empty
    description and a comma after the description.
    """
    key, sep, rest = line.partition('=')
    if not sep or not key:
        return None
    description, comma, _ = rest.partition(',')
    if not comma or not description:
        return None
    return DescriptionEntry(key=key, description=description)


def _entries(lines: Iterable[str]) -> Iterable[DescriptionEntry]:
    for line in lines:
        entry = parse_description(line)
        if entry is not None:
            yield entry


def resolve_description(info_path: str, key: Optional[str] = None,
                        module: Optional[str] = None):
    """
    Look up descriptions in a metadata file.

    Args:
        info_path: Full path of the config.info file
        key: Option to describe. If None, every option is described.
        module: Module name, used only in error messages

    Returns:
        A single "<key> - <description>" string when key is given, otherwise
        a list of such strings in file order

    Raises:
        ConfigNotFound: If the metadata file cannot be read
        OptionUnrecognized: If key has no entry
        NoOptionsForModule: If the file has no entries at all (all-keys mode)
    """
    lines = read_config_lines(info_path)

    if key is not None:
        prefix = f"{key}="
        for line in lines:
            if not line.startswith(prefix):
                continue
            description, comma, _ = line[len(prefix):].partition(',')
            if comma and description:
                return DescriptionEntry(key=key, description=description).format()
        raise OptionUnrecognized(key, module)

    described: List[str] = [entry.format() for entry in _entries(lines)]
    if not described:
        raise NoOptionsForModule(module, info_path)

    logger.debug(f"Found {len(described)} described options in {info_path}")
    return described
