"""
Config Lookup Package

Loading of Webmin key=value configuration files and resolution of option
values, the installation root and option descriptions.
"""

from .config_loader import ConfigFile, load_lines, read_config_lines
from .value_resolver import resolve_value
from .root_resolver import resolve_root
from .description_resolver import DescriptionEntry, parse_description, resolve_description
from .request import LookupRequest

__all__ = [
    'ConfigFile',
    'load_lines',
    'read_config_lines',
    'resolve_value',
    'resolve_root',
    'DescriptionEntry',
    'parse_description',
    'resolve_description',
    'LookupRequest',
]
