"""
Webmin Config Command-Line Tools

This package provides the command-line tools built on the lookup package.
"""

from .config_lookup import ConfigLookupTool

__all__ = [
    'ConfigLookupTool',
]
