"""
Value Resolver

Finds the value bound to a key in a sequence of key=value lines. Keys are
compared as literal text, so a key such as 'log.*' only matches a line that
starts with exactly 'log.*='.
"""

from typing import Iterable, Optional

__all__ = ['resolve_value']


def resolve_value(key: str, lines: Iterable[str]) -> Optional[str]:
    """
    Return the value of the last line binding key, or None if no line does.

    Later lines override earlier ones, the same way a config file is read
    top to bottom. An empty value ('key=') is a match and is returned as ''.
    """
    prefix = f"{key}="
    value = None
    for line in lines:
        if line.startswith(prefix):
            value = line[len(prefix):]
    return value
