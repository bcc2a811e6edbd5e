"""
Lookup errors.

Every failure in a lookup is fatal for the invocation. Resolvers raise one of
these and the command-line entry point turns it into an error message and a
non-zero exit status.
"""

from typing import Optional

__all__ = [
    'ConfigLookupError',
    'ConfigNotFound',
    'RootIndeterminate',
    'RootInvalid',
    'OptionNotFound',
    'OptionUnrecognized',
    'NoOptionsForModule',
    'UsageError',
]


class ConfigLookupError(Exception):
    """Base class for all config lookup failures."""


class ConfigNotFound(ConfigLookupError):
    """A config or metadata file is missing or unreadable."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        message = f"Configuration file {path} does not exist or cannot be read"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class RootIndeterminate(ConfigLookupError):
    """The core config has no root= directive."""

    def __init__(self, config_dir: str) -> None:
        self.config_dir = config_dir
        super().__init__(
            f"Unable to determine the installation root from the configuration "
            f"in {config_dir}"
        )


class RootInvalid(ConfigLookupError):
    """The root= directive points at something that is not a directory."""

    def __init__(self, root: str, config_dir: str) -> None:
        self.root = root
        self.config_dir = config_dir
        super().__init__(
            f"Installation root {root} configured in {config_dir} is not a directory"
        )


class OptionNotFound(ConfigLookupError):
    """The requested key is not set in the config file."""

    def __init__(self, option: str, path: str) -> None:
        self.option = option
        self.path = path
        super().__init__(f"Option '{option}' is not set in {path}")


class OptionUnrecognized(ConfigLookupError):
    """The requested key has no entry in the module's metadata file."""

    def __init__(self, option: str, module: Optional[str] = None) -> None:
        self.option = option
        self.module = module
        where = f" for module '{module}'" if module else ""
        super().__init__(f"Option '{option}' is not recognized{where}")


class NoOptionsForModule(ConfigLookupError):
    """The module's metadata file has no parseable entries."""

    def __init__(self, module: Optional[str], path: str) -> None:
        self.module = module
        self.path = path
        name = f"'{module}'" if module else path
        super().__init__(f"No options exist for module {name}")


class UsageError(ConfigLookupError):
    """The command-line options were combined incorrectly."""
