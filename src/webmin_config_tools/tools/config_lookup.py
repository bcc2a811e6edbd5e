"""
Config Lookup Tool

Prints the directives of the Webmin core configuration (miniserv.conf) or of
a module's configuration, either all of them or a single option. With
--describe, prints the option descriptions from the module's config.info
instead of the values.
"""

import argparse
import logging
from typing import Any, Dict, List, Optional

from ..base import FileBasedTool, WebminTool
from ..errors import ConfigLookupError, OptionNotFound
from ..lookup.config_loader import load_lines
from ..lookup.description_resolver import resolve_description
from ..lookup.request import DEFAULT_CONFIG_DIR, MODULE_CONFIG, MODULE_INFO, LookupRequest
from ..lookup.root_resolver import CORE_CONFIG, resolve_root
from ..lookup.value_resolver import resolve_value

__all__ = ['ConfigLookupTool', 'main']

logger = logging.getLogger(__name__)


class ConfigLookupTool(FileBasedTool):
    """Tool for printing Webmin configuration directives."""

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the config lookup tool.

        Args:
            config: Optional configuration dictionary
        """
        super().__init__(config)

        self.default_config_dir = self.get_config('webmin.config_dir', DEFAULT_CONFIG_DIR)
        self.core_config = self.get_config('webmin.core_config', CORE_CONFIG)
        self.module_config = self.get_config('webmin.module_config', MODULE_CONFIG)
        self.module_info = self.get_config('webmin.module_info', MODULE_INFO)

        logger.debug(f"Default config directory: {self.default_config_dir}")

    def build_request(self, config_dir: Optional[str] = None, module: Optional[str] = None,
                      option: Optional[str] = None, describe: bool = False) -> LookupRequest:
        """
        Build a lookup request, filling in file names from the tool configuration.

        Args:
            config_dir: Webmin config directory (uses webmin.config_dir from config if None)
            module: Module whose config should be read instead of miniserv.conf
            option: Single option to print
            describe: Print descriptions instead of values

        Returns:
            LookupRequest for run()
        """
        return LookupRequest(
            config_dir=self.resolve_path(config_dir or self.default_config_dir),
            module=module,
            option=option,
            describe=describe,
            core_config=self.core_config,
            module_config=self.module_config,
            module_info=self.module_info,
        )

    def describe(self, request: LookupRequest) -> List[str]:
        """
        Look up option descriptions for the request's module.

        Args:
            request: A validated request with describe set

        Returns:
            Formatted description lines
        """
        root = resolve_root(request.config_dir, request.core_config)
        info_path = request.info_path(root)
        logger.debug(f"Reading option descriptions from {info_path}")

        if request.option is not None:
            return [resolve_description(info_path, request.option, request.module)]
        return resolve_description(info_path, None, request.module)

    def run(self, request: LookupRequest) -> List[str]:
        """
        Run the config lookup.

        Args:
            request: What to look up

        Returns:
            The lines to print, in order

        Raises:
            ConfigLookupError: If any part of the lookup fails
        """
        request.validate()

        config_file = load_lines(request.config_dir, request.config_path)
        logger.debug(f"Loaded {len(config_file)} lines from {config_file.path}")

        if request.describe:
            return self.describe(request)

        if request.option is not None:
            value = resolve_value(request.option, config_file)
            if value is None:
                raise OptionNotFound(request.option, config_file.path)
            return [value]

        return list(config_file.lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for the config lookup tool."""
    parser = argparse.ArgumentParser(
        description='Print Webmin configuration directives, or a single directive.'
    )
    parser.add_argument('-c', '--config',
        help=f'Webmin configuration directory (default: webmin.config_dir from config, '
             f'else {DEFAULT_CONFIG_DIR})',
        dest='config_dir'
    )
    parser.add_argument('-m', '--module',
        help='Read the configuration of this module instead of miniserv.conf'
    )
    parser.add_argument('-o', '--option',
        help='Only print the value of this option'
    )
    parser.add_argument('-d', '--describe', action='store_true',
        help='Print option descriptions from the module\'s config.info (requires --module)'
    )

    # Add standard arguments (profile, etc.)
    WebminTool.add_standard_arguments(parser)

    args = parser.parse_args(argv)

    try:
        config = ConfigLookupTool.load_config(args.profile, args.verbose)

        tool = ConfigLookupTool(config)
        request = tool.build_request(args.config_dir, args.module, args.option, args.describe)
        lines = tool.run(request)

    except ConfigLookupError as e:
        logger.error(f"Error: {e}")
        return 1
    except Exception as e:
        logging.error(f"Error: {str(e)}")
        import traceback
        logging.debug(traceback.format_exc())
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    import sys
    sys.exit(main())
