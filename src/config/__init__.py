# Configuration package initialization
"""
Webmin Config Tools - Configuration System

This package provides a lightweight configuration system for the Webmin Config Tools.

Quick Usage:
    # Import the pre-configured instance
    from config import config

    value = config.get('webmin.config_dir')

    # Or create a custom instance
    from config import Config
    custom_config = Config(profile='my_server')
"""

from config.config import Config, config

# Export the Config class and default instance
__all__ = ['Config', 'config']
