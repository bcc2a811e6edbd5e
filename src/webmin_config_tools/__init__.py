"""
Webmin Config Tools - Python package for reading Webmin configuration

This package provides utilities for inspecting the Webmin core configuration
(miniserv.conf) and per-module configuration files, including lookup of
option descriptions from module metadata.
"""

__version__ = '1.0.0'
