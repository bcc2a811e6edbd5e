#!/usr/bin/env python

from setuptools import setup, find_packages

setup(
    name="webmin_config_tools",
    version="1.0.0",
    description="Python tools for reading Webmin core and module configuration files",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "config": ["profiles/*.json"],
    },
    include_package_data=True,
    python_requires=">=3.7",
    install_requires=[],
    extras_require={
        "tests": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "webmin-config=webmin_config_tools.tools.config_lookup:main",
        ],
    },
)
