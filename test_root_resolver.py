#!/usr/bin/env python3
"""
Tests for installation root discovery from miniserv.conf.
"""

import os
import sys
import tempfile

import pytest

# Add the src directory to the path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from webmin_config_tools.errors import ConfigNotFound, RootIndeterminate, RootInvalid
from webmin_config_tools.lookup import resolve_root


def write_miniserv(config_dir, content):
    with open(os.path.join(config_dir, 'miniserv.conf'), 'w') as f:
        f.write(content)


def test_root_found():
    with tempfile.TemporaryDirectory() as temp_dir:
        root = os.path.join(temp_dir, 'webmin')
        os.makedirs(root)
        write_miniserv(temp_dir, f"port=10000\nroot={root}\n")

        assert resolve_root(temp_dir) == root


def test_last_root_wins():
    with tempfile.TemporaryDirectory() as temp_dir:
        old_root = os.path.join(temp_dir, 'old')
        new_root = os.path.join(temp_dir, 'new')
        os.makedirs(new_root)
        write_miniserv(temp_dir, f"root={old_root}\nroot={new_root}\n")

        assert resolve_root(temp_dir) == new_root


def test_missing_root_line():
    with tempfile.TemporaryDirectory() as temp_dir:
        write_miniserv(temp_dir, "port=10000\n")

        with pytest.raises(RootIndeterminate) as excinfo:
            resolve_root(temp_dir)

        assert temp_dir in str(excinfo.value)


def test_empty_root_value():
    with tempfile.TemporaryDirectory() as temp_dir:
        write_miniserv(temp_dir, "root=\n")

        with pytest.raises(RootIndeterminate):
            resolve_root(temp_dir)


def test_root_not_a_directory():
    with tempfile.TemporaryDirectory() as temp_dir:
        missing = os.path.join(temp_dir, 'nonexistent')
        write_miniserv(temp_dir, f"root={missing}\n")

        with pytest.raises(RootInvalid) as excinfo:
            resolve_root(temp_dir)

        assert excinfo.value.root == missing


@pytest.mark.skipif(os.path.isdir('/opt/nonexistent'), reason="/opt/nonexistent exists")
def test_opt_nonexistent_root():
    with tempfile.TemporaryDirectory() as temp_dir:
        write_miniserv(temp_dir, "root=/opt/nonexistent\n")

        with pytest.raises(RootInvalid):
            resolve_root(temp_dir)


def test_missing_core_config():
    with tempfile.TemporaryDirectory() as temp_dir:
        with pytest.raises(ConfigNotFound) as excinfo:
            resolve_root(temp_dir)

        assert excinfo.value.path == os.path.join(temp_dir, 'miniserv.conf')


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
