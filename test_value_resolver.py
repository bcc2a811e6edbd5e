#!/usr/bin/env python3
"""
Tests for config file loading and value resolution.
"""

import os
import sys
import tempfile

import pytest

# Add the src directory to the path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from webmin_config_tools.errors import ConfigNotFound
from webmin_config_tools.lookup import load_lines, resolve_value

MINISERV_CONF = """port=10000
root=/usr/share/webmin
# comment line
ssl=1

logfile=/var/webmin/miniserv.log
"""


def write_file(directory, relative_path, content, newline=None):
    path = os.path.join(directory, relative_path)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', newline=newline) as f:
        f.write(content)
    return path


def test_last_binding_wins():
    assert resolve_value('a', ['a=1', 'b=2', 'a=3']) == '3'


def test_missing_key_is_none():
    assert resolve_value('x', ['a=1', 'b=2']) is None


def test_empty_value_is_found():
    assert resolve_value('a', ['a=1', 'a=']) == ''


def test_key_is_literal_text():
    lines = ['logXfile=wrong', 'log.file=right', 'l+=plus']
    assert resolve_value('log.file', lines) == 'right'
    assert resolve_value('log.*', lines) is None
    assert resolve_value('l+', lines) == 'plus'


def test_key_must_start_the_line():
    assert resolve_value('port', [' port=1', '#port=2', 'sslport=3']) is None


def test_value_keeps_everything_after_first_equals():
    assert resolve_value('opts', ['opts=a=b,c']) == 'a=b,c'


def test_prefix_key_does_not_match_longer_key():
    assert resolve_value('port', ['ports=1', 'port=2', 'portx=3']) == '2'


def test_load_lines_reproduces_file_verbatim():
    with tempfile.TemporaryDirectory() as temp_dir:
        write_file(temp_dir, 'miniserv.conf', MINISERV_CONF)

        config_file = load_lines(temp_dir, 'miniserv.conf')

        assert config_file.path == os.path.join(temp_dir, 'miniserv.conf')
        assert config_file.lines == MINISERV_CONF.splitlines()
        assert len(config_file) == 6
        assert resolve_value('root', config_file) == '/usr/share/webmin'


def test_load_lines_strips_crlf():
    with tempfile.TemporaryDirectory() as temp_dir:
        write_file(temp_dir, 'acl/config', 'a=1\r\nb=2\r\n', newline='')

        config_file = load_lines(temp_dir, os.path.join('acl', 'config'))

        assert config_file.lines == ['a=1', 'b=2']


def test_load_lines_keeps_bare_carriage_return():
    with tempfile.TemporaryDirectory() as temp_dir:
        write_file(temp_dir, 'miniserv.conf', 'banner=a\rb\nport=1\n', newline='')

        config_file = load_lines(temp_dir, 'miniserv.conf')

        assert config_file.lines == ['banner=a\rb', 'port=1']
        assert resolve_value('banner', config_file) == 'a\rb'


def test_load_lines_missing_file_reports_path():
    with tempfile.TemporaryDirectory() as temp_dir:
        with pytest.raises(ConfigNotFound) as excinfo:
            load_lines(temp_dir, 'nosuchmodule/config')

        expected = os.path.join(temp_dir, 'nosuchmodule/config')
        assert excinfo.value.path == expected
        assert expected in str(excinfo.value)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
