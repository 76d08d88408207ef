"""Unit testing for config_utils"""
import logging
import os
from unittest import TestCase
from mock import patch
import pytest
from snapindex.config_utils import (
    build_configdict, check_logging_config, check_snapindex_config, load_config,
    password_filter, set_logging
)
from snapindex.exceptions import ConfigurationError

YAMLCONFIG = """
---
elasticsearch:
  client:
    hosts: http://10.0.0.1:9200
    request_timeout: 60
  other_settings:
    username: elastic
    password: changeme
logging:
  loglevel: WARNING
snapindex:
  location: /mnt/es/bk
  wait_for_completion: no
"""

@pytest.fixture
def config_file(tmp_path):
    """Write YAMLCONFIG to a temporary file and return its path"""
    path = tmp_path / 'snapindex.yml'
    path.write_text(YAMLCONFIG)
    return str(path)

class TestLoadConfig:
    """Test config_utils.load_config functionality."""
    def test_no_file(self):
        with patch.dict(os.environ, {}, clear=True):
            assert {} == load_config(None)
    def test_file(self, config_file):
        with patch.dict(os.environ, {}, clear=True):
            config = load_config(config_file)
        assert 'http://10.0.0.1:9200' == config['elasticsearch']['client']['hosts']
        assert '/mnt/es/bk' == config['snapindex']['location']
    def test_env_overrides_file(self, config_file):
        env = {
            'SNAPINDEX_ES_HOSTS': 'http://es1:9200, http://es2:9200',
            'SNAPINDEX_ES_TIMEOUT': '120',
            'SNAPINDEX_LOG_LEVEL': 'DEBUG',
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config(config_file)
        assert ['http://es1:9200', 'http://es2:9200'] == config['elasticsearch']['client']['hosts']
        assert 120 == config['elasticsearch']['client']['request_timeout']
        assert 'DEBUG' == config['logging']['loglevel']
        assert 'elastic' == config['elasticsearch']['other_settings']['username']
    def test_env_api_key(self):
        with patch.dict(os.environ, {'SNAPINDEX_ES_API_KEY': 'abc123'}, clear=True):
            config = load_config(None)
        assert 'abc123' == config['elasticsearch']['other_settings']['api_key']['token']
    def test_env_bad_timeout(self):
        with patch.dict(os.environ, {'SNAPINDEX_ES_TIMEOUT': 'soon'}, clear=True):
            with pytest.raises(ConfigurationError, match=r'request_timeout'):
                load_config(None)
    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / 'list.yml'
        path.write_text('- one\n- two\n')
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ConfigurationError, match=r'not a YAML mapping'):
                load_config(str(path))

class TestCheckConfig(TestCase):
    """TestCheckConfig

    Test validation of the logging and snapindex configuration sections.
    """
    def test_logging_defaults(self):
        result = check_logging_config({})
        assert 'INFO' == result['loglevel']
        assert 'default' == result['logformat']
        assert ['elastic_transport', 'urllib3'] == result['blacklist']
    def test_logging_not_a_dict(self):
        assert 'INFO' == check_logging_config({'logging': 'loud'})['loglevel']
    def test_logging_bad_format(self):
        with pytest.raises(ConfigurationError):
            check_logging_config({'logging': {'logformat': 'xml'}})
    def test_snapindex_defaults(self):
        result = check_snapindex_config({})
        assert '/tmp' == result['location']
        assert result['wait_for_completion'] is True
        assert result['require_root'] is False
    def test_snapindex_values(self):
        cfg = {'snapindex': {'location': '/mnt/es/bk', 'wait_for_completion': 'no'}}
        result = check_snapindex_config(cfg)
        assert '/mnt/es/bk' == result['location']
        assert result['wait_for_completion'] is False
    def test_snapindex_unknown_key(self):
        with pytest.raises(ConfigurationError):
            check_snapindex_config({'snapindex': {'retention': 7}})

class TestBuildConfigdict(TestCase):
    """TestBuildConfigdict

    Test config_utils.build_configdict functionality.
    """
    def test_empty(self):
        assert {'elasticsearch': {'client': {}, 'other_settings': {}}} == build_configdict({})
    def test_endpoint_wins(self):
        config = {'elasticsearch': {'client': {'hosts': 'http://10.0.0.1:9200'}}}
        result = build_configdict(config, endpoint='http://10.0.0.2:9200')
        assert ['http://10.0.0.2:9200'] == result['elasticsearch']['client']['hosts']
    def test_hosts_become_list(self):
        config = {'elasticsearch': {'client': {'hosts': 'http://10.0.0.1:9200'}}}
        result = build_configdict(config)
        assert ['http://10.0.0.1:9200'] == result['elasticsearch']['client']['hosts']
    def test_request_timeout(self):
        result = build_configdict({}, request_timeout=90)
        assert 90 == result['elasticsearch']['client']['request_timeout']
    def test_config_unchanged(self):
        config = {'elasticsearch': {'client': {'hosts': 'http://10.0.0.1:9200'}}}
        build_configdict(config, endpoint='http://10.0.0.2:9200')
        assert 'http://10.0.0.1:9200' == config['elasticsearch']['client']['hosts']

class TestPasswordFilter(TestCase):
    """TestPasswordFilter

    Test config_utils.password_filter functionality.
    """
    def test_redacted(self):
        data = {'elasticsearch': {'other_settings': {'username': 'elastic', 'password': 'secret'}}}
        result = password_filter(data)
        assert 'REDACTED' == result['elasticsearch']['other_settings']['password']
        assert 'elastic' == result['elasticsearch']['other_settings']['username']
        assert 'secret' == data['elasticsearch']['other_settings']['password']

@patch('snapindex.logtools.is_docker', return_value=False)
class TestSetLogging(TestCase):
    """TestSetLogging

    Test config_utils.set_logging functionality.
    """
    def tearDown(self):
        for handler in list(logging.root.handlers):
            if getattr(handler, 'snapindex', False):
                logging.root.removeHandler(handler)
    def test_replaces_handler(self, _):
        opts = check_logging_config({})
        set_logging(opts)
        set_logging(opts)
        ours = [h for h in logging.root.handlers if getattr(h, 'snapindex', False)]
        assert 1 == len(ours)
        assert logging.INFO == logging.root.level
    def test_blacklist_not_applied_at_debug(self, _):
        opts = check_logging_config({'logging': {'loglevel': 'DEBUG'}})
        set_logging(opts)
        ours = [h for h in logging.root.handlers if getattr(h, 'snapindex', False)]
        assert not ours[0].filters
