"""Configuration utility functions"""
import logging
import os
from copy import deepcopy
import click
from es_client.exceptions import ConfigurationError as ESClientConfigError
from es_client.exceptions import FailedValidation
from es_client.schemacheck import SchemaCheck
from es_client.helpers.utils import ensure_list, get_yaml, prune_nones
from snapindex.defaults.client_defaults import config_snapindex
from snapindex.defaults.logging_defaults import config_logging
from snapindex.defaults.settings import env_mapping
from snapindex.exceptions import ConfigurationError
from snapindex.logtools import LogInfo, Blacklist

def _deep_set(config, keys, value):
    """
    Set ``value`` in the nested dictionary ``config`` at the path in ``keys``

    :param config: The dictionary to modify
    :param keys: Tuple of keys, e.g. ``('elasticsearch', 'client', 'hosts')``
    :param value: The value to set
    """
    current = config
    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]
    current[keys[-1]] = value

def _parse_env_value(value, key):
    """
    :param value: The string value from the environment
    :param key: The final config key, which determines the type

    :returns: ``value`` converted to the type expected for ``key``
    """
    if key == 'hosts':
        return [host.strip() for host in value.split(',') if host.strip()]
    if key == 'request_timeout':
        try:
            return int(value)
        except ValueError as exc:
            raise ConfigurationError(f'request_timeout must be an integer: {value}') from exc
    return value

def load_config(config_path=None):
    """
    Read the YAML configuration file, if any, and apply environment variable overrides.

    :param config_path: Path to a YAML configuration file

    :type config_path: str

    :returns: The merged configuration
    :rtype: dict
    """
    logger = logging.getLogger(__name__)
    config = {}
    if config_path:
        try:
            config = get_yaml(config_path) or {}
        except ESClientConfigError as exc:
            raise ConfigurationError(f'Unable to read configuration file {config_path}: {exc}') from exc
        if not isinstance(config, dict):
            raise ConfigurationError(f'Configuration file {config_path} is not a YAML mapping')
    for env_var, keys in env_mapping().items():
        value = os.environ.get(env_var)
        if value is not None:
            logger.debug('Applying environment override: %s', env_var)
            _deep_set(config, keys, _parse_env_value(value, keys[-1]))
    return config

def _check_section(config, section, schema):
    if not isinstance(config.get(section), dict):
        settings = {}
    else:
        settings = prune_nones(config[section])
    try:
        return SchemaCheck(
            settings, schema, f'{section.capitalize()} Configuration', section).result()
    except FailedValidation as exc:
        raise ConfigurationError(f'Invalid "{section}" configuration: {exc}') from exc

def check_logging_config(config):
    """
    Pass the ``logging`` section of ``config`` to
    :py:class:`~.es_client.schemacheck.SchemaCheck` for value validation.

    :param config: Configuration data

    :type config: dict

    :returns: Validated logging configuration, with defaults.
    """
    if 'logging' in config and not isinstance(config['logging'], dict):
        click.echo(
            f'Must supply logging information as a dictionary. '
            f'You supplied: "{config["logging"]}" which is "{type(config["logging"])}". '
            f'Using default logging values.'
        )
    return _check_section(config, 'logging', config_logging())

def check_snapindex_config(config):
    """
    :param config: Configuration data

    :type config: dict

    :returns: Validated ``snapindex`` section of ``config``, with defaults.
    """
    return _check_section(config, 'snapindex', config_snapindex())

def set_logging(log_opts):
    """Configure global logging options

    Any handler set by an earlier call is replaced.

    :param log_opts: Logging configuration data

    :type log_opts: dict

    :rtype: None
    """
    loginfo = LogInfo(log_opts)
    for handler in list(logging.root.handlers):
        if getattr(handler, 'snapindex', False):
            logging.root.removeHandler(handler)
    loginfo.handler.snapindex = True
    logging.root.addHandler(loginfo.handler)
    logging.root.setLevel(loginfo.numeric_log_level)
    # Set up NullHandler() to handle nested elasticsearch8.trace Logger
    # instance in elasticsearch python client
    logging.getLogger('elasticsearch8.trace').addHandler(logging.NullHandler())
    if log_opts['blacklist'] and loginfo.numeric_log_level > logging.DEBUG:
        for bl_entry in ensure_list(log_opts['blacklist']):
            loginfo.handler.addFilter(Blacklist(bl_entry))

def build_configdict(config, endpoint=None, request_timeout=None):
    """
    Build the configuration dictionary consumed by :py:class:`~.es_client.builder.Builder`.
    Command-line values win over those from the configuration file.

    :param config: Configuration data, as returned by :py:func:`load_config`
    :param endpoint: Cluster base URL from the command-line
    :param request_timeout: Request timeout in seconds from the command-line

    :type config: dict
    :type endpoint: str
    :type request_timeout: int

    :returns: ``{'elasticsearch': {'client': {...}, 'other_settings': {...}}}``
    :rtype: dict
    """
    es_config = deepcopy(config.get('elasticsearch') or {})
    client = prune_nones(es_config.get('client') or {})
    other = prune_nones(es_config.get('other_settings') or {})
    if endpoint:
        client['hosts'] = [endpoint]
    if request_timeout:
        client['request_timeout'] = request_timeout
    if 'hosts' in client:
        client['hosts'] = ensure_list(client['hosts'])
    return {'elasticsearch': {'client': client, 'other_settings': other}}

def password_filter(data):
    """
    Recursively look through all nested structures of ``data`` for the key ``'password'`` and redact
    the value.

    :param data: Configuration data

    :type data: dict

    :returns: A :py:class:`~.copy.deepcopy` of ``data`` with the value obscured by ``REDACTED``
        if the key is ``'password'``.
    """
    def iterdict(mydict):
        for key, value in mydict.items():
            if isinstance(value, dict):
                iterdict(value)
            elif key == "password":
                mydict.update({"password": "REDACTED"})
        return mydict
    return iterdict(deepcopy(data))
