"""Utilities/Helpers for defaults and schemas"""

from os import path
from snapindex.exceptions import (
    ClientException,
    ConfigurationError,
    FailedExecution,
    LoggingException,
    MissingArgument,
    PrivilegeError,
    RepositoryNotFound,
    SafetyMismatch,
    SnapIndexException,
    UserAborted,
)

SNAPINDEX_DOCS = 'https://www.elastic.co/guide/en/elasticsearch/reference'
CLICK_DRYRUN = {
    'dry-run': {'help': 'Do not perform any changes.', 'is_flag': True},
}
DEFAULT_ENDPOINT = 'http://localhost:9200'
DEFAULT_LOCATION = '/tmp'
DEFAULT_WAIT = 'yes'
#: The snapshot name used to list every snapshot in a repository
ALL_SNAPSHOTS = '_all'
#: Any probe or lookup response containing this string is treated as a failure
ERROR_INDICATOR = 'error'
CONFIRM_PROMPT = 'Are you sure you want to restore this snapshot?'

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_VALIDATION = 2
EXIT_NOT_FOUND = 3
EXIT_SAFETY_LOCK = 4
EXIT_ABORTED = 5
EXIT_PRIVILEGE = 6

def footer(version, tail='snapshot-restore.html'):
    """
    Generate a footer linking to the Elasticsearch snapshot docs

    :param version: The snapindex version

    :type version: str

    :returns: An epilog/footer suitable for Click
    """
    if not isinstance(version, str):
        raise SnapIndexException(f'Parameter version is not a string: {type(version)}')
    return f'snapindex v{version}. Learn more at {SNAPINDEX_DOCS}/current/{tail}'

# Default Config file location
def default_config_file():
    """
    :returns: The default configuration file location, if present:
        path.join(path.expanduser('~'), '.snapindex', 'snapindex.yml')
    """
    default = path.join(path.expanduser('~'), '.snapindex', 'snapindex.yml')
    if path.isfile(default):
        return default

def exit_codes():
    """
    :returns: A map of exception classes to the process exit code each one produces.
        Anything not listed here exits with ``EXIT_FAILURE``
    """
    return {
        MissingArgument: EXIT_VALIDATION,
        ConfigurationError: EXIT_VALIDATION,
        LoggingException: EXIT_VALIDATION,
        RepositoryNotFound: EXIT_NOT_FOUND,
        SafetyMismatch: EXIT_SAFETY_LOCK,
        UserAborted: EXIT_ABORTED,
        PrivilegeError: EXIT_PRIVILEGE,
        ClientException: EXIT_FAILURE,
        FailedExecution: EXIT_FAILURE,
    }

def env_mapping():
    """
    :returns: Environment variables which override configuration file settings, mapped
        to their location in the configuration dictionary
    """
    return {
        'SNAPINDEX_ES_HOSTS': ('elasticsearch', 'client', 'hosts'),
        'SNAPINDEX_ES_TIMEOUT': ('elasticsearch', 'client', 'request_timeout'),
        'SNAPINDEX_ES_USERNAME': ('elasticsearch', 'other_settings', 'username'),
        'SNAPINDEX_ES_PASSWORD': ('elasticsearch', 'other_settings', 'password'),
        'SNAPINDEX_ES_API_KEY': ('elasticsearch', 'other_settings', 'api_key', 'token'),
        'SNAPINDEX_LOG_LEVEL': ('logging', 'loglevel'),
        'SNAPINDEX_LOG_FILE': ('logging', 'logfile'),
        'SNAPINDEX_LOG_FORMAT': ('logging', 'logformat'),
    }
