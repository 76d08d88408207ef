"""Utility functions that test things"""

import logging
import os
from snapindex.defaults.settings import ERROR_INDICATOR
from snapindex.exceptions import PrivilegeError
from snapindex.helpers.getters import get_repository


def is_set(value):
    """
    :param value: An option value

    :returns: ``True`` if ``value`` is not ``None`` and, for strings, not blank
    :rtype: bool
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def has_error(text):
    """
    :param text: A response rendered as text

    :type text: str

    :returns: ``True`` if ``text`` contains the error indicator
    :rtype: bool
    """
    return ERROR_INDICATOR in text


def repository_exists(client, repository=None):
    """
    Probe ``repository`` with :py:func:`~.snapindex.helpers.getters.get_repository`

    :param client: A client connection object
    :param repository: The Elasticsearch snapshot repository to use

    :type client: :py:class:`~.elasticsearch.Elasticsearch`
    :type repository: str

    :returns: ``True`` unless the probe response contains an error
    :rtype: bool
    """
    logger = logging.getLogger(__name__)
    if has_error(get_repository(client, repository)):
        logger.debug('Repository %s not found...', repository)
        return False
    logger.debug('Repository %s exists.', repository)
    return True


def verify_root():
    """
    Raise :py:exc:`~.snapindex.exceptions.PrivilegeError` unless running as root.

    :rtype: None
    """
    if os.geteuid() != 0:
        raise PrivilegeError('This script must be run as root.')
