"""Option Schema definitions"""

from voluptuous import All, Any, Boolean, Optional, Required
from snapindex.defaults.settings import DEFAULT_LOCATION, DEFAULT_WAIT

# pylint: disable=E1120


def repository():
    """
    :returns: {Required('repository'): Any(str)}
    """
    return {Required('repository'): Any(str)}


def name(mode):
    """
    :returns: The proper name based on what mode it is:
        ``list``: {Optional('name', default=None): Any(None, str)}
        ``create``, ``restore``: {Required('name'): Any(str)}
    """
    if mode == 'list':
        return {Optional('name', default=None): Any(None, str)}  # type: ignore
    return {Required('name'): Any(str)}


def indices():
    """
    :returns: {Optional('indices', default=None): Any(None, list)}
    """
    return {Optional('indices', default=None): Any(None, list)}  # type: ignore


def location():
    """
    :returns: {Optional('location', default='/tmp'): Any(str)}
    """
    return {Optional('location', default=DEFAULT_LOCATION): Any(str)}  # type: ignore


def restore():
    """
    :returns: {Required('restore'): Any(str)}
    """
    return {Required('restore'): Any(str)}


def wait_for_completion():
    """
    :returns:
        {Optional('wait_for_completion', default='yes'):
            Any(bool, All(Any(str), Boolean()))}
    """
    return {
        Optional('wait_for_completion', default=DEFAULT_WAIT): Any(  # type: ignore
            bool, All(Any(str), Boolean())  # type: ignore
        )
    }


def assume_yes():
    """
    :returns: {Optional('assume_yes', default=False): Any(bool)}
    """
    return {Optional('assume_yes', default=False): Any(bool)}  # type: ignore
