"""Helper utilities

The kind that don't fit in testers or getters
"""

import json
import logging
from elasticsearch8 import ApiError, TransportError
from es_client.helpers.utils import ensure_list
from snapindex.exceptions import ClientException, FailedExecution

logger = logging.getLogger(__name__)


def parse_csv(value):
    """
    Split a comma-separated selector into its parts, dropping blanks.

    :param value: A csv string like ``a,b``, a list of those, or ``None``
    :type value: str

    :returns: The list of non-empty names, or ``None`` if there are none
    :rtype: list
    """
    if value is None:
        return None
    names = []
    for item in ensure_list(value):
        names.extend(part.strip() for part in str(item).split(',') if part.strip())
    return names or None


def to_csv(indices):
    """
    :param indices: A list of indices to act on, or a single value, which could be
        in the format of a csv string already.

    :type indices: list

    :returns: A csv string from a list of indices, in the order given, or ``None``
    :rtype: str
    """
    if not indices:
        return None
    return ','.join(ensure_list(indices))  # in case of a single value passed


def response_text(response):
    """
    Render an API response (or the body of an API error) as the text the operator sees.

    :param response: An :py:class:`~.elastic_transport.ObjectApiResponse`, a
        :py:class:`dict`, or a string

    :returns: JSON text for structured responses, else ``str(response)``
    :rtype: str
    """
    if isinstance(response, (dict, list, str)):
        body = response
    else:
        body = getattr(response, 'body', response)
    if isinstance(body, (dict, list)):
        return json.dumps(body, indent=2, sort_keys=True)
    return str(body)


def send_request(func, what, **kwargs):
    """
    Call the :py:class:`~.elasticsearch.client.SnapshotClient` method ``func`` with
    ``kwargs``.

    :param func: The client method to call
    :param what: A description of the request, for log and exception messages

    :type what: str

    :returns: The API response
    :raises: :py:exc:`~.snapindex.exceptions.FailedExecution` with the raw error body if
        Elasticsearch rejects the request, or
        :py:exc:`~.snapindex.exceptions.ClientException` if it cannot be reached
    """
    logger.debug('%s with arguments: %s', what, kwargs)
    try:
        return func(**kwargs)
    except ApiError as err:
        raise FailedExecution(
            f'{what} failed with status {err.meta.status}: {response_text(err.body)}'
        ) from err
    except TransportError as err:
        raise ClientException(f'Unable to reach Elasticsearch for {what}: {err}') from err


def show_dry_run(mode, **kwargs):
    """
    Log dry run output with the request which would have been sent.

    :param mode: The mode being run
    :param kwargs: The arguments of the request that was not sent

    :type mode: str
    :type kwargs: dict

    :rtype: None
    """
    logger.info('DRY-RUN MODE.  No changes will be made.')
    logger.info('DRY-RUN: %s with arguments: %s', mode, kwargs)
