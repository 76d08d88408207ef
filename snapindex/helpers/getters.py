"""Utility functions that get things"""

import logging
from elasticsearch8 import ApiError, TransportError
from snapindex.defaults.settings import ALL_SNAPSHOTS
from snapindex.exceptions import ClientException, MissingArgument
from snapindex.helpers.utils import response_text


def _lookup(func, what, **kwargs):
    """
    Call ``func`` with ``kwargs`` and return the response as text. An
    :py:exc:`~.elasticsearch8.ApiError` is not raised: its body is the response.

    :param func: A read-only :py:class:`~.elasticsearch.client.SnapshotClient` method
    :param what: A description of the lookup, for log and exception messages

    :returns: The response text
    :rtype: str
    """
    logger = logging.getLogger(__name__)
    try:
        text = response_text(func(**kwargs))
    except ApiError as err:
        logger.debug('%s returned status %s', what, err.meta.status)
        text = response_text(err.body)
    except TransportError as err:
        raise ClientException(f'Unable to reach Elasticsearch for {what}: {err}') from err
    logger.debug('%s response: %s', what, text)
    return text


def get_repository(client, repository=None):
    """
    Calls :py:meth:`~.elasticsearch.client.SnapshotClient.get_repository`

    :param client: A client connection object
    :param repository: The Elasticsearch snapshot repository to probe

    :type client: :py:class:`~.elasticsearch.Elasticsearch`
    :type repository: str

    :returns: The raw response text. If the repository does not exist, this is the
        error body returned by Elasticsearch.
    :rtype: str
    """
    if not repository:
        raise MissingArgument('No value for "repository" provided')
    return _lookup(
        client.snapshot.get_repository, f'Repository {repository} probe', name=repository)


def get_snapshot(client, repository=None, snapshot=None):
    """
    Calls :py:meth:`~.elasticsearch.client.SnapshotClient.get`

    :param client: A client connection object
    :param repository: The Elasticsearch snapshot repository to use
    :param snapshot: The snapshot name. If not provided, all snapshots are fetched.

    :type client: :py:class:`~.elasticsearch.Elasticsearch`
    :type repository: str
    :type snapshot: str

    :returns: The raw response text, which is the error body returned by
        Elasticsearch if the repository or snapshot does not exist.
    :rtype: str
    """
    if not repository:
        raise MissingArgument('No value for "repository" provided')
    snapname = snapshot if snapshot else ALL_SNAPSHOTS
    return _lookup(
        client.snapshot.get, f'Snapshot {snapname} lookup',
        repository=repository, snapshot=snapname
    )
