"""Show snapshots action class"""
import logging
import click
from elasticsearch8 import NotFoundError
from snapindex.defaults.settings import ALL_SNAPSHOTS
from snapindex.exceptions import FailedExecution, MissingArgument, RepositoryNotFound
from snapindex.helpers.utils import response_text, send_request

class ListSnapshots:
    """List Snapshots Action Class

    Read-only. Sends a single :py:meth:`~.elasticsearch.client.SnapshotClient.get`
    request and prints the response.
    """
    def __init__(self, client, repository=None, name=None, echo=click.echo):
        """
        :param client: A client connection object
        :param repository: Repository name.
        :param name: Snapshot name. If not provided, all snapshots in ``repository`` are shown.
        :param echo: Called with each piece of operator-facing output.

        :type client: :py:class:`~.elasticsearch.Elasticsearch`
        :type repository: str
        :type name: str
        :type echo: callable
        """
        if not repository:
            raise MissingArgument('No value for "repository" provided.')
        #: The :py:class:`~.elasticsearch.Elasticsearch` client object
        self.client = client
        #: Object attribute that gets the value of param ``repository``.
        self.repository = repository
        #: Object attribute that gets the value of param ``name``.
        self.name = name
        #: The snapshot name sent in the request. ``_all`` if no :py:attr:`name`
        self.snapname = name if name else ALL_SNAPSHOTS
        self.echo = echo
        self.loggit = logging.getLogger('snapindex.actions.show')

    def do_dry_run(self):
        """Listing makes no changes, so a dry run is the same as :py:meth:`do_action`"""
        self.loggit.info('DRY-RUN MODE.  Listing is read-only and runs as usual.')
        self.do_action()

    def do_action(self):
        """
        Print the details of :py:attr:`name`, or of every snapshot in :py:attr:`repository`
        """
        if self.name:
            self.echo(f'Showing {self.name} snapshot in repository {self.repository}')
        else:
            self.echo(f'Showing ALL snapshots in repository {self.repository}')
        try:
            response = send_request(
                self.client.snapshot.get, f'Snapshot {self.snapname} lookup',
                repository=self.repository, snapshot=self.snapname
            )
        except FailedExecution as err:
            if isinstance(err.__cause__, NotFoundError):
                raise RepositoryNotFound(str(err)) from err
            raise
        self.echo(response_text(response))
