"""Snapshot action class"""
import logging
import click
from snapindex.defaults.settings import DEFAULT_LOCATION
from snapindex.exceptions import MissingArgument
from snapindex.helpers.testers import repository_exists
from snapindex.helpers.utils import response_text, send_request, show_dry_run, to_csv

class Snapshot:
    """Snapshot Action Class

    Registers a shared filesystem repository if the probe finds none, then
    :py:meth:`~.elasticsearch.client.SnapshotClient.create` a full or selective snapshot.
    """
    def __init__(self, client, repository=None, name=None, indices=None,
        location=DEFAULT_LOCATION, wait_for_completion=True, echo=click.echo
    ):
        """
        :param client: A client connection object
        :param repository: Repository name.
        :param name: Snapshot name.
        :param indices: Indices to snapshot. If not provided, the snapshot is a full one.
        :param location: Shared filesystem location used if the repository must be created.
        :param wait_for_completion: Wait for a full snapshot to complete before returning.
        :param echo: Called with each piece of operator-facing output.

        :type client: :py:class:`~.elasticsearch.Elasticsearch`
        :type repository: str
        :type name: str
        :type indices: list
        :type location: str
        :type wait_for_completion: bool
        :type echo: callable
        """
        if not repository:
            raise MissingArgument('No value for "repository" provided.')
        if not name:
            raise MissingArgument('No value for "name" provided.')
        #: The :py:class:`~.elasticsearch.Elasticsearch` client object
        self.client = client
        #: Object attribute that gets the value of param ``repository``.
        self.repository = repository
        #: Object attribute that gets the value of param ``name``.
        self.name = name
        #: Object attribute that contains the :py:func:`~.snapindex.helpers.utils.to_csv`
        #: output of param ``indices``. ``None`` means all indices.
        self.indices = to_csv(indices)
        #: Object attribute that gets the value of param ``wait_for_completion``.
        self.wait_for_completion = wait_for_completion
        #: The request body used to register the repository, if it is missing
        self.repo_body = {
            'type': 'fs',
            'settings': {'compress': True, 'location': location},
        }
        self.echo = echo
        self.loggit = logging.getLogger('snapindex.actions.snapshot')

    @property
    def settings(self):
        """
        The keyword arguments for :py:meth:`~.elasticsearch.client.SnapshotClient.create`.
        A selective snapshot ignores unavailable indices and excludes the cluster global state.
        """
        args = {'repository': self.repository, 'snapshot': self.name}
        if self.indices:
            args.update({
                'indices': self.indices,
                'ignore_unavailable': True,
                'include_global_state': False,
            })
        else:
            args['wait_for_completion'] = self.wait_for_completion
        return args

    def create_repository(self):
        """
        :py:meth:`~.elasticsearch.client.SnapshotClient.create_repository` using
        :py:attr:`repo_body`
        """
        self.echo(f'Repository {self.repository} not found! Creating one...')
        self.loggit.info(
            'Creating repository %s at %s', self.repository, self.repo_body['settings']['location'])
        response = send_request(
            self.client.snapshot.create_repository, f'Repository {self.repository} creation',
            name=self.repository, body=self.repo_body
        )
        self.echo(response_text(response))

    def do_dry_run(self):
        """Log what the output would be, but take no action."""
        if not repository_exists(self.client, repository=self.repository):
            self.loggit.info(
                'DRY-RUN: repository %s not found and would be created with: %s',
                self.repository, self.repo_body
            )
        show_dry_run('snapshot', **self.settings)

    def do_action(self):
        """
        Create :py:attr:`repository` if it does not exist, then create the snapshot.
        """
        if not repository_exists(self.client, repository=self.repository):
            self.create_repository()
        if self.indices:
            self.loggit.info('Creating snapshot "%s" of indices: %s', self.name, self.indices)
        else:
            self.loggit.info('Creating full snapshot "%s"', self.name)
        response = send_request(
            self.client.snapshot.create, f'Snapshot {self.name} creation', **self.settings)
        self.echo(response_text(response))
        if not self.indices and not self.wait_for_completion:
            self.loggit.warning(
                '"wait_for_completion" set to %s. '
                'Remember to check for successful completion manually.',
                self.wait_for_completion
            )
