"""Restore action class"""
import logging
import click
from snapindex.defaults.settings import CONFIRM_PROMPT
from snapindex.exceptions import (
    MissingArgument, RepositoryNotFound, SafetyMismatch, UserAborted
)
from snapindex.helpers.getters import get_snapshot
from snapindex.helpers.testers import has_error
from snapindex.helpers.utils import response_text, send_request, show_dry_run, to_csv

def confirm_restore(message):
    """
    Ask the operator to confirm on the console.

    :param message: The question to ask
    :type message: str

    :returns: ``True`` if the operator answered yes
    :rtype: bool
    """
    return click.confirm(message, default=False)

class Restore:
    """Restore Action Class"""
    def __init__(self, client, repository=None, name=None, restore=None, indices=None,
        assume_yes=False, confirm=confirm_restore, echo=click.echo
    ):
        """
        :param client: A client connection object
        :param repository: Repository name.
        :param name: Snapshot name.
        :param restore: The snapshot to restore. Must be identical to ``name``.
        :param indices: Indices to restore. If not provided, everything in the snapshot is
            restored.
        :param assume_yes: Skip the confirmation prompt.
        :param confirm: Called with the prompt text. Returns ``True`` to proceed.
        :param echo: Called with each piece of operator-facing output.

        :type client: :py:class:`~.elasticsearch.Elasticsearch`
        :type repository: str
        :type name: str
        :type restore: str
        :type indices: list
        :type assume_yes: bool
        :type confirm: callable
        :type echo: callable
        """
        if not repository:
            raise MissingArgument('No value for "repository" provided.')
        if not name:
            raise MissingArgument('No value for "name" provided.')
        if restore != name:
            raise SafetyMismatch('Safe Lock: Snapshot NAME and RESTORE not matching!')
        #: The :py:class:`~.elasticsearch.Elasticsearch` client object
        self.client = client
        #: Object attribute that gets the value of param ``repository``.
        self.repository = repository
        #: Object attribute that gets the value of param ``name``.
        self.name = name
        #: Object attribute that contains the :py:func:`~.snapindex.helpers.utils.to_csv`
        #: output of param ``indices``. ``None`` means a full restore.
        self.indices = to_csv(indices)
        #: Object attribute that gets the value of param ``assume_yes``.
        self.assume_yes = assume_yes
        self.confirm = confirm
        self.echo = echo
        self.loggit = logging.getLogger('snapindex.actions.restore')

    @property
    def settings(self):
        """
        The keyword arguments for :py:meth:`~.elasticsearch.client.SnapshotClient.restore`
        """
        args = {'repository': self.repository, 'snapshot': self.name}
        if self.indices:
            args.update({
                'indices': self.indices,
                'ignore_unavailable': True,
                'include_global_state': False,
            })
        return args

    def fetch_details(self):
        """
        Fetch and print the snapshot metadata.

        :raises: :py:exc:`~.snapindex.exceptions.RepositoryNotFound` if the lookup
            response contains an error
        """
        self.echo('Fetching snapshot details...')
        text = get_snapshot(self.client, repository=self.repository, snapshot=self.name)
        if has_error(text):
            self.loggit.debug('Snapshot lookup response: %s', text)
            raise RepositoryNotFound(
                f'Repository {self.repository} or snapshot {self.name} not found!')
        self.echo(text)

    def do_dry_run(self):
        """Log what the output would be, but take no action."""
        self.fetch_details()
        show_dry_run('restore', **self.settings)

    def do_action(self):
        """
        :py:meth:`~.elasticsearch.client.SnapshotClient.restore` :py:attr:`name`
        after the operator confirms.
        """
        self.fetch_details()
        if not self.assume_yes and not self.confirm(CONFIRM_PROMPT):
            raise UserAborted('Mission abandoned! Exiting...')
        self.echo(f'Restoring {self.name} snapshot from repository {self.repository} ...')
        if self.indices:
            self.loggit.info('Restoring indices "%s" from snapshot: %s', self.indices, self.name)
        else:
            self.loggit.info('Restoring all indices from snapshot: %s', self.name)
        response = send_request(
            self.client.snapshot.restore, f'Snapshot {self.name} restore', **self.settings)
        self.echo(response_text(response))
