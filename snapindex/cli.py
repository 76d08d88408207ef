"""snapindex CLI"""
import sys
import logging
import click
from es_client.builder import Builder
from es_client.exceptions import ConfigurationError as ESClientConfigError
from snapindex.actions import CLASS_MAP
from snapindex.actions.restore import confirm_restore
from snapindex.config_utils import (
    build_configdict,
    check_logging_config,
    check_snapindex_config,
    load_config,
    password_filter,
    set_logging,
)
from snapindex.defaults.settings import (
    CLICK_DRYRUN,
    DEFAULT_ENDPOINT,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    default_config_file,
    exit_codes,
    footer,
)
from snapindex.exceptions import ClientException, ConfigurationError, SnapIndexException
from snapindex.helpers.testers import is_set, verify_root
from snapindex.helpers.utils import parse_csv
from snapindex.validators import validate_options
from snapindex._version import __version__

CONTEXT_SETTINGS = {'help_option_names': ['-h', '--help'], 'max_content_width': 100}


def select_mode(list_only=False, restore=None):
    """
    :param list_only: Whether ``-l`` was passed
    :param restore: The value of ``-r``, if any

    :returns: ``list`` if ``list_only``, else ``restore`` if ``-r`` was passed at all,
        else ``create``. A blank ``-r`` still selects ``restore``, where the safety lock
        rejects it.
    :rtype: str
    """
    if list_only:
        return 'list'
    if restore is not None:
        return 'restore'
    return 'create'


def exit_code_for(err):
    """
    :param err: The exception that ended the run

    :returns: The exit code mapped to the type of ``err``
    :rtype: int
    """
    for exc_class, code in exit_codes().items():
        if isinstance(err, exc_class):
            return code
    return EXIT_FAILURE


def get_client(configdict):
    """
    :param configdict: The :py:class:`~.es_client.builder.Builder` configuration
    :type configdict: dict

    :returns: A client connection object
    :rtype: :py:class:`~.elasticsearch.Elasticsearch`
    """
    logger = logging.getLogger(__name__)
    logger.debug('Client configuration: %s', password_filter(configdict))
    try:
        builder = Builder(configdict=configdict)
    except ESClientConfigError as exc:
        raise ConfigurationError(f'Invalid client configuration: {exc}') from exc
    try:
        builder.connect()
    # pylint: disable=broad-except
    except Exception as exc:
        raise ClientException(f'Unable to connect to Elasticsearch: {exc}') from exc
    return builder.client


def run_mode(client, mode, options, dry_run=False, confirm=confirm_restore, echo=click.echo):
    """
    Build the action class for ``mode`` and run it.

    :param client: A client connection object
    :param mode: One of ``list``, ``restore`` or ``create``
    :param options: Validated options for ``mode``
    :param dry_run: Log what would be done instead of making changes
    :param confirm: Prompt used before a restore. Returns ``True`` to proceed.
    :param echo: Called with each piece of operator-facing output.

    :type client: :py:class:`~.elasticsearch.Elasticsearch`
    :type mode: str
    :type options: dict
    :type dry_run: bool
    :type confirm: callable
    :type echo: callable
    :rtype: None
    """
    kwargs = dict(options)
    if mode == 'restore':
        kwargs['confirm'] = confirm
    action = CLASS_MAP[mode](client, echo=echo, **kwargs)
    if dry_run:
        action.do_dry_run()
    else:
        action.do_action()


def collect_options(mode, repository, name, indices, location, restore, wait, assume_yes, tool_cfg):
    """
    Gather the options used by ``mode``. Blank values count as unset, except ``restore``,
    which is passed as given so that the safety lock sees it. The
    ``snapindex`` configuration section supplies ``location`` and ``wait_for_completion``
    when they are not given on the command-line.

    :returns: The unvalidated options for ``mode``
    :rtype: dict
    """
    def value(val):
        return val if is_set(val) else None
    opts = {'repository': value(repository), 'name': value(name)}
    if mode == 'restore':
        opts.update({
            'restore': restore,
            'indices': parse_csv(indices),
            'assume_yes': assume_yes,
        })
    elif mode == 'create':
        opts.update({
            'indices': parse_csv(indices),
            'location': value(location) or tool_cfg['location'],
            'wait_for_completion': value(wait) or tool_cfg['wait_for_completion'],
        })
    return opts


# pylint: disable=unused-argument, redefined-builtin, too-many-arguments, too-many-locals
@click.command('snapindex', context_settings=CONTEXT_SETTINGS, epilog=footer(__version__))
@click.option('-b', '--repository', type=str, help='Snapshot repository (Required)')
@click.option('-n', '--name', type=str, help='Snapshot name (Required unless -l)')
@click.option('-i', '--indices', type=str, help='Comma-separated indices to snapshot or restore. [default: all]')
@click.option('-t', '--location', type=str, help='Cluster directory for archiving, used when the repository is created. [default: /tmp]')
@click.option('-l', '--list', 'list_only', is_flag=True, help='Show snapshot details only (read-only mode)')
@click.option('-r', '--restore', type=str, help='Restore snapshot (*MUST* match -n parameter for safety)')
@click.option('-e', '--endpoint', type=str, help=f'Elasticsearch URL [default: {DEFAULT_ENDPOINT}]')
@click.option('-w', '--wait', type=str, help='Wait for a full snapshot to complete: yes/no [default: yes]')
@click.option('-y', '--yes', 'assume_yes', is_flag=True, help='Restore without asking for confirmation')
@click.option('-c', '--config', 'config_path', type=click.Path(exists=True, dir_okay=False), help='Path to configuration file. [default: ~/.snapindex/snapindex.yml]')
@click.option('--request-timeout', type=click.IntRange(min=1), help='Request timeout in seconds [default: 30]')
@click.option('--require-root', is_flag=True, help='Refuse to run unless the effective user is root')
@click.option('--dry-run', **CLICK_DRYRUN['dry-run'])
@click.option('--loglevel', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']), help='Log level')
@click.option('--logfile', type=str, help='Log file')
@click.option('--logformat', type=click.Choice(['default', 'json', 'logstash', 'ecs']), help='Log output format')
@click.version_option(__version__, '-v', '--version', prog_name='snapindex')
def snapindex_cli(
    repository, name, indices, location, list_only, restore, endpoint, wait, assume_yes,
    config_path, request_timeout, require_root, dry_run, loglevel, logfile, logformat
):
    """
    Create, list and restore Elasticsearch snapshots.

    \b
    Modes:
      -l          list the snapshot named by -n, or all snapshots in the repository
      -r NAME     restore snapshot NAME (must equal -n), after confirmation
      (default)   create snapshot -n, registering repository -b under -t if needed

    Command-line settings always override environment variables (SNAPINDEX_*), which
    override configuration file settings.
    """
    try:
        config = load_config(config_path or default_config_file())
        log_opts = check_logging_config(config)
        for key, val in (('loglevel', loglevel), ('logfile', logfile), ('logformat', logformat)):
            if val:
                log_opts[key] = val
        set_logging(log_opts)
        logger = logging.getLogger('snapindex.cli')
        tool_cfg = check_snapindex_config(config)
        if require_root or tool_cfg['require_root']:
            verify_root()
        mode = select_mode(list_only=list_only, restore=restore)
        logger.debug('Mode: %s', mode)
        options = validate_options(
            mode,
            collect_options(
                mode, repository, name, indices, location, restore, wait, assume_yes, tool_cfg
            )
        )
        configdict = build_configdict(config, endpoint=endpoint, request_timeout=request_timeout)
        if 'hosts' not in configdict['elasticsearch']['client']:
            configdict['elasticsearch']['client']['hosts'] = [DEFAULT_ENDPOINT]
        client = get_client(configdict)
        run_mode(client, mode, options, dry_run=dry_run)
    except SnapIndexException as err:
        click.echo(f'{err}')
        sys.exit(exit_code_for(err))
    sys.exit(EXIT_SUCCESS)
