"""Set up voluptuous Schema defaults for each mode"""
import logging
from voluptuous import Schema
from es_client.exceptions import FailedValidation
from es_client.schemacheck import SchemaCheck
from es_client.helpers.utils import prune_nones
from snapindex.defaults import option_defaults
from snapindex.exceptions import ConfigurationError, MissingArgument

## Methods for building the schema
def mode_specific(mode):
    """
    :param mode: The name of a mode
    :type mode: str

    :returns: A :py:class:`list` containing one or more
        :py:class:`~.voluptuous.schema_builder.Optional` or
        :py:class:`~.voluptuous.schema_builder.Required` options from
        :py:mod:`~.snapindex.defaults.option_defaults`, defining acceptable values for each for the
        given ``mode``
    :rtype: list
    """
    options = {
        'list' : [
            option_defaults.name(mode),
        ],
        'restore' : [
            option_defaults.name(mode),
            option_defaults.restore(),
            option_defaults.indices(),
            option_defaults.assume_yes(),
        ],
        'create' : [
            option_defaults.name(mode),
            option_defaults.indices(),
            option_defaults.location(),
            option_defaults.wait_for_completion(),
        ],
    }
    return options[mode]

def get_schema(mode):
    """
    Return a :py:class:`~.voluptuous.schema_builder.Schema` of acceptable options and their default
    values as appropriate for the provided ``mode``

    :param mode: One of ``list``, ``restore`` or ``create``
    :type mode: str
    :rtype: :py:class:`~.voluptuous.schema_builder.Schema`
    """
    options = {}
    options.update(option_defaults.repository())
    for option in mode_specific(mode):
        options.update(option)
    return Schema(options)

def validate_options(mode, option_dict):
    """
    Check that required values are present, then run ``option_dict`` through the
    schema for ``mode``. Unset (``None``) values are pruned first so that defaults
    apply.

    :param mode: One of ``list``, ``restore`` or ``create``
    :param option_dict: The options collected from the command-line and configuration

    :type mode: str
    :type option_dict: dict

    :returns: The validated options, with defaults filled in
    :rtype: dict
    """
    logger = logging.getLogger(__name__)
    opts = prune_nones(option_dict)
    if 'repository' not in opts:
        raise MissingArgument('Please provide a repository for your snapshot -b.')
    if mode != 'list' and 'name' not in opts:
        raise MissingArgument('Please provide a name for your snapshot -n.')
    logger.debug('Validating %s options: %s', mode, opts)
    try:
        return SchemaCheck(opts, get_schema(mode), 'options', f'mode "{mode}"').result()
    except FailedValidation as exc:
        raise ConfigurationError(f'Invalid options for mode "{mode}": {exc}') from exc
