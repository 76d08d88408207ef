"""Define valid schemas for the snapindex section of the configuration file"""
from voluptuous import All, Any, Boolean, Optional, Schema
from snapindex.defaults.settings import DEFAULT_LOCATION, DEFAULT_WAIT

# pylint: disable=no-value-for-parameter
def config_snapindex():
    """
    Tool settings with defaults:

    .. code-block:: yaml

        snapindex:
          location: /tmp
          wait_for_completion: yes
          require_root: false

    :returns: A valid :py:class:`~.voluptuous.schema_builder.Schema`
    :rtype: :py:class:`~.voluptuous.schema_builder.Schema`
    """
    return Schema(
        {
            Optional('location', default=DEFAULT_LOCATION): str,
            Optional('wait_for_completion', default=DEFAULT_WAIT):
                Any(bool, All(Any(str), Boolean())),
            Optional('require_root', default=False): Any(bool, All(Any(str), Boolean())),
        }
    )
