"""Loading of range definition files."""

from openinghours.config.model import Config, RangeSet
from openinghours.config.loader import yaml_load, load_config
from openinghours.config.exceptions import ConfigError

__all__ = (
    'Config',
    'RangeSet',
    'yaml_load',
    'load_config',
    'ConfigError',
)
