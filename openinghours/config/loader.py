"""Loading and validation of range definition files."""

import logging
from typing import IO, Any, Dict, List, Union
from pathlib import Path as FilePath

import yaml
import jsonschema
import jsonschema.exceptions

from openinghours.exceptions import OpeningHoursError
from openinghours.time_range import TimeRange
from openinghours.config.model import Config, RangeSet
from openinghours.config.exceptions import ConfigError

Yaml = Dict[str, Any]
Path = List[str]

SCHEMA_PATH = FilePath(__file__).parent / 'schema.yaml'

logger = logging.getLogger(__name__)


def yaml_load(stream: Union[IO[str], str]) -> Any:
    """Parse the first YAML document from the given stream."""
    return yaml.load(stream, getattr(yaml, 'CSafeLoader', yaml.SafeLoader))


def load_config(yaml: Yaml) -> Config:
    """Unpack a parsed YAML file into a `Config` object."""
    _schema_validate(yaml)

    try:
        yaml_ranges = yaml['ranges']
    except KeyError:  # pragma: no cover
        raise ConfigError("No top-level ranges key defined.") from None

    config = Config(
        ranges={
            name: _load_range_set(['ranges', name], name, definitions)
            for name, definitions in yaml_ranges.items()
        },
    )

    logger.debug(f"Loaded {len(config.ranges)} range sets")
    return config


def _schema_validate(config: Yaml) -> None:
    schema_yaml = yaml_load(SCHEMA_PATH.read_text(encoding='utf-8'))

    try:
        jsonschema.validate(config, schema_yaml)
    except jsonschema.exceptions.ValidationError as e:
        location = '.'.join(str(x) for x in e.absolute_path) or 'top level'
        raise ConfigError(
            f"Could not validate config file against schema at {location}.",
        ) from None


def _load_range_set(
    path: Path,
    name: str,
    definitions: List[Any],
) -> RangeSet:
    return RangeSet(
        name=name,
        ranges=[
            _load_time_range(path + [str(idx)], definition)
            for idx, definition in enumerate(definitions)
        ],
    )


def _load_time_range(path: Path, definition: Any) -> TimeRange:
    try:
        return TimeRange.from_definition(definition)
    except OpeningHoursError as e:
        raise ConfigError(f"{e} (at {'.'.join(path)})") from e
