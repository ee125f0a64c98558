"""CLI handling for `openinghours`."""
import logging
import datetime

import yaml
import click
import dateutil.tz
import layer_loader
import dateutil.parser

from openinghours.config import ConfigError, yaml_load, load_config
from openinghours.timezones import get_known_timezones
from openinghours.clock_time import Time
from openinghours.exceptions import OpeningHoursError
from openinghours.time_range import TimeRange

logger = logging.getLogger(__name__)


class TimeRangeParamType(click.ParamType):
    """Click parameter for a `HH:MM-HH:MM` range."""
    name = 'range'

    def convert(self, value, param, ctx):
        """Parse the range, reporting errors as usage errors."""
        if isinstance(value, TimeRange):
            return value
        try:
            return TimeRange.from_string(value)
        except OpeningHoursError as e:
            self.fail(str(e), param, ctx)


class TimeParamType(click.ParamType):
    """Click parameter for a `HH:MM` clock-time."""
    name = 'time'

    def convert(self, value, param, ctx):
        """Parse the time, reporting errors as usage errors."""
        if isinstance(value, Time):
            return value
        try:
            return Time.from_string(value)
        except OpeningHoursError as e:
            self.fail(str(e), param, ctx)


class MomentParamType(click.ParamType):
    """Click parameter for an ISO 8601 moment."""
    name = 'moment'

    def convert(self, value, param, ctx):
        """Parse the moment, reporting errors as usage errors."""
        try:
            return dateutil.parser.isoparse(value)
        except ValueError as e:
            self.fail(f"Not an ISO 8601 moment: {value} ({e})", param, ctx)


@click.group()
@click.option(
    '--log-level',
    help="Logging level.",
    type=click.Choice(('DEBUG', 'INFO', 'WARNING', 'ERROR')),
    default='WARNING',
)
def main(log_level):
    """Shared entrypoint configuration."""
    logging.basicConfig(
        format=(
            "[%(asctime)s] [%(process)d] [%(levelname)s] "
            "[%(name)s] %(message)s"
        ),
        datefmt="%Y-%m-%d %H:%M:%S %z",
        level=getattr(logging, log_level),
    )


@main.command()
@click.argument('time_range', type=TimeRangeParamType())
@click.argument('time', type=TimeParamType())
def check(time_range, time):
    """Report whether TIME_RANGE is open at TIME."""
    is_open = (
        time_range.contains_time(time) or
        time_range.contains_night_time(time)
    )
    logger.debug(f"Checked {time} against {time_range}: {is_open}")

    click.echo('open' if is_open else 'closed')
    click.get_current_context().exit(0 if is_open else 1)


@main.command()
@click.argument('time_range', type=TimeRangeParamType())
@click.option(
    '--at',
    'moment',
    help="Reference moment in ISO 8601 format, defaults to now.",
    type=MomentParamType(),
    default=None,
)
def anchor(time_range, moment):
    """Print the next start and end of TIME_RANGE."""
    if moment is None:
        moment = datetime_now()

    click.echo(f"start: {time_range.start_after(moment).isoformat()}")
    click.echo(f"end: {time_range.end_after(moment).isoformat()}")


@main.command()
@click.option(
    '-c',
    '--config-file',
    'config_files',
    help="Path to a range definition file.",
    type=click.File(encoding='utf-8'),
    required=True,
    multiple=True,
)
def validate(config_files):
    """Validate layered range definition files."""
    try:
        config_data = layer_loader.load_files(
            config_files,
            loader=yaml_load,
        )
    except yaml.YAMLError:
        logger.exception("Could not parse configuration")
        click.get_current_context().exit(1)

    try:
        config = load_config(config_data)
    except ConfigError:
        logger.exception("Configuration Error")
        click.get_current_context().exit(1)

    for range_set in config.ranges.values():
        click.echo(f"{range_set.name}: {len(range_set.ranges)} range(s)")


@main.command()
def timezones():
    """List the known timezone names."""
    for name in sorted(get_known_timezones()):
        click.echo(name)


def datetime_now():
    """The current moment in the local timezone."""
    return datetime.datetime.now(dateutil.tz.tzlocal())
