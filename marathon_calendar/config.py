"""
Plan configuration built once at start-up and passed to every stage.

Environment settings (optionally loaded from .env by the command-line tools):
    PLAN_TIMEZONE       Time zone for run start times (default America/New_York)
    PLAN_OUTPUT_PATH    Calendar file written by export_plan.py (default plan.ics)
    PLAN_CALENDAR_NAME  Calendar display name (default Marathon Training)
"""

import os
from collections import namedtuple
from datetime import datetime

import pytz

from .errors import InvalidDateFormat, InvalidInput, MissingArgument
from .pace import PaceModel, parse_time_of_day

DEFAULT_RUNS_START_TIME = '07:00:00'
DEFAULT_TIMEZONE = 'America/New_York'
DEFAULT_OUTPUT_PATH = 'plan.ics'
DEFAULT_CALENDAR_NAME = 'Marathon Training'


def parse_date(date_str, name='date'):
    """Parse a YYYY-MM-DD string into a date."""
    if not date_str:
        raise MissingArgument(f"Missing {name}")
    try:
        return datetime.strptime(date_str, '%Y-%m-%d').date()
    except ValueError:
        raise InvalidDateFormat(f"Invalid {name} '{date_str}', expected YYYY-MM-DD")


def _require(value, name):
    if not value:
        raise MissingArgument(f"Missing {name}")
    return value


class PlanConfig(namedtuple('PlanConfig', [
        'marathon_date', 'goal_time_seconds', 'training_start',
        'runs_start_seconds', 'include_race_week'])):
    """Validated inputs for a single plan."""

    __slots__ = ()

    @classmethod
    def from_strings(cls, marathon_date, goal_time, training_start,
                     runs_start_time=DEFAULT_RUNS_START_TIME, include_race_week=False):
        """Parse and validate every input before any plan is computed."""
        marathon = parse_date(marathon_date, 'marathon date')
        goal_seconds = PaceModel.from_goal_time(_require(goal_time, 'goal time')).goal_time_seconds
        start = parse_date(training_start, 'training start date')
        runs_start_seconds = parse_time_of_day(_require(runs_start_time, 'runs start time'))

        return cls(
            marathon_date=marathon,
            goal_time_seconds=goal_seconds,
            training_start=start,
            runs_start_seconds=runs_start_seconds,
            include_race_week=include_race_week,
        )


class Settings(namedtuple('Settings', ['timezone', 'output_path', 'calendar_name'])):
    """Environment-driven settings for calendar export."""

    __slots__ = ()

    @classmethod
    def from_env(cls, environ=None):
        if environ is None:
            environ = os.environ

        zone_name = environ.get('PLAN_TIMEZONE') or DEFAULT_TIMEZONE
        try:
            timezone = pytz.timezone(zone_name)
        except pytz.UnknownTimeZoneError:
            raise InvalidInput(f"Unknown time zone '{zone_name}' in PLAN_TIMEZONE")

        return cls(
            timezone=timezone,
            output_path=environ.get('PLAN_OUTPUT_PATH') or DEFAULT_OUTPUT_PATH,
            calendar_name=environ.get('PLAN_CALENDAR_NAME') or DEFAULT_CALENDAR_NAME,
        )
