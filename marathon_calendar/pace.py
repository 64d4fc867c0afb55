"""
Goal-time parsing and pace scaling.
"""

import math
import re

from .errors import InvalidTimeFormat
from .template import RunKind

MARATHON_MILES = 26.2
EASY_RUN_MULTIPLIER = 1.5

_TIME_PATTERN = re.compile(r'^(\d+):(\d+):(\d+)$')


def parse_time(time_str):
    """Convert 'HH:MM:SS' to seconds.

    The minutes component is divided by 60 rather than multiplied, so
    '04:30:00' is 14400.5 seconds. Run start times go through the same
    conversion.
    """
    match = _TIME_PATTERN.match(time_str.strip()) if time_str else None
    if not match:
        raise InvalidTimeFormat(f"Invalid time '{time_str}', expected HH:MM:SS")

    hours, minutes, seconds = (int(part) for part in match.groups())
    return hours * 3600 + minutes / 60 + seconds


def parse_time_of_day(time_str):
    """Like parse_time, but the hour must fall within a single day."""
    match = _TIME_PATTERN.match(time_str.strip()) if time_str else None
    if match and int(match.group(1)) > 23:
        raise InvalidTimeFormat(f"Invalid time of day '{time_str}', hours must be 00-23")
    return parse_time(time_str)


def format_number(value):
    """Render a number without a trailing '.0' when it is integral."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def display_pace(pace_seconds):
    """Format a pace duration as 'Xh Ym Zs' or 'Xm Zs'."""
    remainder = format_number(pace_seconds % 60)
    if pace_seconds > 3600:
        hours = math.floor(pace_seconds / 3600)
        minutes = math.floor((pace_seconds % 3600) / 60)
        return f"{hours}h {minutes}m {remainder}s"

    return f"{math.floor(pace_seconds / 60)}m {remainder}s"


class PaceModel:
    """Scales run distances to the runner's goal marathon time."""

    def __init__(self, goal_time_seconds):
        if goal_time_seconds <= 0:
            raise InvalidTimeFormat("Goal time must be longer than zero")
        self.goal_time_seconds = goal_time_seconds

    @classmethod
    def from_goal_time(cls, goal_time):
        return cls(parse_time(goal_time))

    @property
    def goal_pace(self):
        """Race pace in seconds per mile."""
        return self.goal_time_seconds / MARATHON_MILES

    def pace_for_distance(self, distance_miles):
        """Time to cover the distance at race pace."""
        return distance_miles * self.goal_pace

    def easy_pace_for_distance(self, distance_miles):
        return self.pace_for_distance(distance_miles) * EASY_RUN_MULTIPLIER

    def pace_for(self, kind, distance_miles):
        if kind is RunKind.TEMPO:
            return self.pace_for_distance(distance_miles)
        return self.easy_pace_for_distance(distance_miles)
