"""
Generate an iCalendar file from an expanded training plan.
"""

import math
import os
from collections import namedtuple
from datetime import datetime, time, timedelta

import pytz
from icalendar import Calendar, Event

from .config import DEFAULT_CALENDAR_NAME, Settings
from .errors import EmptyEncodedOutput, EventEncodingFailure
from .pace import display_pace, format_number
from .template import RunKind

PRODID = '-//Marathon Calendar//Novice 2 Plan//EN'

CalendarEvent = namedtuple('CalendarEvent', ['start', 'duration', 'title', 'description', 'uid'])


def duration_parts(pace_seconds):
    """Split a pace into (hours, minutes), rounding minutes up."""
    hours = math.floor(pace_seconds / 3600)
    minutes = math.ceil((pace_seconds % 3600) / 60)
    return hours, minutes


def event_title(kind):
    return 'Tempo run' if kind is RunKind.TEMPO else 'Run'


def event_description(run):
    return f"{format_number(run.distance_miles)} miles in {display_pace(run.pace_seconds)}"


def encode_events(events, dtstamp, calendar_name=DEFAULT_CALENDAR_NAME):
    """Encode calendar events into iCalendar bytes.

    Raises EventEncodingFailure for an event that can't be represented and
    EmptyEncodedOutput when there is nothing to write.
    """
    if not events:
        raise EmptyEncodedOutput("No runs to put in the calendar")

    cal = Calendar()
    cal.add('prodid', PRODID)
    cal.add('version', '2.0')
    cal.add('x-wr-calname', calendar_name)

    for calendar_event in events:
        if not calendar_event.title:
            raise EventEncodingFailure(f"Event {calendar_event.uid} has no title")
        if calendar_event.duration <= timedelta(0):
            raise EventEncodingFailure(
                f"Event {calendar_event.uid} has a non-positive duration ({calendar_event.duration})"
            )

        event = Event()
        event.add('uid', calendar_event.uid)
        event.add('dtstamp', dtstamp)
        event.add('summary', calendar_event.title)
        event.add('dtstart', calendar_event.start)
        event.add('duration', calendar_event.duration)
        event.add('description', calendar_event.description)

        # Always shown as busy
        event.add('transp', 'OPAQUE')
        event.add('x-microsoft-cdo-busystatus', 'BUSY')
        event.add('status', 'CONFIRMED')

        cal.add_component(event)

    data = cal.to_ical()
    if not data:
        raise EmptyEncodedOutput("Calendar encoder returned no data")
    return data


class CalendarGenerator:
    def __init__(self, config, settings=None):
        self.config = config
        self.settings = settings or Settings.from_env()
        self.timezone = self.settings.timezone

    def project(self, run):
        """Create a calendar event for a scheduled run."""
        # Start time seconds may be fractional
        start_dt = datetime.combine(run.date, time.min) + timedelta(seconds=self.config.runs_start_seconds)
        start_dt = self.timezone.localize(start_dt).astimezone(pytz.utc)

        hours, minutes = duration_parts(run.pace_seconds)

        return CalendarEvent(
            start=start_dt,
            duration=timedelta(hours=hours, minutes=minutes),
            title=event_title(run.kind),
            description=event_description(run),
            uid=f"{run.date.isoformat()}-{run.kind.value}@marathon-plan",
        )

    def build_events(self, plan):
        return [self.project(run) for run in plan if run is not None]

    def dtstamp(self):
        # Pinned to the training start so repeated exports are identical
        return datetime.combine(self.config.training_start, time.min).replace(tzinfo=pytz.utc)

    def to_ical(self, plan):
        """Encode every run in the plan as iCalendar bytes."""
        return encode_events(self.build_events(plan), self.dtstamp(), self.settings.calendar_name)

    def generate_calendar(self, plan, output_path=None):
        """Generate complete calendar file."""
        output_path = output_path or self.settings.output_path
        data = self.to_ical(plan)

        # Ensure output directory exists
        output_dir = os.path.dirname(output_path)
        if output_dir and not os.path.exists(output_dir):
            os.makedirs(output_dir)

        with open(output_path, 'wb') as f:
            f.write(data)

        runs = [run for run in plan if run is not None]
        tempo_count = sum(1 for run in runs if run.kind is RunKind.TEMPO)

        print(f"✓ Calendar generated: {output_path}")
        print(f"  - {len(runs)} runs")
        print(f"  - {tempo_count} tempo runs")
        print(f"  - {len(runs) - tempo_count} easy runs")

        return len(runs)
