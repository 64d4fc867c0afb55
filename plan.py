#!/usr/bin/env python3
"""
Print a marathon training plan, starting today, one line per day.

Usage:
    ./plan.py 2025-10-12 04:00:00
    ./plan.py 2025-10-12 04:00:00 --start 2025-06-09
    ./plan.py 2025-10-12 04:00:00 --json
"""

import json
import sys
from datetime import date

from dotenv import load_dotenv

from marathon_calendar.cli import UsageParser, plan_error, usage_error
from marathon_calendar.config import PlanConfig
from marathon_calendar.errors import InvalidDateRange, InvalidInput, PlanError
from marathon_calendar.expander import dated_slots, expand_plan
from marathon_calendar.pace import display_pace, format_number
from marathon_calendar.template import WEEKDAY_LABELS, RunKind

USAGE = "%(prog)s [MARATHON DATE: YYYY-MM-DD] [GOAL TIME: HH:MM:SS]"


def format_slot(day, run):
    """One printable line for a plan day."""
    label = f"{day:%Y-%m-%d} {WEEKDAY_LABELS[day.weekday()]}"
    if run is None:
        return f"{label}  Rest"

    kind = 'Tempo' if run.kind is RunKind.TEMPO else 'Easy'
    return f"{label}  {kind:<5}  {format_number(run.distance_miles):>4} mi  {display_pace(run.pace_seconds)}"


def slot_to_dict(run):
    if run is None:
        return None
    return {
        'date': run.date.isoformat(),
        'kind': run.kind.value,
        'distance_miles': run.distance_miles,
        'pace_seconds': run.pace_seconds,
    }


def build_parser():
    parser = UsageParser(
        usage=USAGE,
        description='Print a Novice 2 marathon training plan',
    )
    parser.add_argument('marathon_date', help='Race date in YYYY-MM-DD format')
    parser.add_argument('goal_time', help='Goal finish time in HH:MM:SS format')
    parser.add_argument('--start', help='Training start date (default: today)')
    parser.add_argument('--include-race-week', action='store_true',
                        help='Count the race week as an extra training week')
    parser.add_argument('--json', action='store_true', help='Print the plan as JSON')
    return parser


def main(argv=None):
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    start = args.start or date.today().isoformat()

    try:
        config = PlanConfig.from_strings(
            args.marathon_date,
            args.goal_time,
            start,
            include_race_week=args.include_race_week,
        )
        plan = expand_plan(config)
    except (InvalidInput, InvalidDateRange) as e:
        return usage_error(parser, e)
    except PlanError as e:
        return plan_error(e)

    if args.json:
        print(json.dumps([slot_to_dict(run) for run in plan], indent=2))
    else:
        for day, run in dated_slots(config, plan):
            print(format_slot(day, run))

    return 0


if __name__ == '__main__':
    sys.exit(main())
