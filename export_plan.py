#!/usr/bin/env python3
"""
Write a marathon training plan to an iCalendar file.

Usage:
    ./export_plan.py 2025-10-12 04:00:00 2025-06-09 07:00:00
    ./export_plan.py 2025-10-12 04:00:00 2025-06-09 07:00:00 --output ~/plan.ics

Settings such as PLAN_TIMEZONE can be placed in a .env file.
"""

import sys

from dotenv import load_dotenv

from marathon_calendar.cli import UsageParser, plan_error, usage_error
from marathon_calendar.config import PlanConfig, Settings
from marathon_calendar.errors import InvalidDateRange, InvalidInput, PlanError
from marathon_calendar.expander import expand_plan
from marathon_calendar.generator import CalendarGenerator

USAGE = ("%(prog)s [MARATHON DATE: YYYY-MM-DD] [GOAL TIME: HH:MM:SS] "
         "[TRAINING START DATE: YYYY-MM-DD] [RUNS START TIME: HH:MM:SS]")


def build_parser():
    parser = UsageParser(
        usage=USAGE,
        description='Export a Novice 2 marathon training plan as an .ics calendar',
    )
    parser.add_argument('marathon_date', help='Race date in YYYY-MM-DD format')
    parser.add_argument('goal_time', help='Goal finish time in HH:MM:SS format')
    parser.add_argument('training_start', help='First training day in YYYY-MM-DD format')
    parser.add_argument('runs_start_time', help='Time of day runs start, HH:MM:SS')
    parser.add_argument('--output', help='Calendar file to write (default: PLAN_OUTPUT_PATH or plan.ics)')
    parser.add_argument('--no-race-week', action='store_true',
                        help="Don't add the race week to the week count")
    return parser


def main(argv=None):
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
        config = PlanConfig.from_strings(
            args.marathon_date,
            args.goal_time,
            args.training_start,
            args.runs_start_time,
            include_race_week=not args.no_race_week,
        )
        plan = expand_plan(config)
    except (InvalidInput, InvalidDateRange) as e:
        return usage_error(parser, e)
    except PlanError as e:
        return plan_error(e)

    generator = CalendarGenerator(config, settings)
    try:
        generator.generate_calendar(plan, args.output)
    except PlanError as e:
        return plan_error(f"Failed to generate calendar: {e}")
    except OSError as e:
        return plan_error(f"Failed to write calendar: {e}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
