"""
Expand the template plan across the weeks leading up to a marathon.
"""

from collections import namedtuple
from datetime import timedelta

from .errors import InvalidDateRange
from .pace import PaceModel
from .template import DAYS_PER_WEEK, NOVICE_2, TEMPLATE_WEEKS, template_cell

ScheduledRun = namedtuple('ScheduledRun', ['date', 'kind', 'distance_miles', 'pace_seconds'])


def count_weeks(training_start, marathon_date, include_race_week=False):
    """Number of whole training weeks between the start date and the marathon.

    Partial weeks are dropped, so the plan ends before race day unless the
    race week is added.
    """
    days = (marathon_date - training_start).days
    if days <= 0:
        raise InvalidDateRange(
            f"Marathon date {marathon_date.isoformat()} must be after "
            f"training start {training_start.isoformat()}"
        )

    weeks = days // DAYS_PER_WEEK
    if weeks <= 0:
        raise InvalidDateRange(
            f"Marathon date {marathon_date.isoformat()} must be at least a week "
            f"after training start {training_start.isoformat()}"
        )

    if include_race_week:
        weeks += 1
    return weeks


def template_row(week, total_weeks):
    """Template row used for a plan week.

    Weeks up to total_weeks % 18 repeat the first template week, after which
    the template is walked linearly. Plans of 36 weeks or more run past the
    last row.
    """
    offset = total_weeks % TEMPLATE_WEEKS
    if week <= offset:
        return 0
    return week - offset


def expand_plan(config, pace_model=None, template=NOVICE_2):
    """Build the full day-by-day plan; rest days are None."""
    if pace_model is None:
        pace_model = PaceModel(config.goal_time_seconds)

    total_weeks = count_weeks(config.training_start, config.marathon_date,
                              config.include_race_week)

    plan = []
    for week in range(total_weeks):
        row = template_row(week, total_weeks)
        for day in range(DAYS_PER_WEEK):
            cell = template_cell(row, day, template)
            if cell is None:
                plan.append(None)
                continue

            plan.append(ScheduledRun(
                date=config.training_start + timedelta(weeks=week, days=day),
                kind=cell.kind,
                distance_miles=cell.distance_miles,
                pace_seconds=pace_model.pace_for(cell.kind, cell.distance_miles),
            ))

    return plan


def dated_slots(config, plan):
    """Pair every plan slot with its calendar date."""
    for index, run in enumerate(plan):
        yield config.training_start + timedelta(days=index), run
