# test_expander.py
# Week counting, template row selection and plan expansion.

from datetime import date, timedelta

import pytest

from marathon_calendar.config import PlanConfig
from marathon_calendar.errors import InvalidDateRange, TemplateIndexOutOfRange
from marathon_calendar.expander import count_weeks, dated_slots, expand_plan, template_row
from marathon_calendar.template import NOVICE_2, RunKind

BASE_START = date(2025, 1, 6)


def build_config(weeks=18, **overrides):
    config = PlanConfig(
        marathon_date=BASE_START + timedelta(weeks=weeks),
        goal_time_seconds=14400,
        training_start=BASE_START,
        runs_start_seconds=25200,
        include_race_week=False,
    )
    return config._replace(**overrides)


def test_count_weeks_whole_weeks():
    assert count_weeks(BASE_START, BASE_START + timedelta(weeks=5)) == 5


def test_count_weeks_drops_partial_week():
    assert count_weeks(BASE_START, BASE_START + timedelta(days=36)) == 5


@pytest.mark.parametrize('days', [1, 2, 3, 4, 5, 6])
@pytest.mark.parametrize('include_race_week', [False, True])
def test_count_weeks_requires_a_whole_week(days, include_race_week):
    with pytest.raises(InvalidDateRange):
        count_weeks(BASE_START, BASE_START + timedelta(days=days), include_race_week)


def test_ten_day_plan_stays_before_race_day():
    config = PlanConfig.from_strings('2025-01-11', '04:00:00', '2025-01-01')
    plan = expand_plan(config)

    assert len(plan) == 7
    assert all(run.date < config.marathon_date for run in plan if run is not None)


@pytest.mark.parametrize('days', [7, 10, 13, 36, 40, 126])
def test_planner_plan_ends_before_race_day(days):
    config = build_config(marathon_date=BASE_START + timedelta(days=days))
    slots = list(dated_slots(config, expand_plan(config)))

    assert len(slots) == 7 * (days // 7)
    assert slots[-1][0] < config.marathon_date


@pytest.mark.parametrize('days', [7, 10, 13, 36, 40, 126])
def test_exporter_plan_covers_race_week(days):
    config = build_config(marathon_date=BASE_START + timedelta(days=days), include_race_week=True)
    last_day = list(dated_slots(config, expand_plan(config)))[-1][0]

    assert config.marathon_date <= last_day
    assert (last_day - config.marathon_date).days < 7


def test_count_weeks_adds_race_week():
    assert count_weeks(BASE_START, BASE_START + timedelta(weeks=5), include_race_week=True) == 6


@pytest.mark.parametrize('days', [0, -1, -30])
@pytest.mark.parametrize('include_race_week', [False, True])
def test_count_weeks_requires_marathon_after_start(days, include_race_week):
    with pytest.raises(InvalidDateRange):
        count_weeks(BASE_START, BASE_START + timedelta(days=days), include_race_week)


def test_short_plan_repeats_first_week():
    # 5 % 18 == 5, so weeks 0 through 5 all use the first template week
    assert [template_row(week, 5) for week in range(6)] == [0] * 6


def test_eighteen_week_plan_walks_template():
    assert [template_row(week, 18) for week in range(18)] == list(range(18))


def test_longer_plan_repeats_then_walks():
    rows = [template_row(week, 20) for week in range(20)]
    assert rows[:3] == [0, 0, 0]
    assert rows[3:] == list(range(1, 18))


def test_plan_length_is_seven_slots_per_week():
    plan = expand_plan(build_config(weeks=5))
    assert len(plan) == 35


def test_five_week_plan_never_leaves_first_week():
    plan = expand_plan(build_config(weeks=5))

    for index, run in enumerate(plan):
        cell = NOVICE_2[0][index % 7]
        if cell is None:
            assert run is None
        else:
            assert (run.kind, run.distance_miles) == (cell.kind, cell.distance_miles)


def test_one_run_per_template_cell():
    plan = expand_plan(build_config(weeks=18))
    expected = sum(1 for week in NOVICE_2 for cell in week if cell is not None)
    assert sum(1 for run in plan if run is not None) == expected


def test_run_dates_follow_week_and_day():
    plan = expand_plan(build_config(weeks=18))

    for index, run in enumerate(plan):
        if run is not None:
            assert run.date == BASE_START + timedelta(weeks=index // 7, days=index % 7)

    assert plan[-1].kind is RunKind.TEMPO
    assert plan[-1].distance_miles == 26.2
    assert plan[-1].date == date(2025, 5, 11)


def test_plan_is_chronological():
    dates = [run.date for run in expand_plan(build_config(weeks=12)) if run is not None]
    assert dates == sorted(dates)


def test_race_week_adds_seven_slots():
    plan = expand_plan(build_config(weeks=10, include_race_week=True))
    assert len(plan) == 77


def test_four_hour_goal_paces():
    plan = expand_plan(build_config(weeks=5))

    tempo = plan[2]
    easy = plan[1]
    assert (tempo.kind, tempo.distance_miles) == (RunKind.TEMPO, 5.0)
    assert tempo.pace_seconds == pytest.approx(2748.1, abs=0.1)
    assert (easy.kind, easy.distance_miles) == (RunKind.EASY, 3.0)
    assert easy.pace_seconds == pytest.approx(2473.2, abs=0.1)


def test_every_run_has_positive_pace():
    plan = expand_plan(build_config(weeks=18))
    assert all(run.pace_seconds > 0 for run in plan if run is not None)


def test_plan_of_thirty_six_weeks_runs_off_template():
    with pytest.raises(TemplateIndexOutOfRange):
        expand_plan(build_config(weeks=36))


def test_thirty_five_weeks_still_fits():
    plan = expand_plan(build_config(weeks=35))
    assert plan[-1].distance_miles == 26.2


def test_expand_rejects_marathon_before_start():
    with pytest.raises(InvalidDateRange):
        expand_plan(build_config(marathon_date=BASE_START))


def test_dated_slots_cover_rest_days():
    config = build_config(weeks=1)
    slots = list(dated_slots(config, expand_plan(config)))

    assert [day for day, _ in slots] == [BASE_START + timedelta(days=n) for n in range(7)]
    assert slots[0][1] is None
