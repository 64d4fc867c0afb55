"""
Hal Higdon's Novice 2 marathon plan as a fixed 18 x 7 table.

https://www.halhigdon.com/training-programs/marathon-training/novice-2-marathon/

Columns run Monday to Sunday. Rest and cross-training days are None.
Week 9's Sunday is the half marathon and week 18's Sunday is the race,
both run at tempo (race) effort.
"""

from collections import namedtuple
from enum import Enum

from .errors import TemplateIndexOutOfRange

TEMPLATE_WEEKS = 18
DAYS_PER_WEEK = 7
WEEKDAY_LABELS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')


class RunKind(Enum):
    EASY = 'easy'
    TEMPO = 'tempo'


RunSpec = namedtuple('RunSpec', ['kind', 'distance_miles'])


def easy_run(distance_miles):
    return RunSpec(RunKind.EASY, float(distance_miles))


def tempo_run(distance_miles):
    return RunSpec(RunKind.TEMPO, float(distance_miles))


NOVICE_2 = (
    (None, easy_run(3), tempo_run(5), easy_run(3), None, easy_run(8), None),
    (None, easy_run(3), easy_run(5), easy_run(3), None, easy_run(9), None),
    (None, easy_run(3), tempo_run(5), easy_run(3), None, easy_run(6), None),
    (None, easy_run(3), tempo_run(6), easy_run(3), None, easy_run(11), None),
    (None, easy_run(3), easy_run(6), easy_run(3), None, easy_run(12), None),
    (None, easy_run(3), tempo_run(6), easy_run(3), None, easy_run(9), None),
    (None, easy_run(4), tempo_run(7), easy_run(4), None, easy_run(14), None),
    (None, easy_run(4), easy_run(7), easy_run(4), None, easy_run(15), None),
    (None, easy_run(4), tempo_run(7), easy_run(4), None, None, tempo_run(13.1)),
    (None, easy_run(4), tempo_run(8), easy_run(4), None, easy_run(17), None),
    (None, easy_run(5), easy_run(8), easy_run(5), None, easy_run(18), None),
    (None, easy_run(5), tempo_run(8), easy_run(5), None, easy_run(13), None),
    (None, easy_run(5), tempo_run(5), easy_run(5), None, easy_run(19), None),
    (None, easy_run(5), easy_run(8), easy_run(5), None, tempo_run(12), None),
    (None, easy_run(5), tempo_run(5), easy_run(5), None, easy_run(20), None),
    (None, easy_run(5), tempo_run(4), easy_run(5), None, tempo_run(12), None),
    (None, easy_run(4), easy_run(3), easy_run(4), None, easy_run(8), None),
    (None, easy_run(3), easy_run(2), None, None, easy_run(2), tempo_run(26.2)),
)


def template_cell(row, day, template=NOVICE_2):
    """Return the RunSpec for a template week/day, or None on rest days."""
    if not 0 <= row < len(template):
        raise TemplateIndexOutOfRange(
            f"Week {row + 1} is outside the {len(template)}-week template"
        )
    return template[row][day]
