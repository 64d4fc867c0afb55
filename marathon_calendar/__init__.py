"""
Marathon training calendar built from Hal Higdon's Novice 2 plan.

This package provides:
- Goal-time parsing and pace scaling
- The 18-week template plan
- Expansion of the template across the weeks before a race
- iCalendar generation for the expanded plan

Usage:
    # Print the plan from today until race day
    python3 plan.py 2025-10-12 04:00:00

    # Write plan.ics
    python3 export_plan.py 2025-10-12 04:00:00 2025-06-09 07:00:00
"""

from .config import PlanConfig, Settings
from .expander import ScheduledRun, expand_plan
from .generator import CalendarGenerator
from .pace import PaceModel

__all__ = ['PlanConfig', 'Settings', 'ScheduledRun', 'expand_plan', 'CalendarGenerator', 'PaceModel']
__version__ = '1.0.0'
