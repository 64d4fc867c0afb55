"""
Exceptions raised while building a training plan or its calendar file.
"""


class PlanError(Exception):
    """Base class for every training plan failure."""
    pass


class InvalidInput(PlanError):
    """Raised when a command-line value can't be used to build a plan."""
    pass


class MissingArgument(InvalidInput):
    pass


class InvalidDateFormat(InvalidInput):
    pass


class InvalidTimeFormat(InvalidInput):
    pass


class InvalidDateRange(PlanError):
    """Raised when the marathon isn't after the training start date."""
    pass


class TemplateIndexOutOfRange(PlanError):
    """Raised when a plan walks past the last week of the template."""
    pass


class EventEncodingFailure(PlanError):
    """Raised when a run can't be encoded as a calendar event."""
    pass


class EmptyEncodedOutput(PlanError):
    """Raised when encoding succeeds but produces nothing to write."""
    pass
